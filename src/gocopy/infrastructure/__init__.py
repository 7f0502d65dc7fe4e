"""Configuration and logging shared by the gocopy modules."""
