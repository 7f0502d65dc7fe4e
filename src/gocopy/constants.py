"""gocopy constants."""

from __future__ import annotations

# https://golang.org/cmd/go/#hdr-File_types
GO_FILE_TYPES: tuple[str, ...] = (
    ".go",
    ".c", ".h",
    ".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx",
    ".m",
    ".s", ".S",
    ".swig", ".swigcxx",
    ".syso",
)

TESTDATA_DIR = "testdata"
UNDERSCORE_TESTDATA_DIR = "_testdata"
TEST_FILE_SUFFIX = "_test.go"

DIR_MODE = 0o755
