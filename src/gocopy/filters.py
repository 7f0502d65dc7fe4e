"""Inclusion policy for files relevant to the Go toolchain.

See https://golang.org/cmd/go/#hdr-Description_of_package_lists for the
naming rules the toolchain itself ignores.
"""

from __future__ import annotations

from .constants import GO_FILE_TYPES, TEST_FILE_SUFFIX, TESTDATA_DIR, UNDERSCORE_TESTDATA_DIR


def is_skipped(name: str, tests: bool) -> bool:
    """Return True if a file or directory with this base name is excluded.

    A skipped directory is pruned together with its whole subtree.
    """
    return (
        name.startswith(".")
        or (name.startswith("_") and name != UNDERSCORE_TESTDATA_DIR)
        or (not tests and name == UNDERSCORE_TESTDATA_DIR)
        or (not tests and name == TESTDATA_DIR)
        or (not tests and name.endswith(TEST_FILE_SUFFIX))
    )


def is_relevant_file(name: str) -> bool:
    """Return True if the file name carries one of the Go toolchain extensions."""
    return name.endswith(GO_FILE_TYPES)
