"""Copy Go source trees, keeping only the files the Go toolchain reads."""

from __future__ import annotations

from .constants import GO_FILE_TYPES
from .errors import CopyFileError, CopyLinkError, GoCopyError
from .file_ops import copy_file, copy_link
from .filters import is_relevant_file, is_skipped
from .infrastructure.logger import setup_logging
from .remove import remove_all
from .tree import copy_tree, list_relevant_files
from .types import CopyResult

__all__ = [
    # constants
    "GO_FILE_TYPES",
    # errors
    "CopyFileError",
    "CopyLinkError",
    "GoCopyError",
    # file_ops
    "copy_file",
    "copy_link",
    # filters
    "is_relevant_file",
    "is_skipped",
    # logging
    "setup_logging",
    # remove
    "remove_all",
    # tree
    "copy_tree",
    "list_relevant_files",
    # types
    "CopyResult",
]
