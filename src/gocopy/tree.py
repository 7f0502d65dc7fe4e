"""Filtered copy of a Go source tree."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .file_ops import copy_file, copy_link
from .filters import is_relevant_file, is_skipped
from .infrastructure.logger import logger
from .remove import remove_all
from .types import CopyResult
from .walk import WalkEntry, walk

if TYPE_CHECKING:
    from collections.abc import Callable

    from .types import StrPath


def _relative(root: str, path: str) -> str:
    return path[len(root) :].lstrip(os.sep + (os.altsep or ""))


def _walk_relevant(src: str, tests: bool, on_file: Callable[[WalkEntry], None]) -> None:
    """Walk src and call on_file for every file the toolchain would use."""

    def visit(entry: WalkEntry) -> bool:
        if entry.error is not None:
            raise entry.error

        if is_skipped(entry.name, tests):
            return False

        if entry.is_dir():
            return True

        if is_relevant_file(entry.name):
            on_file(entry)
        return True

    walk(src, visit)


def list_relevant_files(src: StrPath, tests: bool) -> list[str]:
    """Return the paths, relative to src, of the files copy_tree would copy, in walk order."""
    src = os.fspath(src)
    found: list[str] = []
    _walk_relevant(src, tests, lambda entry: found.append(_relative(src, entry.path)))
    return found


def copy_tree(dst: StrPath, src: StrPath, tests: bool) -> CopyResult:
    """Copy the contents of src to dst, excluding any file that is not
    relevant to the Go compiler.

    Hidden and underscore-prefixed names are skipped, except _testdata.
    Unless tests is set, testdata, _testdata and *_test.go are skipped too.
    Symbolic links are recreated with their original target.

    If anything fails, the partial copy at dst is removed and the original
    error is raised.
    """
    dst, src = os.fspath(dst), os.fspath(src)
    result = CopyResult()

    def copy(entry: WalkEntry) -> None:
        rel = _relative(src, entry.path)
        target = os.path.join(dst, rel) if rel else dst
        if entry.is_symlink():
            copy_link(target, entry.path)
            result.links.append(rel)
        else:
            copy_file(target, entry.path)
            result.files.append(rel)

    logger.debug("Copying tree", src=src, dst=dst, tests=tests)
    try:
        _walk_relevant(src, tests, copy)
    except Exception as err:
        logger.error("Tree copy failed, removing partial copy", src=src, dst=dst, error=str(err))
        try:
            remove_all(dst)
        except Exception as cleanup_err:
            logger.warning("Could not remove partial copy", dst=dst, error=str(cleanup_err))
        raise

    logger.debug("Tree copied", src=src, dst=dst, files=len(result.files), links=len(result.links))
    return result
