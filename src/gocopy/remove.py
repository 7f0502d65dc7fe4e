"""Recursive removal that also deletes read-only files where the platform requires it."""

from __future__ import annotations

import contextlib
import os
import stat
from typing import TYPE_CHECKING

from .infrastructure.config import requires_permission_repair
from .infrastructure.logger import logger
from .walk import WalkEntry, walk

if TYPE_CHECKING:
    from .types import StrPath


def _remove(path: str) -> None:
    """Remove a single file, link or empty directory."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def _make_writable(entry: WalkEntry) -> bool:
    if entry.error is not None or entry.info is None:
        logger.debug("Permission repair skipped node", path=entry.path, error=str(entry.error))
        return True
    mode = stat.S_IMODE(entry.info.st_mode)
    if entry.is_symlink() or mode & stat.S_IWUSR:
        return True
    try:
        os.chmod(entry.path, mode | stat.S_IWUSR)
    except OSError as err:
        logger.debug("Permission repair failed", path=entry.path, error=str(err))
    return True


def _remove_tree(path: str) -> None:
    """Remove path and its contents, deepest entries first."""
    nodes: list[WalkEntry] = []

    def collect(entry: WalkEntry) -> bool:
        if entry.error is not None:
            if isinstance(entry.error, FileNotFoundError):
                return False
            raise entry.error
        nodes.append(entry)
        return True

    walk(path, collect)
    # reversed pre-order puts every node after all of its descendants
    for entry in reversed(nodes):
        with contextlib.suppress(FileNotFoundError):
            if entry.is_dir():
                os.rmdir(entry.path)
            else:
                os.remove(entry.path)


def remove_all(path: StrPath, *, repair_permissions: bool | None = None) -> None:
    """Remove path and any children it contains.

    A missing path is not an error. Unlike shutil.rmtree this also removes
    plain files and, when permission repair applies (Windows by default),
    read-only files.
    """
    path = os.fspath(path)
    if repair_permissions is None:
        repair_permissions = requires_permission_repair()

    if repair_permissions:
        # Simple case: if a single remove works, we're done.
        try:
            _remove(path)
        except FileNotFoundError:
            return
        except OSError:
            # make sure all files are writable so we can delete them
            walk(path, _make_writable)
        else:
            return

    _remove_tree(path)
