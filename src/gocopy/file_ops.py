"""Single file and symbolic link copy primitives."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from .constants import DIR_MODE
from .errors import CopyFileError, CopyLinkError

if TYPE_CHECKING:
    from .types import StrPath


def _mkdir(path: Path) -> None:
    """Create path and its missing parents, shallowest first."""
    missing: list[Path] = []
    for p in (path, *path.parents):
        if p.is_dir():
            break
        missing.append(p)
    for p in reversed(missing):
        try:
            p.mkdir(mode=DIR_MODE)
        except FileExistsError:
            if not p.is_dir():
                raise


def copy_file(dst: StrPath, src: StrPath) -> None:
    """Copy the bytes of src to dst, creating dst's parent directories.

    dst is created or truncated. Permission bits and timestamps are not
    carried over.
    """
    dst_path, src_path = Path(dst), Path(src)
    try:
        _mkdir(dst_path.parent)
    except OSError as err:
        raise CopyFileError("mkdirall", dst_path.parent, err) from err
    try:
        r = src_path.open("rb")
    except OSError as err:
        raise CopyFileError("open", src_path, err) from err
    with r:
        try:
            w = dst_path.open("wb")
        except OSError as err:
            raise CopyFileError("create", dst_path, err) from err
        with w:
            shutil.copyfileobj(r, w)


def copy_link(dst: StrPath, src: StrPath) -> None:
    """Recreate the symbolic link src at dst, pointing at the same literal target."""
    dst_path, src_path = Path(dst), Path(src)
    try:
        target = os.readlink(src_path)
    except OSError as err:
        raise CopyLinkError("readlink", src_path, err) from err
    try:
        _mkdir(dst_path.parent)
    except OSError as err:
        raise CopyLinkError("mkdirall", dst_path.parent, err) from err
    try:
        dst_path.symlink_to(target)
    except OSError as err:
        raise CopyLinkError("symlink", dst_path, err) from err
