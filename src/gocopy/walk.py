"""Pre-order directory walk with lstat semantics."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Callable


class WalkEntry(NamedTuple):
    path: str
    info: os.stat_result | None
    error: OSError | None

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip(os.sep + (os.altsep or ""))) or self.path

    def is_dir(self) -> bool:
        return self.info is not None and stat.S_ISDIR(self.info.st_mode)

    def is_symlink(self) -> bool:
        return self.info is not None and stat.S_ISLNK(self.info.st_mode)


def walk(root: str, visit: Callable[[WalkEntry], bool]) -> None:
    """Call visit for root and every node beneath it, parents before children.

    Entries within a directory are visited in lexical order. Symbolic links
    are reported, never followed. visit returns False to skip the contents
    of the directory it was called for.

    When a node cannot be stat'ed or listed, visit is called for it
    with the error set and info possibly None; an exception raised by visit
    stops the walk and propagates to the caller.
    """
    # Pending paths, next to visit on top; children are pushed in reverse.
    stack = [root]
    while stack:
        path = stack.pop()
        try:
            info = os.lstat(path)
        except OSError as err:
            visit(WalkEntry(path, None, err))
            continue

        descend = visit(WalkEntry(path, info, None))
        if not descend or not stat.S_ISDIR(info.st_mode):
            continue

        try:
            names = os.listdir(path)
        except OSError as err:
            visit(WalkEntry(path, info, err))
            continue

        stack.extend(os.path.join(path, name) for name in sorted(names, reverse=True))
