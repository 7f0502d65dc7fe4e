"""Exceptions raised by the copy primitives."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import StrPath


class GoCopyError(OSError):
    """An OSError naming the failed operation and path.

    errno and strerror come from the underlying error, which the raising
    code also chains as __cause__; filename is the failing path.
    """

    prefix = "gocopy"

    def __init__(self, op: str, path: StrPath, err: OSError) -> None:
        self.op = op
        self.path = os.fspath(path)
        super().__init__(err.errno, err.strerror or str(err), self.path)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.op}({self.path!r}): {self.strerror}"

    def __reduce__(self) -> tuple[type[GoCopyError], tuple[str, str, OSError]]:
        return type(self), (self.op, self.path, OSError(self.errno, self.strerror))


class CopyFileError(GoCopyError):
    prefix = "copyfile"


class CopyLinkError(GoCopyError):
    prefix = "copylink"
