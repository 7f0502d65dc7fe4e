"""gocopy result types."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

StrPath = str | os.PathLike[str]


class CopyResult(BaseModel):
    """Relative paths written by a successful copy_tree, in visit order."""

    files: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files) + len(self.links)
