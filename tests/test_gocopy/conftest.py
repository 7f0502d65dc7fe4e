"""Shared fixtures for gocopy tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def src_dir(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    return src


@pytest.fixture()
def dst_dir(tmp_path: Path) -> Path:
    """Destination root; not created, copy_tree creates it lazily."""
    return tmp_path / "dst"


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Create files under root from a mapping of relative path to content."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def file_set(root: Path) -> set[str]:
    """Relative paths of every non-directory entry under root, links included."""
    found: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root):
        for name in filenames + [d for d in dirnames if os.path.islink(os.path.join(dirpath, d))]:
            found.add(os.path.relpath(os.path.join(dirpath, name), root).replace(os.sep, "/"))
    return found
