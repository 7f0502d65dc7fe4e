"""Test-session configuration shared by all test packages."""

from __future__ import annotations

import sys

# Several tests build directory trees over 1000 levels deep under tmp_path;
# pytest removes its temporary directories with the recursive shutil.rmtree,
# which exceeds the default recursion limit on trees that deep.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
