"""Shared pytest fixtures for the rmenu tests.

Provides a fake search path on disk and a recording stand-in for
subprocess.Popen so launches can be asserted without starting anything.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# Qt widgets in the window tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_file(path: Path, mode: int) -> Path:
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


@pytest.fixture
def search_path(tmp_path: Path) -> str:
    """Create two bin directories plus one missing entry and return a PATH value.

    Structure:
        bin_a/
          ls        (0o755)
          lua       (0o700, owner execute only)
          notes.txt (0o644, not executable)
          subdir/   (directory, never indexed)
        bin_b/
          ls        (0o755, duplicate name)
          less      (0o755)
          vim -> bin_a/lua   (symlink to an executable)
          broken -> missing  (dangling symlink)
        missing/    (listed on PATH, does not exist)
    """
    bin_a = tmp_path / "bin_a"
    bin_b = tmp_path / "bin_b"
    bin_a.mkdir()
    bin_b.mkdir()

    make_file(bin_a / "ls", 0o755)
    make_file(bin_a / "lua", 0o700)
    make_file(bin_a / "notes.txt", 0o644)
    (bin_a / "subdir").mkdir(mode=0o755)

    make_file(bin_b / "ls", 0o755)
    make_file(bin_b / "less", 0o755)
    (bin_b / "vim").symlink_to(bin_a / "lua")
    (bin_b / "broken").symlink_to(tmp_path / "nowhere")

    return os.pathsep.join([str(bin_a), "", str(tmp_path / "missing"), str(bin_b)])


class FakePopen:
    """Records every call instead of starting a process."""

    def __init__(self):
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        return self


@pytest.fixture
def fake_popen() -> FakePopen:
    return FakePopen()
