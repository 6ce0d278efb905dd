"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fskit.config import ConfigManager
from fskit.context import AppContext
from fskit.copier import DirectoryCopier
from fskit.filesystem import RealFileSystem


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a source tree with files, nested directories and symlinks.

    Layout::

        src/
          b.txt              "abc"   0644
          private.key        "key"   0600
          run.sh             "#!"    0755
          x/                         0750
            y.txt            "z"
            deeper/
              empty/
          link -> /etc/hosts
          rel -> b.txt
          dangling -> missing/target
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "b.txt").write_text("abc")
    os.chmod(src / "b.txt", 0o644)
    (src / "private.key").write_text("key")
    os.chmod(src / "private.key", 0o600)
    (src / "run.sh").write_text("#!")
    os.chmod(src / "run.sh", 0o755)
    (src / "x" / "deeper" / "empty").mkdir(parents=True)
    (src / "x" / "y.txt").write_text("z")
    os.chmod(src / "x", 0o750)
    os.symlink("/etc/hosts", src / "link")
    os.symlink("b.txt", src / "rel")
    os.symlink("missing/target", src / "dangling")
    return src


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary configuration directory."""
    config_dir = tmp_path / ".fskit"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def spy_filesystem() -> MagicMock:
    """Create a mock FileSystem that records calls and delegates to the real one."""
    return MagicMock(wraps=RealFileSystem())


@pytest.fixture
def app_context(temp_config_dir: Path) -> AppContext:
    """Create an AppContext using a temporary config directory."""
    filesystem = RealFileSystem()
    return AppContext(
        config=ConfigManager.create(temp_config_dir),
        copier=DirectoryCopier.create(filesystem),
        filesystem=filesystem,
    )
