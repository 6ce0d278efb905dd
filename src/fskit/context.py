"""Application context for dependency injection.

This module separates object creation from object use so CLI commands can
be tested with doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fskit.config import ConfigManager
from fskit.copier import DirectoryCopier
from fskit.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fskit.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for dependencies used by CLI commands."""

    config: ConfigManager
    copier: DirectoryCopier
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        config_dir: Override configuration directory (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from fskit.filesystem import RealFileSystem

    config = ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    filesystem = RealFileSystem()
    copier = DirectoryCopier.create(filesystem)

    return AppContext(config=config, copier=copier, filesystem=filesystem)
