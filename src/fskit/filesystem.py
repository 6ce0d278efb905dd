"""Filesystem primitives backing the directory copier.

The RealFileSystem implementation wraps standard library ``os`` and
``shutil`` calls and satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from fskit.types import DirectoryEntry, EntryKind, Ownership


class RealFileSystem:
    """Production filesystem implementation."""

    def scan_dir(self, path: Path) -> list[DirectoryEntry]:
        """List immediate entries of a directory, sorted by name."""
        entries = []
        with os.scandir(path) as it:
            for dir_entry in it:
                mode = dir_entry.stat(follow_symlinks=False).st_mode
                entries.append(
                    DirectoryEntry(
                        name=dir_entry.name,
                        kind=EntryKind.from_mode(mode),
                        mode=mode,
                    )
                )
        entries.sort(key=lambda entry: entry.name)
        return entries

    def stat(self, path: Path) -> os.stat_result:
        """Stat a path, following symlinks."""
        return os.stat(path)

    def ownership(self, path: Path) -> Ownership:
        """Read uid/gid of the object itself."""
        return Ownership.from_stat(os.lstat(path), path)

    def read_link(self, path: Path) -> str:
        """Read the literal target of a symlink."""
        return os.readlink(path)

    def symlink(self, target: str, path: Path) -> None:
        """Create a symlink pointing at target."""
        os.symlink(target, path)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content, creating or truncating dst."""
        shutil.copyfile(src, dst, follow_symlinks=False)

    def make_directories(self, path: Path, mode: int) -> None:
        """Create a directory and any missing parents."""
        os.makedirs(path, mode=mode, exist_ok=True)

    def lchown(self, path: Path, uid: int, gid: int) -> None:
        """Change ownership without following symlinks."""
        os.lchown(path, uid, gid)

    def chmod(self, path: Path, mode: int) -> None:
        """Change permission bits."""
        os.chmod(path, mode)
