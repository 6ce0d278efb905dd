"""Protocol definitions for the filesystem primitives used by the copier.

The copier only talks to the filesystem through this interface, so tests can
substitute doubles that fail on demand. All concrete implementations satisfy
the protocol structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from fskit.types import DirectoryEntry, Ownership


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the primitive filesystem operations.

    Implementations never follow symlinks when classifying entries or
    reading and changing ownership.
    """

    def scan_dir(self, path: Path) -> list[DirectoryEntry]:
        """List the immediate entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entries with kind and mode taken from the entry itself.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If the path is not a directory.
        """
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Stat a path, following symlinks.

        Args:
            path: Path to stat.

        Returns:
            Stat result of the object the path resolves to.

        Raises:
            FileNotFoundError: If nothing exists at the path.
        """
        ...

    def ownership(self, path: Path) -> Ownership:
        """Read the uid/gid of the object at a path.

        Args:
            path: Path of the object, symlinks not followed.

        Returns:
            Ownership of the object.

        Raises:
            UnsupportedMetadataError: If ownership is unavailable.
        """
        ...

    def read_link(self, path: Path) -> str:
        """Read the literal target of a symlink.

        Args:
            path: Path of the symlink.

        Returns:
            Target string, unresolved.
        """
        ...

    def symlink(self, target: str, path: Path) -> None:
        """Create a symlink.

        Args:
            target: Literal target string to store.
            path: Where to create the link.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy the whole content of a file, creating or truncating dst.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def make_directories(self, path: Path, mode: int) -> None:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create.
            mode: Mode for newly created directories.
        """
        ...

    def lchown(self, path: Path, uid: int, gid: int) -> None:
        """Change ownership without following symlinks.

        Args:
            path: Path to change.
            uid: New owner user id.
            gid: New owner group id.
        """
        ...

    def chmod(self, path: Path, mode: int) -> None:
        """Change permission bits.

        Args:
            path: Path to change.
            mode: New permission bits.
        """
        ...
