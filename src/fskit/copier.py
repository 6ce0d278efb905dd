"""Recursive directory copy preserving ownership and permissions."""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

from fskit.fileops import DEFAULT_DIRECTORY_MODE
from fskit.filesystem import RealFileSystem
from fskit.protocols import FileSystem
from fskit.types import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)


def ensure_directory(
    path: Path, mode: int = DEFAULT_DIRECTORY_MODE, filesystem: FileSystem | None = None
) -> None:
    """Create a directory and its parents unless something already exists there.

    Args:
        path: Directory to create.
        mode: Mode for newly created directories.
        filesystem: Filesystem to use. Defaults to the real one.

    Raises:
        OSError: If the existence probe fails for a reason other than
            the path not existing, or the directory cannot be created.
    """
    fs = filesystem or RealFileSystem()
    try:
        fs.stat(path)
        return
    except FileNotFoundError:
        pass
    fs.make_directories(path, mode)


class DirectoryCopier:
    """Copies directory trees entry by entry.

    Each entry is dispatched on its kind: directories are recreated and
    recursed into, symlinks are relinked to the same literal target, and
    everything else gets a byte copy. Every destination entry then receives
    the source owner, and every non-symlink receives the source mode.

    The first failure aborts the copy and propagates unchanged. Nothing
    already copied is rolled back.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize copier with its filesystem.

        Args:
            filesystem: Filesystem primitives (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> DirectoryCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem (real one created if not provided).

        Returns:
            Configured DirectoryCopier instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def copy(self, source_dir: str | os.PathLike[str], dest_dir: str | os.PathLike[str]) -> None:
        """Copy the tree under source_dir into dest_dir.

        Args:
            source_dir: Existing, readable directory.
            dest_dir: Destination directory, created if absent and reused
                if it already is a directory.

        Raises:
            NotADirectoryError: If dest_dir exists and is not a directory.
            UnsupportedMetadataError: If source ownership cannot be read.
            OSError: Any failure of the underlying filesystem calls.
        """
        source = Path(source_dir)
        dest = Path(dest_dir)

        entries = self.fs.scan_dir(source)
        self._prepare_destination(dest)
        logger.debug("Copying %d entries from %s to %s", len(entries), source, dest)

        for entry in entries:
            try:
                self._copy_entry(source / entry.name, dest / entry.name, entry)
            except OSError as e:
                logger.debug("Copy of %s aborted: %s", source / entry.name, e)
                raise

    def _prepare_destination(self, dest: Path) -> None:
        ensure_directory(dest, DEFAULT_DIRECTORY_MODE, self.fs)
        if not stat.S_ISDIR(self.fs.stat(dest).st_mode):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(dest))

    def _copy_entry(self, src: Path, dst: Path, entry: DirectoryEntry) -> None:
        owner = self.fs.ownership(src)

        if entry.kind is EntryKind.DIRECTORY:
            ensure_directory(dst, DEFAULT_DIRECTORY_MODE, self.fs)
            self.copy(src, dst)
        elif entry.kind is EntryKind.SYMLINK:
            target = self.fs.read_link(src)
            logger.debug("Linking %s -> %s", dst, target)
            self.fs.symlink(target, dst)
        else:
            logger.debug("Copying file %s", src)
            self.fs.copy_file(src, dst)

        self.fs.lchown(dst, owner.uid, owner.gid)

        # Symlink modes cannot be set independently of their target
        if not entry.is_symlink:
            self.fs.chmod(dst, entry.permissions)


def copy_directory(
    source_dir: str | os.PathLike[str], dest_dir: str | os.PathLike[str]
) -> None:
    """Copy a directory tree, preserving ownership and permission bits.

    Args:
        source_dir: Existing, readable directory.
        dest_dir: Destination directory, created if absent.

    Raises:
        OSError: On the first failing entry; the destination is left
            partially copied.
    """
    DirectoryCopier.create().copy(source_dir, dest_dir)
