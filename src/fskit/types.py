"""Shared data types for fskit."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["DirectoryEntry", "EntryKind", "Ownership", "UnsupportedMetadataError"]

# Windows stat results carry a zeroed st_uid, so key off lchown instead.
POSIX_OWNERSHIP = hasattr(os, "lchown")


class UnsupportedMetadataError(OSError):
    """Owner metadata cannot be extracted from the platform's stat structure."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(
            errno.ENOTSUP,
            "failed to get raw uid/gid stat data",
            os.fspath(path),
        )


class EntryKind(Enum):
    """Kind of a filesystem object, as seen without following symlinks."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """Classify a raw ``st_mode`` value."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.OTHER


@dataclass(frozen=True)
class DirectoryEntry:
    """One item of a directory listing.

    Attributes:
        name: Entry name relative to the listed directory.
        kind: Entry kind, determined without following symlinks.
        mode: Full ``st_mode`` of the entry itself.
    """

    name: str
    kind: EntryKind
    mode: int

    @property
    def permissions(self) -> int:
        """Permission bits, including setuid/setgid/sticky."""
        return stat.S_IMODE(self.mode)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


@dataclass(frozen=True)
class Ownership:
    """A (uid, gid) pair read from one object and applied to another."""

    uid: int
    gid: int

    @classmethod
    def from_stat(cls, st: Any, path: str | os.PathLike[str]) -> Ownership:
        """Extract ownership from a stat result.

        Args:
            st: Result of ``os.lstat`` (or anything shaped like it).
            path: Path the stat result belongs to, for error reporting.

        Returns:
            Ownership of the stat'ed object.

        Raises:
            UnsupportedMetadataError: If the platform has no POSIX ownership
                or the stat result exposes no uid/gid.
        """
        uid = getattr(st, "st_uid", None)
        gid = getattr(st, "st_gid", None)
        if not POSIX_OWNERSHIP or uid is None or gid is None:
            raise UnsupportedMetadataError(path)
        return cls(uid=int(uid), gid=int(gid))
