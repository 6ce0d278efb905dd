"""Filesystem convenience helpers and an ownership-preserving tree copier."""

__version__ = "0.1.0"

from fskit.copier import DirectoryCopier, copy_directory, ensure_directory
from fskit.filesystem import RealFileSystem
from fskit.protocols import FileSystem
from fskit.types import DirectoryEntry, EntryKind, Ownership, UnsupportedMetadataError

__all__ = [
    "__version__",
    "DirectoryCopier",
    "DirectoryEntry",
    "EntryKind",
    "FileSystem",
    "Ownership",
    "RealFileSystem",
    "UnsupportedMetadataError",
    "copy_directory",
    "ensure_directory",
]
