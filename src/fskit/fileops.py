"""Single-call helpers for files, paths and directories.

Each helper wraps one standard library call. Errors are the ``OSError``
subclasses raised by the underlying call and are never wrapped.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from datetime import datetime

logger = logging.getLogger(__name__)

# Creation modes, subject to the process umask
DEFAULT_FILE_MODE = 0o644
DEFAULT_APPEND_MODE = 0o600
DEFAULT_DIRECTORY_MODE = 0o755

StrPath = str | os.PathLike[str]


# ============================================================================
# Probes
# ============================================================================


def exists(path: StrPath) -> bool:
    """Check whether anything exists at a path.

    Returns False only when the path does not exist. Other stat failures,
    such as a permission error on a parent directory, are raised.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def is_file(path: StrPath) -> bool:
    """Check whether a path is a regular file, following symlinks.

    Raises:
        FileNotFoundError: If nothing exists at the path.
    """
    return stat.S_ISREG(os.stat(path).st_mode)


def is_directory(path: StrPath) -> bool:
    """Check whether a path is a directory, following symlinks.

    Raises:
        FileNotFoundError: If nothing exists at the path.
    """
    return stat.S_ISDIR(os.stat(path).st_mode)


def _can_open(path: StrPath, flags: int) -> bool:
    try:
        fd = os.open(path, flags)
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        return False
    os.close(fd)
    return True


def is_readable(path: StrPath) -> bool:
    """Check whether a path can be opened for reading."""
    return _can_open(path, os.O_RDONLY)


def is_writable(path: StrPath) -> bool:
    """Check whether an existing path can be opened for writing."""
    return _can_open(path, os.O_WRONLY)


def size(path: StrPath) -> int:
    """Size in bytes of the object at a path."""
    return os.stat(path).st_size


def last_modified(path: StrPath) -> datetime:
    """Modification time of a path, in local time."""
    return datetime.fromtimestamp(os.stat(path).st_mtime)


# ============================================================================
# File content
# ============================================================================


def get(path: StrPath) -> bytes:
    """Read the whole content of a file."""
    with open(path, "rb") as f:
        return f.read()


def get_string(path: StrPath) -> str:
    """Read the whole content of a file as UTF-8 text.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    """
    return get(path).decode("utf-8", errors="replace")


def put(path: StrPath, content: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write content to a file, creating it with mode or truncating it."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(content)


def put_string(path: StrPath, content: str, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write UTF-8 text to a file."""
    put(path, content.encode("utf-8"), mode)


def append(path: StrPath, content: bytes, mode: int = DEFAULT_APPEND_MODE) -> None:
    """Append content to a file, creating it with mode if absent."""
    fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, mode)
    with os.fdopen(fd, "ab") as f:
        f.write(content)


def prepend(path: StrPath, content: bytes) -> None:
    """Insert content at the start of an existing file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    put(path, content + get(path))


# ============================================================================
# File operations
# ============================================================================


def chmod(path: StrPath, mode: int) -> None:
    """Change permission bits of a path."""
    os.chmod(path, mode)


def delete(*paths: StrPath) -> None:
    """Remove files, stopping at the first one that cannot be removed."""
    for path in paths:
        os.remove(path)


def move(src: StrPath, dst: StrPath) -> None:
    """Rename a file."""
    os.rename(src, dst)


def copy(src: StrPath, dst: StrPath, mode: int = DEFAULT_FILE_MODE) -> None:
    """Copy file content, creating dst with mode or truncating it."""
    put(dst, get(src), mode)


def link(target: StrPath, link_name: StrPath) -> None:
    """Create a symlink at link_name pointing at target."""
    os.symlink(target, link_name)


# ============================================================================
# Path components
# ============================================================================


def name(path: StrPath) -> str:
    """Last element of a path, ignoring trailing separators.

    An empty path yields ``"."`` and a path of only separators yields the
    separator.
    """
    path = os.fspath(path)
    if not path:
        return "."
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def basename(path: StrPath) -> str:
    """Name up to its first ``.``.

    ``archive.tar.gz`` yields ``archive`` and ``.gitignore`` yields ``""``.
    A name without a dot is returned whole.
    """
    base = name(path)
    return base.partition(".")[0]


def dirname(path: StrPath) -> str:
    """All but the last element of a path, normalized; ``"."`` if empty."""
    return os.path.normpath(os.path.dirname(os.fspath(path)) or ".")


def extension(path: StrPath) -> str:
    """Text after the first ``.`` of the name, or ``""`` without a dot."""
    base = name(path)
    return base.partition(".")[2]


# ============================================================================
# Directories
# ============================================================================


def _scan(dir_path: StrPath) -> list[tuple[str, bool]]:
    with os.scandir(dir_path) as it:
        entries = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
    return sorted(entries)


def files(dir_path: StrPath) -> list[str]:
    """Names of the non-directory entries of a directory, sorted."""
    return [entry for entry, is_dir in _scan(dir_path) if not is_dir]


def all_files(dir_path: StrPath) -> list[str]:
    """Relative paths of all non-directory entries below a directory.

    Symlinks to directories are listed as files and not descended into.
    """
    result: list[str] = []
    for entry, is_dir in _scan(dir_path):
        if is_dir:
            nested = all_files(os.path.join(dir_path, entry))
            result.extend(os.path.join(entry, child) for child in nested)
        else:
            result.append(entry)
    return result


def directories(dir_path: StrPath) -> list[str]:
    """Names of the subdirectories of a directory, sorted."""
    return [entry for entry, is_dir in _scan(dir_path) if is_dir]


def make_directory(path: StrPath, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """Create a single directory."""
    os.mkdir(path, mode)


def make_directories(path: StrPath, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """Create a directory and any missing parents; existing ones are kept."""
    os.makedirs(path, mode=mode, exist_ok=True)


def delete_directory(path: StrPath) -> None:
    """Remove a path and everything below it.

    A missing path is not an error. A symlink or file is removed itself.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return
    if stat.S_ISDIR(st.st_mode):
        shutil.rmtree(path)
    else:
        os.remove(path)


def move_directory(src: StrPath, dst: StrPath) -> None:
    """Rename a directory."""
    os.rename(src, dst)
