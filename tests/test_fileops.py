"""Tests for single-call file, path and directory helpers."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from fskit import fileops


@pytest.fixture
def foo(tmp_path: Path) -> Path:
    """A file containing "abc"."""
    path = tmp_path / "foo.txt"
    path.write_text("abc")
    return path


class TestProbes:
    """Tests for existence and type probes."""

    def test_exists(self, foo: Path, tmp_path: Path) -> None:
        """Test exists distinguishes present and missing paths."""
        assert fileops.exists(foo) is True
        assert fileops.exists(tmp_path) is True
        assert fileops.exists(tmp_path / "missing.txt") is False

    def test_exists_raises_other_errors(self, foo: Path) -> None:
        """Test stat errors other than not-found are raised."""
        with pytest.raises(NotADirectoryError):
            fileops.exists(foo / "child")

    def test_is_file(self, foo: Path, tmp_path: Path) -> None:
        """Test is_file is True only for regular files."""
        assert fileops.is_file(foo) is True
        assert fileops.is_file(tmp_path) is False
        with pytest.raises(FileNotFoundError):
            fileops.is_file(tmp_path / "missing")

    def test_is_directory(self, foo: Path, tmp_path: Path) -> None:
        """Test is_directory is True only for directories."""
        assert fileops.is_directory(tmp_path) is True
        assert fileops.is_directory(foo) is False
        with pytest.raises(FileNotFoundError):
            fileops.is_directory(tmp_path / "missing")

    def test_is_readable_and_writable(self, foo: Path, tmp_path: Path) -> None:
        """Test readability and writability of an ordinary file."""
        assert fileops.is_readable(foo) is True
        assert fileops.is_writable(foo) is True
        assert fileops.is_readable(tmp_path / "missing") is False
        assert fileops.is_writable(tmp_path / "missing") is False
        assert not (tmp_path / "missing").exists()

    def test_size(self, foo: Path) -> None:
        """Test size returns the byte count."""
        assert fileops.size(foo) == 3

    def test_last_modified(self, foo: Path) -> None:
        """Test last_modified returns the file's mtime as a local datetime."""
        os.utime(foo, (1_600_000_000, 1_600_000_000))

        assert fileops.last_modified(foo) == datetime.fromtimestamp(1_600_000_000)

    def test_last_modified_is_recent(self, foo: Path) -> None:
        """Test a freshly written file has a recent mtime."""
        assert datetime.now() - fileops.last_modified(foo) < timedelta(minutes=5)


class TestContent:
    """Tests for reading and writing file content."""

    def test_get(self, foo: Path, tmp_path: Path) -> None:
        """Test get returns bytes and raises for missing files."""
        assert fileops.get(foo) == b"abc"
        with pytest.raises(FileNotFoundError):
            fileops.get(tmp_path / "missing.txt")

    def test_get_string(self, foo: Path) -> None:
        """Test get_string decodes the content."""
        assert fileops.get_string(foo) == "abc"

    def test_get_string_replaces_invalid_utf8(self, tmp_path: Path) -> None:
        """Test undecodable bytes become replacement characters."""
        path = tmp_path / "binary.bin"
        path.write_bytes(b"ok\xff\xfe\x00")

        assert fileops.get_string(path) == "ok\ufffd\ufffd\x00"

    def test_put(self, tmp_path: Path) -> None:
        """Test put creates a file with the given bytes."""
        path = tmp_path / "out.bin"

        fileops.put(path, b"\x00abc")

        assert path.read_bytes() == b"\x00abc"

    def test_put_truncates(self, foo: Path) -> None:
        """Test put replaces existing content."""
        fileops.put(foo, b"x")

        assert foo.read_bytes() == b"x"

    def test_put_string(self, tmp_path: Path) -> None:
        """Test put_string writes text."""
        path = tmp_path / "out.txt"

        fileops.put_string(path, "héllo")

        assert path.read_text(encoding="utf-8") == "héllo"

    def test_put_mode_applies_to_new_files(self, tmp_path: Path) -> None:
        """Test the creation mode is limited by the umask."""
        path = tmp_path / "secret"
        umask = os.umask(0)
        os.umask(umask)

        fileops.put(path, b"s", mode=0o600)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600 & ~umask

    def test_append(self, foo: Path) -> None:
        """Test append adds to the end."""
        fileops.append(foo, b"aaa")

        assert foo.read_text() == "abcaaa"

    def test_append_creates_file(self, tmp_path: Path) -> None:
        """Test append creates a missing file with owner-only mode."""
        path = tmp_path / "log.txt"

        fileops.append(path, b"line")

        assert path.read_text() == "line"
        assert stat.S_IMODE(path.stat().st_mode) & 0o077 == 0

    def test_prepend(self, foo: Path) -> None:
        """Test prepend inserts at the start."""
        fileops.prepend(foo, b"aaa")

        assert foo.read_text() == "aaaabc"

    def test_prepend_keeps_existing_mode(self, foo: Path) -> None:
        """Test prepend leaves the permission bits of the file unchanged."""
        os.chmod(foo, 0o640)

        fileops.prepend(foo, b"x")

        assert stat.S_IMODE(foo.stat().st_mode) == 0o640

    def test_prepend_missing_file(self, tmp_path: Path) -> None:
        """Test prepend requires an existing file."""
        with pytest.raises(FileNotFoundError):
            fileops.prepend(tmp_path / "missing.txt", b"aaa")


class TestFileOperations:
    """Tests for chmod, delete, move, copy and link."""

    def test_chmod(self, foo: Path) -> None:
        """Test chmod sets permission bits."""
        fileops.chmod(foo, 0o600)

        assert stat.S_IMODE(foo.stat().st_mode) == 0o600

    def test_delete(self, tmp_path: Path) -> None:
        """Test delete removes several files."""
        path1 = tmp_path / "foo1.txt"
        path2 = tmp_path / "foo2.txt"
        path1.write_text("abc")
        path2.write_text("def")

        fileops.delete(path1, path2)

        assert not path1.exists()
        assert not path2.exists()

    def test_delete_stops_at_first_failure(self, tmp_path: Path) -> None:
        """Test files after a failing one are kept."""
        path2 = tmp_path / "foo2.txt"
        path2.write_text("def")

        with pytest.raises(FileNotFoundError):
            fileops.delete(tmp_path / "missing.txt", path2)

        assert path2.exists()

    def test_move(self, foo: Path, tmp_path: Path) -> None:
        """Test move renames a file."""
        target = tmp_path / "foo2.txt"

        fileops.move(foo, target)

        assert not foo.exists()
        assert target.read_text() == "abc"

    def test_copy(self, foo: Path, tmp_path: Path) -> None:
        """Test copy duplicates content and keeps the source."""
        target = tmp_path / "foo2.txt"

        fileops.copy(foo, target)

        assert target.read_text() == "abc"
        assert foo.read_text() == "abc"

    def test_copy_missing_source(self, tmp_path: Path) -> None:
        """Test copy of a missing file raises and creates nothing."""
        with pytest.raises(FileNotFoundError):
            fileops.copy(tmp_path / "missing", tmp_path / "dst")

        assert not (tmp_path / "dst").exists()

    def test_link(self, foo: Path, tmp_path: Path) -> None:
        """Test link creates a symlink with the given target."""
        link_path = tmp_path / "foo_link"

        fileops.link(foo, link_path)

        assert link_path.is_symlink()
        assert os.readlink(link_path) == str(foo)
        assert link_path.read_text() == "abc"


class TestPathComponents:
    """Tests for name, basename, dirname and extension."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/foo.txt", "foo.txt"),
            ("foo.txt", "foo.txt"),
            ("a/b/", "b"),
            ("/", "/"),
            ("", "."),
        ],
    )
    def test_name(self, path: str, expected: str) -> None:
        """Test name returns the last element."""
        assert fileops.name(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/foo.txt", "foo"),
            ("archive.tar.gz", "archive"),
            (".gitignore", ""),
            ("Makefile", "Makefile"),
        ],
    )
    def test_basename(self, path: str, expected: str) -> None:
        """Test basename cuts at the first dot."""
        assert fileops.basename(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/foo.txt", "a/b"),
            ("foo.txt", "."),
            ("/foo.txt", "/"),
            ("a//b/c", "a/b"),
        ],
    )
    def test_dirname(self, path: str, expected: str) -> None:
        """Test dirname drops the last element."""
        assert fileops.dirname(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/foo.txt", "txt"),
            ("archive.tar.gz", "tar.gz"),
            (".gitignore", "gitignore"),
            ("Makefile", ""),
        ],
    )
    def test_extension(self, path: str, expected: str) -> None:
        """Test extension is everything after the first dot."""
        assert fileops.extension(path) == expected

    def test_accepts_path_objects(self) -> None:
        """Test components work with Path arguments."""
        assert fileops.name(Path("a/b/foo.txt")) == "foo.txt"
        assert fileops.dirname(Path("a/b/foo.txt")) == "a/b"


class TestDirectories:
    """Tests for listing, creating, deleting and moving directories."""

    @pytest.fixture
    def tree(self, tmp_path: Path) -> Path:
        """Create a small tree.

        Layout: root/{b.txt, a.txt, sub/{c.txt, inner/d.txt}, empty/, link -> sub}
        """
        root = tmp_path / "root"
        (root / "sub" / "inner").mkdir(parents=True)
        (root / "empty").mkdir()
        (root / "b.txt").write_text("b")
        (root / "a.txt").write_text("a")
        (root / "sub" / "c.txt").write_text("c")
        (root / "sub" / "inner" / "d.txt").write_text("d")
        os.symlink("sub", root / "link")
        return root

    def test_files(self, tree: Path) -> None:
        """Test files lists non-directories, including symlinks, sorted."""
        assert fileops.files(tree) == ["a.txt", "b.txt", "link"]

    def test_all_files(self, tree: Path) -> None:
        """Test all_files lists relative paths recursively."""
        assert fileops.all_files(tree) == [
            "a.txt",
            "b.txt",
            "link",
            os.path.join("sub", "c.txt"),
            os.path.join("sub", "inner", "d.txt"),
        ]

    def test_directories(self, tree: Path) -> None:
        """Test directories lists real subdirectories only."""
        assert fileops.directories(tree) == ["empty", "sub"]

    def test_listing_missing_directory(self, tmp_path: Path) -> None:
        """Test listing a missing directory raises."""
        with pytest.raises(FileNotFoundError):
            fileops.files(tmp_path / "missing")

    def test_make_directory(self, tmp_path: Path) -> None:
        """Test make_directory creates one level and fails if it exists."""
        target = tmp_path / "new"

        fileops.make_directory(target)

        assert target.is_dir()
        with pytest.raises(FileExistsError):
            fileops.make_directory(target)

    def test_make_directory_requires_parent(self, tmp_path: Path) -> None:
        """Test make_directory does not create parents."""
        with pytest.raises(FileNotFoundError):
            fileops.make_directory(tmp_path / "a" / "b")

    def test_make_directories(self, tmp_path: Path) -> None:
        """Test make_directories creates parents and tolerates existing ones."""
        target = tmp_path / "a" / "b" / "c"

        fileops.make_directories(target)
        fileops.make_directories(target)

        assert target.is_dir()

    def test_delete_directory(self, tree: Path) -> None:
        """Test delete_directory removes a whole tree."""
        fileops.delete_directory(tree)

        assert not tree.exists()

    def test_delete_directory_missing(self, tmp_path: Path) -> None:
        """Test deleting a missing directory is not an error."""
        fileops.delete_directory(tmp_path / "missing")

    def test_delete_directory_symlink_keeps_target(self, tree: Path) -> None:
        """Test a symlink is removed without touching what it points to."""
        fileops.delete_directory(tree / "link")

        assert not (tree / "link").is_symlink()
        assert (tree / "sub" / "c.txt").exists()

    def test_move_directory(self, tree: Path, tmp_path: Path) -> None:
        """Test move_directory renames a tree."""
        target = tmp_path / "moved"

        fileops.move_directory(tree, target)

        assert not tree.exists()
        assert (target / "sub" / "inner" / "d.txt").read_text() == "d"
