"""Tests for FileExplorer listing and search."""

import json
import os
from unittest.mock import patch

import pytest

from fskit import (
    Entry,
    EntryType,
    FileExplorer,
    NotADirError,
    PathNotFoundError,
    UnreadableError,
    list_dir,
    search,
)


def names(entries):
    return sorted(e.name for e in entries)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_missing_directory(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            FileExplorer(tmp_path / "nope")

    def test_file_is_not_a_directory(self, tmp_path):
        f = tmp_path / "f.txt"
        f.write_text("x")
        with pytest.raises(NotADirError):
            FileExplorer(f)

    def test_not_a_directory_is_builtin_subclass(self, tmp_path):
        f = tmp_path / "f.txt"
        f.write_text("x")
        with pytest.raises(NotADirectoryError):
            FileExplorer(str(f))

    def test_trailing_separator_stripped(self, syncsource):
        explorer = FileExplorer(str(syncsource) + os.sep)
        assert explorer.directory == str(syncsource)
        for entry in explorer.list_all():
            assert entry.path == os.path.join(str(syncsource), entry.name)


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------

class TestListAll:
    def test_recursive_shape(self, syncsource):
        entries = FileExplorer(syncsource, sort=True).list_all(True)
        assert len(entries) == 3
        file1, file2, sub = entries
        assert (file1.name, file1.is_dir, file1.size) == ("file1.txt", False, 100)
        assert (file2.name, file2.is_dir, file2.size) == ("file2.txt", False, 50)
        assert sub.name == "sub"
        assert sub.is_dir
        assert sub.size is None
        assert len(sub.children) == 2
        assert names(sub.children) == ["a.txt", "b.txt"]

    def test_recursive_unsorted_counts(self, syncsource):
        entries = FileExplorer(syncsource).list_all(True)
        assert names(entries) == ["file1.txt", "file2.txt", "sub"]
        dirs = [e for e in entries if e.is_dir]
        assert len(dirs) == 1
        assert len(dirs[0].children) == 2

    def test_non_recursive_has_no_children(self, syncsource):
        entries = FileExplorer(syncsource).list_all()
        sub = next(e for e in entries if e.name == "sub")
        assert sub.is_dir
        assert sub.children == []

    def test_files_never_have_children(self, syncsource):
        for entry in FileExplorer(syncsource).list_all(True):
            if entry.is_file:
                assert entry.children == []

    def test_no_dot_entries(self, syncsource):
        entry_names = {e.name for e in FileExplorer(syncsource).list_all(True)}
        assert "." not in entry_names
        assert ".." not in entry_names

    def test_child_paths_are_joined(self, syncsource):
        entries = FileExplorer(syncsource).list_all(True)
        sub = next(e for e in entries if e.name == "sub")
        for child in sub.children:
            assert child.path == os.path.join(str(syncsource), "sub", child.name)

    def test_empty_directory(self, tmp_path):
        assert FileExplorer(tmp_path).list_all(True) == []

    def test_sort_orders_each_level(self, tmp_path):
        for name in ("c", "a", "b"):
            (tmp_path / name).write_text(name)
        d = tmp_path / "d"
        d.mkdir()
        for name in ("z", "y"):
            (d / name).write_text(name)
        entries = FileExplorer(tmp_path, sort=True).list_all(True)
        assert [e.name for e in entries] == ["a", "b", "c", "d"]
        assert [e.name for e in entries[3].children] == ["y", "z"]

    def test_mtime(self, syncsource):
        os.utime(syncsource / "file1.txt", (1_600_000_000, 1_600_000_000))
        entries = FileExplorer(syncsource).list_all()
        file1 = next(e for e in entries if e.name == "file1.txt")
        assert file1.mtime == 1_600_000_000
        assert file1.modified_time.timestamp() == 1_600_000_000

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="no symlinks")
    def test_symlinks_are_other_and_not_followed(self, syncsource):
        link = syncsource / "loop"
        try:
            link.symlink_to(syncsource, target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")
        entries = FileExplorer(syncsource).list_all(True)
        loop = next(e for e in entries if e.name == "loop")
        assert loop.type == EntryType.OTHER
        assert loop.children == []

    def test_list_dir_shorthand(self, syncsource):
        assert names(list_dir(syncsource)) == ["file1.txt", "file2.txt", "sub"]


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

class TestEntry:
    def test_size_conversions(self):
        e = Entry(path="/x/f", name="f", type=EntryType.FILE, mtime=0.0, size=1536)
        assert e.size_in_kb == 1.5
        assert e.size_in_mb == 0.0

    def test_directory_sizes_are_none(self):
        e = Entry(path="/x/d", name="d", type=EntryType.DIRECTORY, mtime=0.0)
        assert e.size_in_kb is None
        assert e.size_in_mb is None

    def test_to_dict_recursive(self, syncsource):
        entries = FileExplorer(syncsource, sort=True).list_all(True)
        data = [e.to_dict() for e in entries]
        json.dumps(data)  # serializable
        assert set(data[0]) == {
            "path", "name", "is_directory", "size", "size_in_kb",
            "size_in_mb", "modified_time", "files",
        }
        assert data[0]["is_directory"] is False
        assert data[2]["is_directory"] is True
        assert len(data[2]["files"]) == 2

    def test_entry_type_str(self):
        assert str(EntryType.DIRECTORY) == "directory"


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------

class TestSearch:
    def test_non_recursive_immediate_files_only(self, resources):
        result = FileExplorer(resources).search("*.txt")
        assert names(result) == ["B.TXT", "a.txt"]

    def test_recursive_includes_descendants(self, resources):
        result = FileExplorer(resources).search("*.txt", True)
        assert names(result) == ["B.TXT", "a.txt", "c.txt", "d.txt", "inner.txt"]

    def test_directories_never_match(self, resources):
        result = FileExplorer(resources).search("*folder.txt", True)
        assert result == []

    def test_html_recursive(self, resources):
        result = FileExplorer(resources).search("*.html", True)
        assert names(result) == ["index.html", "page.html"]

    def test_pattern_matches_full_path(self, resources):
        explorer = FileExplorer(resources)
        assert explorer.search("page.html") == []
        result = explorer.search("*" + os.sep + "page.html")
        assert names(result) == ["page.html"]

    def test_directory_component_in_pattern(self, resources):
        pattern = "*" + os.sep + "deep" + os.sep + "*"
        result = FileExplorer(resources).search(pattern, True)
        assert names(result) == ["d.txt"]

    def test_no_matches(self, resources):
        assert FileExplorer(resources).search("*.zzz", True) == []

    def test_results_are_files(self, resources):
        for entry in FileExplorer(resources).search("*", True):
            assert entry.is_file

    def test_search_by_extension(self, resources):
        explorer = FileExplorer(resources)
        assert names(explorer.search_by_extension("html", True)) == ["index.html", "page.html"]
        assert names(explorer.search_by_extension("txt")) == ["B.TXT", "a.txt"]

    def test_search_shorthand(self, resources):
        assert names(search(resources, "*.md")) == ["notes.md"]


class TestIterTree:
    def test_parents_before_children(self, resources):
        seen = []
        for entry in FileExplorer(resources, sort=True).iter_tree():
            parent = os.path.dirname(entry.path)
            if parent != str(resources):
                assert parent in seen
            seen.append(entry.path)
        assert len(seen) == 11

    def test_depth_first(self, resources):
        order = [os.path.relpath(e.path, resources)
                 for e in FileExplorer(resources, sort=True).iter_tree()]
        sub = order.index("sub")
        assert order[sub:sub + 5] == [
            "sub",
            os.path.join("sub", "c.txt"),
            os.path.join("sub", "deep"),
            os.path.join("sub", "deep", "d.txt"),
            os.path.join("sub", "index.html"),
        ]

    def test_deep_tree_does_not_recurse(self, tmp_path):
        d = tmp_path
        for i in range(60):
            d = d / f"d{i}"
        d.mkdir(parents=True)
        (d / "leaf.txt").write_text("leaf")
        result = FileExplorer(tmp_path).search("*leaf.txt", True)
        assert len(result) == 1


# ---------------------------------------------------------------------------
# Symlinks and unreadable directories
# ---------------------------------------------------------------------------

@pytest.fixture
def linked_dir(tmp_path):
    """src/ with plain.txt and link.txt -> ../real.txt."""
    real = tmp_path / "real.txt"
    real.write_bytes(b"r" * 7)
    src = tmp_path / "src"
    src.mkdir()
    (src / "plain.txt").write_text("plain")
    try:
        (src / "link.txt").symlink_to(os.path.join("..", "real.txt"))
    except (OSError, NotImplementedError):
        pytest.skip("cannot create symlinks")
    return src


class TestFileSymlinks:
    def test_listed_as_file(self, linked_dir):
        entries = {e.name: e for e in FileExplorer(linked_dir).list_all()}
        link = entries["link.txt"]
        assert link.type == EntryType.FILE
        assert link.size == 7

    def test_found_by_search(self, linked_dir):
        result = FileExplorer(linked_dir).search("*.txt")
        assert names(result) == ["link.txt", "plain.txt"]

    def test_dangling_link_is_other(self, linked_dir):
        (linked_dir / "gone.txt").symlink_to("nowhere.txt")
        entries = {e.name: e for e in FileExplorer(linked_dir).list_all()}
        assert entries["gone.txt"].type == EntryType.OTHER
        assert "gone.txt" not in names(FileExplorer(linked_dir).search("*.txt"))


class TestUnreadable:
    def test_scandir_permission_error(self, syncsource):
        explorer = FileExplorer(syncsource)
        with patch("fskit.tree.os.scandir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(UnreadableError):
                explorer.list_all()

    def test_entry_vanishing_mid_walk(self, syncsource):
        explorer = FileExplorer(syncsource)
        with patch("fskit.tree.os.scandir", side_effect=FileNotFoundError(2, "gone")):
            with pytest.raises(UnreadableError):
                explorer.search("*.txt", True)

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                        reason="needs a non-root POSIX user")
    def test_chmod_000_subdirectory(self, syncsource):
        sub = syncsource / "sub"
        sub.chmod(0)
        try:
            with pytest.raises(UnreadableError):
                FileExplorer(syncsource).list_all(True)
        finally:
            sub.chmod(0o755)
