"""Shared fixtures for fskit tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def syncsource(tmp_path):
    """Directory with file1.txt (100 B), file2.txt (50 B) and sub/{a,b}.txt."""
    root = tmp_path / "syncsource"
    root.mkdir()
    (root / "file1.txt").write_bytes(b"x" * 100)
    (root / "file2.txt").write_bytes(b"y" * 50)
    sub = root / "sub"
    sub.mkdir()
    (sub / "a.txt").write_text("alpha")
    (sub / "b.txt").write_text("beta")
    return root


@pytest.fixture
def resources(tmp_path):
    """A deeper tree for search tests.

    Tree:
        a.txt, B.TXT, page.html, notes.md, folder.txt/ (a directory),
        folder.txt/inner.txt,
        sub/c.txt, sub/index.html,
        sub/deep/d.txt
    """
    root = tmp_path / "resources"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "B.TXT").write_text("b")
    (root / "page.html").write_text("<p>page</p>")
    (root / "notes.md").write_text("# notes")
    folder = root / "folder.txt"
    folder.mkdir()
    (folder / "inner.txt").write_text("inner")
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c")
    (sub / "index.html").write_text("<p>index</p>")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "d.txt").write_text("d")
    return root


@pytest.fixture
def target_dir(tmp_path):
    d = tmp_path / "target"
    d.mkdir()
    return d
