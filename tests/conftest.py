"""Shared fixtures for robolocopy tests."""

import pytest
from click.testing import CliRunner


def _write_tree(root, files):
    """Create *files* (relative path -> text) under *root*.

    A path ending in ``/`` creates an empty directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        p = root / rel
        if rel.endswith("/"):
            p.mkdir(parents=True, exist_ok=True)
            continue
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content)
    return root


def _list_tree(root):
    """Return the set of relative file paths under *root*."""
    return {
        str(p.relative_to(root)).replace("\\", "/")
        for p in root.rglob("*")
        if p.is_file()
    }


@pytest.fixture
def make_tree():
    return _write_tree


@pytest.fixture
def list_tree():
    return _list_tree


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path):
    """A source tree with a mix of kept and default-excluded entries."""
    return _write_tree(tmp_path / "src", {
        "file1.txt": "one",
        "file2.log": "log",
        "src/code.ts": "code",
        "dist/bundle.js": "bundle",
        "node_modules/package/index.js": "pkg",
    })
