"""Shared fixtures for treee tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── README.md
        ├── docs/
        │   └── guide.md
        ├── src/
        │   ├── api/
        │   │   ├── auth.py
        │   │   └── user.py
        │   └── models/
        │       └── user.py
        └── tests/
            └── test_user.py
    """
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("guide")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "api").mkdir()
    (tmp_path / "src" / "api" / "auth.py").write_text("auth")
    (tmp_path / "src" / "api" / "user.py").write_text("user")
    (tmp_path / "src" / "models").mkdir()
    (tmp_path / "src" / "models" / "user.py").write_text("user")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "test_user.py").write_text("test")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path


@pytest.fixture
def rust_tree(tmp_path: Path) -> Path:
    """Tree where the only ``*.rs`` file is a grandchild.

    Structure::

        root/
        ├── .gitignore          (target)
        ├── empty/
        ├── notes.txt
        ├── src/
        │   ├── readme.txt
        │   └── util/
        │       └── lib.rs
        └── target/
            └── debug/
                └── build.rs
    """
    (tmp_path / ".gitignore").write_text("target\n")
    (tmp_path / "empty").mkdir()
    (tmp_path / "notes.txt").write_text("notes")
    (tmp_path / "src" / "util").mkdir(parents=True)
    (tmp_path / "src" / "readme.txt").write_text("readme")
    (tmp_path / "src" / "util" / "lib.rs").write_text("fn main() {}")
    (tmp_path / "target" / "debug").mkdir(parents=True)
    (tmp_path / "target" / "debug" / "build.rs").write_text("fn main() {}")
    return tmp_path


@pytest.fixture
def gitignore_tree(tmp_path: Path) -> Path:
    """Tree with root and nested .gitignore files.

    Structure::

        root/
        ├── .gitignore          (*.pyc, node_modules/, dist/, *.log)
        ├── README.md
        ├── dist/
        │   └── bundle.js
        ├── node_modules/
        │   └── pkg/
        │       └── index.js
        └── src/
            ├── .gitignore      (!keep.log, /local.txt)
            ├── app.py
            ├── app.pyc
            ├── debug.log
            ├── keep.log
            ├── local.txt
            └── sub/
                └── local.txt
    """
    (tmp_path / ".gitignore").write_text("*.pyc\nnode_modules/\ndist/\n*.log\n")
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "bundle.js").write_text("bundle")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("js")
    (tmp_path / "src" / "sub").mkdir(parents=True)
    (tmp_path / "src" / ".gitignore").write_text("!keep.log\n/local.txt\n")
    (tmp_path / "src" / "app.py").write_text("app")
    (tmp_path / "src" / "app.pyc").write_bytes(b"\x00")
    (tmp_path / "src" / "debug.log").write_text("log")
    (tmp_path / "src" / "keep.log").write_text("log")
    (tmp_path / "src" / "local.txt").write_text("local")
    (tmp_path / "src" / "sub" / "local.txt").write_text("local")
    (tmp_path / "README.md").write_text("readme")
    return tmp_path
