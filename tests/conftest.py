"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create the reference tree used across scan tests.

    Layout::

        root/a.txt            100 bytes
        root/sub/b.txt        200 bytes
        root/sub/empty/       no files
    """
    root = tmp_path / "root"
    (root / "sub" / "empty").mkdir(parents=True)
    _ = (root / "a.txt").write_bytes(b"a" * 100)
    _ = (root / "sub" / "b.txt").write_bytes(b"b" * 200)
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a deeper tree with several files per directory."""
    root = tmp_path / "nested"
    layout: dict[str, int] = {
        "top.bin": 10,
        "docs/readme.md": 20,
        "docs/guide/intro.md": 30,
        "docs/guide/advanced.md": 40,
        "src/pkg/module.py": 50,
        "src/pkg/sub/deep.py": 60,
        "src/pkg/sub/deeper/deepest.py": 70,
        "zero/empty.txt": 0,
    }
    for relative, size in layout.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_bytes(b"x" * size)
    (root / "hollow" / "inner").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def reset_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
