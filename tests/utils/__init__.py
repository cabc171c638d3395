"""Common utilities for tests."""

import typing as t
from pathlib import Path


def get_test_data_dir() -> Path:
    """Return path to the test data directory.

    This is the single source of truth for test data location,
    used by both unittest TestCases and pytest fixtures.
    """
    return Path(__file__).parent.parent / "fixtures" / "data"


def make_tree(root: Path, tree: t.Mapping[str, t.Any]) -> Path:
    """Create files and directories under ``root`` from a nested dict.

    Dict values become directories, string values file contents.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in tree.items():
        path = root / name
        if isinstance(content, dict):
            make_tree(path, content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def list_tree(root: Path) -> dict[str, t.Any]:
    """Inverse of make_tree: read a directory back into a nested dict."""
    return {
        p.name: list_tree(p) if p.is_dir() else p.read_text(encoding="utf-8")
        for p in sorted(root.iterdir())
    }
