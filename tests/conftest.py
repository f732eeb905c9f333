"""Shared fixtures: build app directories under ``tmp_path``."""

from collections.abc import Callable
from pathlib import Path

import pytest

type TreeFactory = Callable[[dict[str, str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Write ``{relative_path: contents}`` under ``tmp_path / "app"``."""

    def factory(files: dict[str, str]) -> Path:
        root = tmp_path / "app"
        root.mkdir(exist_ok=True)
        for relative, contents in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(contents, encoding="utf-8")
        return root

    return factory
