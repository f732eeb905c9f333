"""Tests for warren.pages.metadata: per-URI title and description."""

import json
from pathlib import Path

import pytest

from warren.pages.metadata import load_metadata


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(
        json.dumps(
            {
                "default": {"title": "Site", "description": "A site"},
                "": {"title": "Home"},
                "blog/post": {"title": "Post", "author": "ann"},
            }
        )
    )
    return path


class TestLoadMetadata:
    def test_exact_uri(self, metadata_file: Path) -> None:
        meta = load_metadata(metadata_file, "/blog/post")
        assert meta == {"title": "Post", "description": "", "author": "ann"}

    def test_home(self, metadata_file: Path) -> None:
        assert load_metadata(metadata_file, "/")["title"] == "Home"

    def test_default_fallback(self, metadata_file: Path) -> None:
        assert load_metadata(metadata_file, "/elsewhere") == {
            "title": "Site",
            "description": "A site",
        }

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_metadata(tmp_path / "none.json", "/") == {"title": "", "description": ""}

    def test_malformed_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "metadata.json"
        path.write_text("{oops")
        assert load_metadata(path, "/") == {"title": "", "description": ""}
        assert "Ignoring unreadable metadata file" in caplog.text
