"""Tests for warren.config: AppConfig defaults and file roles."""

import dataclasses
from pathlib import Path

import pytest

from warren.config import AppConfig, RouteRoles


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.app_dir == "app"
        assert config.rescan_routes is True
        assert config.private_marker == "_"
        assert config.inventory_cache == ".warren-files.json"

    def test_inventory_cache_beside_app_dir(self, tmp_path: Path) -> None:
        config = AppConfig(app_dir=tmp_path / "app")
        assert config.inventory_cache_path == tmp_path / ".warren-files.json"

    def test_inventory_cache_absolute_and_disabled(self, tmp_path: Path) -> None:
        cache = tmp_path / "elsewhere" / "routes.json"
        assert AppConfig(app_dir="app", inventory_cache=cache).inventory_cache_path == cache
        assert AppConfig(inventory_cache=None).inventory_cache_path is None

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AppConfig().debug = True  # type: ignore[misc]

    def test_roles_follow_names(self) -> None:
        roles = AppConfig(entry_point_name="api.py", document_name="page.html").roles
        assert roles.entry_point == "api.py"
        assert roles.document == "page.html"
        assert roles.routable == frozenset({"api.py", "page.html"})


class TestRouteRoles:
    def test_defaults(self) -> None:
        roles = RouteRoles()
        assert roles.layout == "layout.html"
        assert roles.not_found == "not-found.html"
        assert roles.routable == frozenset({"route.py", "index.html"})
