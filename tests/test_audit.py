"""Tests for warren.routing.audit: duplicate route detection."""

from warren.config import RouteRoles
from warren.routing.audit import audit
from warren.routing.inventory import RouteInventory

ROLES = RouteRoles()


def _inv(*paths: str) -> RouteInventory:
    return RouteInventory.from_paths("app", list(paths))


class TestAudit:
    def test_groups_colliding(self) -> None:
        conflicts = audit(_inv("(a)/blog/route.py", "(b)/blog/route.py"), ROLES)
        assert len(conflicts) == 1
        assert conflicts[0].path == "blog/route.py"
        assert conflicts[0].originals == ("(a)/blog/route.py", "(b)/blog/route.py")

    def test_grouped_and_ungrouped_collide(self) -> None:
        conflicts = audit(_inv("(a)/blog/index.html", "blog/index.html"), ROLES)
        assert len(conflicts) == 1

    def test_root_level_duplicates_reported(self) -> None:
        conflicts = audit(_inv("(a)/index.html", "index.html"), ROLES)
        assert [c.path for c in conflicts] == ["index.html"]

    def test_route_and_index_do_not_collide(self) -> None:
        assert audit(_inv("(a)/blog/route.py", "(b)/blog/index.html"), ROLES) == []

    def test_layouts_may_repeat(self) -> None:
        assert audit(_inv("(a)/layout.html", "(b)/layout.html"), ROLES) == []

    def test_clean_inventory(self) -> None:
        assert audit(_inv("index.html", "blog/index.html", "posts/[id]/route.py"), ROLES) == []

    def test_one_conflict_per_path(self) -> None:
        inv = _inv("(a)/x/route.py", "(b)/x/route.py", "(c)/x/route.py", "(a)/y/route.py", "(b)/y/route.py")
        conflicts = audit(inv, ROLES)
        assert [c.path for c in conflicts] == ["x/route.py", "y/route.py"]
        assert len(conflicts[0].originals) == 3
