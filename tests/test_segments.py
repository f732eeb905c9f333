"""Tests for warren.routing.segments: tokenizing and normalizing paths."""

from warren.routing.segments import Segment, SegmentKind, join, normalize, strip_groups, texts


class TestSegmentParse:
    def test_literal(self) -> None:
        seg = Segment.parse("about")
        assert seg.kind is SegmentKind.LITERAL
        assert seg.name == "about"

    def test_group(self) -> None:
        seg = Segment.parse("(marketing)")
        assert seg.is_group
        assert seg.name == "marketing"

    def test_dynamic(self) -> None:
        seg = Segment.parse("[id]")
        assert seg.is_dynamic
        assert seg.name == "id"

    def test_catch_all(self) -> None:
        seg = Segment.parse("[...slug]")
        assert seg.is_catch_all
        assert not seg.is_dynamic
        assert seg.name == "slug"

    def test_unbalanced_brackets_are_literal(self) -> None:
        assert Segment.parse("[id").kind is SegmentKind.LITERAL
        assert Segment.parse("(x").kind is SegmentKind.LITERAL

    def test_str_is_text(self) -> None:
        assert str(Segment.parse("[id]")) == "[id]"


class TestNormalize:
    def test_strips_leading_slash_and_dot(self) -> None:
        assert texts(normalize("/blog/post")) == ("blog", "post")
        assert texts(normalize("./blog/post")) == ("blog", "post")

    def test_backslashes_become_slashes(self) -> None:
        assert texts(normalize("(shop)\\products\\[id]\\route.py")) == (
            "(shop)",
            "products",
            "[id]",
            "route.py",
        )

    def test_repeated_separators_collapse(self) -> None:
        assert texts(normalize("a//b///c/")) == ("a", "b", "c")

    def test_root_is_empty(self) -> None:
        assert normalize("/") == ()
        assert normalize("") == ()

    def test_idempotent(self) -> None:
        for raw in ("/a/(g)/[id]/x.html", "a\\b", "./[...rest]/route.py", "/"):
            once = normalize(raw)
            assert normalize(once) == once
            assert normalize(join(once)) == once

    def test_brackets_preserved(self) -> None:
        assert join(normalize("/(g)/[id]/[...rest]")) == "(g)/[id]/[...rest]"


class TestStripGroups:
    def test_removes_only_groups(self) -> None:
        segments = normalize("(a)/blog/(b)/[id]/index.html")
        assert texts(strip_groups(segments)) == ("blog", "[id]", "index.html")
