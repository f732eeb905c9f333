"""Tests for warren.pages.layouts: chain discovery and placeholder contracts."""

import pytest

from warren.config import RouteRoles
from warren.errors import LayoutContractError
from warren.pages.layouts import CHILD_CONTENT, CONTENT, build_chain, has_placeholder
from warren.routing.inventory import scan
from warren.routing.segments import normalize

ROLES = RouteRoles()


class TestHasPlaceholder:
    @pytest.mark.parametrize(
        "source",
        ["{{ content }}", "{{content}}", "{{- content -}}", "{{ content | safe }}"],
    )
    def test_accepts(self, source: str) -> None:
        assert has_placeholder(source, CONTENT)

    def test_rejects_other_names(self) -> None:
        assert not has_placeholder("{{ contents }}", CONTENT)
        assert not has_placeholder("{{ content }}", CHILD_CONTENT)
        assert not has_placeholder("content", CONTENT)


class TestBuildChain:
    def test_root_then_nested(self, make_tree) -> None:
        root = make_tree(
            {
                "layout.html": "<html>{{ content }}</html>",
                "blog/layout.html": "<section>{{ child_content }}</section>",
                "blog/post/layout.html": "<article>{{ child_content }}</article>",
                "blog/post/index.html": "X",
            }
        )
        chain = build_chain(scan(root), normalize("blog/post"), ROLES)
        assert [layout.template_name for layout in chain.layouts] == [
            "layout.html",
            "blog/layout.html",
            "blog/post/layout.html",
        ]
        assert chain.root is not None
        assert chain.root.placeholder == CONTENT
        assert [layout.placeholder for layout in chain.nested] == [CHILD_CONTENT, CHILD_CONTENT]

    def test_directories_without_layout_skipped(self, make_tree) -> None:
        root = make_tree(
            {
                "layout.html": "{{ content }}",
                "a/b/layout.html": "{{ child_content }}",
            }
        )
        chain = build_chain(scan(root), normalize("a/b/c"), ROLES)
        assert [layout.depth for layout in chain.layouts] == [0, 2]

    def test_group_layouts_included(self, make_tree) -> None:
        root = make_tree(
            {
                "layout.html": "{{ content }}",
                "(shop)/layout.html": "{{ child_content }}",
            }
        )
        chain = build_chain(scan(root), normalize("(shop)/products"), ROLES)
        assert [layout.template_name for layout in chain.nested] == ["(shop)/layout.html"]

    def test_root_only(self, make_tree) -> None:
        root = make_tree({"layout.html": "{{ content }}"})
        chain = build_chain(scan(root), (), ROLES)
        assert len(chain) == 1


class TestContracts:
    def test_nested_missing_placeholder(self, make_tree) -> None:
        root = make_tree(
            {
                "layout.html": "{{ content }}",
                "blog/layout.html": "<section>nothing here</section>",
            }
        )
        with pytest.raises(LayoutContractError) as exc_info:
            build_chain(scan(root), normalize("blog"), ROLES)
        assert exc_info.value.template_name == "blog/layout.html"
        assert exc_info.value.placeholder == CHILD_CONTENT

    def test_nested_using_root_placeholder(self, make_tree) -> None:
        root = make_tree(
            {
                "layout.html": "{{ content }}",
                "blog/layout.html": "{{ content }}",
            }
        )
        with pytest.raises(LayoutContractError):
            build_chain(scan(root), normalize("blog"), ROLES)

    def test_root_missing_placeholder(self, make_tree) -> None:
        root = make_tree({"layout.html": "<html></html>"})
        with pytest.raises(LayoutContractError) as exc_info:
            build_chain(scan(root), (), ROLES)
        assert exc_info.value.placeholder == CONTENT
        assert "{{ content }}" in str(exc_info.value)

    def test_missing_root_layout(self, make_tree) -> None:
        root = make_tree({"index.html": "hi"})
        with pytest.raises(LayoutContractError, match="root layout file is missing"):
            build_chain(scan(root), (), ROLES)

    def test_validation_can_be_skipped(self, make_tree) -> None:
        root = make_tree({"layout.html": "<html></html>"})
        chain = build_chain(scan(root), (), ROLES, validate=False)
        assert len(chain) == 1
