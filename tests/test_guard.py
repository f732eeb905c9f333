"""Tests for warren.routing.guard: same-origin-only private routes."""

from warren.routing.guard import is_blocked, is_private


class TestIsPrivate:
    def test_marker_prefix(self) -> None:
        assert is_private("/_partials/row")
        assert is_private("/blog/_drafts/x")
        assert not is_private("/blog/post_1")

    def test_first_segment_checked(self) -> None:
        assert is_private("_hidden")

    def test_custom_marker(self) -> None:
        assert is_private("/~internal/x", "~")
        assert not is_private("/_x", "~")

    def test_empty_marker_disables(self) -> None:
        assert not is_private("/_x", "")


class TestIsBlocked:
    def test_blocked_without_header(self) -> None:
        assert is_blocked("/_partials/row", None)

    def test_blocked_cross_site(self) -> None:
        assert is_blocked("/_partials/row", "cross-site")
        assert is_blocked("/_partials/row", "same-site")
        assert is_blocked("/_partials/row", "none")

    def test_same_origin_allowed(self) -> None:
        assert not is_blocked("/_partials/row", "same-origin")

    def test_public_never_blocked(self) -> None:
        assert not is_blocked("/blog", None)
