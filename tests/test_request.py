"""Tests for warren.http.request, headers and params."""

import pytest

from warren.http.headers import Headers, parse_cookies
from warren.http.params import Params
from warren.http.request import Request


def _request(
    *,
    method: str = "GET",
    query: bytes = b"",
    headers: list[tuple[bytes, bytes]] | None = None,
    bodies: tuple[bytes, ...] = (b"",),
) -> Request:
    messages = [
        {"type": "http.request", "body": body, "more_body": i < len(bodies) - 1}
        for i, body in enumerate(bodies)
    ]
    it = iter(messages)

    async def receive():
        return next(it)

    scope = {
        "type": "http",
        "method": method,
        "path": "/items",
        "query_string": query,
        "headers": headers or [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 5000),
    }
    return Request.from_asgi(scope, receive)


class TestRequest:
    def test_metadata(self) -> None:
        request = _request(query=b"a=1", headers=[(b"Sec-Fetch-Site", b"same-origin")])
        assert request.method == "GET"
        assert request.path == "/items"
        assert request.url == "/items?a=1"
        assert request.fetch_site == "same-origin"
        assert request.query["a"] == "1"
        assert request.server == ("localhost", 8000)

    def test_cookies(self) -> None:
        request = _request(headers=[(b"cookie", b"a=1; b=two")])
        assert request.cookies == {"a": "1", "b": "two"}

    @pytest.mark.asyncio
    async def test_body_streamed_and_cached(self) -> None:
        request = _request(method="POST", bodies=(b"hel", b"lo"))
        assert await request.body() == b"hello"
        assert await request.body() == b"hello"
        assert await request.text() == "hello"

    @pytest.mark.asyncio
    async def test_json(self) -> None:
        request = _request(method="POST", bodies=(b'{"x": [1, 2]}',))
        assert await request.json() == {"x": [1, 2]}

    @pytest.mark.asyncio
    async def test_params_form_body(self) -> None:
        request = _request(
            method="POST",
            query=b"page=1",
            headers=[(b"content-type", b"application/x-www-form-urlencoded")],
            bodies=(b"title=hi&tag=a&tag=b",),
        )
        params = await request.params()
        assert params["page"] == "1"
        assert params["title"] == "hi"
        assert params.get_list("tag") == ["a", "b"]

    @pytest.mark.asyncio
    async def test_params_json_empty_array(self) -> None:
        request = _request(
            method="POST",
            headers=[(b"content-type", b"application/json")],
            bodies=(b'{"title": "x", "tags": []}',),
        )
        params = await request.params()
        assert dict(params) == {"title": "x", "tags": []}

    @pytest.mark.asyncio
    async def test_params_get_ignores_body(self) -> None:
        request = _request(query=b"q=x")
        params = await request.params()
        assert dict(params) == {"q": "x"}


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers(((b"X-Thing", b"1"), (b"x-thing", b"2")))
        assert headers["x-THING"] == "1"
        assert headers.get_list("X-Thing") == ["1", "2"]
        assert "x-thing" in headers
        assert headers.get("missing", "d") == "d"

    def test_parse_cookies_skips_junk(self) -> None:
        assert parse_cookies("a=1; junk; b = 2") == {"a": "1", "b": "2"}


class TestParams:
    def test_from_query_string(self) -> None:
        params = Params.from_query_string(b"a=1&a=2&b=")
        assert params["a"] == "1"
        assert params.get_list("a") == ["1", "2"]
        assert params["b"] == ""

    def test_get_int(self) -> None:
        params = Params.from_query_string("n=5&bad=x")
        assert params.get_int("n") == 5
        assert params.get_int("bad", 0) == 0
        assert params.get_int("missing") is None

    def test_merged_replaces(self) -> None:
        merged = Params.from_query_string("a=1&b=2").merged(Params.from_object({"a": "x"}))
        assert dict(merged) == {"a": "x", "b": "2"}

    def test_from_object_arrays_are_single_values(self) -> None:
        params = Params.from_object({"tags": ["a", "b"], "empty": [], "n": 1})
        assert params["tags"] == ["a", "b"]
        assert params["empty"] == []
        assert params["n"] == 1
        assert dict(params) == {"tags": ["a", "b"], "empty": [], "n": 1}

    def test_names_without_values_dropped(self) -> None:
        params = Params({"a": ["1"], "b": []})
        assert list(params) == ["a"]
        assert "b" not in params
        assert params.get_list("b") == []
