"""Tests for waymark.routing.render — the substitution engine."""

import pytest

from waymark.errors import BuildError, MissingPathParameter, UnknownPathParameter
from waymark.routing.render import render, render_query
from waymark.routing.template import PathTemplate


def _tpl(pattern: str) -> PathTemplate:
    return PathTemplate.parse(pattern)


class TestPathSubstitution:
    def test_single_param(self) -> None:
        assert render(_tpl("/users/{id}"), {"id": "user123"}) == "/users/user123"

    def test_static(self) -> None:
        assert render(_tpl("/about"), {}) == "/about"

    def test_multiple_params(self) -> None:
        url = render(_tpl("/orgs/{org}/repos/{repo}"), {"repo": "waymark", "org": "acme"})
        assert url == "/orgs/acme/repos/waymark"

    def test_non_string_values(self) -> None:
        assert render(_tpl("/posts/{id}/page/{n}"), {"id": 42, "n": 0}) == "/posts/42/page/0"

    def test_values_not_escaped(self) -> None:
        assert render(_tpl("/files/{name}"), {"name": "a b&c"}) == "/files/a b&c"

    def test_no_braces_left(self) -> None:
        tpl = _tpl("/a/{x}/b/{y}/{z}.json")
        url = render(tpl, {"x": "1", "y": "2", "z": "3"})
        assert "{" not in url
        assert "}" not in url

    def test_literals_untouched(self) -> None:
        tpl = _tpl("/a-{x}/b_{y}/c")
        url = render(tpl, {"x": "X", "y": "Y"})
        assert url == "/a-X/b_Y/c"
        for seg in tpl.segments:
            if not seg.is_param:
                assert seg.value in url

    def test_missing_param(self) -> None:
        with pytest.raises(MissingPathParameter) as exc_info:
            render(_tpl("/users/{id}"), {})
        assert exc_info.value.names == ("id",)
        assert "/users/{id}" in str(exc_info.value)

    def test_unknown_param(self) -> None:
        with pytest.raises(UnknownPathParameter) as exc_info:
            render(_tpl("/users/{id}"), {"id": "1", "slug": "x"})
        assert exc_info.value.names == ("slug",)

    def test_errors_are_type_errors(self) -> None:
        with pytest.raises(TypeError):
            render(_tpl("/users/{id}"), {})
        with pytest.raises(BuildError):
            render(_tpl("/about"), {"id": "1"})


class TestQuerySubstitution:
    def test_search_scenario(self) -> None:
        url = render(_tpl("/search"), {}, {"q": "go", "page": ""})
        assert url == "/search?q=go"

    def test_empty_value_skipped(self) -> None:
        url = render(_tpl("/list"), {}, {"a": "", "b": "x"})
        assert url == "/list?b=x"
        assert "a=" not in url
        assert not url.endswith("&")

    def test_all_empty_drops_question_mark(self) -> None:
        assert render(_tpl("/list"), {}, {"a": "", "b": ""}) == "/list"

    def test_none_skipped(self) -> None:
        assert render(_tpl("/list"), {}, {"a": None, "b": "1"}) == "/list?b=1"

    def test_empty_binding(self) -> None:
        assert render(_tpl("/list"), {}, {}) == "/list"
        assert render(_tpl("/list"), {}, None) == "/list"

    def test_declared_order(self) -> None:
        url = render(_tpl("/list"), {}, {"z": "1", "a": "2", "m": "3"})
        assert url == "/list?z=1&a=2&m=3"

    def test_pairs_binding(self) -> None:
        url = render(_tpl("/list"), {}, [("tag", "a"), ("tag", "b")])
        assert url == "/list?tag=a&tag=b"

    def test_zero_is_kept(self) -> None:
        assert render(_tpl("/list"), {}, {"page": 0}) == "/list?page=0"

    def test_path_and_query(self) -> None:
        url = render(_tpl("/users/{id}/posts"), {"id": "7"}, {"sort": "new"})
        assert url == "/users/7/posts?sort=new"

    def test_query_values_not_escaped(self) -> None:
        assert render(_tpl("/s"), {}, {"q": "a b"}) == "/s?q=a b"


class TestRenderQuery:
    def test_empty(self) -> None:
        assert render_query(None) == ""
        assert render_query({}) == ""

    def test_joined(self) -> None:
        assert render_query({"a": "1", "b": "2"}) == "a=1&b=2"

    def test_all_skipped(self) -> None:
        assert render_query({"a": "", "b": None}) == ""
