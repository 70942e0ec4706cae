"""Tests for waymark.routing.template — PathTemplate and parse_template."""

import pytest

from waymark.errors import ConfigurationError, MalformedTemplate
from waymark.routing.template import PathSegment, PathTemplate, parse_template


class TestParseTemplate:
    def test_static(self) -> None:
        segments = parse_template("/users")
        assert segments == [PathSegment("/users")]

    def test_param(self) -> None:
        segments = parse_template("/users/{id}")
        assert len(segments) == 2
        assert segments[0].value == "/users/"
        assert segments[0].is_param is False
        assert segments[1].is_param is True
        assert segments[1].param_name == "id"
        assert segments[1].value == "{id}"

    def test_multiple_params(self) -> None:
        segments = parse_template("/orgs/{org}/repos/{repo}")
        assert [s.value for s in segments] == ["/orgs/", "{org}", "/repos/", "{repo}"]

    def test_params_within_one_segment(self) -> None:
        segments = parse_template("/files/{name}.{ext}")
        assert [s.param_name for s in segments if s.is_param] == ["name", "ext"]
        assert segments[2].value == "."

    def test_trailing_literal(self) -> None:
        segments = parse_template("/users/{id}/edit")
        assert segments[-1] == PathSegment("/edit")

    def test_empty_pattern(self) -> None:
        assert parse_template("") == []

    def test_duplicate_name(self) -> None:
        with pytest.raises(MalformedTemplate) as exc_info:
            parse_template("/x/{id}/{id}")
        assert "more than once" in str(exc_info.value)
        assert exc_info.value.pattern == "/x/{id}/{id}"

    def test_unmatched_open(self) -> None:
        with pytest.raises(MalformedTemplate, match="unmatched '\\{'"):
            parse_template("/users/{id")

    def test_unmatched_close(self) -> None:
        with pytest.raises(MalformedTemplate, match="unmatched '\\}'"):
            parse_template("/users/id}")

    def test_nested_braces(self) -> None:
        with pytest.raises(MalformedTemplate, match="nested"):
            parse_template("/users/{a{b}}")

    def test_empty_name(self) -> None:
        with pytest.raises(MalformedTemplate, match="empty placeholder"):
            parse_template("/users/{}")

    def test_converter_syntax_rejected(self) -> None:
        with pytest.raises(MalformedTemplate, match="identifier"):
            parse_template("/users/{id:int}")

    def test_keyword_name_rejected(self) -> None:
        with pytest.raises(MalformedTemplate):
            parse_template("/items/{class}")

    def test_rejects_flask_style_param(self) -> None:
        """Waymark expects {param}, not <param>."""
        with pytest.raises(MalformedTemplate) as exc_info:
            parse_template("/share/<slug>")
        assert "<param>" in str(exc_info.value)
        assert "{param}" in str(exc_info.value)
        assert "/share/<slug>" in str(exc_info.value)

    def test_rejects_query_string(self) -> None:
        with pytest.raises(MalformedTemplate, match="query"):
            parse_template("/search?q={q}")

    def test_rejects_fragment(self) -> None:
        with pytest.raises(MalformedTemplate):
            parse_template("/docs#intro")

    def test_malformed_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_template("/x/{id}/{id}")


class TestPathTemplate:
    def test_parameter_names_in_order(self) -> None:
        tpl = PathTemplate.parse("/orgs/{org}/repos/{repo}")
        assert tpl.parameter_names == ("org", "repo")

    def test_pattern_kept_verbatim(self) -> None:
        tpl = PathTemplate.parse("/users/{id}")
        assert tpl.pattern == "/users/{id}"
        assert str(tpl) == "/users/{id}"

    def test_static(self) -> None:
        assert PathTemplate.parse("/about").is_static is True
        assert PathTemplate.parse("/users/{id}").is_static is False

    def test_requires_leading_slash(self) -> None:
        with pytest.raises(MalformedTemplate, match="must start with '/'"):
            PathTemplate.parse("users/{id}")

    def test_leading_slash_optional(self) -> None:
        tpl = PathTemplate.parse("users/{id}", require_leading_slash=False)
        assert tpl.parameter_names == ("id",)

    def test_segments_reassemble_pattern(self) -> None:
        pattern = "/a/{x}-{y}/b"
        tpl = PathTemplate.parse(pattern)
        assert "".join(s.value for s in tpl.segments) == pattern

    def test_frozen(self) -> None:
        tpl = PathTemplate.parse("/users/{id}")
        with pytest.raises(AttributeError):
            tpl.pattern = "/other"  # type: ignore[misc]

    def test_equal_patterns_compare_equal(self) -> None:
        assert PathTemplate.parse("/users/{id}") == PathTemplate.parse("/users/{id}")
