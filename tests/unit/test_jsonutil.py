"""
Unit tests for applib.utils.jsonutil module.
"""

import logging

import pytest

from applib.utils.jsonutil import safe_json_parse


class TestSafeJsonParse:
    """Tests for safe_json_parse function."""

    @pytest.mark.unit
    def test_parses_valid_json(self) -> None:
        """Valid JSON should be decoded as-is."""
        assert safe_json_parse('{"name": "test"}', {"name": ""}) == {"name": "test"}

    @pytest.mark.unit
    def test_preserves_nesting(self) -> None:
        """Nested objects and arrays should be preserved."""
        text = '{"a": {"b": [1, 2, {"c": null}]}, "d": true}'
        assert safe_json_parse(text, {}) == {"a": {"b": [1, 2, {"c": None}]}, "d": True}

    @pytest.mark.unit
    def test_does_not_validate_against_fallback_shape(self) -> None:
        """A successful parse is returned even if it differs from the fallback's shape."""
        assert safe_json_parse("[1, 2]", {"items": []}) == [1, 2]

    @pytest.mark.unit
    def test_accepts_bytes(self) -> None:
        """UTF-8 encoded bytes should be decoded like text."""
        assert safe_json_parse(b'{"k": "v"}', None) == {"k": "v"}

    @pytest.mark.unit
    def test_returns_fallback_identity_on_invalid_json(self) -> None:
        """Invalid JSON should return the exact fallback object passed in."""
        fallback = {"error": True}
        result = safe_json_parse("invalid", fallback)
        assert result is fallback
        assert fallback == {"error": True}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["", "   ", "{", '{"a": 1,}', "[1, 2", "NaN", '{"x": Infinity}', None],
    )
    def test_returns_fallback_for_unparseable_input(self, text) -> None:
        """Any parse-time error should produce the fallback without raising."""
        fallback: list = []
        assert safe_json_parse(text, fallback) is fallback

    @pytest.mark.unit
    def test_returns_fallback_for_excessive_nesting(self) -> None:
        """Input nested beyond the recursion limit should produce the fallback."""
        fallback = object()
        assert safe_json_parse("[" * 100_000 + "]" * 100_000, fallback) is fallback

    @pytest.mark.unit
    def test_logs_absorbed_error_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """The swallowed error should be visible at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="applib"):
            safe_json_parse("invalid", None)
        assert "JSON parse failed" in caplog.text
