"""Unit tests for size tokens, keywords and count coercion."""

import pytest

from poke_layout.styles.sanitizer import sanitize_css_value
from poke_layout.styles.tokens import (
    ALIGN_ITEMS_KEYWORDS,
    JUSTIFY_CONTENT_KEYWORDS,
    SIZE_TOKENS,
    clamp_count,
    is_size_token,
    resolve_keyword,
    resolve_optional_size,
    resolve_size,
)


class TestSizeTokens:
    """Test resolution of the modular scale."""

    def test_scale_bounds(self):
        assert SIZE_TOKENS[0] == "s-5"
        assert "s5" in SIZE_TOKENS
        assert "measure" in SIZE_TOKENS

    def test_is_size_token(self):
        assert is_size_token("s0")
        assert not is_size_token("s9")
        assert not is_size_token(1)

    def test_tokens_resolve_to_variables(self):
        assert resolve_size("s1", sanitize_css_value) == "var(--s1)"
        assert resolve_size("measure", sanitize_css_value) == "var(--measure)"

    def test_raw_values_are_sanitized(self):
        assert resolve_size("10px;", sanitize_css_value) == "10px"

    def test_optional_size(self):
        assert resolve_optional_size(None, sanitize_css_value) is None
        assert resolve_optional_size("s-1", sanitize_css_value) == "var(--s-1)"


class TestKeywords:
    def test_known_keywords_pass_through(self):
        assert (
            resolve_keyword("space-between", JUSTIFY_CONTENT_KEYWORDS, sanitize_css_value)
            == "space-between"
        )
        assert (
            resolve_keyword("first baseline", ALIGN_ITEMS_KEYWORDS, sanitize_css_value)
            == "first baseline"
        )

    def test_unknown_keywords_are_sanitized(self):
        assert (
            resolve_keyword("center;}", JUSTIFY_CONTENT_KEYWORDS, sanitize_css_value)
            == "center"
        )


class TestClampCount:
    """Test coercion of count-like inputs."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3, 3),
            ("4", 4),
            (2.9, 2),
            (0, 1),
            (-2, 1),
            ("abc", 1),
            (None, 1),
            (float("inf"), 1),
        ],
    )
    def test_clamp(self, value, expected):
        assert clamp_count(value) == expected

    def test_custom_minimum(self):
        assert clamp_count(1, minimum=2) == 2
