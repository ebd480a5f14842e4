"""Unit tests for CSS value sanitization."""

import logging

import pytest

from poke_layout.errors import UnsafeStyleValueError
from poke_layout.styles.sanitizer import (
    DISALLOWED_CSS_CHARS,
    ValueSanitizer,
    inspect_css_value,
    sanitize_css_value,
    sanitize_selector,
)


class TestSanitizeCssValue:
    """Test the allow-list filter applied to every interpolated value."""

    @pytest.mark.parametrize(
        "value",
        ["1rem", "var(--s1)", "calc(100% - 2rem)", "-0.5em", "10px 20px", "a + b"],
    )
    def test_safe_values_pass_unchanged(self, value):
        assert sanitize_css_value(value) == value

    def test_breakout_attempt_is_neutralized(self):
        result = sanitize_css_value("red; } body { display:none; } /*")

        for char in ";{}:":
            assert char not in result
        assert "/*" not in result
        assert result.startswith("red")

    def test_markup_and_quotes_are_dropped(self):
        assert sanitize_css_value("<script>'x'\"y\"</script>") == "scriptxy/script"

    def test_empty_and_none(self):
        assert sanitize_css_value("") == ""
        assert sanitize_css_value(None) == ""

    def test_primitives_are_stringified(self):
        assert sanitize_css_value(12) == "12"
        assert sanitize_css_value(1.5) == "1.5"
        assert sanitize_css_value(True) == "true"

    def test_comment_markers_are_removed(self):
        assert sanitize_css_value("1px /* x */") == "1px  x "
        assert "/*" not in sanitize_css_value("//**")

    def test_division_and_multiplication_survive(self):
        assert sanitize_css_value("calc(var(--s1) * 2 / 3)") == "calc(var(--s1) * 2 / 3)"

    @pytest.mark.parametrize(
        "value",
        [
            "red; } body { display:none; } /*",
            "//**",
            "url('javascript:alert(1)')",
            "élève 10px",
            "a\nb\tc",
            "",
        ],
    )
    def test_idempotent(self, value):
        once = sanitize_css_value(value)
        assert sanitize_css_value(once) == once

    @pytest.mark.parametrize(
        "value", ["{}", ";;", "<>", "'\"", "\\", "a:b", "x{y}z;", " "]
    )
    def test_output_only_contains_allowed_characters(self, value):
        assert DISALLOWED_CSS_CHARS.search(sanitize_css_value(value)) is None


class TestSanitizeSelector:
    """Test sanitization of selector-valued inputs."""

    def test_keeps_compound_selector(self):
        assert sanitize_selector(".title") == ".title"
        assert sanitize_selector("[data-role=main]") == "[data-role=main]"

    def test_drops_braces_and_combinators(self):
        assert sanitize_selector("h1 } body {") == "h1body"
        assert sanitize_selector("h1;>p") == "h1p"


class TestInspectCssValue:
    """Test reporting of dropped characters."""

    def test_unchanged_value(self):
        report = inspect_css_value("1rem")

        assert report.cleaned == "1rem"
        assert report.dropped == ""
        assert not report.changed

    def test_dropped_characters_are_reported_in_order(self):
        report = inspect_css_value("red;}")

        assert report.cleaned == "red"
        assert report.dropped == ";}"
        assert report.changed

    def test_comment_markers_are_reported(self):
        report = inspect_css_value("a/*b")

        assert report.cleaned == "ab"
        assert "/*" in report.dropped
        assert report.changed


class TestValueSanitizer:
    """Test the policy-holding sanitizer used by elements."""

    def test_default_policy_fails_open(self):
        sanitize = ValueSanitizer()

        assert sanitize("red; }") == "red "

    def test_default_policy_logs_dropped_characters(self, caplog):
        sanitize = ValueSanitizer()

        with caplog.at_level(logging.DEBUG, logger="poke_layout.sanitizer"):
            sanitize("red;")

        assert any("Dropped" in r.getMessage() for r in caplog.records)

    def test_strict_policy_raises(self):
        sanitize = ValueSanitizer(strict=True)

        with pytest.raises(UnsafeStyleValueError) as exc_info:
            sanitize("red;")

        assert exc_info.value.value == "red;"
        assert exc_info.value.dropped == ";"
        assert isinstance(exc_info.value, ValueError)

    def test_strict_policy_accepts_clean_values(self):
        assert ValueSanitizer(strict=True)("calc(1rem + 2px)") == "calc(1rem + 2px)"

    def test_clean_optional_passes_none_through(self):
        sanitize = ValueSanitizer()

        assert sanitize.clean_optional(None) is None
        assert sanitize.clean_optional("a;") == "a"
