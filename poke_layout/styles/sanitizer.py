"""Sanitization of caller-supplied values before they reach generated CSS.

Values are interpolated directly into rule bodies, so anything outside a
small allow-list (alphanumerics, unit and calc characters) is dropped.
The default policy fails open: the call never raises.
"""

import re
from dataclasses import dataclass
from typing import Any

from ..errors import UnsafeStyleValueError
from ..layout_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.SANITIZER)

# Alphanumerics, parentheses, dot, percent, space and calc operators
DISALLOWED_CSS_CHARS = re.compile(r"[^0-9a-zA-Z().% \-+*/]")

# Selectors used as inputs (e.g. cover's centered child) may also carry
# combinator-free class/attribute syntax but never braces or semicolons
DISALLOWED_SELECTOR_CHARS = re.compile(r"[^0-9a-zA-Z.#\-_:()\[\]=]")

COMMENT_MARKERS = ("/*", "*/")


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sanitize_css_value(value: Any) -> str:
    """Strip every character outside the CSS value allow-list.

    Args:
        value: Raw value supplied by the caller (string or primitive).

    Returns:
        The value with disallowed characters removed; "" for None/empty.
    """
    text = _to_text(value)
    if not text:
        return ""
    return _strip_comment_markers(DISALLOWED_CSS_CHARS.sub("", text))


def _strip_comment_markers(text: str) -> str:
    # "/" and "*" are allowed alone but must not open or close a comment
    while any(marker in text for marker in COMMENT_MARKERS):
        for marker in COMMENT_MARKERS:
            text = text.replace(marker, "")
    return text


def sanitize_selector(value: Any) -> str:
    """Reduce a selector-like input to a safe compound selector."""
    return DISALLOWED_SELECTOR_CHARS.sub("", _to_text(value))


@dataclass(frozen=True)
class SanitizationReport:
    """Outcome of sanitizing a single value."""

    value: str
    cleaned: str
    dropped: str

    @property
    def changed(self) -> bool:
        return self.cleaned != self.value


def inspect_css_value(value: Any) -> SanitizationReport:
    """Sanitize a value and report which characters were dropped."""
    text = _to_text(value)
    dropped = "".join(DISALLOWED_CSS_CHARS.findall(text))
    stripped = DISALLOWED_CSS_CHARS.sub("", text)
    cleaned = _strip_comment_markers(stripped)
    if cleaned != stripped:
        dropped += "".join(m for m in COMMENT_MARKERS if m in stripped)
    return SanitizationReport(value=text, cleaned=cleaned, dropped=dropped)


class ValueSanitizer:
    """Policy-holding sanitizer used by element controllers.

    In the default (non-strict) mode dropped characters are logged and the
    cleaned value is returned. In strict mode any dropped character raises
    UnsafeStyleValueError instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def __call__(self, value: Any) -> str:
        return self.clean(value)

    def clean(self, value: Any) -> str:
        """Sanitize a value according to the configured policy.

        Args:
            value: Raw caller-supplied value.

        Returns:
            Sanitized value.

        Raises:
            UnsafeStyleValueError: In strict mode, if any character is dropped.
        """
        report = inspect_css_value(value)
        if report.changed:
            if self.strict:
                raise UnsafeStyleValueError(report.value, report.dropped)
            logger.debug(
                f"Dropped {report.dropped!r} from style value {report.value!r}",
                extra={"dropped": report.dropped},
            )
        return report.cleaned

    def clean_optional(self, value: Any) -> str | None:
        """Sanitize a value, passing None through unchanged."""
        if value is None:
            return None
        return self.clean(value)
