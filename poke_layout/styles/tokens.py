"""Design tokens and keyword sets accepted by layout primitives.

Size tokens name the modular scale defined as CSS custom properties on
``:root`` (``--s-5`` .. ``--s5`` and ``--measure``). Alignment keywords are
passed through verbatim; any other value is sanitized.
"""

from collections.abc import Callable
from typing import Any

SIZE_TOKENS: tuple[str, ...] = (
    "s-5",
    "s-4",
    "s-3",
    "s-2",
    "s-1",
    "s0",
    "s1",
    "s2",
    "s3",
    "s4",
    "s5",
    "measure",
)

JUSTIFY_CONTENT_KEYWORDS = frozenset(
    [
        "flex-start",
        "flex-end",
        "start",
        "end",
        "left",
        "right",
        "center",
        "space-between",
        "space-around",
        "space-evenly",
        "stretch",
        "normal",
    ]
)

ALIGN_ITEMS_KEYWORDS = frozenset(
    [
        "flex-start",
        "flex-end",
        "start",
        "end",
        "self-start",
        "self-end",
        "center",
        "baseline",
        "first baseline",
        "last baseline",
        "stretch",
        "normal",
    ]
)


def is_size_token(value: Any) -> bool:
    """Check whether a value names a modular scale step."""
    return isinstance(value, str) and value in SIZE_TOKENS


def size_var(token: str) -> str:
    """CSS custom property reference for a size token."""
    return f"var(--{token})"


def resolve_size(value: Any, sanitize: Callable[[Any], str]) -> str:
    """Resolve a size token to its variable, sanitizing raw values.

    Args:
        value: Token name (e.g. "s1") or raw CSS length.
        sanitize: Sanitizer applied to non-token values.

    Returns:
        ``var(--token)`` for tokens, otherwise the sanitized value.
    """
    if is_size_token(value):
        return size_var(value)
    return sanitize(value)


def resolve_optional_size(value: Any, sanitize: Callable[[Any], str]) -> str | None:
    """Like resolve_size, but None stays None."""
    if value is None:
        return None
    return resolve_size(value, sanitize)


def resolve_keyword(
    value: Any, keywords: frozenset[str], sanitize: Callable[[Any], str]
) -> str:
    """Pass known CSS keywords through, sanitize anything else."""
    if isinstance(value, str) and value in keywords:
        return value
    return sanitize(value)


def clamp_count(value: Any, minimum: int = 1) -> int:
    """Coerce a count-like input to an integer of at least ``minimum``.

    Non-numeric or zero inputs fall back to ``minimum``.
    """
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return minimum
    return max(minimum, number or minimum)
