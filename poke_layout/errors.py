"""Exception hierarchy for the layout style engine.

Style generation itself is fail-open and raises nothing. These errors cover
the opt-in strict policies and programming mistakes around the engine.
"""


class StyleEngineError(Exception):
    """Base class for all poke_layout errors."""


class UnsafeStyleValueError(StyleEngineError, ValueError):
    """Raised by a strict sanitizer when a value contains disallowed characters."""

    def __init__(self, value: str, dropped: str):
        self.value = value
        self.dropped = dropped
        super().__init__(
            f"Style value {value!r} contains disallowed characters: {dropped!r}"
        )


class UnknownElementKindError(StyleEngineError, KeyError):
    """Raised when an element kind has no registered implementation."""

    def __init__(self, kind: str, known: list[str] | None = None):
        self.kind = kind
        self.known = sorted(known or [])
        super().__init__(kind)

    def __str__(self) -> str:
        known = ", ".join(self.known) if self.known else "none"
        return f"Unknown element kind {self.kind!r} (known kinds: {known})"


class ElementLifecycleError(StyleEngineError, RuntimeError):
    """Raised when an element is driven through an invalid lifecycle transition."""


class ConfigurationError(StyleEngineError):
    """Raised when the engine configuration file or environment is invalid."""


class InvalidLayoutError(StyleEngineError, ValueError):
    """Raised when a layout description does not have the expected shape."""
