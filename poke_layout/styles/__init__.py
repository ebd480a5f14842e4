"""Style generation and deduplication machinery for layout primitives.

Main components:
- sanitizer: allow-list sanitization of caller-supplied values
- hashing: canonical records and kind-prefixed signatures
- tokens: size tokens and alignment keywords
- document: style/host node model
- registry: deduplicating (kind, signature) -> style node store
- controller: per-instance lifecycle against the registry
"""

from .controller import ElementStyleController, LifecycleState, tag_attribute
from .document import HostNode, StyleDocument, StyleNode
from .hashing import (
    canonicalize,
    element_signature,
    generate_signature,
    hash_string,
    hash_string_wide,
    record_key,
)
from .registry import (
    SignatureCollision,
    StyleEntry,
    StyleRegistry,
    get_default_registry,
    reset_default_registry,
)
from .sanitizer import (
    SanitizationReport,
    ValueSanitizer,
    inspect_css_value,
    sanitize_css_value,
    sanitize_selector,
)

__all__ = [
    # Sanitizer
    "sanitize_css_value",
    "sanitize_selector",
    "inspect_css_value",
    "SanitizationReport",
    "ValueSanitizer",
    # Hashing
    "canonicalize",
    "generate_signature",
    "element_signature",
    "hash_string",
    "hash_string_wide",
    "record_key",
    # Document
    "StyleDocument",
    "StyleNode",
    "HostNode",
    # Registry
    "StyleRegistry",
    "StyleEntry",
    "SignatureCollision",
    "get_default_registry",
    "reset_default_registry",
    # Controller
    "ElementStyleController",
    "LifecycleState",
    "tag_attribute",
]
