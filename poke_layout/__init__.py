"""Generated, deduplicated styles for layout primitives.

Layout primitives (box, stack, cluster, grid, ...) turn a small sanitized
configuration into CSS scoped by a signature of that configuration. A shared
StyleRegistry guarantees one style node per (kind, signature), however many
element instances use it.

Main components:
- styles: sanitizer, hashing, document model, registry, lifecycle controller
- elements: the layout primitives and the kind catalog
- config: engine configuration
- render: mounting a layout description for server-side output
"""

__version__ = "0.1.0"

from .config import StyleEngineConfig, load_style_config
from .elements import ELEMENT_KINDS, LayoutElement, create_element
from .errors import (
    ConfigurationError,
    ElementLifecycleError,
    InvalidLayoutError,
    StyleEngineError,
    UnknownElementKindError,
    UnsafeStyleValueError,
)
from .render import RenderedPage, render_layout
from .styles import (
    HostNode,
    StyleDocument,
    StyleRegistry,
    generate_signature,
    get_default_registry,
    reset_default_registry,
    sanitize_css_value,
)

__all__ = [
    "__version__",
    # Config
    "StyleEngineConfig",
    "load_style_config",
    # Elements
    "ELEMENT_KINDS",
    "LayoutElement",
    "create_element",
    # Rendering
    "RenderedPage",
    "render_layout",
    # Styles
    "HostNode",
    "StyleDocument",
    "StyleRegistry",
    "generate_signature",
    "get_default_registry",
    "reset_default_registry",
    "sanitize_css_value",
    # Errors
    "StyleEngineError",
    "UnsafeStyleValueError",
    "UnknownElementKindError",
    "ElementLifecycleError",
    "ConfigurationError",
    "InvalidLayoutError",
]
