"""Server-side rendering of a layout description into deduplicated markup.

A layout description is a JSON-compatible mapping::

    {"elements": [{"kind": "box", "inputs": {"padding": "s2"}}, ...]}

Every element is mounted against one registry, so identical configurations
share a single ``<style>`` node in the rendered head.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import StyleEngineConfig
from .elements import LayoutElement, create_element
from .errors import InvalidLayoutError
from .styles.registry import StyleRegistry


@dataclass
class RenderedPage:
    """Result of mounting a layout description."""

    registry: StyleRegistry
    elements: list[LayoutElement] = field(default_factory=list)

    @property
    def style_count(self) -> int:
        return len(self.registry.document)

    def head(self) -> str:
        return self.registry.document.render_head()

    def host_tags(self) -> list[str]:
        return [element.host.render_open_tag() for element in self.elements]

    def signature_counts(self) -> dict[str, int]:
        """How many mounted hosts share each signature."""
        counts: dict[str, int] = {}
        for element in self.elements:
            if element.signature is not None:
                counts[element.signature] = counts.get(element.signature, 0) + 1
        return counts


def parse_layout(data: Any) -> list[tuple[str, dict[str, Any]]]:
    """Validate a layout description into (kind, inputs) pairs.

    Raises:
        InvalidLayoutError: If the structure is not a layout description.
    """
    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        raise InvalidLayoutError("layout must be an object with an 'elements' list")
    parsed = []
    for index, item in enumerate(data["elements"]):
        if not isinstance(item, dict) or not isinstance(item.get("kind"), str):
            raise InvalidLayoutError(f"element {index} must be an object with a 'kind'")
        inputs = item.get("inputs", {})
        if not isinstance(inputs, dict):
            raise InvalidLayoutError(f"element {index} 'inputs' must be an object")
        count = item.get("count", 1)
        if not isinstance(count, int) or count < 1:
            raise InvalidLayoutError(f"element {index} 'count' must be a positive integer")
        parsed.extend([(item["kind"], inputs)] * count)
    return parsed


def render_layout(
    data: Any,
    settings: StyleEngineConfig | None = None,
    registry: StyleRegistry | None = None,
) -> RenderedPage:
    """Mount every element of a layout description.

    Args:
        data: Parsed layout description.
        settings: Engine settings; defaults when omitted.
        registry: Registry to render into; a fresh one per page when omitted.

    Returns:
        RenderedPage holding the registry and mounted elements.
    """
    settings = settings or StyleEngineConfig()
    if registry is None:
        registry = StyleRegistry(detect_collisions=settings.detect_collisions)
    page = RenderedPage(registry=registry)
    for kind, inputs in parse_layout(data):
        element = create_element(kind, registry=registry, settings=settings, **inputs)
        element.mount()
        page.elements.append(element)
    return page


def load_layout_file(path: Path) -> Any:
    """Read a layout description from a JSON file."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
