"""In-memory document model for generated styles and host elements.

The registry writes ``<style>`` nodes into a StyleDocument's head; element
controllers tag HostNode instances. Both render to markup so pages can be
produced server-side.
"""

import html
from dataclasses import dataclass, field

GENERATED_BY_ATTR = "data-generated-by"
SIGNATURE_ATTR = "data-signature"


def _render_attributes(attributes: dict[str, str]) -> str:
    return "".join(
        f' {name}="{html.escape(value, quote=True)}"'
        for name, value in attributes.items()
    )


@dataclass
class StyleNode:
    """A ``<style>`` element carrying generated CSS."""

    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def generated_by(self) -> str | None:
        return self.attributes.get(GENERATED_BY_ATTR)

    @property
    def signature(self) -> str | None:
        return self.attributes.get(SIGNATURE_ATTR)

    def render(self) -> str:
        """Render as markup. CSS text is emitted raw, ``</`` is neutralized."""
        body = self.text.replace("</", "<\\/")
        return f"<style{_render_attributes(self.attributes)}>{body}</style>"


class StyleDocument:
    """Ordered collection of style nodes standing in for ``document.head``."""

    def __init__(self) -> None:
        self._head: list[StyleNode] = []

    def __len__(self) -> int:
        return len(self._head)

    def query_style(self, generated_by: str, signature: str) -> StyleNode | None:
        """Find the style node generated for (generated_by, signature)."""
        for node in self._head:
            if node.generated_by == generated_by and node.signature == signature:
                return node
        return None

    def append_style(self, node: StyleNode) -> StyleNode:
        self._head.append(node)
        return node

    def style_nodes(self, generated_by: str | None = None) -> list[StyleNode]:
        """List style nodes, optionally only those for one generator."""
        if generated_by is None:
            return list(self._head)
        return [node for node in self._head if node.generated_by == generated_by]

    def render_head(self) -> str:
        return "\n".join(node.render() for node in self._head)


class HostNode:
    """Root node of an element instance: a tag with attributes and classes."""

    def __init__(self, tag: str = "div", attributes: dict[str, str] | None = None):
        self.tag = tag
        self.attributes: dict[str, str] = dict(attributes or {})
        self.classes: list[str] = []

    def __repr__(self) -> str:
        return f"HostNode({self.render_open_tag()})"

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def render_open_tag(self) -> str:
        """Render the opening tag, classes first then attributes."""
        attributes = {}
        if self.classes:
            attributes["class"] = " ".join(self.classes)
        attributes.update(self.attributes)
        return f"<{self.tag}{_render_attributes(attributes)}>"
