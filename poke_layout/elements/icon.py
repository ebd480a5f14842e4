"""Icon: inline SVG sized to the cap height, optionally labelled."""

import html
from dataclasses import dataclass
from typing import Any

from ..styles.document import HostNode
from ..styles.tokens import resolve_optional_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class IconConfig(ElementConfig):
    space: str | None
    label: str | None


class Icon(LayoutElement):
    kind = "icon"
    host_classes = ("with-icon",)
    inputs_defaults = {"space": None, "label": None, "icon_href": ""}

    def build_config(self) -> IconConfig:
        # label only reaches attributes, which are escaped on render
        return IconConfig(
            space=resolve_optional_size(self.space, self.sanitize),
            label=self.label or None,
        )

    def render_style(self, signature: str, config: Any) -> str:
        attr = self.controller.attribute
        margin = (
            f"  margin-inline-end: {config.space};\n" if config.space is not None else ""
        )
        return (
            f'.icon[{attr}="{signature}"] {{\n'
            f"  width: 0.75em;\n  width: 1cap;\n"
            f"  height: 0.75em;\n  height: 1cap;\n{margin}}}\n"
            f"{self.selector(signature)} {{\n"
            f"  display: inline-flex;\n  align-items: baseline;\n}}\n"
        )

    def decorate_host(self, host: HostNode, config: Any) -> None:
        if config.label:
            host.set_attribute("aria-label", config.label)
            host.set_attribute("role", "img")
        else:
            host.remove_attribute("aria-label")
            host.remove_attribute("role")

    def undecorate_host(self, host: HostNode) -> None:
        host.remove_attribute("aria-label")
        host.remove_attribute("role")

    def render_svg(self) -> str:
        """Markup for the inner ``<svg>``, tagged with the same signature."""
        if self.signature is None:
            return ""
        href = html.escape(str(self.icon_href or ""), quote=True)
        return (
            f'<svg class="icon" {self.controller.attribute}="{self.signature}">'
            f'<use href="{href}"></use></svg>'
        )
