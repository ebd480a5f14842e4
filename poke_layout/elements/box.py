"""Box: padded container with optional border and colors."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import resolve_optional_size, resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class BoxConfig(ElementConfig):
    padding: str
    border_width: str | None
    border_radius: str | None
    background_color: str
    color: str


class Box(LayoutElement):
    """Padded box. A missing or zero border falls back to a transparent
    outline so forced-colors modes still show the box edge."""

    kind = "box"
    host_classes = ("box",)
    inputs_defaults = {
        "padding": "s1",
        "border_width": None,
        "border_radius": None,
        "background_color": None,
        "color": None,
    }

    def build_config(self) -> BoxConfig:
        return BoxConfig(
            padding=resolve_size(self.padding, self.sanitize),
            border_width=resolve_optional_size(self.border_width, self.sanitize),
            border_radius=resolve_optional_size(self.border_radius, self.sanitize),
            background_color=self.sanitize(self.background_color or "transparent"),
            color=self.sanitize(self.color or "inherit"),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        rules = [
            f"padding: {config.padding};",
            f"background-color: {config.background_color};",
            f"color: {config.color};",
        ]
        if config.border_width is not None and config.border_width != "0":
            rules.append(f"border: {config.border_width} solid;")
        else:
            rules.append(
                "border: 0 solid; outline: var(--s-1) solid transparent; "
                "outline-offset: calc(var(--s-1) * -1);"
            )
        if config.border_radius is not None:
            rules.append(f"border-radius: {config.border_radius};")
        body = "\n  ".join(rules)
        return f"{sel} {{\n  {body}\n}}\n{sel} * {{\n  color: inherit;\n}}\n"
