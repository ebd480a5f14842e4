"""Sidebar: two panels that stack once the content gets too narrow."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class SidebarConfig(ElementConfig):
    side: str
    side_width: str | None
    content_min: str
    space: str
    no_stretch: bool


class Sidebar(LayoutElement):
    kind = "sidebar"
    host_classes = ("with-sidebar",)
    inputs_defaults = {
        "side": "left",
        "side_width": None,
        "content_min": "50%",
        "space": "s2",
        "no_stretch": False,
    }

    def build_config(self) -> SidebarConfig:
        return SidebarConfig(
            side="right" if self.side == "right" else "left",
            side_width=self.sanitize(self.side_width) if self.side_width else None,
            content_min=self.sanitize(self.content_min),
            space=resolve_size(self.space, self.sanitize),
            no_stretch=bool(self.no_stretch),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        if config.side == "right":
            sidebar_child, content_child = "> :last-child", "> :first-child"
        else:
            sidebar_child, content_child = "> :first-child", "> :last-child"
        align = "flex-start" if config.no_stretch else "stretch"
        side_basis = f"  flex-basis: {config.side_width};\n" if config.side_width else ""
        return (
            f"{sel} {{\n  display: flex;\n  flex-wrap: wrap;\n"
            f"  gap: {config.space};\n  align-items: {align};\n}}\n"
            f"{sel} {sidebar_child} {{\n{side_basis}  flex-grow: 1;\n}}\n"
            f"{sel} {content_child} {{\n  flex-basis: 0;\n  flex-grow: 999;\n"
            f"  min-inline-size: {config.content_min or '50%'};\n}}\n"
        )
