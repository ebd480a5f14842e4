"""Reel: horizontally scrolling strip of items."""

from dataclasses import dataclass
from typing import Any

from ..styles.document import HostNode
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class ReelConfig(ElementConfig):
    item_width: str
    space: str
    height: str
    no_bar: bool
    role: str


class Reel(LayoutElement):
    kind = "reel"
    host_classes = ("reel",)
    inputs_defaults = {
        "item_width": "auto",
        "space": "var(--s0)",
        "height": "auto",
        "no_bar": False,
        "role": "",
    }

    def build_config(self) -> ReelConfig:
        return ReelConfig(
            item_width=self.sanitize(self.item_width),
            space=self.sanitize(self.space),
            height=self.sanitize(self.height),
            no_bar=bool(self.no_bar),
            role=self.sanitize(self.role),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        return (
            f"{sel} {{\n  display: flex;\n  unicode-bidi: isolate;\n"
            f"  block-size: {config.height};\n"
            f"  overflow-x: {'hidden' if config.no_bar else 'auto'};\n"
            f"  overflow-y: hidden;\n  scrollbar-color: #fff #000;\n}}\n"
            f"{sel}::-webkit-scrollbar {{\n  block-size: 1rem;\n}}\n"
            f"{sel}::-webkit-scrollbar-track {{\n  background-color: #000;\n}}\n"
            f"{sel}::-webkit-scrollbar-thumb {{\n  background-color: #000;\n"
            f"  background-image: linear-gradient(#000 0, #000 0.25rem, #fff 0.25rem, "
            f"#fff 0.75rem, #000 0.75rem);\n}}\n"
            f"{sel} > * {{\n  flex: 0 0 {config.item_width};\n"
            f"  margin: {config.space};\n  margin-inline-end: 0;\n}}\n"
            f"{sel} > img {{\n  block-size: 100%;\n  flex-basis: auto;\n  width: auto;\n}}\n"
            f"{sel} > * + * {{\n  margin-inline-start: {config.space};\n}}\n"
            f"{sel}.overflowing {{\n  padding-block-end: 1rem;\n}}\n"
        )

    def decorate_host(self, host: HostNode, config: Any) -> None:
        if config.role:
            host.set_attribute("role", config.role)
        else:
            host.remove_attribute("role")

    def undecorate_host(self, host: HostNode) -> None:
        host.remove_attribute("role")
