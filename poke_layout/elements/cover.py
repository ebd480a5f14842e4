"""Cover: vertically centers one principal child within a minimum height."""

from dataclasses import dataclass
from typing import Any

from ..styles.sanitizer import sanitize_selector
from ..styles.tokens import resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class CoverConfig(ElementConfig):
    centered: str
    space: str
    min_height: str
    no_pad: bool


class Cover(LayoutElement):
    kind = "cover"
    host_classes = ("cover",)
    inputs_defaults = {
        "centered": "h1",
        "space": "s1",
        "min_height": "measure",
        "no_pad": False,
    }

    def build_config(self) -> CoverConfig:
        return CoverConfig(
            centered=sanitize_selector(self.centered) or "h1",
            space=resolve_size(self.space, self.sanitize),
            min_height=resolve_size(self.min_height, self.sanitize),
            no_pad=bool(self.no_pad),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        centered = config.centered
        return (
            f"{sel} {{\n  display: flex;\n  flex-direction: column;\n"
            f"  min-block-size: {config.min_height};\n"
            f"  padding: {'0' if config.no_pad else config.space};\n}}\n"
            f"{sel} > * {{\n  margin-block: {config.space};\n}}\n"
            f"{sel} > :first-child:not({centered}) {{\n  margin-block-start: 0;\n}}\n"
            f"{sel} > :last-child:not({centered}) {{\n  margin-block-end: 0;\n}}\n"
            f"{sel} > {centered} {{\n  margin-block: auto;\n}}\n"
        )
