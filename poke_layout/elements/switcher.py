"""Switcher: row of items that flips to a column below a threshold."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import clamp_count, resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class SwitcherConfig(ElementConfig):
    threshold: str
    gap: str
    limit: int


class Switcher(LayoutElement):
    kind = "switcher"
    host_classes = ("switcher",)
    inputs_defaults = {"threshold": "s2", "gap": "s1", "limit": 4}

    def build_config(self) -> SwitcherConfig:
        return SwitcherConfig(
            threshold=resolve_size(self.threshold, self.sanitize),
            gap=resolve_size(self.gap, self.sanitize),
            limit=clamp_count(self.limit),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        overflow = config.limit + 1
        return (
            f"{sel} {{\n  display: flex;\n  flex-wrap: wrap;\n  gap: {config.gap};\n}}\n"
            f"{sel} > * {{\n  flex-grow: 1;\n"
            f"  flex-basis: calc(({config.threshold} - 100%) * 999);\n}}\n"
            f"{sel} > :nth-child(n+{overflow}),\n"
            f"{sel} > :nth-child(n+{overflow}) ~ * {{\n  flex-basis: 100%;\n}}\n"
        )
