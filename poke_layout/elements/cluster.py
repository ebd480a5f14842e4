"""Cluster: wrapping inline group with a gap."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import (
    ALIGN_ITEMS_KEYWORDS,
    JUSTIFY_CONTENT_KEYWORDS,
    resolve_keyword,
    resolve_size,
)
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class ClusterConfig(ElementConfig):
    space: str
    justify: str
    align: str


class Cluster(LayoutElement):
    kind = "cluster"
    host_classes = ("cluster",)
    inputs_defaults = {"justify": "flex-start", "align": "flex-start", "space": "s1"}

    def build_config(self) -> ClusterConfig:
        return ClusterConfig(
            space=resolve_size(self.space, self.sanitize),
            justify=resolve_keyword(self.justify, JUSTIFY_CONTENT_KEYWORDS, self.sanitize),
            align=resolve_keyword(self.align, ALIGN_ITEMS_KEYWORDS, self.sanitize),
        )

    def render_style(self, signature: str, config: Any) -> str:
        return (
            f"{self.selector(signature)} {{\n"
            f"  unicode-bidi: isolate;\n"
            f"  display: flex;\n"
            f"  flex-wrap: wrap;\n"
            f"  gap: {config.space or 'var(--space, 1rem)'};\n"
            f"  justify-content: {config.justify or 'flex-start'};\n"
            f"  align-items: {config.align or 'flex-start'};\n"
            f"}}\n"
        )
