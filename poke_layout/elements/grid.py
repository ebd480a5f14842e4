"""Grid: auto-fitting columns no narrower than a minimum."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class GridConfig(ElementConfig):
    min: str
    space: str


class Grid(LayoutElement):
    kind = "grid"
    host_classes = ("grid",)
    inputs_defaults = {"min": "250px", "space": "s1"}

    def build_config(self) -> GridConfig:
        return GridConfig(
            min=self.sanitize(self.min),
            space=resolve_size(self.space, self.sanitize),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        return (
            f"{sel} {{\n  display: grid;\n  grid-gap: {config.space};\n"
            f"  align-items: stretch;\n}}\n"
            f"@supports (width: min({config.min}, 100%)) {{\n"
            f"  {sel} {{\n"
            f"    grid-template-columns: repeat(auto-fit, minmax(min({config.min}, 100%), 1fr));\n"
            f"  }}\n}}\n"
        )
