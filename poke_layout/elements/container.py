"""Container: establishes a (optionally named) query container."""

from dataclasses import dataclass
from typing import Any

from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class ContainerConfig(ElementConfig):
    name: str | None


class Container(LayoutElement):
    kind = "container"
    host_classes = ("container",)
    inputs_defaults = {"name": None}

    def build_config(self) -> ContainerConfig:
        # container-name is an identifier, so spaces are dropped as well
        name = (self.sanitize.clean_optional(self.name) or "").replace(" ", "")
        return ContainerConfig(name=name or None)

    def render_style(self, signature: str, config: Any) -> str:
        name = f"  container-name: {config.name};\n" if config.name else ""
        return f"{self.selector(signature)} {{\n{name}  container-type: inline-size;\n}}\n"
