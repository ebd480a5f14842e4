"""Imposter: element positioned over the center of its container."""

from dataclasses import dataclass
from typing import Any

from ..styles.document import HostNode
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class ImposterConfig(ElementConfig):
    breakout: bool
    margin: str
    fixed: bool


class Imposter(LayoutElement):
    kind = "imposter"
    host_classes = ("imposter",)
    inputs_defaults = {"breakout": False, "margin": "0", "fixed": False}

    def build_config(self) -> ImposterConfig:
        return ImposterConfig(
            breakout=bool(self.breakout),
            margin=self.sanitize(self.margin),
            fixed=bool(self.fixed),
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        position = "fixed" if config.fixed else "absolute"
        return (
            f"{sel} {{\n  position: {position};\n"
            f"  inset-block-start: 50%;\n  inset-inline-start: 50%;\n"
            f"  transform: translate(-50%, -50%);\n}}\n"
            f"{sel}.contain {{\n  --margin: {config.margin};\n  overflow: auto;\n"
            f"  max-inline-size: calc(100% - (var(--margin) * 2));\n"
            f"  max-block-size: calc(100% - (var(--margin) * 2));\n}}\n"
        )

    def decorate_host(self, host: HostNode, config: Any) -> None:
        if config.breakout:
            host.add_class("breakout")
            host.remove_class("contain")
        else:
            host.add_class("contain")
            host.remove_class("breakout")

    def undecorate_host(self, host: HostNode) -> None:
        host.remove_class("contain")
        host.remove_class("breakout")
