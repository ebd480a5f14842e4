"""Stack: vertical flow with consistent spacing between children."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import clamp_count, resolve_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class StackConfig(ElementConfig):
    space: str
    recursive: bool
    split_after: int | None


class Stack(LayoutElement):
    kind = "stack"
    host_classes = ("stack",)
    inputs_defaults = {"space": "s1", "recursive": False, "split_after": None}

    def build_config(self) -> StackConfig:
        split_after = self.split_after
        return StackConfig(
            space=resolve_size(self.space, self.sanitize),
            recursive=bool(self.recursive),
            split_after=clamp_count(split_after) if split_after is not None else None,
        )

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        spacing = f"{sel} * + *" if config.recursive else f"{sel} > * + *"
        css = (
            f"{sel} {{\n  display: flex;\n  flex-direction: column;\n"
            f"  justify-content: flex-start;\n}}\n"
            f"{sel} > * {{\n  margin-block: 0;\n}}\n"
            f"{spacing} {{\n  margin-block-start: {config.space};\n}}\n"
        )
        if config.split_after:
            css += (
                f"{sel}:only-child {{\n  block-size: 100%;\n}}\n"
                f"{sel} > :nth-child({config.split_after}) {{\n"
                f"  margin-block-end: auto;\n}}\n"
            )
        return css
