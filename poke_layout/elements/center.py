"""Center: horizontally centered column with an optional measure."""

from dataclasses import dataclass
from typing import Any

from ..styles.tokens import resolve_optional_size
from .base import ElementConfig, LayoutElement


@dataclass(frozen=True)
class CenterConfig(ElementConfig):
    max_width: str | None
    center_text: bool
    intrinsic: bool
    gutter_width: str | None


class Center(LayoutElement):
    kind = "center"
    host_classes = ("center",)
    inputs_defaults = {
        "max_width": None,
        "center_text": False,
        "intrinsic": False,
        "gutter_width": None,
    }

    def build_config(self) -> CenterConfig:
        return CenterConfig(
            max_width=resolve_optional_size(self.max_width, self.sanitize),
            center_text=bool(self.center_text),
            intrinsic=bool(self.intrinsic),
            gutter_width=resolve_optional_size(self.gutter_width, self.sanitize),
        )

    def render_style(self, signature: str, config: Any) -> str:
        rules = [
            "display: block;",
            "unicode-bidi: isolate;",
            "box-sizing: content-box;",
            "margin-inline: auto;",
        ]
        if config.max_width is not None:
            rules.append(f"max-inline-size: {config.max_width};")
        if config.center_text:
            rules.append("text-align: center;")
        if config.intrinsic:
            rules.append("display: flex; flex-direction: column; align-items: center;")
        if config.gutter_width is not None:
            rules.append(
                f"padding-inline-start: {config.gutter_width}; "
                f"padding-inline-end: {config.gutter_width};"
            )
        body = "\n  ".join(rules)
        return f"{self.selector(signature)} {{\n  {body}\n}}\n"
