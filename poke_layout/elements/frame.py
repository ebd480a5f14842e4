"""Frame: crops media to a fixed aspect ratio."""

import math
from dataclasses import dataclass
from typing import Any

from .base import ElementConfig, LayoutElement

DEFAULT_RATIO = (16, 9)


def parse_ratio(ratio: Any) -> tuple[float, float]:
    """Parse ``"n:d"``; each unparseable side falls back to 16:9."""
    parts = str(ratio if ratio is not None else "").split(":")
    parsed = []
    for index, default in enumerate(DEFAULT_RATIO):
        try:
            value = float(parts[index])
        except (IndexError, ValueError):
            value = float(default)
        if not math.isfinite(value):
            value = float(default)
        parsed.append(value)
    return parsed[0], parsed[1]


@dataclass(frozen=True)
class FrameConfig(ElementConfig):
    n: float
    d: float


def _number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


class Frame(LayoutElement):
    kind = "frame"
    host_classes = ("frame",)
    inputs_defaults = {"ratio": "16:9"}

    def build_config(self) -> FrameConfig:
        n, d = parse_ratio(self.ratio)
        return FrameConfig(n=n, d=d)

    def render_style(self, signature: str, config: Any) -> str:
        sel = self.selector(signature)
        return (
            f"{sel} {{\n"
            f"  --n: {_number(config.n)};\n"
            f"  --d: {_number(config.d)};\n"
            f"  aspect-ratio: var(--n) / var(--d);\n"
            f"  overflow: hidden;\n"
            f"  display: flex;\n"
            f"  justify-content: center;\n"
            f"  align-items: center;\n}}\n"
            f"{sel} > img,\n{sel} > video {{\n"
            f"  inline-size: 100%;\n  block-size: 100%;\n  object-fit: cover;\n}}\n"
        )
