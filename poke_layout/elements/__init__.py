"""Layout primitives whose styles are generated and deduplicated at runtime.

Each kind lives in its own module; ELEMENT_KINDS maps kind names to classes
and create_element builds an instance by name.
"""

from typing import Any

from ..config import StyleEngineConfig
from ..errors import UnknownElementKindError
from ..styles.document import HostNode
from ..styles.registry import StyleRegistry
from .base import ElementConfig, LayoutElement
from .box import Box, BoxConfig
from .center import Center, CenterConfig
from .cluster import Cluster, ClusterConfig
from .container import Container, ContainerConfig
from .cover import Cover, CoverConfig
from .frame import Frame, FrameConfig, parse_ratio
from .grid import Grid, GridConfig
from .icon import Icon, IconConfig
from .imposter import Imposter, ImposterConfig
from .reel import Reel, ReelConfig
from .sidebar import Sidebar, SidebarConfig
from .stack import Stack, StackConfig
from .switcher import Switcher, SwitcherConfig

ELEMENT_KINDS: dict[str, type[LayoutElement]] = {
    cls.kind: cls
    for cls in (
        Box,
        Stack,
        Cluster,
        Grid,
        Center,
        Cover,
        Frame,
        Sidebar,
        Switcher,
        Icon,
        Reel,
        Imposter,
        Container,
    )
}


def get_element_class(kind: str) -> type[LayoutElement]:
    """Look up the element class for a kind name.

    Raises:
        UnknownElementKindError: If no element is registered for ``kind``.
    """
    try:
        return ELEMENT_KINDS[kind]
    except KeyError:
        raise UnknownElementKindError(kind, list(ELEMENT_KINDS)) from None


def create_element(
    kind: str,
    host: HostNode | None = None,
    registry: StyleRegistry | None = None,
    settings: StyleEngineConfig | None = None,
    **inputs: Any,
) -> LayoutElement:
    """Instantiate (but do not mount) an element of the given kind."""
    element_cls = get_element_class(kind)
    return element_cls(host=host, registry=registry, settings=settings, **inputs)


__all__ = [
    "ELEMENT_KINDS",
    "ElementConfig",
    "LayoutElement",
    "create_element",
    "get_element_class",
    "parse_ratio",
    "Box",
    "BoxConfig",
    "Center",
    "CenterConfig",
    "Cluster",
    "ClusterConfig",
    "Container",
    "ContainerConfig",
    "Cover",
    "CoverConfig",
    "Frame",
    "FrameConfig",
    "Grid",
    "GridConfig",
    "Icon",
    "IconConfig",
    "Imposter",
    "ImposterConfig",
    "Reel",
    "ReelConfig",
    "Sidebar",
    "SidebarConfig",
    "Stack",
    "StackConfig",
    "Switcher",
    "SwitcherConfig",
]
