"""Base class for layout primitives backed by generated, deduplicated CSS.

Each primitive declares its caller-facing inputs with defaults, turns them
into a frozen, sanitized config (one dataclass per kind) and renders that
config into CSS scoped by the config's signature. The shared lifecycle is
delegated to ElementStyleController.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, ClassVar

from ..config import StyleEngineConfig
from ..styles.controller import ElementStyleController, LifecycleState
from ..styles.document import HostNode
from ..styles.registry import StyleRegistry, get_default_registry
from ..styles.sanitizer import ValueSanitizer

_SNAKE_PART = re.compile(r"_([a-z0-9])")


def camel_case(name: str) -> str:
    """``border_width`` -> ``borderWidth``."""
    return _SNAKE_PART.sub(lambda m: m.group(1).upper(), name)


@dataclass(frozen=True)
class ElementConfig:
    """Sanitized configuration of one element kind.

    Subclasses add their own fields; ``to_record`` flattens them into the
    camelCase record that is canonicalized and hashed.
    """

    def to_record(self) -> dict[str, Any]:
        return {camel_case(f.name): getattr(self, f.name) for f in fields(self)}


class LayoutElement(ABC):
    """A layout primitive instance bound to a host node and a registry."""

    kind: ClassVar[str]
    host_classes: ClassVar[tuple[str, ...]]
    inputs_defaults: ClassVar[dict[str, Any]] = {}

    def __init__(
        self,
        host: HostNode | None = None,
        registry: StyleRegistry | None = None,
        settings: StyleEngineConfig | None = None,
        **inputs: Any,
    ):
        self.settings = settings or StyleEngineConfig()
        self.host = host if host is not None else HostNode(
            tag=f"{self.settings.signature_prefix}-{self.kind}"
        )
        self.registry = registry if registry is not None else get_default_registry()
        self.sanitize = ValueSanitizer(strict=self.settings.strict_sanitization)
        self._check_inputs(inputs)
        self.inputs: dict[str, Any] = {**self.inputs_defaults, **inputs}

        self.controller = ElementStyleController(
            kind=self.kind,
            host=self.host,
            registry=self.registry,
            build_config=self.build_config,
            template=self.render_style,
            host_classes=self.host_classes,
            prefix=self.settings.signature_prefix,
            algorithm=self.settings.signature_hash,
            decorate=self.decorate_host,
            undecorate=self.undecorate_host,
        )

    def __getattr__(self, name: str) -> Any:
        # Inputs read like attributes: box.padding
        inputs = self.__dict__.get("inputs")
        if inputs is not None and name in inputs:
            return inputs[name]
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(signature={self.signature!r}, state={self.state.value})"

    @property
    def state(self) -> LifecycleState:
        return self.controller.state

    @property
    def signature(self) -> str | None:
        return self.controller.signature

    @property
    def config(self) -> ElementConfig | None:
        return self.controller.config

    def mount(self) -> str:
        """Create the element's style entry and tag its host."""
        return self.controller.mount()

    def update(self, **changes: Any) -> str | None:
        """Change inputs; restyles only when a value actually changed.

        If restyling raises, the previous inputs are restored so the element
        stays consistent with its current signature.
        """
        self._check_inputs(changes)
        changed = {k: v for k, v in changes.items() if self.inputs.get(k) != v}
        if not changed:
            return self.signature
        previous = self.inputs
        self.inputs = {**previous, **changed}
        try:
            return self.controller.update()
        except Exception:
            self.inputs = previous
            raise

    def destroy(self) -> None:
        """Untag the host. The shared style entry is left in place."""
        self.controller.destroy()

    def _check_inputs(self, values: dict[str, Any]) -> None:
        unknown = sorted(set(values) - set(self.inputs_defaults))
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected input(s): {', '.join(unknown)}"
            )

    @abstractmethod
    def build_config(self) -> ElementConfig:
        """Sanitize the current inputs into this kind's config."""

    @abstractmethod
    def render_style(self, signature: str, config: Any) -> str:
        """Render CSS whose selectors are scoped by ``signature``."""

    def selector(self, signature: str) -> str:
        """Base selector, e.g. ``.box[data-pc-box="pc-box-abc"]``."""
        return f'.{self.host_classes[0]}[{self.controller.attribute}="{signature}"]'

    def decorate_host(self, host: HostNode, config: Any) -> None:
        """Hook for kind-specific host attributes after registration."""

    def undecorate_host(self, host: HostNode) -> None:
        """Hook undoing ``decorate_host`` on destroy."""
