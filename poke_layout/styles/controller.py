"""Per-instance style lifecycle shared by every layout primitive.

An ElementStyleController moves through four states:

    UNINITIALIZED --mount--> CONFIGURED --> REGISTERED
                                 ^              |
                                 +---update-----+
    any state --destroy--> DESTROYED

Configuring builds the sanitized config and its signature. Registering
renders the kind's template, upserts it into the shared registry and tags
the host node so the signature-scoped selector matches it. Destroying only
removes the host tag; the registry entry stays for other instances.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Protocol

from ..errors import ElementLifecycleError
from ..layout_logging import LogCategory, get_category_logger
from .document import HostNode
from .hashing import HashAlgorithm, canonicalize, hash_canonical, record_key
from .registry import StyleRegistry

logger = get_category_logger(LogCategory.CONTROLLER)


class StyleConfig(Protocol):
    """A sanitized per-kind configuration that flattens to a record."""

    def to_record(self) -> dict[str, Any]: ...


class LifecycleState(Enum):
    """Lifecycle states of an element's generated style."""

    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    REGISTERED = "registered"
    DESTROYED = "destroyed"


def tag_attribute(prefix: str, kind: str) -> str:
    """Host attribute carrying the signature, e.g. ``data-pc-box``."""
    return f"data-{prefix}-{kind}"


class ElementStyleController:
    """Reconciles one element instance's configuration with the registry.

    Args:
        kind: Element kind, e.g. "box".
        host: The instance's root node.
        registry: Shared style registry.
        build_config: Returns the sanitized config for the current inputs.
        template: Renders CSS for (signature, config).
        host_classes: Classes the generated selectors rely on.
        prefix: Signature/attribute namespace.
        algorithm: Signature hash algorithm.
        decorate: Optional extra host tagging after registration.
        undecorate: Optional cleanup of the extra tagging on destroy.
    """

    def __init__(
        self,
        kind: str,
        host: HostNode,
        registry: StyleRegistry,
        build_config: Callable[[], StyleConfig],
        template: Callable[[str, Any], str],
        host_classes: Sequence[str] = (),
        prefix: str = "pc",
        algorithm: HashAlgorithm = "djb2",
        decorate: Callable[[HostNode, Any], None] | None = None,
        undecorate: Callable[[HostNode], None] | None = None,
    ):
        self.kind = kind
        self.host = host
        self.registry = registry
        self.build_config = build_config
        self.template = template
        self.host_classes = tuple(host_classes) or (kind,)
        self.prefix = prefix
        self.algorithm = algorithm
        self.decorate = decorate
        self.undecorate = undecorate

        self.state = LifecycleState.UNINITIALIZED
        self.config: Any = None
        self.canonical: str | None = None
        self.record_key: str | None = None
        self.signature: str | None = None

    @property
    def generated_by(self) -> str:
        """Registry kind key, e.g. ``pc-box``."""
        return f"{self.prefix}-{self.kind}"

    @property
    def attribute(self) -> str:
        return tag_attribute(self.prefix, self.kind)

    def configure(self) -> str:
        """Build the sanitized config and compute its signature."""
        self._ensure_alive("configure")
        config = self.build_config()
        record = config.to_record()
        canonical = canonicalize(record)
        self.config = config
        self.canonical = canonical
        self.record_key = record_key(record)
        self.signature = f"{self.generated_by}-{hash_canonical(canonical, self.algorithm)}"
        self.state = LifecycleState.CONFIGURED
        return self.signature

    def register(self) -> str:
        """Render and upsert the style, then tag the host with the signature."""
        self._ensure_alive("register")
        if self.state is LifecycleState.UNINITIALIZED or self.signature is None:
            raise ElementLifecycleError(
                f"{self.kind} element must be configured before it is registered"
            )
        style = self.template(self.signature, self.config)
        self.registry.upsert(self.generated_by, self.signature, style, self.record_key)

        for name in self.host_classes:
            self.host.add_class(name)
        self.host.set_attribute(self.attribute, self.signature)
        if self.decorate is not None:
            self.decorate(self.host, self.config)

        self.state = LifecycleState.REGISTERED
        return self.signature

    def mount(self) -> str:
        """UNINITIALIZED -> CONFIGURED -> REGISTERED."""
        if self.state is not LifecycleState.UNINITIALIZED:
            raise ElementLifecycleError(
                f"{self.kind} element is already {self.state.value}"
            )
        self.configure()
        return self.register()

    def update(self) -> str | None:
        """Re-run configure/register after an input change.

        Before mount this is a no-op: the new inputs are picked up by mount.
        The previous signature's registry entry is left as it is.
        """
        self._ensure_alive("update")
        if self.state is LifecycleState.UNINITIALIZED:
            return None
        previous = self.signature
        self.configure()
        signature = self.register()
        if previous != signature:
            logger.debug(
                f"{self.kind} element moved from {previous} to {signature}",
                extra={"kind": self.kind, "signature": signature},
            )
        return signature

    def destroy(self) -> None:
        """Remove this instance's host tag. The style entry is kept."""
        if self.state is LifecycleState.DESTROYED:
            return
        if self.state is LifecycleState.REGISTERED:
            self.host.remove_attribute(self.attribute)
            for name in self.host_classes:
                self.host.remove_class(name)
            if self.undecorate is not None:
                self.undecorate(self.host)
        self.state = LifecycleState.DESTROYED

    def _ensure_alive(self, operation: str) -> None:
        if self.state is LifecycleState.DESTROYED:
            raise ElementLifecycleError(
                f"Cannot {operation} a destroyed {self.kind} element"
            )
