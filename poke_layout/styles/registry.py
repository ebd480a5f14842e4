"""Process-wide deduplicating registry of generated style fragments.

Every element instance upserts its CSS under (kind, signature). At most one
style node exists per key; repeated upserts overwrite the node's text, and
nothing is ever evicted. Entries outlive the elements that created them.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..layout_logging import LogCategory, get_category_logger
from .document import GENERATED_BY_ATTR, SIGNATURE_ATTR, StyleDocument, StyleNode

logger = get_category_logger(LogCategory.REGISTRY)

StyleKey = tuple[str, str]


@dataclass
class StyleEntry:
    """The single live style node for a (kind, signature) key."""

    kind: str
    signature: str
    node: StyleNode
    canonical: str | None = None
    writes: int = 1

    @property
    def key(self) -> StyleKey:
        return (self.kind, self.signature)

    @property
    def style_text(self) -> str:
        return self.node.text


@dataclass(frozen=True)
class SignatureCollision:
    """Two different canonical records that hashed to the same key."""

    kind: str
    signature: str
    existing_canonical: str
    incoming_canonical: str


@dataclass
class RegistryStats:
    """Counters describing registry activity."""

    created: int = 0
    overwritten: int = 0
    collisions: int = 0
    kinds: dict[str, int] = field(default_factory=dict)


class StyleRegistry:
    """Deduplicating store mapping (kind, signature) to one style node.

    Construct one per document and pass it to every element instance.
    ``upsert`` is serialized by a lock so a registry may be shared between
    rendering threads.
    """

    def __init__(
        self, document: StyleDocument | None = None, detect_collisions: bool = True
    ):
        """Initialize the registry.

        Args:
            document: Document whose head receives style nodes. A fresh one
                is created when omitted.
            detect_collisions: Compare canonical records on repeat keys and
                record mismatches.
        """
        self.document = document if document is not None else StyleDocument()
        self.detect_collisions = detect_collisions
        self.collisions: list[SignatureCollision] = []
        self.stats = RegistryStats()
        self._entries: dict[StyleKey, StyleEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def entries(self) -> Iterator[StyleEntry]:
        """Iterate over a snapshot of the registered entries."""
        with self._lock:
            snapshot = list(self._entries.values())
        return iter(snapshot)

    def upsert(
        self,
        kind: str,
        signature: str,
        style_text: str,
        canonical: str | None = None,
    ) -> StyleEntry:
        """Insert or overwrite the style node for (kind, signature).

        Args:
            kind: Generator name, e.g. "pc-box".
            signature: Kind-prefixed configuration signature.
            style_text: Generated CSS, overwrites any previous content.
            canonical: Unambiguous form of the record the signature was
                computed from; compared when the key is reused.

        Returns:
            The live StyleEntry for the key.
        """
        key = (kind, signature)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._adopt_or_create(kind, signature, style_text, canonical)
                self._entries[key] = entry
                return entry

            if (
                self.detect_collisions
                and canonical is not None
                and entry.canonical is not None
                and canonical != entry.canonical
            ):
                self._record_collision(entry, canonical)

            entry.node.text = style_text
            entry.writes += 1
            if canonical is not None:
                entry.canonical = canonical
            self.stats.overwritten += 1
            return entry

    def _adopt_or_create(
        self, kind: str, signature: str, style_text: str, canonical: str | None
    ) -> StyleEntry:
        # A node may already be attached to the document by an earlier render
        node = self.document.query_style(kind, signature)
        if node is None:
            node = StyleNode(
                attributes={GENERATED_BY_ATTR: kind, SIGNATURE_ATTR: signature},
            )
            self.document.append_style(node)
            self.stats.created += 1
            self.stats.kinds[kind] = self.stats.kinds.get(kind, 0) + 1
            logger.debug(
                f"Created style node for {signature}",
                extra={"kind": kind, "signature": signature, "operation": "create"},
            )
        else:
            self.stats.overwritten += 1
        node.text = style_text
        return StyleEntry(kind=kind, signature=signature, node=node, canonical=canonical)

    def _record_collision(self, entry: StyleEntry, canonical: str) -> None:
        collision = SignatureCollision(
            kind=entry.kind,
            signature=entry.signature,
            existing_canonical=entry.canonical or "",
            incoming_canonical=canonical,
        )
        self.collisions.append(collision)
        self.stats.collisions += 1
        logger.warning(
            f"Signature collision on {entry.signature}: "
            f"{collision.existing_canonical!r} vs {canonical!r}",
            extra={"kind": entry.kind, "signature": entry.signature},
        )


_default_registry: StyleRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> StyleRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = StyleRegistry()
        return _default_registry


def reset_default_registry(registry: StyleRegistry | None = None) -> StyleRegistry:
    """Replace the process-wide registry (fresh one if not given)."""
    global _default_registry
    with _default_lock:
        _default_registry = registry if registry is not None else StyleRegistry()
        return _default_registry
