"""Unit tests for the deduplicating style registry."""

import logging
import threading

from poke_layout.styles.document import (
    GENERATED_BY_ATTR,
    SIGNATURE_ATTR,
    StyleDocument,
    StyleNode,
)
from poke_layout.styles.registry import (
    StyleRegistry,
    get_default_registry,
    reset_default_registry,
)


class TestUpsert:
    """Test insert and overwrite semantics."""

    def test_first_upsert_creates_one_node(self, registry, document):
        entry = registry.upsert("pc-box", "pc-box-abc", ".box{}", "padding:1")

        assert len(document) == 1
        node = document.style_nodes()[0]
        assert node is entry.node
        assert node.attributes[GENERATED_BY_ATTR] == "pc-box"
        assert node.attributes[SIGNATURE_ATTR] == "pc-box-abc"
        assert node.text == ".box{}"
        assert entry.writes == 1

    def test_repeat_upsert_overwrites_in_place(self, registry, document):
        first = registry.upsert("pc-box", "pc-box-abc", "old", "padding:1")
        second = registry.upsert("pc-box", "pc-box-abc", "new", "padding:1")

        assert first is second
        assert len(document) == 1
        assert document.style_nodes()[0].text == "new"
        assert second.writes == 2

    def test_identical_upserts_are_idempotent(self, registry, document):
        for _ in range(5):
            registry.upsert("pc-box", "pc-box-abc", "css", "padding:1")

        assert len(registry) == 1
        assert document.render_head().count("<style") == 1
        assert registry.stats.created == 1
        assert registry.stats.overwritten == 4

    def test_keys_are_namespaced_by_kind(self, registry, document):
        registry.upsert("pc-box", "sig", "a")
        registry.upsert("pc-stack", "sig", "b")

        assert len(registry) == 2
        assert len(document.style_nodes("pc-box")) == 1
        assert len(document.style_nodes("pc-stack")) == 1
        assert ("pc-box", "sig") in registry
        assert ("pc-grid", "sig") not in registry

    def test_entries_snapshot(self, registry):
        registry.upsert("pc-box", "a", "x")
        registry.upsert("pc-box", "b", "y")

        entries = registry.entries()
        registry.upsert("pc-box", "c", "z")

        assert [e.signature for e in entries] == ["a", "b"]
        assert registry.stats.kinds == {"pc-box": 3}

    def test_adopts_node_already_in_document(self, document):
        existing = document.append_style(
            StyleNode(
                attributes={GENERATED_BY_ATTR: "pc-box", SIGNATURE_ATTR: "pc-box-abc"},
                text="stale",
            )
        )
        registry = StyleRegistry(document=document)

        entry = registry.upsert("pc-box", "pc-box-abc", "fresh")

        assert entry.node is existing
        assert existing.text == "fresh"
        assert len(document) == 1
        assert registry.stats.created == 0

    def test_creates_document_when_omitted(self):
        registry = StyleRegistry()

        registry.upsert("pc-box", "sig", "css")

        assert isinstance(registry.document, StyleDocument)
        assert len(registry.document) == 1


class TestCollisions:
    """Test detection of distinct records sharing a signature."""

    def test_collision_is_recorded_and_last_write_wins(self, registry, caplog):
        registry.upsert("pc-box", "pc-box-x", "first", "padding:1")

        with caplog.at_level(logging.WARNING, logger="poke_layout.registry"):
            entry = registry.upsert("pc-box", "pc-box-x", "second", "padding:2")

        assert entry.style_text == "second"
        assert entry.canonical == "padding:2"
        assert len(registry.collisions) == 1
        collision = registry.collisions[0]
        assert collision.existing_canonical == "padding:1"
        assert collision.incoming_canonical == "padding:2"
        assert registry.stats.collisions == 1
        assert any("collision" in r.getMessage() for r in caplog.records)

    def test_same_canonical_is_not_a_collision(self, registry):
        registry.upsert("pc-box", "pc-box-x", "a", "padding:1")
        registry.upsert("pc-box", "pc-box-x", "a", "padding:1")

        assert registry.collisions == []

    def test_detection_can_be_disabled(self, document):
        registry = StyleRegistry(document=document, detect_collisions=False)

        registry.upsert("pc-box", "pc-box-x", "a", "padding:1")
        registry.upsert("pc-box", "pc-box-x", "b", "padding:2")

        assert registry.collisions == []
        assert document.style_nodes()[0].text == "b"

    def test_missing_canonical_skips_detection(self, registry):
        registry.upsert("pc-box", "pc-box-x", "a")
        registry.upsert("pc-box", "pc-box-x", "b", "padding:2")

        assert registry.collisions == []


class TestConcurrency:
    """Test that concurrent upserts keep one node per key."""

    def test_threaded_upserts(self, registry, document):
        signatures = [f"sig-{i % 5}" for i in range(200)]
        barrier = threading.Barrier(8)

        def worker(offset):
            barrier.wait()
            for signature in signatures[offset::8]:
                registry.upsert("pc-box", signature, f"css-{signature}", signature)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 5
        assert len(document) == 5
        assert registry.collisions == []
        assert sum(e.writes for e in registry.entries()) == 200


class TestDefaultRegistry:
    """Test the process-wide registry accessor."""

    def test_default_registry_is_shared(self):
        assert get_default_registry() is get_default_registry()

    def test_reset_replaces_registry(self):
        before = get_default_registry()
        after = reset_default_registry()

        assert after is not before
        assert get_default_registry() is after

    def test_reset_with_explicit_registry(self, registry):
        assert reset_default_registry(registry) is registry
        assert get_default_registry() is registry
