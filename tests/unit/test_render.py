"""Unit tests for server-side layout rendering."""

import pytest

from poke_layout.config import StyleEngineConfig
from poke_layout.errors import InvalidLayoutError, UnknownElementKindError
from poke_layout.render import load_layout_file, parse_layout, render_layout


class TestParseLayout:
    """Test validation of layout descriptions."""

    def test_expands_counts(self):
        parsed = parse_layout(
            {"elements": [{"kind": "box", "count": 2}, {"kind": "stack", "inputs": {"space": "s2"}}]}
        )

        assert parsed == [("box", {}), ("box", {}), ("stack", {"space": "s2"})]

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [],
            {},
            {"elements": {}},
            {"elements": ["box"]},
            {"elements": [{"kind": 1}]},
            {"elements": [{"kind": "box", "inputs": []}]},
            {"elements": [{"kind": "box", "count": 0}]},
            {"elements": [{"kind": "box", "count": "2"}]},
        ],
    )
    def test_invalid_shapes(self, data):
        with pytest.raises(InvalidLayoutError):
            parse_layout(data)


class TestRenderLayout:
    """Test mounting a layout into one registry."""

    def test_identical_elements_share_a_node(self):
        page = render_layout({"elements": [{"kind": "box", "count": 50}]})

        assert page.style_count == 1
        assert len(page.elements) == 50
        assert list(page.signature_counts().values()) == [50]

    def test_head_and_host_tags(self):
        page = render_layout(
            {"elements": [{"kind": "box"}, {"kind": "cluster", "inputs": {"justify": "center"}}]}
        )

        head = page.head()
        tags = page.host_tags()
        assert head.count("<style") == 2
        assert tags[0].startswith('<pc-box class="box" data-pc-box="pc-box-')
        assert tags[1].startswith('<pc-cluster class="cluster"')

    def test_fresh_registry_per_page(self):
        first = render_layout({"elements": [{"kind": "box"}]})
        second = render_layout({"elements": [{"kind": "box"}]})

        assert first.registry is not second.registry

    def test_shared_registry(self, registry):
        render_layout({"elements": [{"kind": "box"}]}, registry=registry)
        render_layout({"elements": [{"kind": "box"}]}, registry=registry)

        assert len(registry) == 1

    def test_settings_are_applied(self):
        page = render_layout(
            {"elements": [{"kind": "box"}]},
            settings=StyleEngineConfig(signature_prefix="acme", detect_collisions=False),
        )

        assert page.elements[0].signature.startswith("acme-box-")
        assert page.registry.detect_collisions is False

    def test_unknown_kind_propagates(self):
        with pytest.raises(UnknownElementKindError):
            render_layout({"elements": [{"kind": "carousel"}]})

    def test_load_layout_file(self, layout_file):
        data = load_layout_file(layout_file)

        assert render_layout(data).style_count == 2
