"""
Shared fixtures for the poke_layout test suite.

Provides test fixtures for:
- Fresh style documents and registries per test
- Default engine settings and strict settings
- Isolation of the process-wide registry and package logger
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from poke_layout.config import StyleEngineConfig
from poke_layout.layout_logging import ROOT_LOGGER_NAME
from poke_layout.styles.document import HostNode, StyleDocument
from poke_layout.styles.registry import StyleRegistry, reset_default_registry


@pytest.fixture(autouse=True)
def isolate_engine_state(monkeypatch) -> Iterator[None]:
    """Reset global registry, env overrides and logger wiring around each test."""
    for name in (
        "POKE_LAYOUT_CONFIG",
        "POKE_LAYOUT_SIGNATURE_PREFIX",
        "POKE_LAYOUT_SIGNATURE_HASH",
        "POKE_LAYOUT_STRICT_SANITIZATION",
        "POKE_LAYOUT_DETECT_COLLISIONS",
        "POKE_LAYOUT_LOG_LEVEL",
        "POKE_LAYOUT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_default_registry()
    yield
    reset_default_registry()

    # setup_logging() detaches the package logger from the root; caplog
    # relies on propagation, so restore it for the next test
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def document() -> StyleDocument:
    """Empty style document."""
    return StyleDocument()


@pytest.fixture()
def registry(document: StyleDocument) -> StyleRegistry:
    """Registry writing into the ``document`` fixture."""
    return StyleRegistry(document=document)


@pytest.fixture()
def host() -> HostNode:
    return HostNode(tag="div")


@pytest.fixture()
def settings() -> StyleEngineConfig:
    return StyleEngineConfig()


@pytest.fixture()
def strict_settings() -> StyleEngineConfig:
    return StyleEngineConfig(strict_sanitization=True)


@pytest.fixture()
def layout_file(tmp_path: Path) -> Path:
    """A small layout description with repeated boxes and one stack."""
    path = tmp_path / "page.json"
    path.write_text(
        '{"elements": ['
        '{"kind": "box", "inputs": {"padding": "s2"}, "count": 3},'
        '{"kind": "stack", "inputs": {"space": "s1"}}'
        "]}",
        encoding="utf-8",
    )
    return path
