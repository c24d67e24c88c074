"""Pytest configuration: import paths and shared locator fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure repository root and shared test doubles are importable
sys.path.append(str(Path(__file__).resolve().parents[1]))
sys.path.append(str(Path(__file__).resolve().parent))

# pylint: disable=wrong-import-position
from fakes import RecordingReporter  # noqa: E402

from systems_locator.adapters.scene import SceneConstruction, SceneDiscovery, SceneNode  # noqa: E402
from systems_locator.services import runtime  # noqa: E402
from systems_locator.services.locator import Locator  # noqa: E402


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def locator(reporter: RecordingReporter) -> Locator:
    return Locator(SceneDiscovery(), SceneConstruction(), reporter, name="test")


@pytest.fixture
def systems_root() -> SceneNode:
    return SceneNode("Systems")


@pytest.fixture(autouse=True)
def _reset_runtime_locator():
    runtime.clear_locator()
    yield
    runtime.clear_locator()
