"""Tests for the enable/disable driven override layer."""

# pylint: disable=missing-function-docstring,redefined-outer-name

from __future__ import annotations

import pytest
from fakes import Bar, BetterBar, IBax

from systems_locator.adapters.scene import SceneNode
from systems_locator.services import runtime
from systems_locator.services.overrider import SystemOverrider


@pytest.fixture
def base_bar(locator, systems_root):
    bar = systems_root.add_component(Bar)
    locator.initialize(lambda s: s.add(IBax), systems_root)
    return bar


def test_enable_applies_children_and_disable_removes(locator, base_bar):
    node = SceneNode("Level Overrides")
    better = node.add_child("Audio").add_component(BetterBar)
    overrider = SystemOverrider(node, locator=locator)

    overrider.enable()
    assert locator.get(IBax) is better

    overrider.disable()
    assert locator.get(IBax) is base_bar


def test_listed_systems_without_children(locator, base_bar):
    node = SceneNode("Level Overrides")
    node.add_component(BetterBar)
    elsewhere = SceneNode("Elsewhere")
    listed = elsewhere.add_component(BetterBar)
    overrider = SystemOverrider(
        node, [elsewhere], grab_systems_from_children=False, locator=locator
    )

    with overrider:
        assert locator.get(IBax) is listed
        container = dict(locator.systems)[IBax]
        assert container.instances == (base_bar, listed)

    assert locator.get(IBax) is base_bar


def test_enable_twice_binds_once(locator, base_bar):
    node = SceneNode("Level Overrides")
    node.add_component(BetterBar)
    overrider = SystemOverrider(node, locator=locator)

    overrider.enable()
    overrider.enable()
    overrider.disable()
    overrider.disable()

    assert locator.get(IBax) is base_bar
    assert overrider.enabled is False


def test_enable_before_initialize_is_queued(locator, systems_root):
    node = SceneNode("Early Overrides")
    better = node.add_component(BetterBar)
    overrider = SystemOverrider(node, locator=locator)

    overrider.enable()
    locator.initialize(lambda s: s.add(IBax), systems_root)

    assert locator.get(IBax) is better


def test_disable_before_initialize_drops_queued_layer(locator, systems_root):
    systems_root.add_component(Bar)
    node = SceneNode("Early Overrides")
    node.add_component(BetterBar)
    overrider = SystemOverrider(node, locator=locator)

    overrider.enable()
    overrider.disable()
    locator.initialize(lambda s: s.add(IBax), systems_root)

    assert type(locator.get(IBax)) is Bar
    assert locator.queued_override_count == 0


def test_falls_back_to_runtime_locator(locator, base_bar):
    runtime.set_locator(locator)
    node = SceneNode("Level Overrides")
    better = node.add_component(BetterBar)

    with SystemOverrider(node):
        assert locator.get(IBax) is better
    assert locator.get(IBax) is base_bar


def test_missing_runtime_locator_raises():
    with pytest.raises(RuntimeError):
        SystemOverrider(SceneNode("Orphan")).enable()
