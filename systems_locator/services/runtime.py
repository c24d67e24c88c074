"""Optional process-wide slot for a default :class:`Locator`.

Locators are ordinary objects and nothing in this package requires a global
one. Hosts that want a single shared locator (the bootstrapper does) register
it here so components such as :class:`SystemOverrider` can find it without
being handed a reference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .locator import Locator

_registry: dict[str, Optional["Locator"]] = {"locator": None}


def set_locator(locator: "Locator") -> None:
    """Register the process-wide default locator."""
    _registry["locator"] = locator


def get_locator() -> "Locator":
    """Return the registered locator or raise if missing."""
    locator = _registry.get("locator")
    if locator is None:
        raise RuntimeError("No default locator has been registered.")
    return locator


def clear_locator() -> None:
    """Reset the slot (used primarily in tests)."""
    _registry["locator"] = None


__all__ = ["set_locator", "get_locator", "clear_locator"]
