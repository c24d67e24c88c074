"""Protocol definitions for the collaborators the locator consumes."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from systems_locator.services.builder import LocatorBuilder


class DiscoveryPort(Protocol):
    """Port answering "which instance satisfies this capability" questions."""

    def find_first(self, root: Any, capability: type, include_inactive: bool) -> Any | None:
        """Return the first instance of ``capability`` reachable from ``root``."""
        ...

    def find_on(self, obj: Any, capability: type) -> Any | None:
        """Return an instance of ``capability`` held directly by ``obj`` (no recursion)."""
        ...


class ConstructionPort(Protocol):
    """Port used only to synthesize instances for auto-created capabilities."""

    def create_child_host(self, parent: Any, display_name: str) -> Any:
        """Create a new host object named ``display_name`` under ``parent``."""
        ...

    def instantiate_capability(self, host: Any, capability: type) -> Any:
        """Create a fresh instance of ``capability`` attached to ``host``."""
        ...


class ReporterPort(Protocol):
    """Sink for non-fatal configuration-integrity problems."""

    def warning(self, message: str) -> None:
        """Report a recoverable oddity."""
        ...

    def error(self, message: str) -> None:
        """Report a broken configuration that did not abort the operation."""
        ...


class SystemConfiguration(Protocol):
    """Object declaring which capabilities a locator tracks."""

    def configure(self, builder: "LocatorBuilder") -> None:
        """Declare capabilities and root-location hints on ``builder``."""
        ...


__all__ = ["DiscoveryPort", "ConstructionPort", "ReporterPort", "SystemConfiguration"]
