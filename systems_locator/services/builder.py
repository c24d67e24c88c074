"""Configuration surface handed to configuration callbacks during initialization."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .locator import Locator


class LocatorBuilder:
    """Declares capabilities on a locator and carries root-location hints.

    ``prefab_path`` and ``prefab_paths`` are never read by the locator itself;
    they exist for whatever produces the systems root (see
    :func:`systems_locator.bootstrap.build_systems_root`).
    """

    def __init__(self, locator: "Locator") -> None:
        self._locator = locator
        self.prefab_path: str = ""
        self.prefab_paths: list[str] = []

    @property
    def is_system_prefab_set(self) -> bool:
        return bool(self.prefab_path)

    @property
    def declared(self) -> tuple[type, ...]:
        """Capabilities declared on the locator so far, in declaration order."""
        return tuple(capability for capability, _ in self._locator.systems)

    def add(
        self,
        capability: type,
        null_object: Optional[Any] = None,
        *,
        required: bool = False,
        no_override: bool = False,
        create_if_not_present: bool = False,
    ) -> "LocatorBuilder":
        """Declare ``capability`` on the locator.

        Args:
            capability: Class, ABC or runtime-checkable Protocol used as the key.
            null_object: Optional fallback returned when nothing is bound.
            required: Report when no instance can be found for the capability.
            no_override: Only the base discovery pass may bind this capability.
            create_if_not_present: Synthesize an instance under the root when
                discovery finds none.

        Returns:
            The builder, so declarations can be chained.

        Raises:
            DuplicateCapabilityError: If ``capability`` was already declared.
        """
        self._locator.add(
            capability,
            null_object,
            required=required,
            no_override=no_override,
            create_if_not_present=create_if_not_present,
        )
        return self


__all__ = ["LocatorBuilder"]
