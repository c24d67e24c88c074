"""Enable/disable driven override layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

from systems_locator.core.logging import get_logger

from . import runtime

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .locator import Locator

logger = get_logger(__name__)


class SystemOverrider:
    """Apply an override layer while enabled and remove it when disabled.

    With ``grab_systems_from_children`` the whole subtree of ``node`` acts as
    the override holder; ``systems`` lists individual objects whose own
    components override regardless of where they live. Enabling before the
    locator is initialized queues the layer until initialization.
    """

    def __init__(
        self,
        node: Any,
        systems: Optional[Sequence[Any]] = None,
        *,
        grab_systems_from_children: bool = True,
        locator: Optional["Locator"] = None,
    ) -> None:
        self.node = node
        self._systems = list(systems) if systems else []
        self._grab_systems_from_children = grab_systems_from_children
        self._locator = locator
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def systems(self) -> tuple[Any, ...]:
        return tuple(self._systems)

    def enable(self) -> None:
        if self._enabled:
            return
        self._resolve_locator().try_apply_override(self._holder, self._systems)
        self._enabled = True

    def disable(self) -> None:
        if not self._enabled:
            return
        locator = self._resolve_locator()
        if locator.is_initialized:
            locator.remove_override(self._holder, self._systems)
        elif not locator.discard_queued_override(self._holder, self._systems):
            logger.debug("Disabled overrider had no queued layer on %s", locator.name)
        self._enabled = False

    def __enter__(self) -> "SystemOverrider":
        self.enable()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disable()

    @property
    def _holder(self) -> Optional[Any]:
        return self.node if self._grab_systems_from_children else None

    def _resolve_locator(self) -> "Locator":
        return self._locator if self._locator is not None else runtime.get_locator()


__all__ = ["SystemOverrider"]
