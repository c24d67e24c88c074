"""Per-capability binding state held by a :class:`~systems_locator.services.locator.Locator`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from systems_locator.core.logging import get_logger

logger = get_logger(__name__)

ReadyCallback = Callable[[Any], None]


@dataclass(slots=True)
class ServiceContainer:
    """Stack of bound instances plus the policy flags declared for one capability.

    The container does not know which capability it serves; the locator keeps
    that mapping. The newest bound instance answers lookups, falling back to
    ``null_instance`` when nothing is bound.
    """

    null_instance: Optional[Any] = None
    required: bool = False
    no_override: bool = False
    create_if_not_present: bool = False
    bound_instances: list[Any] = field(default_factory=list)
    _ready_callbacks: list[ReadyCallback] = field(default_factory=list, repr=False)

    @property
    def instance(self) -> Optional[Any]:
        """Newest bound instance, else the null instance, else ``None``."""
        if self.bound_instances:
            return self.bound_instances[-1]
        return self.null_instance

    @property
    def instances(self) -> tuple[Any, ...]:
        """All bound instances, oldest first."""
        return tuple(self.bound_instances)

    @property
    def has_instance_bound(self) -> bool:
        return bool(self.bound_instances)

    @property
    def pending_callbacks(self) -> int:
        return len(self._ready_callbacks)

    def bind_instance(self, instance: Optional[Any]) -> None:
        """Push ``instance`` on top of the stack and flush ready callbacks on first bind."""

        if instance is None:
            return

        self.bound_instances.append(instance)
        if len(self.bound_instances) != 1 or not self._ready_callbacks:
            return

        callbacks, self._ready_callbacks = self._ready_callbacks, []
        current = self.instance
        failure: Optional[Exception] = None
        for callback in callbacks:
            try:
                callback(current)
            except Exception as exc:  # pylint: disable=broad-except
                if failure is None:
                    failure = exc
                else:
                    logger.exception("Ready callback failed for %s", type(current).__name__)
        # Every waiter has been notified; surface the first failure afterwards.
        if failure is not None:
            raise failure

    def unbind_instance(self, instance: Optional[Any]) -> None:
        """Remove the first occurrence of ``instance`` (by identity); missing is fine."""

        for index, bound in enumerate(self.bound_instances):
            if bound is instance:
                del self.bound_instances[index]
                return

    def when_ready(self, callback: ReadyCallback) -> None:
        """Call ``callback`` now if an instance is bound, otherwise on first bind.

        A configured null instance does not count as ready.
        """
        if self.has_instance_bound:
            callback(self.instance)
            return
        self._ready_callbacks.append(callback)


__all__ = ["ServiceContainer", "ReadyCallback"]
