"""Type-keyed registry of service containers with layered overrides.

The :class:`Locator` indexes instances that already exist somewhere in an
object graph. A single discovery pass over the systems root populates the base
bindings; override layers are then stacked on top and removed again in any
order. Every lookup answers with the newest binding that is still present,
so removing a layer that is not on top only drops that one binding.
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from systems_locator.core.exceptions import (
    AlreadyInitializedError,
    DuplicateCapabilityError,
    LocatorConfigurationError,
    NotInitializedError,
    UnknownCapabilityError,
)
from systems_locator.core.logging import get_logger, locator_context
from systems_locator.core.models import SystemInfo
from systems_locator.core.naming import display_name, qualified_name
from systems_locator.core.ports import ConstructionPort, DiscoveryPort, ReporterPort

from .builder import LocatorBuilder
from .container import ReadyCallback, ServiceContainer
from .reporting import LoggingReporter

logger = get_logger(__name__)

ConfigCallback = Callable[[LocatorBuilder], None]
RootFactory = Callable[[LocatorBuilder], Optional[Any]]


@dataclass(slots=True)
class QueuedOverride:
    """Override layer received before the locator was initialized."""

    holder: Optional[Any]
    overrides: Optional[Sequence[Any]]


class Locator:
    """Registry mapping capabilities to their current instances."""

    def __init__(
        self,
        discovery: DiscoveryPort,
        construction: Optional[ConstructionPort] = None,
        reporter: Optional[ReporterPort] = None,
        *,
        name: str = "default",
    ) -> None:
        self.name = name
        self._discovery = discovery
        self._construction = construction
        self._reporter: ReporterPort = reporter or LoggingReporter()
        self._systems: dict[type, ServiceContainer] = {}
        self._queued_overrides: deque[QueuedOverride] = deque()
        self._initialized = False

    @property
    def systems(self) -> Iterable[tuple[type, ServiceContainer]]:
        """All declared capabilities with their containers, in declaration order."""
        return tuple(self._systems.items())

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def queued_override_count(self) -> int:
        return len(self._queued_overrides)

    def initialize(
        self,
        configure: ConfigCallback,
        root: Optional[Any] = None,
        *,
        root_factory: Optional[RootFactory] = None,
    ) -> None:
        """Declare capabilities and bind whatever the systems root provides.

        Args:
            configure: Callback declaring capabilities on the builder.
            root: Systems root to scan. Mutually exclusive with ``root_factory``.
            root_factory: Called with the configured builder to produce the
                root lazily; may return ``None``.

        If any step raises, every declared capability is dropped again so the
        locator can be initialized afresh.

        Raises:
            AlreadyInitializedError: If the locator is already initialized.
            LocatorConfigurationError: If both ``root`` and ``root_factory``
                are given, or an instance must be auto-created without a
                construction collaborator.
        """
        if self._initialized:
            raise AlreadyInitializedError(
                "Service locator cannot be initialized twice, clear the locator before "
                "the second initialization"
            )
        if root is not None and root_factory is not None:
            raise LocatorConfigurationError("Pass either a root or a root factory, not both")

        with locator_context(self.name):
            try:
                builder = LocatorBuilder(self)
                configure(builder)

                resolved_root = root_factory(builder) if root_factory is not None else root
                if resolved_root is not None:
                    self._bind_systems_from_root(resolved_root)
                    self._create_missing_systems(resolved_root)
                else:
                    self._warn_about_uncreated_systems()
            except BaseException:
                # Back to Empty; queued overrides stay for the next attempt.
                self._systems.clear()
                raise

            self._initialized = True
            logger.info("Locator initialized with %d systems", len(self._systems))
            self._replay_queued_overrides()

    def clear(self) -> None:
        """Forget every container and queued override; safe to call repeatedly."""

        self._initialized = False
        self._systems.clear()
        self._queued_overrides.clear()

    def add(
        self,
        capability: type,
        null_object: Optional[Any] = None,
        *,
        required: bool = False,
        no_override: bool = False,
        create_if_not_present: bool = False,
    ) -> None:
        """Register a container for ``capability``; use :class:`LocatorBuilder` instead."""

        if capability in self._systems:
            raise DuplicateCapabilityError(
                f"The system type can only be registered once ({capability.__name__})"
            )
        self._systems[capability] = ServiceContainer(
            null_instance=null_object,
            required=required,
            no_override=no_override,
            create_if_not_present=create_if_not_present,
        )

    def get(self, capability: type) -> Optional[Any]:
        """Return the instance answering for ``capability``, or ``None``.

        A missing required system is reported, never raised.
        """
        container = self._container_for(capability)
        instance = container.instance
        if instance is None and container.required:
            self._reporter.warning(
                f"Tried to get a required system {qualified_name(capability)} but found None"
            )
        return instance

    def try_get(self, capability: type) -> tuple[bool, Optional[Any]]:
        """Return ``(found, instance)`` for ``capability``."""

        instance = self.get(capability)
        return instance is not None, instance

    def get_when_ready(self, capability: type, callback: ReadyCallback) -> None:
        """Invoke ``callback`` with the instance now, or once something gets bound."""

        self._container_for(capability).when_ready(callback)

    def apply_override(
        self,
        holder: Optional[Any] = None,
        overrides: Optional[Sequence[Any]] = None,
    ) -> None:
        """Layer the instances found under ``holder`` and on ``overrides`` on top.

        Capabilities declared with ``no_override`` are left untouched.
        """
        self._assert_initialized()
        with locator_context(self.name):
            self._walk_override(holder, overrides, ServiceContainer.bind_instance)

    def remove_override(
        self,
        holder: Optional[Any] = None,
        overrides: Optional[Sequence[Any]] = None,
    ) -> None:
        """Remove a layer previously added with :meth:`apply_override`."""

        self._assert_initialized()
        with locator_context(self.name):
            self._walk_override(holder, overrides, ServiceContainer.unbind_instance)

    def try_apply_override(
        self,
        holder: Optional[Any] = None,
        overrides: Optional[Sequence[Any]] = None,
    ) -> None:
        """Apply the layer now, or queue it until the locator gets initialized."""

        if self._initialized:
            self.apply_override(holder, overrides)
            return
        self._queued_overrides.append(
            QueuedOverride(holder=holder, overrides=list(overrides) if overrides else None)
        )
        logger.debug(
            "Queued override until initialization (%d pending)", len(self._queued_overrides)
        )

    def discard_queued_override(
        self,
        holder: Optional[Any] = None,
        overrides: Optional[Sequence[Any]] = None,
    ) -> bool:
        """Drop the oldest queued layer matching ``holder`` and ``overrides``."""

        wanted = list(overrides) if overrides else None
        for index, queued in enumerate(self._queued_overrides):
            if queued.holder is holder and _same_objects(queued.overrides, wanted):
                del self._queued_overrides[index]
                return True
        return False

    @contextmanager
    def override_context(
        self,
        holder: Optional[Any] = None,
        overrides: Optional[Sequence[Any]] = None,
    ) -> Iterator["Locator"]:
        """Temporarily apply an override layer for the duration of the block."""

        self.apply_override(holder, overrides)
        try:
            yield self
        finally:
            self.remove_override(holder, overrides)

    def describe(self) -> list[SystemInfo]:
        """Return a snapshot of every declared capability."""

        snapshot = []
        for capability, container in self._systems.items():
            instance = container.instance
            snapshot.append(
                SystemInfo(
                    name=qualified_name(capability),
                    module=_defining_module(capability),
                    qualname=getattr(capability, "__qualname__", repr(capability)),
                    required=container.required,
                    no_override=container.no_override,
                    create_if_not_present=container.create_if_not_present,
                    has_null_instance=container.null_instance is not None,
                    bound_count=len(container.bound_instances),
                    instance_type=type(instance).__name__ if instance is not None else None,
                )
            )
        return snapshot

    def _container_for(self, capability: type) -> ServiceContainer:
        self._assert_initialized()
        try:
            return self._systems[capability]
        except KeyError as exc:
            raise UnknownCapabilityError(
                f"{getattr(capability, '__name__', capability)} was not registered as a system"
            ) from exc

    def _assert_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError(
                "Service locator is not yet initialized, cannot perform the operation"
            )

    def _bind_systems_from_root(self, root: Any) -> None:
        for capability, container in self._systems.items():
            found = self._discovery.find_first(root, capability, True)
            if found is not None:
                container.bind_instance(found)
            elif container.required and not container.create_if_not_present:
                self._reporter.error(f"The binding for {qualified_name(capability)} is required")

    def _create_missing_systems(self, root: Any) -> None:
        for capability, container in self._systems.items():
            if not container.create_if_not_present or container.has_instance_bound:
                continue
            if self._construction is None:
                raise LocatorConfigurationError(
                    f"{capability.__name__} is marked create_if_not_present but the locator "
                    "has no construction collaborator"
                )
            host = self._construction.create_child_host(root, display_name(capability))
            container.bind_instance(self._construction.instantiate_capability(host, capability))
            logger.info("Created missing system %s", qualified_name(capability))

    def _warn_about_uncreated_systems(self) -> None:
        count = sum(
            1
            for container in self._systems.values()
            if container.create_if_not_present and not container.has_instance_bound
        )
        if count > 0:
            self._reporter.warning(
                f"{count} systems with create_if_not_present but no system root was provided. "
                "Therefore those systems will not be created"
            )

    def _walk_override(
        self,
        holder: Optional[Any],
        overrides: Optional[Sequence[Any]],
        action: Callable[[ServiceContainer, Any], None],
    ) -> None:
        if holder is not None:
            for capability, container in self._systems.items():
                if container.no_override:
                    continue
                found = self._discovery.find_first(holder, capability, True)
                if found is not None:
                    action(container, found)

        if overrides:
            for capability, container in self._systems.items():
                if container.no_override:
                    continue
                for obj in overrides:
                    found = self._discovery.find_on(obj, capability)
                    if found is not None:
                        action(container, found)

    def _replay_queued_overrides(self) -> None:
        while self._queued_overrides:
            queued = self._queued_overrides.popleft()
            self._walk_override(queued.holder, queued.overrides, ServiceContainer.bind_instance)


def _defining_module(capability: type) -> Optional[str]:
    module = getattr(capability, "__module__", None)
    return None if not module or module == "builtins" else module


def _same_objects(left: Optional[Sequence[Any]], right: Optional[Sequence[Any]]) -> bool:
    if left is None or right is None:
        return left is right
    return len(left) == len(right) and all(a is b for a, b in zip(left, right))


__all__ = ["Locator", "ConfigCallback", "RootFactory", "QueuedOverride"]
