"""Typed service registry with layered, reversible overrides."""

from systems_locator.core.exceptions import (  # noqa: F401
    AlreadyInitializedError,
    DuplicateCapabilityError,
    LocatorConfigurationError,
    LocatorError,
    NotInitializedError,
    UnknownCapabilityError,
)
from systems_locator.services import (
    Locator,
    LocatorBuilder,
    LoggingReporter,
    ServiceContainer,
    SystemOverrider,
)

__all__ = [
    "Locator",
    "LocatorBuilder",
    "LoggingReporter",
    "ServiceContainer",
    "SystemOverrider",
    "AlreadyInitializedError",
    "DuplicateCapabilityError",
    "LocatorConfigurationError",
    "LocatorError",
    "NotInitializedError",
    "UnknownCapabilityError",
]
