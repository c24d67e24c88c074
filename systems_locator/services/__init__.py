"""Registry services: containers, the locator and its helpers."""

from __future__ import annotations

from .builder import LocatorBuilder
from .container import ServiceContainer
from .locator import Locator
from .overrider import SystemOverrider
from .reporting import LoggingReporter

__all__ = [
    "Locator",
    "LocatorBuilder",
    "LoggingReporter",
    "ServiceContainer",
    "SystemOverrider",
]
