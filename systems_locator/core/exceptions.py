"""Core exception types shared across layers."""


class LocatorError(RuntimeError):
    """Base error for locator misuse."""


class AlreadyInitializedError(LocatorError):
    """Raised when initializing a locator twice without clearing it in between."""


class NotInitializedError(LocatorError):
    """Raised when using a locator before initialization or after it was cleared."""


class UnknownCapabilityError(LocatorError):
    """Raised when looking up a capability that was never declared."""


class DuplicateCapabilityError(LocatorError):
    """Raised when the same capability is declared twice."""


class LocatorConfigurationError(LocatorError):
    """Raised when the locator lacks a collaborator it needs to honour its configuration."""


class PrefabNotFoundError(LocatorError):
    """Raised when a root-location hint matches neither a prefab nor a folder."""


__all__ = [
    "LocatorError",
    "AlreadyInitializedError",
    "NotInitializedError",
    "UnknownCapabilityError",
    "DuplicateCapabilityError",
    "LocatorConfigurationError",
    "PrefabNotFoundError",
]
