"""Naming helpers for capabilities."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def display_name(capability: type) -> str:
    """Return ``capability``'s name split into words, e.g. ``AudioMixer`` -> ``Audio Mixer``."""

    return _CAMEL_BOUNDARY.sub(r"\1 \2", capability.__name__)


def qualified_name(capability: type) -> str:
    """Return the dotted module path and qualname of ``capability``."""

    module = getattr(capability, "__module__", None)
    qualname = getattr(capability, "__qualname__", repr(capability))
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


__all__ = ["display_name", "qualified_name"]
