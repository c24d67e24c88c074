"""Path-addressed catalog of factories that build :class:`SceneNode` trees."""

from __future__ import annotations

from typing import Callable, Optional

from .scene import SceneNode

PrefabFactory = Callable[[], SceneNode]


class PrefabCatalog:
    """Registry of prefab factories keyed by slash-separated paths.

    A path may name a single prefab (``"Systems"``) and also act as a folder
    for prefabs registered beneath it (``"Systems/Audio"``).
    """

    def __init__(self, prefabs: Optional[dict[str, PrefabFactory]] = None) -> None:
        self._prefabs: dict[str, PrefabFactory] = {}
        for path, factory in (prefabs or {}).items():
            self.register(path, factory)

    def __contains__(self, path: str) -> bool:
        return _normalize(path) in self._prefabs

    def register(self, path: str, factory: PrefabFactory) -> None:
        normalized = _normalize(path)
        if not normalized:
            raise ValueError("Prefab path cannot be empty")
        self._prefabs[normalized] = factory

    def load(self, path: str) -> Optional[PrefabFactory]:
        """Return the prefab registered exactly at ``path``."""

        return self._prefabs.get(_normalize(path))

    def load_all(self, path: str) -> list[tuple[str, PrefabFactory]]:
        """Return ``(path, factory)`` for ``path`` itself and everything under it."""

        normalized = _normalize(path)
        prefix = f"{normalized}/"
        return [
            (registered, factory)
            for registered, factory in self._prefabs.items()
            if registered == normalized or registered.startswith(prefix)
        ]


def _normalize(path: str) -> str:
    return path.strip().strip("/")


__all__ = ["PrefabCatalog", "PrefabFactory"]
