"""Infrastructure adapter exports."""

from .prefabs import PrefabCatalog, PrefabFactory
from .scene import Component, SceneConstruction, SceneDiscovery, SceneNode

__all__ = [
    "Component",
    "PrefabCatalog",
    "PrefabFactory",
    "SceneConstruction",
    "SceneDiscovery",
    "SceneNode",
]
