"""Bootstrap helpers for building the systems root and initializing a locator."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from systems_locator.adapters.prefabs import PrefabCatalog
from systems_locator.adapters.scene import SceneConstruction, SceneDiscovery, SceneNode
from systems_locator.core.config import settings
from systems_locator.core.exceptions import PrefabNotFoundError
from systems_locator.core.logging import get_logger
from systems_locator.core.ports import (
    ConstructionPort,
    DiscoveryPort,
    ReporterPort,
    SystemConfiguration,
)
from systems_locator.services import runtime
from systems_locator.services.builder import LocatorBuilder
from systems_locator.services.locator import ConfigCallback, Locator

logger = get_logger(__name__)

TEMPORARY_HOLDER_NAME = "TEMP HOLDER: SHOULD BE DELETED"


def should_skip_root(scene_names: Iterable[str], keyword: Optional[str] = None) -> bool:
    """Return True when every loaded scene asks to skip spawning the systems root."""

    keyword = keyword if keyword is not None else settings.SKIP_ROOT_KEYWORD
    names = list(scene_names)
    return bool(names) and all(keyword in name for name in names)


def build_systems_root(
    builder: LocatorBuilder, catalog: PrefabCatalog, parent: SceneNode
) -> SceneNode:
    """Instantiate the prefabs named by ``builder`` and return the systems root.

    The primary ``prefab_path`` becomes the root; every extra entry in
    ``prefab_paths`` is built underneath it.
    """
    root = _construct_for_path(parent, builder.prefab_path, catalog)
    for path in builder.prefab_paths:
        _construct_for_path(root, path, catalog)
    return root


def _construct_for_path(parent: SceneNode, path: str, catalog: PrefabCatalog) -> SceneNode:
    if not path:
        return parent.add_child(settings.DEFAULT_ROOT_NAME)

    # A path may point at a single prefab, at a folder of prefabs, or both.
    prefab = catalog.load(path)
    folder = catalog.load_all(path)
    if prefab is None and not folder:
        raise PrefabNotFoundError(
            f'There is no prefab or folder in the catalog at "{path}". '
            "Make sure the path is typed correctly"
        )

    if prefab is not None:
        systems_root = _instantiate(prefab, _leaf_name(path), parent)
    else:
        systems_root = parent.add_child(_leaf_name(path))

    for prefab_path, factory in folder:
        if factory is prefab:
            continue
        _instantiate(factory, _leaf_name(prefab_path), systems_root)

    logger.debug("Built systems root %s from %s", systems_root.path, path)
    return systems_root


def _instantiate(factory, name: str, parent: SceneNode) -> SceneNode:
    node = factory()
    node.name = name
    node.set_parent(parent)
    return node


def _leaf_name(path: str) -> str:
    return path.strip("/").rsplit("/", 1)[-1]


def bootstrap(
    configuration: Union[SystemConfiguration, ConfigCallback],
    *,
    catalog: Optional[PrefabCatalog] = None,
    locator: Optional[Locator] = None,
    discovery: Optional[DiscoveryPort] = None,
    construction: Optional[ConstructionPort] = None,
    reporter: Optional[ReporterPort] = None,
    skip_root: bool = False,
) -> Locator:
    """Initialize ``locator`` (or a new scene-backed one) and register it as the default.

    The systems root is spawned under an inactive temporary holder so nothing
    in it counts as active until initialization finished; the holder's
    children are detached afterwards, even when initialization fails.
    Overrides queued on a not-yet-initialized ``locator`` are preserved.
    """
    if locator is None:
        locator = Locator(
            discovery or SceneDiscovery(),
            construction or SceneConstruction(),
            reporter,
        )
    elif locator.is_initialized:
        locator.clear()

    configure = getattr(configuration, "configure", configuration)
    prefabs = catalog if catalog is not None else PrefabCatalog()
    holder = SceneNode(TEMPORARY_HOLDER_NAME, active=False)

    def create_systems_root(builder: LocatorBuilder) -> Optional[SceneNode]:
        if not builder.is_system_prefab_set or skip_root:
            return None
        return build_systems_root(builder, prefabs, holder)

    try:
        locator.initialize(configure, root_factory=create_systems_root)
    finally:
        holder.detach_children()

    runtime.set_locator(locator)
    return locator


__all__ = ["bootstrap", "build_systems_root", "should_skip_root", "TEMPORARY_HOLDER_NAME"]
