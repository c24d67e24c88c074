"""In-memory object graph implementing the discovery and construction ports.

A :class:`SceneNode` is a named node holding components and child nodes,
enough to describe a systems root and override holders without a game
engine. Capability checks are plain ``isinstance`` tests, so capabilities may
be concrete classes, ABCs or ``runtime_checkable`` Protocols.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, TypeVar, cast

T = TypeVar("T")


class Component:
    """Optional base for components that want to know the node they live on."""

    node: Optional["SceneNode"] = None


class SceneNode:
    """Named node in a tree, carrying components."""

    def __init__(
        self, name: str = "Node", parent: Optional["SceneNode"] = None, active: bool = True
    ) -> None:
        self.name = name
        self.active = active
        self.parent: Optional[SceneNode] = None
        self._children: list[SceneNode] = []
        self._components: list[Any] = []
        if parent is not None:
            self.set_parent(parent)

    def __repr__(self) -> str:
        return f"SceneNode({self.path!r})"

    @property
    def children(self) -> tuple["SceneNode", ...]:
        return tuple(self._children)

    @property
    def components(self) -> tuple[Any, ...]:
        return tuple(self._components)

    @property
    def path(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.path}/{self.name}"

    @property
    def active_in_hierarchy(self) -> bool:
        node: Optional[SceneNode] = self
        while node is not None:
            if not node.active:
                return False
            node = node.parent
        return True

    def set_parent(self, parent: Optional["SceneNode"]) -> None:
        """Move this node under ``parent`` (``None`` detaches it)."""

        if parent is self.parent:
            return
        node = parent
        while node is not None:
            if node is self:
                raise ValueError(f"Cannot parent {self.name!r} under its own descendant")
            node = node.parent
        if self.parent is not None:
            self.parent._children.remove(self)  # pylint: disable=protected-access
        self.parent = parent
        if parent is not None:
            parent._children.append(self)  # pylint: disable=protected-access

    def add_child(self, name: str, active: bool = True) -> "SceneNode":
        return SceneNode(name, parent=self, active=active)

    def detach_children(self) -> list["SceneNode"]:
        """Detach and return every direct child."""

        detached = list(self._children)
        for child in detached:
            child.set_parent(None)
        return detached

    def add_component(self, component: Any, *args: Any, **kwargs: Any) -> Any:
        """Attach ``component``; a class is instantiated with ``args``/``kwargs`` first."""

        if isinstance(component, type):
            component = component(*args, **kwargs)
        elif args or kwargs:
            raise TypeError("Constructor arguments are only accepted with a component type")
        if isinstance(component, Component):
            component.node = self
        self._components.append(component)
        return component

    def remove_component(self, component: Any) -> None:
        for index, attached in enumerate(self._components):
            if attached is component:
                del self._components[index]
                if isinstance(component, Component):
                    component.node = None
                return

    def get_component(self, capability: type[T]) -> Optional[T]:
        """Return the first component on this node satisfying ``capability``."""

        for component in self._components:
            if isinstance(component, capability):
                return cast(T, component)
        return None

    def get_component_in_children(
        self, capability: type[T], include_inactive: bool = False
    ) -> Optional[T]:
        """Depth-first search of this node and its descendants, this node first."""

        for node in self.walk(include_inactive=include_inactive):
            found = node.get_component(capability)
            if found is not None:
                return found
        return None

    def walk(self, include_inactive: bool = True) -> Iterator["SceneNode"]:
        """Yield this node and its descendants in pre-order."""

        if not include_inactive and not self.active_in_hierarchy:
            return
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            children = node._children  # pylint: disable=protected-access
            if not include_inactive:
                children = [child for child in children if child.active]
            stack.extend(reversed(children))


class SceneDiscovery:
    """``DiscoveryPort`` over :class:`SceneNode` trees."""

    def find_first(
        self, root: SceneNode, capability: type, include_inactive: bool
    ) -> Optional[Any]:
        return root.get_component_in_children(capability, include_inactive)

    def find_on(self, obj: Any, capability: type) -> Optional[Any]:
        if isinstance(obj, SceneNode):
            return obj.get_component(capability)
        # A bare component handed in as an override stands for itself.
        if isinstance(obj, capability):
            return obj
        return None


class SceneConstruction:
    """``ConstructionPort`` creating child nodes and default-constructed components."""

    def create_child_host(self, parent: SceneNode, display_name: str) -> SceneNode:
        return parent.add_child(display_name)

    def instantiate_capability(self, host: SceneNode, capability: type) -> Any:
        return host.add_component(capability)


__all__ = ["Component", "SceneNode", "SceneDiscovery", "SceneConstruction"]
