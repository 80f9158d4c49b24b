"""Game objects and their components: colliders and rigid bodies."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from bravoengine.geometry import Transform, Vector2

C = TypeVar("C", bound="Component")


class _Tracked:
    """Attribute that marks its owner as updated whenever it is assigned."""

    def __init__(self, convert: Callable[[Any], Any] | None = None) -> None:
        self._convert = convert

    def __set_name__(self, owner: type, name: str) -> None:
        self._private = "_" + name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self._private)

    def __set__(self, obj: Any, value: Any) -> None:
        if self._convert is not None:
            value = self._convert(value)
        setattr(obj, self._private, value)
        obj.is_updated = True


class Component:
    """Base of everything that can be attached to a game object."""

    def __init__(self, tag: str = "defaultComponent") -> None:
        self.game_object: GameObject | None = None
        self.tag = tag
        self.active = True

    def clone(self) -> Component:
        """Return an independent copy that shares the parent game object."""
        duplicate = copy.copy(self)
        for name, value in vars(self).items():
            if name != "game_object":
                setattr(duplicate, name, copy.deepcopy(value))
        return duplicate


class GameObject:
    """An object in a scene that holds a transform and components."""

    def __init__(self, name: str = "", transform: Transform | None = None) -> None:
        self.name = name
        self.transform = transform if transform is not None else Transform()
        self.active = True
        self._components: list[Component] = []

    def add_component(self, component: Component) -> Component:
        """Attach a component and make this object its parent."""
        component.game_object = self
        self._components.append(component)
        return component

    def get_components(self, kind: type[C]) -> list[C]:
        """Return the attached components that are instances of kind."""
        return [c for c in self._components if isinstance(c, kind)]

    def has_component(self, kind: type[Component]) -> bool:
        """Return True if a component of the given kind is attached."""
        return any(isinstance(c, kind) for c in self._components)


class Collider(Component):
    """Base collider with a transform relative to its game object."""

    def __init__(self, tag: str = "defaultCollider") -> None:
        super().__init__(tag)
        self.transform = Transform()


class BoxCollider(Collider):
    """Rectangular collider; any property change marks it as updated."""

    width = _Tracked(float)
    height = _Tracked(float)
    rotation = _Tracked(float)
    is_trigger = _Tracked(bool)
    collide_category = _Tracked(int)
    collide_with_category = _Tracked(list)

    def __init__(self, tag: str = "defaultBoxCollider") -> None:
        super().__init__(tag)
        self.width = 0.0
        self.height = 0.0
        self.rotation = 0.0
        self.is_trigger = False
        self.collide_category = 1
        self.collide_with_category = [1]
        self.is_updated = False


class CircleCollider(Collider):
    """Circular collider; any property change marks it as updated."""

    radius = _Tracked(float)
    is_trigger = _Tracked(bool)
    collide_category = _Tracked(int)
    collide_with_category = _Tracked(list)

    def __init__(self, radius: float = 0.0, tag: str = "defaultCircleCollider") -> None:
        super().__init__(tag)
        self.radius = radius
        self.is_trigger = False
        self.collide_category = 1
        self.collide_with_category = [1]
        self.is_updated = False


class BodyType(enum.Enum):
    """How the physics world moves a body."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    KINEMATIC = "kinematic"


@dataclass(frozen=True)
class BodyFlags:
    """Physical behaviour switches of a rigid body."""

    has_gravity: bool = False
    is_moveable_by_force: bool = False


@dataclass(frozen=True)
class BodyProperties:
    """Material and mass properties of a rigid body."""

    density: float = 1.0
    friction: float = 0.3
    restitution: float = 0.0
    gravity_scale: float = 1.0
    mass: float = 1.0


@dataclass
class BodyID:
    """Identifies a body inside a physics world; -1 means not yet created."""

    body_id: int = -1
    world_id: int = 0


class RigidBody(Component):
    """Physical body; property changes mark it for resynchronisation."""

    has_gravity = _Tracked(bool)
    is_moveable_by_force = _Tracked(bool)
    can_rotate = _Tracked(bool)
    density = _Tracked(float)
    friction = _Tracked(float)
    restitution = _Tracked(float)
    linear_damping = _Tracked(float)
    angular_damping = _Tracked(float)
    gravity_scale = _Tracked(float)
    mass = _Tracked(float)
    body_type = _Tracked(BodyType)

    def __init__(
        self,
        flags: BodyFlags | None = None,
        properties: BodyProperties | None = None,
        tag: str = "defaultRigidBody",
    ) -> None:
        super().__init__(tag)
        flags = flags if flags is not None else BodyFlags()
        properties = properties if properties is not None else BodyProperties()
        self.transform = Transform()
        self.has_gravity = flags.has_gravity
        self.is_moveable_by_force = flags.is_moveable_by_force
        # Rotation follows the moveable flag at construction.
        self.can_rotate = flags.is_moveable_by_force
        self.density = properties.density
        self.friction = properties.friction
        self.restitution = properties.restitution
        self.linear_damping = 0.0
        self.angular_damping = 0.0
        self.gravity_scale = properties.gravity_scale
        self.mass = properties.mass
        self.body_type = BodyType.STATIC
        self.body_id = BodyID()
        self.angular_velocity = 0.0
        self.linear_velocity = Vector2(0.0, 0.0)
        self._forces: list[Vector2] = []
        self._torques: list[float] = []
        self.is_updated = False

    @property
    def forces_buffer(self) -> list[Vector2]:
        """Forces queued since the buffer was last cleared."""
        return list(self._forces)

    @property
    def torque_buffer(self) -> list[float]:
        """Torques queued since the buffer was last cleared."""
        return list(self._torques)

    def add_force(self, force: Vector2) -> None:
        """Queue a force to apply on the next physics step."""
        self._forces.append(force)

    def add_torque(self, torque: float) -> None:
        """Queue a torque to apply on the next physics step."""
        self._torques.append(torque)

    def clear_forces_buffer(self) -> None:
        """Drop all queued forces."""
        self._forces.clear()

    def clear_torque_buffer(self) -> None:
        """Drop all queued torques."""
        self._torques.clear()


def _all_of(objects: Iterable[GameObject], kind: type[C]) -> list[C]:
    return [c for obj in objects for c in obj.get_components(kind)]