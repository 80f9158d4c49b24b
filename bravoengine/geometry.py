"""Basic value types: vectors, points, colours, rectangles and transforms."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vector2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> Vector2:
        return Vector2(self.x * other, self.y * other)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iadd__(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self


@dataclass
class Point:
    """An integer position, such as a pixel on the screen."""

    x: int = 0
    y: int = 0


@dataclass
class Color:
    """An RGBA colour with components from 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255


@dataclass
class FRect:
    """A rectangle with float coordinates."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class Rect:
    """A rectangle with integer coordinates."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )


@dataclass
class Transform:
    """Position, rotation in degrees and scale of an object."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def __add__(self, other: Transform) -> Transform:
        return Transform(
            self.position + other.position,
            self.rotation + other.rotation,
            self.scale + other.scale,
        )

    def __iadd__(self, other: Transform) -> Transform:
        self.position = self.position + other.position
        self.rotation += other.rotation
        self.scale = self.scale + other.scale
        return self

    def copy(self) -> Transform:
        """Return an independent copy of this transform."""
        return Transform(Vector2(self.position.x, self.position.y), self.rotation,
                         Vector2(self.scale.x, self.scale.y))

    def translate(self, offset: Vector2) -> None:
        """Move the position by an offset."""
        self.position = self.position + offset

    def rotate(self, degrees: float) -> None:
        """Add to the rotation."""
        self.rotation += degrees

    def scale_by(self, factor: Vector2) -> None:
        """Multiply the scale component-wise."""
        self.scale = self.scale * factor