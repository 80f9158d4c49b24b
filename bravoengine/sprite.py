"""Sprites and frame-based sprite animations."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from bravoengine.components import Component
from bravoengine.geometry import Color, Rect, Transform

_WHITE = (255, 255, 255, 255)


class Sprite(Component):
    """A textured rectangle drawn relative to its game object.

    The texture is shared between copies; everything else is copied.
    """

    def __init__(
        self,
        texture: Any,
        width: int,
        height: int,
        source: Rect | None = None,
        tag: str = "defaultSprite",
    ) -> None:
        super().__init__(tag)
        self.texture = texture
        self.width = width
        self.height = height
        self.source = source if source is not None else Rect()
        self.layer = 0
        self.color_filter = Color(*_WHITE)
        self.flip_x = False
        self.flip_y = False
        self.relative_position = Transform()

    def clone(self) -> Sprite:
        """Return a copy that shares the texture but owns its other state."""
        duplicate = copy.copy(self)
        duplicate.source = copy.deepcopy(self.source)
        duplicate.color_filter = copy.deepcopy(self.color_filter)
        duplicate.relative_position = self.relative_position.copy()
        return duplicate


class Animation(Component):
    """A sequence of sprites shown one after another at a fixed interval."""

    def __init__(
        self,
        frames: Iterable[Sprite],
        time_between_frames: int,
        is_looping: bool,
        tag: str = "defaultAnimation",
    ) -> None:
        super().__init__(tag)
        self._frames: list[Sprite] = list(frames)
        self.time_between_frames = time_between_frames
        self.is_looping = is_looping
        self.flip_x = False
        self.flip_y = False
        self.layer = 0
        self.transform = Transform()

    @property
    def frame_count(self) -> int:
        """Number of frames in the animation."""
        return len(self._frames)

    @property
    def color_filter(self) -> Color:
        """Colour filter of the first frame, or opaque white when there are none."""
        for frame in self._frames:
            return frame.color_filter
        return Color(*_WHITE)

    @color_filter.setter
    def color_filter(self, color: Color) -> None:
        for frame in self._frames:
            frame.color_filter = copy.copy(color)

    def clone(self) -> Animation:
        """Return a copy whose frames are independent copies of these frames."""
        duplicate = copy.copy(self)
        duplicate.transform = self.transform.copy()
        duplicate._frames = [frame.clone() for frame in self._frames]
        return duplicate

    def world_transform(self) -> Transform:
        """Parent game object's transform plus the animation's own transform."""
        if self.game_object is None:
            raise RuntimeError("animation is not attached to a game object")
        return self.game_object.transform + self.transform

    def get_frame(self, index: int) -> Sprite:
        """Return a frame with the animation's flip flags applied.

        Raises IndexError when the index is outside the frames.
        """
        if index < 0 or index >= len(self._frames):
            raise IndexError("Frame index out of range")
        sprite = self._frames[index]
        sprite.flip_x = self.flip_x
        sprite.flip_y = self.flip_y
        return sprite

    def current_frame(self, ticks: float) -> Sprite:
        """Return the frame shown at a time in seconds since start."""
        if not self._frames:
            raise IndexError("Frame index out of range")
        cycle = self.time_between_frames * len(self._frames)
        index = (int(ticks * 1000) % cycle) // self.time_between_frames
        return self.get_frame(index)