"""A camera game object with viewport settings and screen shake."""

from __future__ import annotations

import random
from dataclasses import dataclass

from bravoengine.components import GameObject
from bravoengine.geometry import Color, FRect, Vector2


@dataclass
class CameraDebugOverlay:
    """Debug drawing switches for a camera."""

    show_fps: bool = False
    render_camera_viewport: bool = False
    render_colliders: bool = False


class Camera(GameObject):
    """A view into the scene, centred on its transform's position."""

    def __init__(self, name: str = "", rng: random.Random | None = None) -> None:
        super().__init__(name)
        self.background_color = Color(0, 0, 0)
        self.width = 800
        self.height = 600
        self.viewport = FRect(0.0, 0.0, 1.0, 1.0)
        self.debug_overlay = CameraDebugOverlay()
        self.render_order = 0
        self.is_main_camera = True
        self._rng = rng if rng is not None else random.Random()
        self._is_shaking = False
        self._shake_offset = Vector2(0.0, 0.0)
        self._shake_start = 0.0
        self._shake_duration = 0.0
        self._shake_magnitude = 0.0

    @property
    def is_shaking(self) -> bool:
        """Whether a shake is in progress."""
        return self._is_shaking

    @property
    def shake_offset(self) -> Vector2:
        """Offset currently applied by the shake."""
        return Vector2(self._shake_offset.x, self._shake_offset.y)

    @property
    def origin(self) -> Vector2:
        """Top-left corner of the camera in game units."""
        half = Vector2(self.width / 2.0, self.height / 2.0)
        return self.transform.position - half + self._shake_offset

    def update(self, ticks: float) -> None:
        """Advance the shake to the given time, fading it out as it ends."""
        if not self._is_shaking:
            self._shake_offset = Vector2(0.0, 0.0)
            return
        elapsed = ticks - self._shake_start
        progress = elapsed / self._shake_duration if self._shake_duration else 1.0
        if progress >= 1.0:
            self.stop_shake()
            return
        strength = self._shake_magnitude * (1.0 - progress)
        self._shake_offset = Vector2(
            self._rng.choice((1, -1)) * strength,
            self._rng.choice((1, -1)) * strength,
        )

    def start_shake(self, duration: float, magnitude: float, ticks: float) -> None:
        """Begin shaking from the given time for a duration."""
        self._shake_duration = duration
        self._shake_magnitude = magnitude
        self._shake_start = ticks
        self._is_shaking = True

    def stop_shake(self) -> None:
        """End any shake and reset its offset."""
        self._is_shaking = False
        self._shake_offset = Vector2(0.0, 0.0)
        self._shake_start = 0.0
        self._shake_duration = 0.0
        self._shake_magnitude = 0.0