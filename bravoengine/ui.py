"""Buttons, text labels and the manager that routes mouse input to buttons."""

from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass, field

from bravoengine.components import Component, GameObject
from bravoengine.events import Event, EventManager, EventType
from bravoengine.geometry import Color, Point, Vector2

ScreenToWorld = Callable[[Point, GameObject], Vector2]


@dataclass
class BoundingBox:
    """An axis-aligned box given by its top-left and bottom-right corners."""

    top_left: Vector2 = field(default_factory=Vector2)
    bottom_right: Vector2 = field(default_factory=Vector2)

    def contains(self, point: Vector2) -> bool:
        """Return True if the point lies inside the box or on its edge."""
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )


class UIObject(GameObject):
    """Base of game objects that belong to the user interface."""


class Button(UIObject):
    """A clickable rectangle whose top-left corner is its transform's position."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.width = 0.0
        self.height = 0.0
        self.interactable = True
        self.hovered = False
        self.on_click_callback: Callable[[], None] | None = None
        self.on_release_callback: Callable[[], None] | None = None

    def activate_on_click_callback(self) -> None:
        """Call the click callback, if one is set."""
        if self.on_click_callback is not None:
            self.on_click_callback()

    def activate_on_release_callback(self) -> None:
        """Call the release callback, if one is set."""
        if self.on_release_callback is not None:
            self.on_release_callback()

    def bounding_box(self) -> BoundingBox:
        """Return the area the button covers in world units."""
        position = self.transform.position
        return BoundingBox(
            Vector2(position.x, position.y),
            Vector2(position.x + self.width, position.y + self.height),
        )


class Text(UIObject):
    """A line of text drawn at the object's position."""

    def __init__(
        self,
        text: str = "",
        font: str = "",
        color: Color | None = None,
        location: Vector2 | None = None,
        scale: Vector2 | None = None,
    ) -> None:
        super().__init__()
        self.text = text
        self.font = font
        self.color = color if color is not None else Color()
        self.scale = scale if scale is not None else Vector2(1.0, 1.0)
        self.layer = 0
        if location is not None:
            self.transform.position = Vector2(location.x, location.y)


class ButtonBehaviourScript(Component, abc.ABC):
    """Reacts to presses, releases and hovering of the button it is attached to."""

    def __init__(self, tag: str = "defaultButtonBehaviourScript") -> None:
        super().__init__(tag)

    @abc.abstractmethod
    def on_button_pressed(self) -> None:
        """Called when a mouse button goes down over the button."""

    @abc.abstractmethod
    def on_button_released(self) -> None:
        """Called when a mouse button goes up over the button."""

    @abc.abstractmethod
    def on_button_hover(self) -> None:
        """Called when the mouse starts hovering over the button."""

    @abc.abstractmethod
    def on_button_unhover(self) -> None:
        """Called when the mouse stops hovering over the button."""


class UIManager:
    """Collects mouse events and delivers them to registered buttons."""

    def __init__(self) -> None:
        self._objects: list[Button] = []
        self._mouse_down_queue: list[Event] = []
        self._mouse_up_queue: list[Event] = []

    @property
    def objects(self) -> list[Button]:
        """Buttons currently registered."""
        return list(self._objects)

    def init(self, event_manager: EventManager) -> None:
        """Subscribe to mouse button events."""
        event_manager.subscribe(self.handle_mouse_down_event, EventType.MOUSE_BUTTON_DOWN)
        event_manager.subscribe(self.handle_mouse_up_event, EventType.MOUSE_BUTTON_UP)

    def handle_mouse_down_event(self, event: Event) -> None:
        """Queue a mouse-down event for the next update."""
        self._mouse_down_queue.append(event)

    def handle_mouse_up_event(self, event: Event) -> None:
        """Queue a mouse-up event for the next update."""
        self._mouse_up_queue.append(event)

    def update(
        self,
        camera: GameObject | None,
        screen_to_world: ScreenToWorld,
        mouse_position: Point,
    ) -> None:
        """Deliver queued clicks and hover changes to the buttons, then empty the queues.

        Without a camera nothing is delivered and, if buttons are registered,
        the queued events are kept for a later update.
        """
        for button in self._objects:
            if camera is None:
                return
            scripts = button.get_components(ButtonBehaviourScript)
            box = button.bounding_box()

            for event in self._mouse_down_queue:
                world = screen_to_world(event.mouse.position, camera)
                if (
                    button.interactable
                    and box.contains(world)
                    and event.type is EventType.MOUSE_BUTTON_DOWN
                ):
                    for script in scripts:
                        script.on_button_pressed()
                        button.activate_on_click_callback()

            for event in self._mouse_up_queue:
                world = screen_to_world(event.mouse.position, camera)
                if (
                    button.interactable
                    and box.contains(world)
                    and event.type is EventType.MOUSE_BUTTON_UP
                ):
                    for script in scripts:
                        script.on_button_released()
                        button.activate_on_release_callback()

            if not button.interactable:
                continue
            world = screen_to_world(mouse_position, camera)
            if box.contains(world):
                for script in scripts:
                    if not button.hovered:
                        script.on_button_hover()
                        button.hovered = True
            else:
                for script in scripts:
                    if button.hovered:
                        script.on_button_unhover()
                        button.hovered = False

        self._mouse_down_queue.clear()
        self._mouse_up_queue.clear()

    def add_object(self, game_object: GameObject) -> None:
        """Register a button once; raises TypeError for anything but a button."""
        if not isinstance(game_object, Button):
            raise TypeError("only buttons can be managed by the UI manager")
        if not any(obj is game_object for obj in self._objects):
            self._objects.append(game_object)

    def remove_object(self, game_object: GameObject) -> None:
        """Unregister an object; unknown objects are ignored."""
        self._objects = [obj for obj in self._objects if obj is not game_object]

    def clear_objects(self) -> None:
        """Unregister every button."""
        self._objects.clear()