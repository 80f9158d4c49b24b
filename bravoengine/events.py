"""Input events and a publish/subscribe dispatcher."""

from __future__ import annotations

import enum
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from bravoengine.geometry import Point


class EventType(enum.Enum):
    """Kinds of events the engine reacts to."""

    NONE = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    MOUSE_BUTTON_DOWN = enum.auto()
    MOUSE_BUTTON_UP = enum.auto()
    MOUSE_MOVE = enum.auto()
    QUIT = enum.auto()


class MouseButton(enum.Enum):
    """Physical mouse buttons."""

    LEFT = enum.auto()
    MIDDLE = enum.auto()
    RIGHT = enum.auto()


@dataclass
class Mouse:
    """Mouse state carried by an event."""

    position: Point = field(default_factory=Point)
    left: bool = False
    right: bool = False
    middle: bool = False

    @classmethod
    def pressed(cls, button: MouseButton | None, position: Point) -> Mouse:
        """Build the state for a single button at a position."""
        return cls(
            position=position,
            left=button is MouseButton.LEFT,
            right=button is MouseButton.RIGHT,
            middle=button is MouseButton.MIDDLE,
        )


@dataclass
class Event:
    """A single input event; key is the keyboard scancode for key events."""

    type: EventType = EventType.NONE
    key: int | None = None
    mouse: Mouse = field(default_factory=Mouse)


EventCallback = Callable[[Event], None]


class EventManager:
    """Delivers events to the callbacks subscribed to their type."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[EventType, list[EventCallback]] = defaultdict(list)

    def subscribe(self, callback: EventCallback, event_type: EventType) -> None:
        """Register a callback for one event type; callbacks run in subscription order."""
        self._subscribers[event_type].append(callback)

    def dispatch(self, event: Event) -> None:
        """Call every callback subscribed to the event's type."""
        for callback in list(self._subscribers.get(event.type, ())):
            callback(event)

    def handle_events(self, events: Iterable[Event]) -> None:
        """Dispatch each pending event in order."""
        for event in events:
            self.dispatch(event)