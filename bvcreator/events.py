"""Typed events and a simple synchronous event dispatcher."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TypeVar

T = TypeVar("T")


class EventType(IntEnum):
    """All kinds of events; values are sequential from 0 up to COUNT."""

    INVALID = 0
    WINDOW_RESIZE = 1
    WINDOW_KEY_ACTION = 2
    WINDOW_MOUSE_MOTION = 3
    PLAYER_TRIGGER_INPUTS = 4
    ECS_COMPONENT_CREATED = 5
    ECS_COMPONENT_DESTROYED = 6
    COUNT = 7


@dataclass
class WindowResize:
    """Payload of EventType.WINDOW_RESIZE: the framebuffer size."""

    width: int = 0
    height: int = 0


@dataclass
class WindowKeyAction:
    """Payload of EventType.WINDOW_KEY_ACTION."""

    key: int = 0
    scancode: int = 0
    pressed: bool = False
    mod_shift: bool = False
    mod_control: bool = False
    mod_alt: bool = False
    mod_super: bool = False


@dataclass
class WindowMouseMotion:
    """Payload of EventType.WINDOW_MOUSE_MOTION."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0


@dataclass
class EcsComponent:
    """Payload of the ECS component created/destroyed events.

    ``entity`` is None when no valid entity is set.
    """

    entity: int | None = None
    signature: int = 0


class _Missing:
    def __repr__(self) -> str:
        return "<no data>"


_MISSING: Any = _Missing()


class Event:
    """A single event of a given type, optionally carrying data."""

    __slots__ = ("event_type", "_data")

    def __init__(self, event_type: EventType, data: Any = _MISSING) -> None:
        self.event_type = EventType(event_type)
        self._data = data

    @property
    def has_data(self) -> bool:
        return self._data is not _MISSING

    def get_data(self, expected_type: type[T]) -> T:
        """Return the stored data, checked against ``expected_type``.

        Raises TypeError when there is no data or it is of another type.
        """
        if self._data is _MISSING:
            raise TypeError(f"{self.event_type.name} event carries no data")
        if not isinstance(self._data, expected_type):
            raise TypeError(
                f"{self.event_type.name} event data is "
                f"{type(self._data).__name__}, not {expected_type.__name__}"
            )
        return self._data

    def __repr__(self) -> str:
        return f"Event({self.event_type.name}, {self._data!r})"


EventListener = Callable[[Event], None]


class EventManager:
    """Registers listeners per event type and dispatches events to them."""

    def __init__(self) -> None:
        self._listeners: dict[EventType, dict[int, EventListener]] = {
            event_type: {} for event_type in EventType if event_type is not EventType.COUNT
        }
        self._owner: dict[int, EventType] = {}
        self._ids = itertools.count(1)

    def on(self, event_type: EventType, listener: EventListener) -> int:
        """Register ``listener`` for ``event_type`` and return its id (never 0)."""
        event_type = EventType(event_type)
        if event_type is EventType.COUNT:
            raise ValueError("COUNT is not an event type")
        if not callable(listener):
            raise TypeError("listener must be callable")
        listener_id = next(self._ids)
        self._listeners[event_type][listener_id] = listener
        self._owner[listener_id] = event_type
        return listener_id

    def unregister(self, listener_id: int) -> None:
        """Remove a listener; unknown ids are ignored."""
        event_type = self._owner.pop(listener_id, None)
        if event_type is not None:
            del self._listeners[event_type][listener_id]

    def emit(self, event: Event) -> None:
        """Call every listener of the event's type, in registration order."""
        listeners = self._listeners.get(event.event_type, {})
        for listener in list(listeners.values()):
            listener(event)