"""Events and the observer/subject pair used to route UI events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pygame

    from monkeyui.widgets import MouseState


class EventType(Enum):
    """Events raised by UI elements and consumed by observers."""

    NONE = auto()
    MAIN_MENU_TO_MAP_SELECTION = auto()
    CANCEL_MAP_SELECTION = auto()
    EXIT = auto()
    MOVE_NEXT = auto()
    MOVE_PREVIOUS = auto()
    MAP_SELECTION_TO_MONKEY_LANE = auto()


class Observer(ABC):
    """Something that reacts to events and takes part in the frame loop."""

    @abstractmethod
    def update(self, event: EventType) -> None:
        """React to an event."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the observer for use."""

    @abstractmethod
    def draw(self, surface: "pygame.Surface") -> None:
        """Render onto the given surface."""

    @abstractmethod
    def handle_input(self, mouse: "MouseState") -> None:
        """Process the current input state."""


class Subject:
    """Keeps a list of observers and forwards events to them."""

    def __init__(self) -> None:
        self._observers: list[Any] = []

    @property
    def observers(self) -> tuple[Any, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Register an observer; it will receive every later event."""
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every registration of the observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, event: EventType) -> None:
        """Send the event to all registered observers, in order."""
        for observer in list(self._observers):
            observer.update(event)