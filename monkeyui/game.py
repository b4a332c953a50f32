"""Game-wide state: exit flag and the state manager driving the frame loop."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

if TYPE_CHECKING:
    import pygame

    from monkeyui.observer import Observer
    from monkeyui.widgets import MouseState

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 900


class Game:
    """Owns the state manager and the exit request."""

    _instance: ClassVar[Optional["Game"]] = None

    def __init__(self) -> None:
        self._exit = False
        self._state_manager: Optional["Observer"] = None

    @classmethod
    def instance(cls) -> "Game":
        """Return the shared game object, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def state_manager(self) -> Optional["Observer"]:
        return self._state_manager

    def initialize(self, state_manager: "Observer") -> None:
        """Install and initialise the state manager."""
        self._state_manager = state_manager
        state_manager.initialize()

    def _require_state_manager(self) -> "Observer":
        if self._state_manager is None:
            raise RuntimeError("game has not been initialized")
        return self._state_manager

    def render(self, surface: "pygame.Surface") -> None:
        """Draw the current state."""
        self._require_state_manager().draw(surface)

    def update(self, delta_time: float, mouse: "MouseState") -> None:
        """Advance one frame by handling input."""
        self._require_state_manager().handle_input(mouse)

    def request_exit(self) -> None:
        self._exit = True

    def is_exit(self) -> bool:
        return self._exit