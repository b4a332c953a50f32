"""Clickable textured buttons that announce clicks to observers."""

from __future__ import annotations

from enum import Enum, auto
from functools import lru_cache
from typing import Optional

import pygame

from monkeyui.game import Game
from monkeyui.observer import EventType, Observer, Subject
from monkeyui.widgets import Clickable, MouseState, PanelElement

_WHITE = (255, 255, 255)
_HOVER_TINT = (200, 200, 200)


class ButtonType(Enum):
    NEW_GAME = auto()
    RESUME = auto()
    OPTIONS = auto()
    CANCEL_MAP_SELECTION = auto()
    PREVIOUS_MAP = auto()
    NEXT_MAP = auto()
    EXIT = auto()
    CHOOSE_MONKEY_LANE = auto()
    CHOOSE_JUNGLE = auto()
    COMING_SOON = auto()


class ButtonState(Enum):
    NONE = auto()
    HOVERING = auto()
    CLICKED = auto()


_TITLES = {
    ButtonType.NEW_GAME: "New Game",
    ButtonType.RESUME: "Resume",
    ButtonType.OPTIONS: "Options",
    ButtonType.EXIT: "Exit",
}

_ATTACHED_TYPES = frozenset(
    {
        ButtonType.NEW_GAME,
        ButtonType.CANCEL_MAP_SELECTION,
        ButtonType.NEXT_MAP,
        ButtonType.PREVIOUS_MAP,
        ButtonType.CHOOSE_MONKEY_LANE,
        ButtonType.CHOOSE_JUNGLE,
        ButtonType.COMING_SOON,
    }
)

_EVENTS = {
    ButtonType.NEW_GAME: EventType.MAIN_MENU_TO_MAP_SELECTION,
    ButtonType.CANCEL_MAP_SELECTION: EventType.CANCEL_MAP_SELECTION,
    ButtonType.NEXT_MAP: EventType.MOVE_NEXT,
    ButtonType.PREVIOUS_MAP: EventType.MOVE_PREVIOUS,
    ButtonType.CHOOSE_MONKEY_LANE: EventType.MAP_SELECTION_TO_MONKEY_LANE,
    ButtonType.CHOOSE_JUNGLE: EventType.NONE,
    ButtonType.COMING_SOON: EventType.NONE,
}


@lru_cache(maxsize=None)
def _default_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Button(PanelElement, Clickable, Subject):
    """A textured button; hovering tints it and clicking triggers its action."""

    def __init__(
        self,
        button_type: ButtonType,
        texture: pygame.Surface,
        font_size: int,
        height: int,
        width: int,
        position: tuple[float, float],
        game: Optional[Game] = None,
    ) -> None:
        if texture is None or texture.get_width() == 0 or texture.get_height() == 0:
            raise ValueError("cannot use an empty texture for a button")
        PanelElement.__init__(self, height, width, position)
        Subject.__init__(self)
        self.texture = texture
        self.font_size = font_size
        self.type = button_type
        self.state = ButtonState.NONE
        self.title = _TITLES.get(button_type, "")
        self._game = game if game is not None else Game.instance()
        if button_type in _ATTACHED_TYPES and self._game.state_manager is not None:
            self.attach(self._game.state_manager)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.available:
            return
        tex_w, tex_h = self.texture.get_size()
        scale = max(self.width / tex_w, self.height / tex_h)
        size = (round(tex_w * scale), round(tex_h * scale))
        image = pygame.transform.scale(self.texture, size)
        if self.state is ButtonState.HOVERING:
            image.fill(_HOVER_TINT, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(image, self.position)

        if self.title:
            text = _default_font(self.font_size).render(self.title, True, _WHITE)
            x = self.position.x + (size[0] - text.get_width()) / 2
            y = self.position.y + (size[1] - self.font_size) / 2
            surface.blit(text, (x, y))

    def is_clicked(self) -> bool:
        return self.state is ButtonState.CLICKED

    def on_click(self) -> None:
        """Carry out the action bound to this button's type."""
        if self.type is ButtonType.EXIT:
            self._game.request_exit()
        elif self.type in _EVENTS:
            self.notify(_EVENTS[self.type])

    def _contains(self, mouse: MouseState) -> bool:
        return (
            self.position.x <= mouse.x < self.position.x + self.width
            and self.position.y <= mouse.y < self.position.y + self.height
        )

    def handle_input(self, mouse: MouseState) -> None:
        if not self.available:
            return
        if self._contains(mouse):
            self.state = ButtonState.HOVERING if self.title else ButtonState.NONE
            if mouse.left_pressed:
                self.state = ButtonState.CLICKED
        else:
            self.state = ButtonState.NONE

        if self.state is ButtonState.CLICKED:
            self.on_click()

    def attach(self, observer: Observer) -> None:
        Subject.attach(self, observer)

    def detach(self, observer: Observer) -> None:
        Subject.detach(self, observer)

    def notify(self, event: EventType) -> None:
        Subject.notify(self, event)