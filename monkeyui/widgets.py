"""Basic UI building blocks: panel elements, panels, text and sprites."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

import pygame


@dataclass(frozen=True)
class MouseState:
    """Mouse position and whether the left button was pressed this frame."""

    x: float
    y: float
    left_pressed: bool = False


class Drawable(ABC):
    """Something that can render itself."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render onto the given surface."""


class Clickable(ABC):
    """Something that reacts to clicks."""

    @abstractmethod
    def on_click(self) -> None:
        """Perform the click action."""

    @abstractmethod
    def is_clicked(self) -> bool:
        """Whether the element is currently clicked."""


class Updatable(ABC):
    """Something that advances over time."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance by the elapsed time."""

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the object is still active."""


class PanelElement(Drawable):
    """A positioned, sized element that lives inside a panel."""

    def __init__(self, height: int, width: int, position: tuple[float, float]) -> None:
        self.index = -1
        self.height = height
        self.width = width
        self.position = pygame.Vector2(position)
        self.available = True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw nothing by default."""

    @abstractmethod
    def handle_input(self, mouse: MouseState) -> None:
        """Process the current input state."""

    def bounding_box(self) -> pygame.Rect:
        """The rectangle covered by the element."""
        return pygame.Rect(
            int(self.position.x), int(self.position.y), self.width, self.height
        )


class Panel(Drawable):
    """An ordered collection of panel elements, each aware of its index."""

    def __init__(self) -> None:
        self._elements: list[PanelElement] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[PanelElement]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> PanelElement:
        return self._elements[index]

    def add(self, element: PanelElement) -> None:
        """Append an element and give it the next index."""
        element.index = len(self._elements)
        self._elements.append(element)

    def remove(self, index: int) -> None:
        """Remove the element at index; out-of-range indices are ignored."""
        if not 0 <= index < len(self._elements):
            return
        del self._elements[index]
        for position, element in enumerate(self._elements):
            element.index = position

    def draw(self, surface: pygame.Surface) -> None:
        for element in self._elements:
            element.draw(surface)

    def update(self) -> None:
        """Panels hold no time-dependent state."""

    def handle_input(self, mouse: MouseState) -> None:
        for element in self._elements:
            element.handle_input(mouse)


class TextField(PanelElement):
    """A line of text rendered with a given font and colour."""

    def __init__(
        self,
        text: str,
        font: pygame.font.Font,
        color: tuple[int, int, int] | pygame.Color,
        height: int,
        width: int,
        position: tuple[float, float],
    ) -> None:
        super().__init__(height, width, position)
        self.text = text
        self.font = font
        self.color = pygame.Color(color)

    def draw(self, surface: pygame.Surface) -> None:
        rendered = self.font.render(self.text, True, self.color)
        surface.blit(rendered, self.position)

    def handle_input(self, mouse: MouseState) -> None:
        """Static text ignores input."""


class InputField(PanelElement):
    """Holds editable text limited to a maximum length."""

    def __init__(
        self,
        max_length: int,
        text: str,
        height: int,
        width: int,
        position: tuple[float, float],
    ) -> None:
        super().__init__(height, width, position)
        self.max_length = max_length
        self.text = text

    def draw(self, surface: pygame.Surface) -> None:
        """Input fields have no visual representation yet."""

    def handle_input(self, mouse: MouseState) -> None:
        """Mouse input does not affect the field."""


class Sprite:
    """A texture drawn unscaled at a fixed position."""

    def __init__(self, texture: pygame.Surface, position: tuple[float, float]) -> None:
        self.texture = texture
        self.position = pygame.Vector2(position)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.texture, self.position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return self.texture is other.texture

    def __hash__(self) -> int:
        return hash(id(self.texture))