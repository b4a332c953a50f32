import pygame
import pytest

from monkeyui.widgets import (
    Clickable,
    InputField,
    MouseState,
    Panel,
    PanelElement,
    Sprite,
    TextField,
    Updatable,
)

BLACK = (0, 0, 0, 255)
RED = (255, 0, 0)


class Probe(PanelElement):
    def __init__(self, name="probe"):
        super().__init__(10, 20, (1, 2))
        self.name = name
        self.drawn = []
        self.inputs = []

    def draw(self, surface):
        self.drawn.append(surface)

    def handle_input(self, mouse):
        self.inputs.append(mouse)


def test_abstract_bases_cannot_be_instantiated():
    for cls in (Clickable, Updatable, PanelElement):
        with pytest.raises(TypeError):
            cls()


def test_panel_element_defaults_until_added():
    field = InputField(4, "", 10, 20, (1, 2))
    assert field.index == -1
    assert field.available is True
    panel = Panel()
    panel.add(field)
    assert field.index == 0


def test_bounding_box_matches_position_and_size():
    field = InputField(4, "", 10, 20, (1, 2))
    assert field.bounding_box() == pygame.Rect(1, 2, 20, 10)


def test_panel_add_assigns_indices():
    panel = Panel()
    elements = [Probe(str(n)) for n in range(3)]
    for element in elements:
        panel.add(element)
    assert [e.index for e in panel] == [0, 1, 2]
    assert len(panel) == 3


def test_panel_remove_reindexes():
    panel = Panel()
    a, b, c = Probe("a"), Probe("b"), Probe("c")
    for element in (a, b, c):
        panel.add(element)
    panel.remove(0)
    assert [e.name for e in panel] == ["b", "c"]
    assert [e.index for e in panel] == [0, 1]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_panel_remove_out_of_range_is_ignored(index):
    panel = Panel()
    panel.add(Probe("a"))
    panel.add(Probe("b"))
    panel.remove(index)
    assert [e.name for e in panel] == ["a", "b"]


def test_panel_draw_and_input_reach_every_element():
    panel = Panel()
    a, b = Probe("a"), Probe("b")
    panel.add(a)
    panel.add(b)
    surface = pygame.Surface((5, 5))
    mouse = MouseState(3.0, 4.0, True)
    panel.draw(surface)
    panel.handle_input(mouse)
    assert a.drawn == [surface] and b.drawn == [surface]
    assert a.inputs == [mouse] and b.inputs == [mouse]


def test_sprite_draws_texture_at_position():
    texture = pygame.Surface((2, 2))
    texture.fill(RED)
    surface = pygame.Surface((6, 6))
    Sprite(texture, (3, 3)).draw(surface)
    assert surface.get_at((3, 3))[:3] == RED
    assert surface.get_at((4, 4))[:3] == RED
    assert surface.get_at((2, 2)) == BLACK


def test_sprite_equality_follows_texture():
    texture = pygame.Surface((2, 2))
    assert Sprite(texture, (0, 0)) == Sprite(texture, (5, 5))
    assert not Sprite(texture, (0, 0)) == Sprite(pygame.Surface((2, 2)), (0, 0))


def test_text_field_draws_in_its_colour():
    pygame.font.init()
    field = TextField("Hi", pygame.font.Font(None, 40), RED, 40, 60, (0, 0))
    surface = pygame.Surface((60, 40))
    field.draw(surface)
    pixels = [surface.get_at((x, y))[:3] for x in range(60) for y in range(40)]
    assert RED in pixels


def test_text_field_text_can_change():
    pygame.font.init()
    field = TextField("a", pygame.font.Font(None, 20), RED, 20, 20, (0, 0))
    field.text = "b"
    assert field.text == "b"


def test_input_field_keeps_text_and_draws_nothing():
    field = InputField(8, "abc", 10, 10, (0, 0))
    assert field.text == "abc"
    assert field.max_length == 8
    surface = pygame.Surface((10, 10))
    field.draw(surface)
    field.handle_input(MouseState(1.0, 1.0, True))
    assert surface.get_at((5, 5)) == BLACK
    assert field.text == "abc"