# monkeyui

The menu and widget layer of a tower-defence game. It is built on pygame
and uses a small observer pattern to pass UI events around.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `monkeyui.observer`

- `EventType` is an enum of the events the UI can raise:
  - `NONE`
  - `MAIN_MENU_TO_MAP_SELECTION`
  - `CANCEL_MAP_SELECTION`
  - `EXIT`
  - `MOVE_NEXT`
  - `MOVE_PREVIOUS`
  - `MAP_SELECTION_TO_MONKEY_LANE`
- `Observer` is an abstract base class. Subclasses implement these methods:
  - `update(event)`
  - `initialize()`
  - `draw(surface)`
  - `handle_input(mouse)`
- `Subject` keeps an ordered list of observers and has these methods:
  - `attach(observer)` adds an observer.
  - `detach(observer)` removes every registration of that observer.
  - `notify(event)` calls `update(event)` on each observer in the order they
    were attached.
  - The `observers` property returns a tuple of the attached observers.

### `monkeyui.game`

`SCREEN_WIDTH` (1200) and `SCREEN_HEIGHT` (900) give the screen size.

`Game` holds the exit flag and the state manager. `Game.instance()` returns
one shared object and creates it on first use. Its methods are:

- `initialize(state_manager)` stores an `Observer` and calls its
  `initialize()`. The `state_manager` property returns it.
- `render(surface)` calls the state manager's `draw(surface)`.
- `update(delta_time, mouse)` calls the state manager's `handle_input(mouse)`.
  `delta_time` is accepted but not used.
- `request_exit()` sets the exit flag and `is_exit()` reports it.

`render` and `update` raise `RuntimeError` if `initialize` has not been
called.

### `monkeyui.widgets`

- `MouseState(x, y, left_pressed=False)` is a frozen snapshot of the pointer
  for one frame. Widgets read it instead of polling pygame themselves.
- `Drawable`, `Clickable` and `Updatable` are abstract interfaces.
- `PanelElement` is the base class for anything placed in a panel:
  - Its attributes are `index` (starting at -1), `height`, `width`,
    `position` (a `pygame.Vector2`) and `available`.
  - `bounding_box()` returns the `pygame.Rect` the element covers.
  - Subclasses implement `handle_input(mouse)`.
- `Panel` holds an ordered list of elements:
  - `add(element)` sets the element's `index` to its position in the list.
  - `remove(index)` deletes an element and renumbers the ones that remain.
    An index out of range is silently ignored.
  - `draw(surface)` and `handle_input(mouse)` forward to each element in
    order.
  - `len()`, iteration and indexing are supported.
- `TextField(text, font, color, height, width, position)` renders its text
  with a `pygame.font.Font` at its position. It ignores input.
- `InputField(max_length, text, height, width, position)` stores text and a
  maximum length. It draws nothing and ignores input.
- `Sprite(texture, position)` blits a surface, unscaled, at a fixed position.
  Two sprites compare equal when they share the same texture object.

### `monkeyui.button`

`Button(button_type, texture, font_size, height, width, position, game=None)`
is a textured, clickable `PanelElement` that is also a `Subject`.

- `ButtonType` sets the button's caption and the action it takes when
  clicked:

  | `ButtonType` | Caption | Action when clicked |
  | --- | --- | --- |
  | `NEW_GAME` | "New Game" | raises `MAIN_MENU_TO_MAP_SELECTION` |
  | `CANCEL_MAP_SELECTION` | none | raises `CANCEL_MAP_SELECTION` |
  | `NEXT_MAP` | none | raises `MOVE_NEXT` |
  | `PREVIOUS_MAP` | none | raises `MOVE_PREVIOUS` |
  | `CHOOSE_MONKEY_LANE` | none | raises `MAP_SELECTION_TO_MONKEY_LANE` |
  | `CHOOSE_JUNGLE` | none | raises `NONE` |
  | `COMING_SOON` | none | raises `NONE` |
  | `EXIT` | "Exit" | calls `request_exit()` on the game |
  | `RESUME` | "Resume" | nothing |
  | `OPTIONS` | "Options" | nothing |

- When a button of any type that raises an event is created, it attaches
  the game's state manager, if one has already been installed. The game is
  `Game.instance()` unless `game` is given.
- `handle_input(mouse)` sets `state`, a `ButtonState`:
  - `HOVERING` when the pointer is over a button that has a caption.
  - `CLICKED` when the pointer is over the button and the left button is
    pressed. The click action then runs.
  - `NONE` otherwise.
- `draw(surface)` scales the texture to cover the button's size. It tints
  the texture grey while the button is hovered and centres the caption in
  white.
- A button whose `available` is false neither draws nor reacts to input.
- An empty texture raises `ValueError`.

## What this package does not do

It does not:

- open a window or run a frame loop;
- load textures or fonts from disk;
- provide a state manager or any game screens.

You supply an `Observer` that acts on the events, create the pygame
surfaces yourself, and build a `MouseState` for each frame.

## Sketch

```python
import pygame
from monkeyui.game import Game
from monkeyui.observer import Observer
from monkeyui.widgets import MouseState


class Screens(Observer):
    def update(self, event):
        print("UI event:", event)

    def initialize(self):
        pass

    def draw(self, surface):
        surface.fill((0, 0, 0))

    def handle_input(self, mouse):
        pass


game = Game.instance()
game.initialize(Screens())
surface = pygame.Surface((1200, 900))
game.update(0.016, MouseState(0, 0, left_pressed=False))
game.render(surface)
```