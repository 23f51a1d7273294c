"""The game loop's state stack and per-frame dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from gaemi.input import InputManager, InputState
from gaemi.matrix import Matrix4
from gaemi.vector import Vector3


class GameState(ABC):
    """A scene the game can run, pause and resume."""

    game: Game | None = None

    @abstractmethod
    def load(self) -> None: ...

    @abstractmethod
    def clean(self) -> None: ...

    @abstractmethod
    def handle_event(self, input_state: InputState) -> None: ...

    @abstractmethod
    def update(self, dt: int) -> None: ...

    @abstractmethod
    def draw(self) -> None: ...

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def resume(self) -> None: ...

    def set_game(self, game: Game) -> None:
        """Attach the game that owns this state."""
        self.game = game


class Game:
    """Manages a stack of game states and forwards each frame to the top one."""

    def __init__(self) -> None:
        self.is_running = False
        self.window_width = 0
        self.window_height = 0
        self.input_manager: InputManager | None = None
        self.states: list[GameState] = []

    def init(self, screen_width: int, screen_height: int) -> None:
        """Record the window size, create the input manager and start running."""
        self.window_width = screen_width
        self.window_height = screen_height
        self.is_running = True
        self.input_manager = InputManager()

    def projection(self) -> Matrix4:
        """Orthographic projection mapping window pixels, origin bottom-left, to clip space."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise RuntimeError("game window size is not set; call init() first")
        width = float(self.window_width)
        height = float(self.window_height)
        ortho = Matrix4.create_ortho(width, height, -1.0, 1.0)
        shift = Matrix4.create_translation(Vector3(-width / 2.0, -height / 2.0, 0.0))
        return shift * ortho

    @property
    def current_state(self) -> GameState:
        if not self.states:
            raise RuntimeError("no game state is active")
        return self.states[-1]

    def handle_inputs(self, events: Iterable) -> None:
        """Apply this frame's input events and pass the input state to the active state."""
        if self.input_manager is None:
            raise RuntimeError("game is not initialised; call init() first")
        self.input_manager.prepare_for_update()
        self.is_running = self.input_manager.poll_inputs(events)
        self.current_state.handle_event(self.input_manager.state())

    def update(self, dt: int) -> None:
        self.current_state.update(dt)

    def render(self) -> None:
        self.current_state.draw()

    def change_state(self, state: GameState) -> None:
        """Replace the active state with ``state``."""
        if self.states:
            self.states.pop().clean()
        state.set_game(self)
        self.states.append(state)
        state.load()

    def push_state(self, state: GameState) -> None:
        """Pause the active state and run ``state`` on top of it."""
        if self.states:
            self.states[-1].pause()
        state.set_game(self)
        self.states.append(state)
        state.load()

    def pop_state(self) -> None:
        """Drop the active state and resume the one beneath it."""
        if self.states:
            self.states.pop().clean()
        if self.states:
            self.states[-1].resume()