"""Keyboard state tracking across frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Iterable

QUIT = "quit"
KEY_DOWN = "key_down"
KEY_UP = "key_up"


class KeyStatus(Enum):
    """A key's state derived from the previous and current frame."""

    NONE = "none"
    JUST_PRESSED = "just_pressed"
    HELD = "held"
    JUST_RELEASED = "just_released"


@dataclass
class KeyboardState:
    """The keys down in the current frame and in the previous one."""

    current: set[Hashable] = field(default_factory=set)
    previous: frozenset[Hashable] = frozenset()

    def key_status(self, key: Hashable) -> KeyStatus:
        was_down = key in self.previous
        is_down = key in self.current
        if not was_down:
            return KeyStatus.JUST_PRESSED if is_down else KeyStatus.NONE
        return KeyStatus.HELD if is_down else KeyStatus.JUST_RELEASED

    def is_up(self, key: Hashable) -> bool:
        """True when the key is up or just released."""
        return key not in self.current

    def is_free(self, key: Hashable) -> bool:
        """True when the key is up and not just released."""
        return self.key_status(key) is KeyStatus.NONE

    def is_just_pressed(self, key: Hashable) -> bool:
        return self.key_status(key) is KeyStatus.JUST_PRESSED

    def is_down(self, key: Hashable) -> bool:
        """True when the key is down or just pressed."""
        return key in self.current

    def is_held(self, key: Hashable) -> bool:
        """True when the key is down and not just pressed."""
        return self.key_status(key) is KeyStatus.HELD

    def is_just_released(self, key: Hashable) -> bool:
        return self.key_status(key) is KeyStatus.JUST_RELEASED


@dataclass
class InputState:
    """General state of all inputs."""

    keyboard_state: KeyboardState = field(default_factory=KeyboardState)


class InputManager:
    """Feeds input events into an InputState, one frame at a time.

    Events are ``(kind, key)`` tuples with kind ``KEY_DOWN`` or ``KEY_UP``,
    or ``QUIT`` (alone or as ``(QUIT, None)``).
    """

    def __init__(self) -> None:
        self._state = InputState()

    def prepare_for_update(self) -> None:
        """Remember the current keys as the previous frame's."""
        keyboard = self._state.keyboard_state
        keyboard.previous = frozenset(keyboard.current)

    def poll_inputs(self, events: Iterable) -> bool:
        """Apply ``events``; return False if a quit was requested, else True."""
        running = True
        keyboard = self._state.keyboard_state
        for event in events:
            if isinstance(event, str):
                kind, key = event, None
            else:
                kind, key = event
            if kind == QUIT:
                running = False
            elif kind == KEY_DOWN:
                keyboard.current.add(key)
            elif kind == KEY_UP:
                keyboard.current.discard(key)
            else:
                raise ValueError(f"unknown input event kind: {kind!r}")
        return running

    def state(self) -> InputState:
        return self._state