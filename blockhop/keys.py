"""Keyboard and mouse state with logical key bindings."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable

import pygame

log = logging.getLogger(__name__)

PRESS_DELAY = 10
KEY_COUNT = 512
MOUSE_KEY_COUNT = 24
TOTAL_KEYS = KEY_COUNT + MOUSE_KEY_COUNT
MAX_KEYBINDS = 2

_SC_A = 4
_SC_D = 7
_SC_Q = 20
_SC_S = 22
_SC_W = 26
_SC_RETURN = 40
_SC_ESCAPE = 41
_SC_RIGHT = 79
_SC_LEFT = 80
_SC_DOWN = 81
_SC_UP = 82
_SC_KP_ENTER = 88
_BUTTON_LEFT = 1
_BUTTON_RIGHT = 3


class KeyMap(enum.IntEnum):
    """Logical inputs the game asks about."""

    W = 0
    S = 1
    D = 2
    A = 3
    ENTER = 4
    EXIT = 5
    CLICK = 6


def _default_bindings() -> dict[KeyMap, list[int | None]]:
    return {
        KeyMap.W: [_SC_W, _SC_UP],
        KeyMap.S: [_SC_S, _SC_DOWN],
        KeyMap.D: [_SC_D, _SC_RIGHT],
        KeyMap.A: [_SC_A, _SC_LEFT],
        KeyMap.ENTER: [_SC_RETURN, _SC_KP_ENTER],
        KeyMap.EXIT: [_SC_ESCAPE, None],
        KeyMap.CLICK: [_BUTTON_LEFT + KEY_COUNT, _BUTTON_RIGHT + KEY_COUNT],
    }


class Keys:
    """Per-key counters: PRESS_DELAY on a fresh press, decaying to 1 while held, 0 when up."""

    def __init__(self) -> None:
        self.state: list[int] = [0] * TOTAL_KEYS
        self.bindings = _default_bindings()
        self.mouse_pos: tuple[int, int] = (0, 0)
        self.quit = False
        self.wheel = 0

    def reset(self) -> None:
        """Release every key."""
        self.state = [0] * TOTAL_KEYS

    def _bound(self, key: KeyMap) -> Iterable[int]:
        return (code for code in self.bindings[KeyMap(key)] if code is not None)

    def pressed(self, key: KeyMap) -> bool:
        """True on the frame after a binding of ``key`` went down."""
        return any(self.state[code] == PRESS_DELAY - 1 for code in self._bound(key))

    def held(self, key: KeyMap) -> bool:
        """True while any binding of ``key`` is down."""
        return any(self.state[code] for code in self._bound(key))

    def remap_key(self, key: KeyMap, new_key: int | None, bind_index: int) -> None:
        """Bind ``new_key`` to slot ``bind_index`` of ``key``; slots past the last are ignored."""
        if bind_index < 0:
            raise ValueError(f"bind index must not be negative: {bind_index}")
        if bind_index < MAX_KEYBINDS:
            self.bindings[KeyMap(key)][bind_index] = new_key

    def _down(self, index: int) -> None:
        self.state[index] = 2 if self.state[index] > 0 else PRESS_DELAY

    def key_down(self, scancode: int) -> None:
        if not 0 <= scancode < KEY_COUNT:
            raise ValueError(f"key: {scancode}")
        self._down(scancode)

    def key_up(self, scancode: int) -> None:
        if not 0 <= scancode < KEY_COUNT:
            raise ValueError(f"key: {scancode}")
        self.state[scancode] = 0

    def button_down(self, button: int) -> None:
        if not 0 <= button < MOUSE_KEY_COUNT:
            raise ValueError(f"key: {button}")
        self._down(button + KEY_COUNT)

    def button_up(self, button: int) -> None:
        if not 0 <= button < MOUSE_KEY_COUNT:
            raise ValueError(f"key: {button}")
        self.state[button + KEY_COUNT] = 0

    def decay(self) -> None:
        """Count every held key one step closer to the steady held value."""
        self.state = [v - 1 if v > 1 else v for v in self.state]

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Advance one frame: decay, then apply the events.

        An out-of-range key or button is logged and ends processing of the frame.
        """
        self.decay()
        handlers = {
            pygame.KEYDOWN: lambda e: self.key_down(e.scancode),
            pygame.KEYUP: lambda e: self.key_up(e.scancode),
            pygame.MOUSEBUTTONDOWN: lambda e: self.button_down(e.button),
            pygame.MOUSEBUTTONUP: lambda e: self.button_up(e.button),
        }
        for event in events:
            pos = getattr(event, "pos", None)
            if pos is not None and event.type in (
                pygame.MOUSEMOTION,
                pygame.MOUSEBUTTONDOWN,
                pygame.MOUSEBUTTONUP,
            ):
                self.mouse_pos = (int(pos[0]), int(pos[1]))
            handler = handlers.get(event.type)
            if handler is not None:
                try:
                    handler(event)
                except ValueError as exc:
                    log.warning("%s", exc)
                    return
            elif event.type == pygame.MOUSEWHEEL:
                self.wheel += event.y
            elif event.type == pygame.QUIT:
                self.quit = True
        if self.state[_SC_Q]:
            self.quit = True