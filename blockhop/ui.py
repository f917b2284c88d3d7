"""Clickable user-interface elements grouped into handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from blockhop.geometry import Rect
from blockhop.keys import KeyMap, Keys
from blockhop.renderer import Renderer
from blockhop.tick import Ticker


@dataclass
class Elem:
    """An element with a screen area and optional press, update and render callbacks."""

    area: Rect
    on_press: Callable[[Elem], None] | None = None
    on_update: Callable[[Elem], None] | None = None
    on_render: Callable[[Elem, Any], None] | None = None


@dataclass
class UiHandler:
    """A group of elements sharing an area."""

    area: Rect
    elems: list[Elem] = field(default_factory=list)
    on_press: Callable[[], None] | None = None


class Ui:
    """All UI handlers; hooks itself into the ticker and renderer on first use."""

    def __init__(
        self,
        keys: Keys,
        ticker: Ticker | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.keys = keys
        self.ticker = ticker
        self.renderer = renderer
        self.handlers: list[UiHandler] = []
        self._registered = False

    def init_handler(self, area: Rect) -> int:
        """Create a handler and return its index."""
        if not self._registered:
            if self.ticker is not None:
                self.ticker.add(self.tick)
            if self.renderer is not None:
                self.renderer.add(self.render)
            self._registered = True
        self.handlers.append(UiHandler(area))
        return len(self.handlers) - 1

    def add_elem(self, handler: UiHandler, elem: Elem) -> int:
        """Append an element and return how many the handler now holds."""
        handler.elems.append(elem)
        return len(handler.elems)

    def tick(self, dt: float) -> None:
        """Update every element and fire presses for those under the pointer."""
        for handler in self.handlers:
            for elem in handler.elems:
                if elem.on_update is None:
                    continue
                elem.on_update(elem)
                if elem.on_press is None:
                    continue
                inside = elem.area.contains(self.keys.mouse_pos)
                if inside and self.keys.held(KeyMap.ENTER):
                    elem.on_press(elem)
                if inside and self.keys.pressed(KeyMap.CLICK):
                    elem.on_press(elem)

    def render(self, target: Any) -> None:
        for handler in self.handlers:
            for elem in handler.elems:
                if elem.on_render is not None:
                    elem.on_render(elem, target)