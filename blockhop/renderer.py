"""Frame rendering: registered draw callbacks, a camera and textured drawing."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pygame

from blockhop.geometry import Rect
from blockhop.resources import Palette, ResourceManager

RenderFunction = Callable[[pygame.Surface], None]

TEXT_LIMIT = 255


def recolor_surface(surface: pygame.Surface, palette: Palette) -> pygame.Surface:
    """Return a new RGBA surface with every pixel mapped through the palette."""
    width, height = surface.get_size()
    out = pygame.Surface((width, height), pygame.SRCALPHA, 32)
    for y in range(height):
        for x in range(width):
            out.set_at((x, y), palette.recolor(*surface.get_at((x, y))))
    return out


class Renderer:
    """Owns the window surface, the camera and the list of per-frame draw functions."""

    def __init__(
        self,
        resources: ResourceManager | None = None,
        width: int = 512,
        height: int = 125,
    ) -> None:
        self.resources = resources if resources is not None else ResourceManager()
        self.width = width
        self.height = height
        self.camera: tuple[int, int] = (0, 0)
        self.functions: list[RenderFunction] = []
        self.screen: pygame.Surface | None = None
        self._recolored: dict[tuple[str, str], pygame.Surface] = {}

    def init(self, width: int, height: int) -> None:
        """Open the window and load every resource."""
        self.width = width
        self.height = height
        pygame.display.init()
        self.screen = pygame.display.set_mode((width, height))
        self.resources.load_all()

    def add(self, func: RenderFunction) -> None:
        self.functions.append(func)

    def set_camera(self, x: int, y: int) -> None:
        self.camera = (x, y)

    def to_screen(self, rect: Rect, static_pos: bool = False) -> Rect:
        """Translate a world rectangle to screen space unless it is fixed to the screen."""
        if static_pos:
            return Rect(rect.x, rect.y, rect.w, rect.h)
        cx, cy = self.camera
        return Rect(rect.x - cx, rect.y - cy, rect.w, rect.h)

    def render(self) -> None:
        """Clear the screen, run every draw function and present the frame."""
        if self.screen is None:
            return
        self.screen.fill((0, 0, 0))
        for func in self.functions:
            func(self.screen)
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def _blit(
        self,
        image: pygame.Surface,
        src: Rect | None,
        dst: Rect,
        static_pos: bool,
    ) -> bool:
        if self.screen is None:
            return False
        if src is not None:
            image = image.subsurface(pygame.Rect(src.x, src.y, src.w, src.h))
        target = self.to_screen(dst, static_pos)
        size = (max(target.w, 0), max(target.h, 0))
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        self.screen.blit(image, (target.x, target.y))
        return True

    def draw_texture(
        self,
        name: str,
        src: Rect | None,
        dst: Rect,
        static_pos: bool = False,
    ) -> bool:
        """Draw a named image stretched over ``dst``; returns False if nothing was drawn."""
        image = self.resources.surface(name)
        if image is None:
            return False
        return self._blit(image, src, dst, static_pos)

    def draw_texture_pal(
        self,
        name: str,
        src: Rect | None,
        dst: Rect,
        static_pos: bool,
        palette_name: str,
    ) -> bool:
        """Draw a named image recoloured by a palette, or plainly if either is missing."""
        image = self.resources.surface(name)
        palette = self.resources.palette(palette_name)
        if image is None or palette is None:
            return self.draw_texture(name, src, dst, static_pos)
        key = (name, palette_name)
        recolored = self._recolored.get(key)
        if recolored is None:
            recolored = recolor_surface(image, palette)
            self._recolored[key] = recolored
        return self._blit(recolored, src, dst, static_pos)

    def draw_text(
        self,
        font_name: str,
        x: int,
        y: int,
        color: Sequence[int],
        text: str,
    ) -> bool:
        """Draw text at a fixed screen position; returns False if nothing was drawn."""
        font = self.resources.font(font_name)
        if font is None or self.screen is None:
            return False
        surface = font.render(text[:TEXT_LIMIT], True, tuple(color))
        self.screen.blit(surface, (x, y))
        return True

    def free(self) -> None:
        """Release resources and close the window."""
        self.resources.free_all()
        self._recolored.clear()
        self.screen = None
        pygame.display.quit()