"""Named images, palettes, sounds and fonts, and their loader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

IMAGES: dict[str, str] = {
    "noise_a": "res/textures/noise_a.png",
    "noise_b": "res/textures/noise_b.png",
    "player": "res/textures/noise_a.png",
    "block": "res/textures/noise_b.png",
    "ground": "res/textures/noise_a.png",
    "bg": "res/textures/noise_b.png",
}

SOUNDS: dict[str, str] = {
    "beep": "res/sound/beep.wav",
}

FONTS: dict[str, str] = {
    "default_font": "res/font/Mx437_EverexME_5x8.ttf",
}

FONT_SIZE = 16


@dataclass(frozen=True)
class Palette:
    """A short list of RGBA colours packed as 0xRRGGBBAA."""

    name: str
    colors: tuple[int, ...]

    def index_for(self, r: int, g: int, b: int) -> int:
        """Pick a palette slot by the brightness of a pixel."""
        count = len(self.colors)
        return min((r + g + b) * count // (3 * 256), count - 1)

    def recolor(self, r: int, g: int, b: int, a: int) -> tuple[int, int, int, int]:
        """Map a pixel to its palette colour, scaling its alpha by the colour's."""
        col = self.colors[self.index_for(r, g, b)]
        na = col & 0xFF
        return (
            (col >> 24) & 0xFF,
            (col >> 16) & 0xFF,
            (col >> 8) & 0xFF,
            int(a * (na / 255.0)),
        )


PALETTES: dict[str, Palette] = {
    p.name: p
    for p in (
        Palette("player_pal", (0xFF0000FF, 0x0000FFFF, 0xFFD39BFF, 0x000000FF)),
        Palette("enemy_pal", (0x00FF00FF, 0x008000FF, 0xFFD39BFF, 0x000000FF)),
        Palette("block_pal", (0x964B00FF, 0xFFB000FF, 0xFFD39BFF, 0x00FFFFFF)),
    )
}


class ResourceManager:
    """Loads the resource table from disk; lookups give None for anything not loaded."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self.surfaces: dict[str, pygame.Surface | None] = {}
        self.sounds: dict[str, pygame.mixer.Sound | None] = {}
        self.fonts: dict[str, pygame.font.Font | None] = {}

    def _path(self, relative: str) -> str:
        return str(self.root / relative)

    def load_all(self) -> None:
        pygame.font.init()
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
            mixer_ready = True
        except pygame.error:
            mixer_ready = False

        for name, path in IMAGES.items():
            try:
                self.surfaces[name] = pygame.image.load(self._path(path))
            except (pygame.error, OSError):
                self.surfaces[name] = None

        for name, path in SOUNDS.items():
            sound = None
            if mixer_ready:
                try:
                    sound = pygame.mixer.Sound(self._path(path))
                except (pygame.error, OSError):
                    sound = None
            self.sounds[name] = sound

        for name, path in FONTS.items():
            try:
                self.fonts[name] = pygame.font.Font(self._path(path), FONT_SIZE)
            except (pygame.error, OSError):
                self.fonts[name] = None

    def surface(self, name: str) -> pygame.Surface | None:
        return self.surfaces.get(name)

    def palette(self, name: str) -> Palette | None:
        return PALETTES.get(name)

    def sound(self, name: str) -> pygame.mixer.Sound | None:
        return self.sounds.get(name)

    def font(self, name: str) -> pygame.font.Font | None:
        return self.fonts.get(name)

    def free_all(self) -> None:
        self.surfaces.clear()
        self.sounds.clear()
        self.fonts.clear()
        pygame.mixer.quit()
        pygame.font.quit()