"""The side-scrolling platformer: a player, blocks to stand on and patrolling enemies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from blockhop.geometry import Rect
from blockhop.keys import KeyMap, Keys
from blockhop.renderer import Renderer

TILE = 32
MAP_W = 64
MAP_H = 16
GRAVITY = 10 * 64
SPEED = 300.0
JUMP_VEL = 300.0
GROUND_Y = (MAP_H - 1) * TILE
START_TIMER = 100.0
SPAWN = (64, (MAP_H - 2) * TILE)
TEXT_COLOR = (255, 255, 255, 255)


@dataclass
class Player:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    w: int = TILE
    h: int = TILE
    on_ground: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass
class Enemy:
    x: float
    y: float
    vx: float
    w: int = TILE
    h: int = TILE


class Game:
    """Game state plus the per-frame update and draw steps."""

    def __init__(
        self,
        keys: Keys,
        renderer: Renderer | None = None,
        width: int | None = None,
    ) -> None:
        self.keys = keys
        self.renderer = renderer
        if width is None:
            width = renderer.width if renderer is not None else 512
        self.width = width
        self.player = Player()
        self.blocks: list[Rect] = []
        self.enemies: list[Enemy] = []
        self.camera_x = 0.0
        self.timer = START_TIMER
        self.load_level(0)

    def load_level(self, level: int) -> None:
        if level == 0:
            self.timer = START_TIMER
            self.blocks = [
                Rect(5 * TILE, (MAP_H - 3) * TILE, TILE, TILE),
                Rect(12 * TILE, (MAP_H - 4) * TILE, TILE, TILE),
                Rect(20 * TILE, (MAP_H - 6) * TILE, TILE, TILE),
                Rect(30 * TILE, (MAP_H - 3) * TILE, TILE, TILE),
                Rect(40 * TILE, (MAP_H - 5) * TILE, TILE, TILE),
            ]
            self.enemies = [
                Enemy(15 * TILE, (MAP_H - 2) * TILE, 1.0),
                Enemy(35 * TILE, (MAP_H - 2) * TILE, -1.2),
            ]
        self.spawn_player(SPAWN)

    def spawn_player(self, pos: Sequence[float]) -> None:
        self.player = Player(x=pos[0], y=pos[1])
        self.camera_x = 0.0

    def _move_player(self, dt: float) -> None:
        p = self.player
        if self.keys.held(KeyMap.A):
            p.vx = -SPEED
        elif self.keys.held(KeyMap.D):
            p.vx = SPEED
        else:
            p.vx = 0.0

        if self.keys.pressed(KeyMap.W) and p.on_ground:
            p.vy = -JUMP_VEL
            p.on_ground = False

        p.vy += GRAVITY * dt
        p.x += p.vx * dt
        p.y += p.vy * dt

        if p.y + p.h > GROUND_Y:
            p.y = GROUND_Y - p.h
            p.vy = 0.0
            p.on_ground = True

    def _collide_blocks(self) -> None:
        p = self.player
        for b in self.blocks:
            if not p.rect.intersects(b):
                continue
            if p.vy > 0 and p.y - p.vy + p.h <= b.y:
                p.y = b.y - p.h
                p.vy = 0.0
                p.on_ground = True
            elif p.vy < 0 and p.y - p.vy >= b.y + b.h:
                p.y = b.y + b.h
                p.vy = 0.0
            elif p.vx > 0:
                p.x = b.x - p.w
            elif p.vx < 0:
                p.x = b.x + b.w

    def _move_enemies(self) -> None:
        p = self.player
        for e in self.enemies:
            e.x += e.vx
            if e.x < 0 or e.x + e.w > MAP_W * TILE:
                e.vx = -e.vx
            if p.rect.intersects(Rect(int(e.x), int(e.y), e.w, e.h)):
                p.x, p.y = SPAWN
                p.vx = p.vy = 0.0

    def _follow_camera(self) -> None:
        camera = self.player.x - self.width // 2
        camera = max(camera, 0)
        camera = min(camera, MAP_W * TILE - self.width)
        self.camera_x = camera
        if self.renderer is not None:
            self.renderer.set_camera(int(camera), 0)

    def tick(self, dt: float) -> None:
        self._move_player(dt)
        self._collide_blocks()
        self._move_enemies()
        self._follow_camera()
        self.timer -= dt

    def render(self, target: Any = None) -> None:
        """Draw the level through the renderer."""
        r = self.renderer
        if r is None:
            return
        r.draw_texture("bg", None, Rect(0, 0, MAP_W * TILE, MAP_H * TILE), False)
        for i in range(MAP_W):
            r.draw_texture_pal(
                "ground", None, Rect(i * TILE, GROUND_Y, TILE, TILE), False, "block_pal"
            )
        for b in self.blocks:
            r.draw_texture_pal("block", None, Rect(b.x, b.y, b.w, b.h), False, "block_pal")
        for e in self.enemies:
            r.draw_texture_pal(
                "block", None, Rect(int(e.x), int(e.y), e.w, e.h), False, "enemy_pal"
            )
        p = self.player
        r.draw_texture_pal(
            "player", None, Rect(int(p.x), int(p.y), p.w, p.h), False, "player_pal"
        )
        r.draw_text("default_font", 10, 10, TEXT_COLOR, f" {self.timer:.1f}")