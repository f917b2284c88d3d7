import pygame
import pytest

from blockhop.game import (
    GROUND_Y,
    MAP_H,
    MAP_W,
    SPAWN,
    SPEED,
    START_TIMER,
    TILE,
    Game,
)
from blockhop.keys import KeyMap, Keys
from blockhop.renderer import Renderer
from blockhop.resources import PALETTES, ResourceManager


@pytest.fixture
def keys():
    return Keys()


@pytest.fixture
def game(keys):
    return Game(keys)


def test_level_zero_layout(game):
    assert len(game.blocks) == 5
    assert len(game.enemies) == 2
    assert (game.player.x, game.player.y) == SPAWN
    assert game.timer == START_TIMER
    assert game.blocks[0].x == 5 * TILE


def test_player_lands_on_ground(game):
    game.tick(1.0)
    assert game.player.y == GROUND_Y - TILE
    assert game.player.vy == 0
    assert game.player.on_ground


def test_timer_counts_down(game):
    game.tick(0.25)
    game.tick(0.25)
    assert game.timer == pytest.approx(START_TIMER - 0.5)


def test_holding_right_moves_player(game, keys):
    keys.key_down(keys.bindings[KeyMap.D][0])
    start = game.player.x
    game.tick(0.1)
    assert game.player.vx == SPEED
    assert game.player.x == pytest.approx(start + SPEED * 0.1)


def test_holding_left_moves_player_back(game, keys):
    game.spawn_player((300, SPAWN[1]))
    keys.key_down(keys.bindings[KeyMap.A][0])
    game.tick(0.1)
    assert game.player.vx == -SPEED
    assert game.player.x < 300


def test_jump_only_from_ground(game, keys):
    game.tick(1.0)
    keys.key_down(keys.bindings[KeyMap.W][0])
    keys.decay()
    game.tick(0.01)
    assert game.player.vy < 0
    assert not game.player.on_ground
    assert game.player.y < GROUND_Y - TILE


def test_no_jump_in_air(game, keys):
    keys.key_down(keys.bindings[KeyMap.W][0])
    keys.decay()
    game.tick(0.01)
    assert game.player.vy > 0


def test_touching_enemy_respawns_player(game):
    enemy = game.enemies[0]
    game.spawn_player((enemy.x + 1, enemy.y))
    game.tick(0.0)
    assert (game.player.x, game.player.y) == SPAWN
    assert game.player.vx == 0 and game.player.vy == 0


def test_enemy_turns_at_map_edge(game):
    enemy = game.enemies[0]
    enemy.x = -5.0
    speed = enemy.vx
    game.tick(0.0)
    assert enemy.vx == -speed


def test_enemy_patrols(game):
    enemy = game.enemies[1]
    start = enemy.x
    game.tick(0.0)
    assert enemy.x == pytest.approx(start + enemy.vx)


def test_camera_clamped_to_map(keys):
    renderer = Renderer(ResourceManager(), width=512)
    game = Game(keys, renderer)
    game.spawn_player((MAP_W * TILE - TILE, GROUND_Y - TILE))
    game.tick(0.0)
    assert game.camera_x == MAP_W * TILE - 512
    assert renderer.camera == (MAP_W * TILE - 512, 0)
    game.spawn_player(SPAWN)
    game.tick(0.0)
    assert renderer.camera == (0, 0)


def test_block_stops_horizontal_motion(game, keys):
    block = game.blocks[0]
    game.spawn_player((block.x - TILE - 1, block.y))
    keys.key_down(keys.bindings[KeyMap.D][0])
    game.tick(0.01)
    assert game.player.x == block.x - TILE


def test_render_draws_player_with_palette(keys):
    resources = ResourceManager()
    black = pygame.Surface((4, 4))
    black.fill((0, 0, 0))
    resources.surfaces["player"] = black
    renderer = Renderer(resources, width=512, height=512)
    renderer.screen = pygame.Surface((512, 512))
    renderer.screen.fill((0, 0, 255))
    game = Game(keys, renderer)
    game.render(renderer.screen)
    expected = PALETTES["player_pal"].recolor(0, 0, 0, 255)[:3]
    assert tuple(renderer.screen.get_at((SPAWN[0] + 2, SPAWN[1] + 2)))[:3] == expected
    assert tuple(renderer.screen.get_at((0, (MAP_H - 1) * TILE)))[:3] == (0, 0, 255)