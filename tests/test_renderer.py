import pygame
import pytest

from blockhop.geometry import Rect
from blockhop.renderer import Renderer, recolor_surface
from blockhop.resources import PALETTES, ResourceManager


def _solid(color, size=(4, 4)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def renderer():
    resources = ResourceManager()
    resources.surfaces["bg"] = _solid((0, 0, 0))
    resources.surfaces["white"] = _solid((255, 255, 255))
    r = Renderer(resources=resources)
    r.screen = pygame.Surface((64, 64))
    r.screen.fill((0, 0, 255))
    return r


def test_recolor_surface_maps_every_pixel():
    palette = PALETTES["player_pal"]
    surface = _solid((0, 0, 0), (3, 2))
    out = recolor_surface(surface, palette)
    assert out.get_size() == (3, 2)
    expected = palette.recolor(0, 0, 0, 255)
    assert all(tuple(out.get_at((x, y))) == expected for x in range(3) for y in range(2))


def test_recolor_surface_bright_pixel_uses_last_slot():
    palette = PALETTES["block_pal"]
    out = recolor_surface(_solid((255, 255, 255), (1, 1)), palette)
    assert tuple(out.get_at((0, 0))) == palette.recolor(255, 255, 255, 255)
    assert tuple(out.get_at((0, 0)))[:3] == (
        (palette.colors[-1] >> 24) & 0xFF,
        (palette.colors[-1] >> 16) & 0xFF,
        (palette.colors[-1] >> 8) & 0xFF,
    )


def test_to_screen_applies_camera_unless_static(renderer):
    renderer.set_camera(10, 3)
    rect = Rect(20, 20, 5, 5)
    assert renderer.to_screen(rect, False) == Rect(10, 17, 5, 5)
    assert renderer.to_screen(rect, True) == rect


def test_draw_texture_blits_at_camera_offset(renderer):
    renderer.set_camera(10, 0)
    assert renderer.draw_texture("white", None, Rect(20, 5, 4, 4), False)
    assert tuple(renderer.screen.get_at((10, 5)))[:3] == (255, 255, 255)
    assert tuple(renderer.screen.get_at((20, 5)))[:3] == (0, 0, 255)


def test_draw_texture_scales_to_destination(renderer):
    assert renderer.draw_texture("white", None, Rect(0, 0, 16, 16), True)
    assert tuple(renderer.screen.get_at((15, 15)))[:3] == (255, 255, 255)
    assert tuple(renderer.screen.get_at((16, 16)))[:3] == (0, 0, 255)


def test_draw_texture_missing_image_draws_nothing(renderer):
    assert renderer.draw_texture("nope", None, Rect(0, 0, 4, 4), True) is False
    assert tuple(renderer.screen.get_at((0, 0)))[:3] == (0, 0, 255)


def test_draw_texture_pal_recolors(renderer):
    palette = PALETTES["player_pal"]
    assert renderer.draw_texture_pal("bg", None, Rect(0, 0, 4, 4), True, "player_pal")
    assert tuple(renderer.screen.get_at((1, 1))) == palette.recolor(0, 0, 0, 255)


def test_draw_texture_pal_without_palette_draws_plain(renderer):
    assert renderer.draw_texture_pal("white", None, Rect(0, 0, 4, 4), True, "missing")
    assert tuple(renderer.screen.get_at((1, 1)))[:3] == (255, 255, 255)


def test_draw_text_without_font_returns_false(renderer):
    assert renderer.draw_text("default_font", 0, 0, (255, 255, 255), "hi") is False


def test_render_calls_functions_in_order(renderer):
    calls = []
    renderer.add(lambda target: calls.append(("a", target)))
    renderer.add(lambda target: calls.append(("b", target)))
    renderer.render()
    assert [name for name, _ in calls] == ["a", "b"]
    assert all(target is renderer.screen for _, target in calls)
    assert tuple(renderer.screen.get_at((0, 0)))[:3] == (0, 0, 0)


def test_free_drops_screen_and_resources(renderer):
    renderer.draw_texture_pal("bg", None, Rect(0, 0, 4, 4), True, "player_pal")
    renderer.free()
    assert renderer.screen is None
    assert renderer.resources.surface("bg") is None
    assert renderer.draw_texture("bg", None, Rect(0, 0, 4, 4), True) is False