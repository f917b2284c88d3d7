"""Command entry point: open the window and run the game loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from blockhop.game import Game
from blockhop.keys import Keys
from blockhop.renderer import Renderer
from blockhop.resources import ResourceManager
from blockhop.tick import Ticker

WIDTH = 512
HEIGHT = 512
FRAME_DELAY_MS = 16


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def _parse(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockhop", description="A small platformer.")
    parser.add_argument("--root", default=".", help="directory holding res/")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse(argv)
    keys = Keys()
    renderer = Renderer(ResourceManager(args.root))
    renderer.init(WIDTH, HEIGHT)
    ticker = Ticker()
    game = Game(keys, renderer)
    ticker.add(game.tick)
    renderer.add(game.render)

    frames = 0
    try:
        while args.frames is None or frames < args.frames:
            keys.handle_events(pygame.event.get())
            ticker.tick()
            renderer.render()
            frames += 1
            if keys.quit:
                break
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        renderer.free()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())