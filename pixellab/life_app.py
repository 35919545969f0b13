"""Window that animates the Game of Life."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from pixellab.framebuffer import Color, Framebuffer
from pixellab.life import GameOfLife

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
CELL_SIZE = 10
FRAME_DELAY = 0.02
TITLE = "Conway's Game of Life"


def _present(screen: pygame.Surface, framebuffer: Framebuffer) -> None:
    image = framebuffer.to_image()
    surface = pygame.image.frombuffer(image.tobytes(), image.size, "RGBA")
    screen.fill(Color.WHITE.rgb)
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(frames: int | None = None) -> GameOfLife:
    """Animate the board until the window is closed or ``frames`` frames are shown.

    Returns the game in its final state.
    """
    framebuffer = Framebuffer(WINDOW_WIDTH, WINDOW_HEIGHT, background_color=Color.BLACK)
    framebuffer.clear()
    game = GameOfLife(CELL_SIZE)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        shown = 0
        while frames is None or shown < frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            framebuffer.clear()
            game.update()
            game.render(framebuffer)
            _present(screen, framebuffer)
            shown += 1
            time.sleep(FRAME_DELAY)
    finally:
        pygame.display.quit()
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Animate Conway's Game of Life.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames (default: run until the window is closed)",
    )
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    run(args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())