# main.py
import sys

import numpy as np # type: ignore
import pygame # type: ignore

from .clock import TickTimer
from .config import WIDTH, HEIGHT, CELL_SIZE, CFG, Config
from .controls import handle_events
from .game import Game, GameStatus
from .grid import Grid
from .render import WindowError, window, draw_frame


def run(screen: pygame.Surface, cfg: Config) -> int:
    """Play until the window is closed. Returns the final score."""
    font = pygame.font.SysFont(None, cfg.font_size)
    clock = pygame.time.Clock()

    grid = Grid.from_screen(WIDTH, HEIGHT, CELL_SIZE)
    game = Game(grid, np.random.default_rng(cfg.seed), cfg)
    timer = TickTimer(cfg.ticks_per_second, pygame.time.get_ticks())

    def restarted():
        timer.reset(pygame.time.get_ticks())
        if cfg.debug:
            print("[SNAKE] restart")

    running = True
    while running:
        # 1) input
        running = handle_events(game, pygame.event.get(), on_restart=restarted)
        if not running:
            break

        # 2) update, gated on the tick rate rather than the frame rate
        if game.is_running and timer.due(pygame.time.get_ticks()):
            score = game.score
            status = game.tick()
            if cfg.debug and game.score != score:
                print(f"[SNAKE] ate food, score={game.score}, length={game.length}")
            if cfg.debug and status is not GameStatus.RUNNING:
                print(f"[SNAKE] {status.value}, score={game.score}")

        # 3) render
        draw_frame(screen, font, game)
        pygame.display.flip()
        clock.tick(cfg.fps)

    return game.score


def main(cfg: Config = CFG) -> int:
    try:
        with window() as screen:
            score = run(screen, cfg)
    except WindowError as exc:
        print(f"[SNAKE] {exc}", file=sys.stderr)
        return 1

    if cfg.debug:
        print(f"[SNAKE] Final score: {score}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
