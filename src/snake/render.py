# render.py
from contextlib import contextmanager
from typing import Iterator, Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, TITLE,
    BG, GRID_LINE, HEAD, BODY, FOOD, TEXT, SCORE_TEXT,
)
from .game import Game, GameStatus


class WindowError(RuntimeError):
    """The game window or render context could not be created."""


@contextmanager
def window(width: int = WIDTH, height: int = HEIGHT, title: str = TITLE) -> Iterator[pygame.Surface]:
    """Open the game window for the duration of the block; pygame is always shut down."""
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise WindowError(f"Could not open a {width}x{height} window: {exc}") from exc
        pygame.display.set_caption(title)
        yield screen
    finally:
        pygame.quit()


# ---------- Primitives ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_grid(screen: pygame.Surface, game: Game) -> None:
    w_px = game.grid.width * CELL_SIZE
    h_px = game.grid.height * CELL_SIZE
    for i in range(1, game.grid.width):
        x = i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (x, 0), (x, h_px))
    for i in range(1, game.grid.height):
        y = i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (0, y), (w_px, y))


# ---------- Frames ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    screen.fill(BG)
    draw_grid(screen, game)
    # food
    if game.food is not None:
        draw_cell(screen, game.food.x, game.food.y, FOOD)
    # snake, head drawn last so it stays on top
    for x, y in list(game.snake)[1:]:
        draw_cell(screen, x, y, BODY)
    draw_cell(screen, game.head.x, game.head.y, HEAD)
    # score
    txt = font.render(f"Score: {game.score}", True, SCORE_TEXT)
    screen.blit(txt, (8, 6))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    w, h = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    heading = "YOU WIN" if game.status is GameStatus.WON else "GAME OVER"
    title = font.render(heading, True, (240, 240, 250))
    sco   = font.render(f"Score: {game.score}", True, TEXT)
    sub   = font.render("Click to restart", True, TEXT)

    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(w // 2, h // 2 + 16)))
    screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 44)))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    draw_game(screen, font, game)
    if not game.is_running:
        draw_game_over(screen, font, game)
