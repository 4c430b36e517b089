# controls.py
from typing import Callable, Iterable, Optional

import pygame # type: ignore

from .config import KEY_DIRECTIONS, RESTART_BUTTON
from .game import Game


def handle_events(
    game: Game,
    events: Iterable[pygame.event.Event],
    on_restart: Optional[Callable[[], None]] = None,
) -> bool:
    """Process events; steer on keys, restart on left click. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                game.set_direction(direction)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == RESTART_BUTTON:
            game.restart()
            if on_restart is not None:
                on_restart()
    return True
