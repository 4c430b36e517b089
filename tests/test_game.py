import numpy as np
import pytest

from src.snake.config import Config, GRID_W, GRID_H
from src.snake.game import Game, GameStatus
from src.snake.grid import Direction, Grid, Position


def test_initial_state(game):
    assert game.status is GameStatus.RUNNING
    assert list(game.snake) == [(10, 10), (9, 10), (8, 10)]
    assert game.snake.direction is Direction.RIGHT
    assert game.score == 0
    assert game.food is not None
    assert game.food not in game.snake
    assert game.grid.contains(game.food)


def test_default_grid_matches_window():
    game = Game()
    assert game.grid == Grid(GRID_W, GRID_H)
    assert game.is_running


def test_eating_food_scores_grows_and_respawns(game):
    game.food = Position(11, 10)
    status = game.tick()

    assert status is GameStatus.RUNNING
    assert game.head == (11, 10)
    assert game.score == 1
    assert game.length == 4
    assert game.food not in {(11, 10), (10, 10), (9, 10), (8, 10)}
    assert game.grid.contains(game.food)


def test_plain_move_keeps_length(game):
    game.food = Position(0, 0)
    game.tick()
    assert list(game.snake) == [(11, 10), (10, 10), (9, 10)]
    assert game.score == 0


def test_reverse_direction_is_ignored(game):
    game.food = Position(0, 0)
    assert game.set_direction(Direction.LEFT) is False
    game.tick()
    assert game.snake.direction is Direction.RIGHT
    assert game.head == (11, 10)


def test_reverse_checked_against_committed_heading(game):
    game.food = Position(0, 0)
    assert game.set_direction(Direction.UP) is True
    # Left is still the reverse of the heading the snake is actually moving in.
    assert game.set_direction(Direction.LEFT) is False
    game.tick()
    assert game.snake.direction is Direction.UP
    assert game.head == (10, 9)


def test_same_direction_already_queued_is_ignored(game):
    assert game.set_direction(Direction.RIGHT) is False
    assert game.set_direction(Direction.DOWN) is True
    assert game.set_direction(Direction.DOWN) is False


def test_wall_collision_ends_game_and_leaves_snake(game):
    game.food = Position(0, 0)
    for _ in range(9):
        game.tick()
    assert game.head == (19, 10)
    before = list(game.snake)

    assert game.tick() is GameStatus.GAME_OVER
    assert list(game.snake) == before
    assert game.snake.direction is Direction.RIGHT
    assert game.score == 0


def test_fatal_turn_keeps_previous_heading(game):
    game.food = Position(0, 0)
    game.set_direction(Direction.UP)
    for _ in range(10):
        game.tick()
    game.set_direction(Direction.RIGHT)
    game.tick()
    assert game.head == (11, 0)
    before = list(game.snake)

    # Turning into the top wall kills the snake without committing the turn.
    game.set_direction(Direction.UP)
    assert game.tick() is GameStatus.GAME_OVER
    assert game.snake.direction is Direction.RIGHT
    assert list(game.snake) == before


def test_top_wall_collision(game):
    game.food = Position(0, 0)
    game.set_direction(Direction.UP)
    for _ in range(10):
        game.tick()
    assert game.head == (10, 0)
    assert game.tick() is GameStatus.GAME_OVER


def test_self_collision(make_game):
    game = make_game(initial_length=5)
    game.food = Position(0, 0)
    for d in (Direction.UP, Direction.LEFT, Direction.DOWN):
        game.set_direction(d)
        game.tick()
    assert game.status is GameStatus.GAME_OVER
    assert game.head == (9, 9)


def test_moving_into_vacated_tail_is_legal(make_game):
    game = make_game(initial_length=4)
    game.food = Position(0, 0)
    for d in (Direction.UP, Direction.LEFT, Direction.DOWN):
        game.set_direction(d)
        game.tick()
    assert game.status is GameStatus.RUNNING
    assert game.head == (9, 10)
    assert game.length == 4


def test_tick_and_set_direction_ignored_after_game_over(game):
    game.food = Position(0, 0)
    for _ in range(10):
        game.tick()
    assert game.status is GameStatus.GAME_OVER
    before = list(game.snake)
    assert game.set_direction(Direction.UP) is False
    assert game.tick() is GameStatus.GAME_OVER
    assert list(game.snake) == before


def test_restart_restores_initial_state(game):
    game.food = Position(11, 10)
    game.tick()
    game.set_direction(Direction.UP)
    for _ in range(20):
        game.tick()
    assert game.status is GameStatus.GAME_OVER

    game.restart()
    assert game.status is GameStatus.RUNNING
    assert list(game.snake) == [(10, 10), (9, 10), (8, 10)]
    assert game.snake.direction is Direction.RIGHT
    assert game.pending is Direction.RIGHT
    assert game.snake.pending_growth == 0
    assert game.score == 0
    assert game.food is not None and game.food not in game.snake


def test_restart_while_running(game):
    game.food = Position(0, 0)
    game.tick()
    game.restart()
    assert list(game.snake) == [(10, 10), (9, 10), (8, 10)]
    assert game.is_running


def test_filling_the_grid_wins(make_game):
    game = make_game(width=3, height=1, initial_length=2)
    assert list(game.snake) == [(1, 0), (0, 0)]
    assert game.food == (2, 0)

    assert game.tick() is GameStatus.WON
    assert game.score == 1
    assert game.length == 3
    assert game.food is None
    assert not game.is_running


def test_growth_per_food(make_game):
    game = make_game(growth_per_food=3)
    game.food = Position(11, 10)
    game.tick()
    game.food = Position(0, 0)
    game.tick()
    game.tick()
    assert game.length == 6
    game.tick()
    assert game.length == 6


def test_initial_snake_must_fit():
    with pytest.raises(ValueError):
        Game(Grid(4, 4), np.random.default_rng(0), Config(initial_length=5))


def test_seeded_games_place_the_same_food():
    a = Game(Grid(20, 20), np.random.default_rng(5))
    b = Game(Grid(20, 20), np.random.default_rng(5))
    assert a.food == b.food


def test_random_play_keeps_body_unique(make_game):
    game = make_game(width=8, height=8, seed=11)
    moves = np.random.default_rng(99)
    directions = list(Direction)
    for _ in range(2000):
        if not game.is_running:
            game.restart()
        game.set_direction(directions[moves.integers(4)])
        length_before, score_before = game.length, game.score
        game.tick()
        if game.is_running:
            body = list(game.snake)
            assert len(body) == len(set(body))
            assert game.food not in game.snake
            assert game.length - length_before == game.score - score_before
