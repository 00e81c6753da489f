"""
Tests for the player modes.
"""

import random

import pytest

from logic.ai_player import (
    PLAYER_MODES,
    ComputerPlayer,
    Human,
    RandomComputer,
    create_player_mode,
    is_computer,
)
from logic.errors import GameFinishedError
from logic.game_state import TicTacToeGame
from logic.pieces import Piece


def test_takes_centre_on_empty_board():
    for seed in range(20):
        computer = RandomComputer(random.Random(seed))
        assert computer.decide(TicTacToeGame().view) == (1, 1)


def test_takes_centre_whenever_free():
    game = TicTacToeGame()
    game.apply_move(0, 0)

    assert RandomComputer().decide(game.view) == (1, 1)


def test_takes_only_empty_cell():
    game = TicTacToeGame()
    # X O X
    # X O O
    # O X .
    for row, col in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0)]:
        game.apply_move(row, col)
    assert not game.is_finished

    for seed in range(10):
        assert RandomComputer(random.Random(seed)).decide(game.view) == (2, 2)


def test_random_choice_is_an_empty_cell():
    game = TicTacToeGame()
    game.apply_move(1, 1)
    game.apply_move(0, 0)
    computer = RandomComputer(random.Random(42))

    for _ in range(50):
        row, col = computer.decide(game.view)
        assert game.get(row, col) == Piece.EMPTY


def test_random_choice_covers_all_empty_cells():
    game = TicTacToeGame()
    game.apply_move(1, 1)
    computer = RandomComputer(random.Random(7))

    picks = {computer.decide(game.view) for _ in range(500)}

    assert picks == set(game.get_empty_cells())


def test_refuses_finished_game():
    game = TicTacToeGame()
    for row, col in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
        game.apply_move(row, col)

    with pytest.raises(GameFinishedError):
        RandomComputer().decide(game.view)


def test_computer_plays_through_game():
    game = TicTacToeGame()
    game.bind_strategy(RandomComputer(random.Random(3)))

    while not game.is_finished:
        game.apply_automated_move()

    assert game.winner is not None
    assert len(game.moves) >= 5


def test_modes():
    assert not Human().is_computer
    assert RandomComputer().is_computer
    assert isinstance(RandomComputer(), ComputerPlayer)
    assert not isinstance(Human(), ComputerPlayer)
    assert is_computer(RandomComputer())
    assert not is_computer(Human())
    assert not is_computer(None)


def test_create_player_mode():
    assert list(PLAYER_MODES)[0] == "human"
    assert isinstance(create_player_mode("human"), Human)
    assert isinstance(create_player_mode("Random"), RandomComputer)

    with pytest.raises(ValueError):
        create_player_mode("minimax")
