"""
Property-based tests for the board engine and the motion filter.
"""

from typing import List, Tuple

import numpy as np
from hypothesis import given, settings, strategies as st

from logic.game_state import TicTacToeGame
from logic.pieces import Piece, Winner
from motion.high_pass import HighPassFilter
from motion.shake_detector import ShakeDetector
from test_win_checker import complete_lines

cells = st.tuples(st.integers(0, 2), st.integers(0, 2))
move_lists = st.lists(cells, max_size=30)
move_orders = st.permutations([(r, c) for r in range(3) for c in range(3)])


def snapshot(game) -> List[List[Piece]]:
    return [[game.get(r, c) for c in range(3)] for r in range(3)]


@given(move_lists)
def test_accepted_moves_alternate_and_stick(moves: List[Tuple[int, int]]):
    game = TicTacToeGame()

    for row, col in moves:
        before = snapshot(game)
        player = game.current_player
        if game.apply_move(row, col):
            assert game.get(row, col) == player
            if not game.is_finished:
                assert game.current_player == player.opposite()
        else:
            assert snapshot(game) == before

    x_count = sum(row.count(Piece.X) for row in snapshot(game))
    o_count = sum(row.count(Piece.O) for row in snapshot(game))
    assert x_count - o_count in (0, 1)
    assert len(game.moves) == x_count + o_count


@given(move_orders)
def test_full_playthrough_always_ends(order):
    game = TicTacToeGame()

    for row, col in order:
        if game.is_finished:
            break
        assert game.apply_move(row, col)

    assert game.is_finished
    assert game.current_player is None
    assert game.winner is not None


@given(move_orders)
def test_winner_owns_a_line(order):
    game = TicTacToeGame()
    for row, col in order:
        if game.is_finished:
            break
        game.apply_move(row, col)

    board = snapshot(game)
    line = game.winning_line()
    if game.winner == Winner.DRAW:
        assert line is None
        assert game.is_board_full()
        assert complete_lines(board) == []
    else:
        assert line is not None
        assert all(board[r][c] == game.winner.piece for r, c in line)
        assert line in complete_lines(board)
        # The game stopped on the winning move
        last = game.moves[-1]
        assert (last.row, last.col) in line


@given(move_orders, cells)
def test_finished_game_never_changes(order, extra):
    game = TicTacToeGame()
    for row, col in order:
        if game.is_finished:
            break
        game.apply_move(row, col)
    before = snapshot(game)
    winner = game.winner

    assert not game.apply_move(*extra)

    assert snapshot(game) == before
    assert game.winner == winner


floats = st.floats(min_value=-4.0, max_value=4.0, allow_nan=False)
vectors = st.tuples(floats, floats, floats)


@settings(max_examples=50)
@given(vectors, st.integers(min_value=10, max_value=500))
def test_constant_signal_filters_to_zero(sample, period_ms):
    hp = HighPassFilter()

    for _ in range(20):
        out = hp.apply(period_ms, sample)

    np.testing.assert_allclose(out, [0.0, 0.0, 0.0], atol=1e-12)


@given(st.lists(vectors, min_size=1, max_size=60))
def test_at_most_one_shake_per_cooldown_window(samples):
    detector = ShakeDetector()
    fired_at = []

    for i, sample in enumerate(samples):
        if detector.on_sample(100, *sample) is not None:
            fired_at.append(i)

    # Ten 100ms samples of cooldown separate two shakes
    for first, second in zip(fired_at, fired_at[1:]):
        assert second - first > 10
