"""
Test script for the Othello game state machine.
"""
import random

import numpy as np
import pytest

from othello.game import (
    Board, GameState, Player, Phase, PassNotice, DRAW,
    IllegalMoveError, GameOverError, InvalidCoordinateError, TurnPendingError,
)


def _pass_position() -> Board:
    """Black to move; after black plays (0, 2) white has no move but black still has (5, 2)."""
    cells = np.zeros((8, 8), dtype=int)
    cells[0, 0] = Player.BLACK
    cells[0, 1] = Player.WHITE
    cells[5, 0] = Player.BLACK
    cells[5, 1] = Player.WHITE
    return Board.from_array(cells)


def _one_square_left() -> Board:
    """Checkerboard with (0, 0) empty; white at (0, 0) fills the board."""
    i, j = np.indices((8, 8))
    cells = np.where((i + j) % 2 == 0, int(Player.WHITE), int(Player.BLACK))
    cells[0, 0] = 0
    return Board.from_array(cells)


def test_initial_state():
    game = GameState()
    assert game.get_current_player() == Player.BLACK
    assert not game.is_game_over()
    assert game.phase == Phase.AWAITING_MOVE
    assert game.pass_notice is None
    assert game.get_score() == (2, 2)
    assert game.get_winner() is None


def test_make_move():
    """Test making moves and capturing pieces."""
    game = GameState()

    assert game.make_move(2, 3), "Should be a valid move"
    board = game.get_board_state()

    assert board[2][3] == Player.BLACK, "Move should place black piece"
    assert board[3][3] == Player.BLACK, "Should capture white piece"
    assert game.get_score() == (4, 1)
    assert game.get_current_player() == Player.WHITE, "Should be white's turn"


def test_apply_move_does_not_switch_turn():
    game = GameState()
    flipped = game.apply_move(2, 3)
    assert flipped == [(3, 3)]
    assert game.current_player == Player.BLACK

    with pytest.raises(TurnPendingError):
        game.apply_move(2, 2)

    assert game.advance_turn() is None
    assert game.current_player == Player.WHITE


def test_advance_turn_without_move_is_noop():
    game = GameState()
    assert game.advance_turn() is None
    assert game.current_player == Player.BLACK


def test_illegal_move_leaves_state_untouched():
    game = GameState()
    before = game.get_board_state()

    with pytest.raises(IllegalMoveError):
        game.play(3, 3)
    with pytest.raises(IllegalMoveError):
        game.play(0, 0)
    assert not game.make_move(3, 3)

    assert np.array_equal(before, game.get_board_state())
    assert game.current_player == Player.BLACK
    # Rejection must not leave a pending turn behind
    assert game.make_move(2, 3)


def test_invalid_coordinate_is_rejected():
    game = GameState()
    before = game.get_board_state()
    with pytest.raises(InvalidCoordinateError):
        game.play(8, 3)
    with pytest.raises(InvalidCoordinateError):
        game.is_legal_move(-1, 0)
    assert not game.make_move(3, -1)
    assert np.array_equal(before, game.get_board_state())


def test_is_legal_move_with_explicit_player():
    game = GameState()
    assert game.is_legal_move(2, 3)
    assert not game.is_legal_move(2, 3, Player.WHITE)
    assert game.is_legal_move(2, 4, Player.WHITE)


def test_pass_keeps_turn_with_mover():
    game = GameState.from_board(_pass_position(), Player.BLACK)
    assert game.phase == Phase.AWAITING_MOVE

    notice = game.play(0, 2)

    assert notice == PassNotice(Player.WHITE)
    assert game.pass_notice == notice
    assert game.phase == Phase.PASS_NOTICE
    assert game.current_player == Player.BLACK
    assert not game.is_game_over()
    assert "White" in notice.message

    game.acknowledge_pass()
    assert game.phase == Phase.AWAITING_MOVE
    assert game.current_player == Player.BLACK


def test_game_ends_when_nobody_can_move():
    game = GameState.from_board(_pass_position(), Player.BLACK)
    game.play(0, 2)

    notice = game.play(5, 2)

    assert notice is None
    assert game.is_game_over()
    assert game.phase == Phase.GAME_OVER
    assert game.get_score() == (6, 0)
    assert game.get_winner() == Player.BLACK
    assert game.result_message() == "Black wins!"
    assert game.get_valid_moves() == []


def test_moves_rejected_after_game_over():
    game = GameState.from_board(_pass_position(), Player.BLACK)
    game.play(0, 2)
    game.play(5, 2)
    before = game.get_board_state()

    with pytest.raises(GameOverError):
        game.play(7, 7)
    assert not game.make_move(7, 7)
    assert game.advance_turn() is None
    assert np.array_equal(before, game.get_board_state())


def test_game_over():
    """Test game over condition by filling the board completely."""
    game = GameState.from_board(_one_square_left(), Player.WHITE)
    assert game.current_player == Player.WHITE

    assert game.make_move(0, 0), "Final move should be valid"

    assert game.is_game_over(), "Game should be over after filling the board"
    assert game.board.is_full()
    assert game.get_score() == (30, 34)
    assert game.get_winner() == Player.WHITE
    print(game)


def test_full_board_is_terminal_regardless_of_turn():
    i, j = np.indices((8, 8))
    cells = np.where((i + j) % 2 == 0, int(Player.WHITE), int(Player.BLACK))
    for player in Player:
        game = GameState.from_board(Board.from_array(cells), player)
        assert game.is_game_over()
        assert game.get_winner() == DRAW
        assert game.result_message() == "It's a draw!"


def test_from_board_settles_a_stuck_player():
    # White to move but only black can move
    game = GameState.from_board(_pass_position(), Player.WHITE)
    assert game.current_player == Player.BLACK
    assert game.pass_notice == PassNotice(Player.WHITE)


def test_next_move_clears_pass_notice():
    cells = _pass_position().get_board_state()
    # A second edge group gives black another move while white stays stuck
    cells[7, 0] = Player.BLACK
    cells[7, 1] = Player.WHITE
    game = GameState.from_board(Board.from_array(cells), Player.BLACK)

    assert game.play(0, 2) == PassNotice(Player.WHITE)

    game.apply_move(7, 2)
    assert game.pass_notice is None
    assert game.phase == Phase.AWAITING_MOVE

    assert game.advance_turn() == PassNotice(Player.WHITE)
    assert game.current_player == Player.BLACK


def test_random_games_respect_turn_rules():
    rng = random.Random(2024)
    for _ in range(20):
        game = GameState()
        while not game.is_game_over():
            mover = game.current_player
            before = game.get_score()
            row, col = rng.choice(game.get_valid_moves())
            flips = len(game.board.get_flipped_pieces(row, col, mover))

            notice = game.play(row, col)
            after = game.get_score()

            assert after.total == before.total + 1
            assert after.total <= 64
            assert after.for_player(mover) == before.for_player(mover) + 1 + flips
            assert after.for_player(mover.opponent) == before.for_player(mover.opponent) - flips

            if game.is_game_over():
                assert notice is None
                assert not game.board.has_any_valid_move(Player.BLACK)
                assert not game.board.has_any_valid_move(Player.WHITE)
                assert game.get_winner() == after.winner
            elif notice is not None:
                assert notice.player == mover.opponent
                assert game.current_player == mover
                assert not game.board.has_any_valid_move(mover.opponent)
            else:
                assert game.current_player == mover.opponent


def test_reset_restores_initial_layout():
    game = GameState()
    initial = game.get_board_state()
    rng = random.Random(3)
    for _ in range(10):
        game.play(*rng.choice(game.get_valid_moves()))

    game.reset()

    assert np.array_equal(initial, game.get_board_state())
    assert game.current_player == Player.BLACK
    assert not game.is_game_over()
    assert game.pass_notice is None
    assert game.make_move(2, 3)


def test_copy_is_independent():
    game = GameState()
    clone = game.copy()
    clone.play(2, 3)
    assert game.get_score() == (2, 2)
    assert game.current_player == Player.BLACK


if __name__ == "__main__":
    print("Running Othello game tests...\n")

    test_initial_state()
    test_make_move()
    test_pass_keeps_turn_with_mover()
    test_game_over()

    print("\nAll tests passed successfully!")
