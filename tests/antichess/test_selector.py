"""Unit tests for antichess/selector.py"""

import random

import chess

from antichess.moves import MOVE_NONE, Move
from antichess.position import Position
from antichess.selector import select_move
from tests.positions import MATED_FEN, ONE_CAPTURE_FEN, PINNED_CAPTURE_FEN, PROMOTION_FEN


def test_quiet_position_returns_a_legal_move(rng: random.Random) -> None:
    position = Position()
    legal = position.legal_moves()
    for _ in range(20):
        assert select_move(position, rng) in legal


def test_legal_capture_is_preferred(rng: random.Random) -> None:
    position = Position(ONE_CAPTURE_FEN)
    for _ in range(20):
        assert select_move(position, rng) == Move(chess.E4, chess.D5)


def test_falls_back_to_first_raw_capture(rng: random.Random) -> None:
    """With no legal capture the first raw capture is returned unchecked."""
    position = Position(PINNED_CAPTURE_FEN)
    move = select_move(position, rng)
    assert move == Move(chess.E2, chess.C3)
    assert move not in position.legal_moves()


def test_terminal_position_yields_none(rng: random.Random) -> None:
    assert select_move(Position(MATED_FEN), rng) == MOVE_NONE


def test_same_seed_same_choice() -> None:
    position = Position()
    first = [select_move(position, random.Random(99)) for _ in range(3)]
    assert len(set(first)) == 1


def test_does_not_modify_position(rng: random.Random) -> None:
    position = Position()
    select_move(position, rng)
    assert position.fen() == chess.STARTING_FEN


def test_antichess_promotion_position_yields_legal_move(rng: random.Random) -> None:
    position = Position(PROMOTION_FEN, variant="antichess")
    legal = position.legal_moves()
    for _ in range(20):
        assert select_move(position, rng) in legal
