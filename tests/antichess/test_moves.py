"""Unit tests for antichess/moves.py"""

import chess
import pytest

from antichess.moves import MOVE_NONE, MOVE_NULL, Move, MoveKind


def test_sentinels_are_distinct() -> None:
    assert MOVE_NONE != MOVE_NULL
    assert MOVE_NONE != Move(chess.E2, chess.E4)


def test_moves_compare_by_value_and_hash() -> None:
    """Two equal moves must collapse in a set (the selector relies on it)."""
    a = Move(chess.E2, chess.E4)
    b = Move(chess.E2, chess.E4)
    assert a == b
    assert len({a, b}) == 1


@pytest.mark.parametrize("piece", [chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN, chess.KING])
def test_promotion_accepts_pieces(piece: chess.PieceType) -> None:
    move = Move(chess.A7, chess.A8, MoveKind.PROMOTION, piece)
    assert move.promotion == piece


@pytest.mark.parametrize("piece", [None, chess.PAWN])
def test_promotion_rejects_other_pieces(piece: chess.PieceType | None) -> None:
    with pytest.raises(ValueError):
        Move(chess.A7, chess.A8, MoveKind.PROMOTION, piece)


def test_non_promotion_cannot_carry_piece() -> None:
    with pytest.raises(ValueError):
        Move(chess.E2, chess.E4, promotion=chess.QUEEN)


def test_to_chess_move() -> None:
    assert Move(chess.E2, chess.E4).to_chess_move() == chess.Move.from_uci("e2e4")
    assert Move(chess.A7, chess.A8, MoveKind.PROMOTION, chess.KNIGHT).to_chess_move() == chess.Move.from_uci("a7a8n")
    assert MOVE_NULL.to_chess_move() == chess.Move.null()


def test_king_promotion_converts_for_push() -> None:
    move = Move(chess.A7, chess.A8, MoveKind.PROMOTION, chess.KING)
    assert move.to_chess_move() == chess.Move.from_uci("a7a8k")
