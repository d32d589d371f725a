"""
Move codec: Move <-> coordinate notation.

Coordinate notation is origin square + destination square, plus a lowercase
promotion letter when the move promotes (g1f3, a7a8q). Two sentinels have
fixed spellings: MOVE_NONE is "(none)" and MOVE_NULL is "0000".

Castling is the only move whose text depends on a mode flag. Internally it is
always king-takes-rook. In standard mode it is printed with the conventional
king destination (e1g1, e1c1); in Chess960 mode it is printed as is (e1h1).
"""

import chess

from antichess.constants import NONE_TEXT, NULL_TEXT, PROMOTION_LETTERS
from antichess.moves import MOVE_NONE, MOVE_NULL, Move, MoveKind
from antichess.position import Position


def square_text(square: chess.Square) -> str:
    """Render a square as file letter + rank digit (e.g. g1, a7)."""
    return chr(ord("a") + chess.square_file(square)) + chr(ord("1") + chess.square_rank(square))


def encode(move: Move, chess960: bool) -> str:
    """
    Convert a Move to coordinate notation.

    Args:
        move:     The move to render. May be one of the sentinels.
        chess960: True to print castling as king-takes-rook.

    Returns:
        The move text, e.g. "e2e4", "a7a8q", "e1g1", "(none)".
    """
    if move == MOVE_NONE:
        return NONE_TEXT
    if move == MOVE_NULL:
        return NULL_TEXT

    from_square, to_square = move.from_square, move.to_square

    if move.kind is MoveKind.CASTLING and not chess960:
        file = 6 if to_square > from_square else 2  # g-file / c-file
        to_square = chess.square(file, chess.square_rank(from_square))

    text = square_text(from_square) + square_text(to_square)

    if move.kind is MoveKind.PROMOTION:
        text += PROMOTION_LETTERS[move.promotion - chess.PAWN]

    return text


def decode(text: str, position: Position) -> Move:
    """
    Find the move in `position` whose notation equals `text`.

    Legal moves are searched first. If none matches, the pseudo-legal
    captures are searched too, so a capture that the legal generator
    rejected can still be named by the opponent.

    A five-character token has its promotion letter lowercased before
    comparison, so "a7a8Q" is accepted as "a7a8q".

    Returns:
        The matching Move, or MOVE_NONE.
    """
    if len(text) == 5:
        text = text[:4] + text[4].lower()

    chess960 = position.is_chess960()

    for move in position.legal_moves():
        if encode(move, chess960) == text:
            return move

    for move in position.capture_moves():
        if encode(move, chess960) == text:
            return move

    return MOVE_NONE
