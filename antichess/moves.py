"""
Move data model.

A Move is a plain (from, to, kind, promotion) record. It carries its own
kind so the codec can render it without consulting a board. Castling is
always stored as "king takes its own rook"; the codec decides at render
time whether to show the rook square or the conventional king destination.
"""

import enum
from dataclasses import dataclass

import chess

# Kings only appear in variants where the king is an ordinary piece (antichess).
PROMOTION_PIECES: frozenset[int] = frozenset(
    {chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN, chess.KING}
)


class MoveKind(enum.Enum):
    NORMAL = "normal"
    PROMOTION = "promotion"
    EN_PASSANT = "en_passant"
    CASTLING = "castling"


@dataclass(frozen=True)
class Move:
    """
    One move in the engine's internal representation.

    Attributes:
        from_square: Origin square (python-chess square index, 0..63).
        to_square:   Destination square. For castling this is the square of
                     the castling rook, never the king's landing square.
        kind:        What sort of move this is.
        promotion:   Piece type promoted to. Set exactly when kind is
                     PROMOTION, and then one of knight/bishop/rook/queen,
                     or king where the variant allows it.

    Raises:
        ValueError: If the promotion field disagrees with the kind.
    """

    from_square: chess.Square
    to_square: chess.Square
    kind: MoveKind = MoveKind.NORMAL
    promotion: chess.PieceType | None = None

    def __post_init__(self) -> None:
        if self.kind is MoveKind.PROMOTION:
            if self.promotion not in PROMOTION_PIECES:
                raise ValueError(f"invalid promotion piece: {self.promotion!r}")
        elif self.promotion is not None:
            raise ValueError(f"{self.kind.value} move cannot carry a promotion piece")

    def to_chess_move(self) -> chess.Move:
        """Convert to a python-chess move suitable for Board.push()."""
        if self == MOVE_NULL:
            return chess.Move.null()
        return chess.Move(self.from_square, self.to_square, promotion=self.promotion)


# Sentinels. A real move never has from == to, so these cannot collide with
# anything produced by move generation.
MOVE_NONE = Move(chess.A1, chess.A1)
MOVE_NULL = Move(chess.B1, chess.B1)
