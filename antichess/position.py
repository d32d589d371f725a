"""
Position facade over python-chess.

The rest of the engine never touches chess.Board directly. It sees a single
mutable object that can be built from a FEN, serialized back to one, asked
for its legal moves and its raw captures, and advanced one ply at a time.
Keeping python-chess behind this seam means the codec and the selector work
purely in terms of antichess.moves.Move.

Two move generators are exposed on purpose:
    legal_moves()   — strictly legal moves under the board's rules.
    capture_moves() — pseudo-legal captures. These ignore pins and checks
                      (and any variant restriction that only the legal
                      generator knows about), so they can over-generate.
The selector relies on the difference between the two.
"""

import logging
from dataclasses import dataclass

import chess
import chess.variant

from antichess.constants import DEFAULT_VARIANT
from antichess.moves import MOVE_NONE, Move, MoveKind

_log = logging.getLogger(__name__)


@dataclass
class Snapshot:
    """
    Per-ply state record, filled in by Position.apply().

    Attributes:
        fen:      Position before the move was applied. None for the root
                  snapshot of a freshly built history.
        move:     The move that was applied.
        captured: Piece type removed by the move, if any.
    """

    fen: str | None = None
    move: Move | None = None
    captured: chess.PieceType | None = None


def board_class(variant: str) -> type[chess.Board]:
    """
    Resolve a variant name ("chess", "antichess", "atomic", ...) to a board class.

    Variants with piece drops are rejected: a Move has no way to express a
    drop.

    Raises:
        ValueError: If python-chess does not know the variant, or it has drops.
    """
    cls = chess.variant.find_variant(variant)
    if issubclass(cls, chess.variant.CrazyhouseBoard):
        raise ValueError(f"variant with drops is not supported: {variant}")
    return cls


class Position:
    """
    The single live game position.

    Args:
        fen:      Position to set up. Defaults to the variant's start position.
        chess960: Relaxed castling mode: castling is encoded and accepted as
                  the king moving onto its own rook.
        variant:  python-chess variant name.

    Raises:
        ValueError: Malformed FEN, unknown variant, or a variant with drops.
    """

    def __init__(
        self,
        fen: str | None = None,
        chess960: bool = False,
        variant: str = DEFAULT_VARIANT,
    ) -> None:
        cls = board_class(variant)
        self.variant = variant
        self._board: chess.Board = cls(fen or cls.starting_fen, chess960=chess960)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def fen(self) -> str:
        return self._board.fen()

    def is_chess960(self) -> bool:
        return self._board.chess960

    @property
    def turn(self) -> chess.Color:
        return self._board.turn

    @property
    def ply(self) -> int:
        return self._board.ply()

    def legal_moves(self) -> list[Move]:
        return [self._from_chess_move(m) for m in self._board.legal_moves]

    def capture_moves(self) -> list[Move]:
        return [self._from_chess_move(m) for m in self._board.generate_pseudo_legal_captures()]

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def apply(self, move: Move, snapshot: Snapshot) -> None:
        """
        Play a move in place and record what it did in the given snapshot.

        No legality check is made: the caller decides what is trusted.
        MOVE_NONE must never reach this method.
        """
        if move == MOVE_NONE:
            raise ValueError("cannot apply MOVE_NONE")

        chess_move = move.to_chess_move()
        snapshot.fen = self._board.fen()
        snapshot.move = move
        if move.kind is MoveKind.EN_PASSANT:
            snapshot.captured = chess.PAWN
        elif move.kind is not MoveKind.CASTLING and chess_move:
            snapshot.captured = self._board.piece_type_at(move.to_square)
        self._board.push(chess_move)
        _log.debug("applied %s, now %s", chess_move.uci(), self._board.fen())

    # -----------------------------------------------------------------------
    # Translation
    # -----------------------------------------------------------------------

    def _from_chess_move(self, move: chess.Move) -> Move:
        """
        Classify a python-chess move and normalise castling.

        python-chess hands out standard castling as e1g1/e1c1 when the board
        is not in Chess960 mode. Internally castling is always king-takes-rook,
        so the destination is moved onto the rook's corner square.
        """
        board = self._board
        if move.drop is not None:
            raise ValueError(f"drop moves are not supported: {move.uci()}")
        if board.is_castling(move):
            to_square = move.to_square
            if board.color_at(to_square) != board.turn:
                king_side = chess.square_file(to_square) > chess.square_file(move.from_square)
                to_square = chess.square(7 if king_side else 0, chess.square_rank(move.from_square))
            return Move(move.from_square, to_square, MoveKind.CASTLING)
        if move.promotion is not None:
            return Move(move.from_square, move.to_square, MoveKind.PROMOTION, move.promotion)
        if board.is_en_passant(move):
            return Move(move.from_square, move.to_square, MoveKind.EN_PASSANT)
        return Move(move.from_square, move.to_square)
