"""
Game session: the live position plus its state history.

One Snapshot is appended for every ply played. The history is never trimmed
during play; instead, every opponent move rebases the session on a fresh
position rebuilt from the current FEN with a one-element history. Earlier
plies are therefore not recoverable: there is no undo beyond the current
exchange.
"""

import logging

from antichess.codec import decode
from antichess.constants import DEFAULT_VARIANT
from antichess.moves import MOVE_NONE, Move
from antichess.position import Position, Snapshot

_log = logging.getLogger(__name__)


class GameSession:
    """
    Owner of the one Position and its Snapshot history.

    Attributes:
        position: The current position, mutated in place by each ply.
        states:   Append-only snapshot history. states[-1] records the most
                  recent ply (or is the empty root snapshot).
    """

    def __init__(
        self,
        fen: str | None = None,
        chess960: bool = False,
        variant: str = DEFAULT_VARIANT,
    ) -> None:
        self.variant = variant
        self.position: Position
        self.states: list[Snapshot]
        self.reset(fen, chess960)

    def reset(self, fen: str | None = None, chess960: bool = False) -> None:
        """Start over from `fen` (default: the variant start position) with one empty snapshot."""
        self.states = [Snapshot()]
        self.position = Position(fen, chess960=chess960, variant=self.variant)

    def apply_opponent_move(self, text: str) -> Move:
        """
        Decode and play the opponent's move.

        On success the session is first rebased onto a fresh copy of the
        current position (dropping all earlier snapshots), then the move is
        applied on top of it.

        Returns:
            The applied Move, or MOVE_NONE if `text` names no legal move and
            no capture. The session is left untouched in that case.
        """
        move = decode(text, self.position)
        if move == MOVE_NONE:
            return MOVE_NONE

        self.reset(self.position.fen(), self.position.is_chess960())
        self._push(move)
        return move

    def apply_self_move(self, move: Move) -> None:
        """
        Play a move chosen by the selector. No legality check is made.

        MOVE_NONE is not a playable move; it is logged and ignored.
        """
        if move == MOVE_NONE:
            _log.warning("no move to apply at %s", self.position.fen())
            return
        self._push(move)

    def _push(self, move: Move) -> None:
        snapshot = Snapshot()
        self.states.append(snapshot)
        self.position.apply(move, snapshot)
