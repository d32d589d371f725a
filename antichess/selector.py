"""
Reply selection: capture first, otherwise anything, chosen at random.

This is the whole "search" of the engine. There is no evaluation: the side
to move takes a capture whenever one is available and otherwise plays a
uniformly random legal move.

The random generator is passed in by the caller. The function keeps no
state of its own, so a seeded random.Random makes it fully reproducible.
"""

import logging
import random

from antichess.moves import MOVE_NONE, Move
from antichess.position import Position

_log = logging.getLogger(__name__)


def select_move(position: Position, rng: random.Random) -> Move:
    """
    Pick the engine's reply in the given position.

    Algorithm:
        1. Generate pseudo-legal captures and legal moves.
        2. Candidates are the captures that are also legal.
        3. No legal capture but some raw capture exists: return the first
           raw capture unchecked. The capture generator ignores pins and
           checks, so this move may not be legal.
        4. No capture at all: candidates are all legal moves.
        5. Pick a candidate uniformly at random, or MOVE_NONE if there are
           none (checkmate, stalemate, or a finished variant game).

    Args:
        position: Position to move in. Not modified.
        rng:      Random source used for the final choice.

    Returns:
        The chosen Move, or MOVE_NONE.
    """
    captures = position.capture_moves()
    legal = position.legal_moves()

    legal_set = set(legal)
    candidates = [m for m in captures if m in legal_set]

    if not candidates and captures:
        _log.warning("no legal capture among %d raw captures, playing the first one", len(captures))
        return captures[0]

    if not candidates:
        candidates = legal

    if not candidates:
        return MOVE_NONE

    return rng.choice(candidates)
