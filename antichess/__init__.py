"""
Antichess reply engine package.

A minimal move-and-reply front-end: the opponent sends a move in coordinate
notation, the engine answers with one move chosen by a capture-first random
policy. Board representation and move generation come from python-chess.

Modules:
    constants — Protocol literals, notation tables, environment variable names
    moves     — Move data model and the MOVE_NONE / MOVE_NULL sentinels
    position  — Facade over a python-chess board (apply, serialize, generate)
    codec     — Move <-> coordinate text conversion
    selector  — Capture-preferring random move selection
    session   — The live position and its per-ply state history
    config    — Engine options (pydantic), environment loading, RNG factory
"""
