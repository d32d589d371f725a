"""FEN strings shared across the test suite."""

# White can castle both ways; nothing else special.
CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
# White pawn on a7 about to promote.
PROMOTION_FEN = "8/P7/8/8/8/8/8/k6K w - - 0 1"
# White can take d6 en passant.
EN_PASSANT_FEN = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
# exd5 is the only capture, and it is legal.
ONE_CAPTURE_FEN = "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1"
# The knight on e2 is pinned by the rook on e8; Nxc3 is pseudo-legal only.
PINNED_CAPTURE_FEN = "k3r3/8/8/8/8/2p5/4N3/4K3 w - - 0 1"
# Fool's mate: white is checkmated and has no captures.
MATED_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
