"""25-bit bitboards and movement masks for 5五将棋.

Bit ``i`` is the square with flat index ``i`` (see coords). Bitboards are
derived projections of a Board and are never mutated on their own.

Step pieces use a pattern centred on index 12 (square 3C), shifted to the
piece's square and masked with a per-column guard so that bits shifted past
the left or right edge do not wrap into the neighbouring row. Sliding pieces
are resolved by ray casting.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from minishogi.game.mini_shogi.board import Board, OnBoard
from minishogi.game.mini_shogi.coords import ALL_SQUARES, Square
from minishogi.game.mini_shogi.types import (
    COLS,
    GOLD_STEPS,
    NUM_SQUARES,
    ROWS,
    SLIDE_MOVES,
    STEP_MOVES,
    PieceType,
    Player,
)

FULL_MASK: Final[int] = (1 << NUM_SQUARES) - 1

_CENTER = Square(3, 3)

# File (column) and rank (row) masks, indexed by 1-based col / row
FILE_MASKS: dict[int, int] = {
    col: sum(1 << sq.index for sq in ALL_SQUARES if sq.col == col)
    for col in range(1, COLS + 1)
}
RANK_MASKS: dict[int, int] = {
    row: sum(1 << sq.index for sq in ALL_SQUARES if sq.row == row)
    for row in range(1, ROWS + 1)
}


def _column_guard(col_shift: int) -> int:
    """Columns a centred pattern can legitimately reach after col_shift."""
    return sum(
        1 << sq.index for sq in ALL_SQUARES if 0 <= (sq.col - 1) - col_shift < COLS
    )


# rshift -2..2 → 11100 11110 11111 01111 00111 (columns A..E)
COLUMN_GUARDS: dict[int, int] = {shift: _column_guard(shift) for shift in range(-2, 3)}


def _centred_pattern(deltas: list[tuple[int, int]], owner: Player) -> int:
    bits = 0
    for dr, dc in deltas:
        # 受け方は行方向を反転
        target = _CENTER.offset(dr * owner.forward, dc)
        assert target is not None
        bits |= 1 << target.index
    return bits


STEP_PATTERNS: dict[tuple[PieceType, Player], int] = {
    (pt, owner): _centred_pattern(deltas, owner)
    for pt, deltas in STEP_MOVES.items()
    for owner in Player
}

_PROMOTED_GOLD_PATTERNS: dict[Player, int] = {
    owner: _centred_pattern(GOLD_STEPS, owner) for owner in Player
}


def iter_indices(bits: int) -> Iterator[int]:
    """Yield the indices of set bits, lowest first."""
    while bits:
        low = bits & -bits
        yield low.bit_length() - 1
        bits ^= low


def step_mask(
    square: Square,
    piece_type: PieceType,
    owner: Player,
    promoted: bool = False,
) -> int:
    """Squares a step piece on square attacks, ignoring occupancy.

    Not defined for Rook and Bishop (their unpromoted moves are rays).
    """
    if promoted and piece_type in (PieceType.PAWN, PieceType.SILVER):
        pattern = _PROMOTED_GOLD_PATTERNS[owner]  # と・成銀は金と同じ動き
    else:
        pattern = STEP_PATTERNS[(piece_type, owner)]

    col_shift = square.col - _CENTER.col
    shift = (square.row - _CENTER.row) * COLS + col_shift
    mask = pattern << shift if shift >= 0 else pattern >> -shift
    return mask & COLUMN_GUARDS[col_shift] & FULL_MASK


def ray_cast(
    square: Square,
    direction: tuple[int, int],
    own: int,
    occupied: int,
) -> int:
    """Walk from square one step at a time in direction.

    Empty squares are included and the walk continues, an enemy piece is
    included and stops the walk, a friendly piece or the edge stops it.
    """
    bits = 0
    dr, dc = direction
    target = square.offset(dr, dc)
    while target is not None:
        bit = 1 << target.index
        if own & bit:
            break
        bits |= bit
        if occupied & bit:
            break  # Captured, stop sliding
        target = target.offset(dr, dc)
    return bits


def movable_squares(board: Board, placement: OnBoard, piece_type: PieceType) -> int:
    """Bitboard of squares the piece at placement can move to (captures included)."""
    owner = placement.owner
    own = board.occupancy(hide=owner.opponent)

    if piece_type in SLIDE_MOVES:
        occupied = board.occupancy()
        bits = 0
        for direction in SLIDE_MOVES[piece_type]:
            bits |= ray_cast(placement.square, direction, own, occupied)
        if placement.promoted:
            # 龍・馬: 王の1マス移動を追加
            bits |= step_mask(placement.square, PieceType.KING, owner) & ~own
        return bits

    return step_mask(placement.square, piece_type, owner, placement.promoted) & ~own
