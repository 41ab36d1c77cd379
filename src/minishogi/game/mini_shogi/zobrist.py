"""Zobrist hashing for 5五将棋 positions.

A position's hash is the XOR of one random key per fact that holds in it:

* the side to move,
* for each piece copy on the board: (owner, piece type, promoted, square),
* for each piece type held in a hand: (owner, piece type, "one in hand") or,
  when one side holds both copies, a single (owner, piece type, "two in
  hand") key. Two "one in hand" keys would cancel out, hence the extra bucket.

The table is built once per session and passed to every hashing call.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Final

from minishogi.game.mini_shogi.board import Board, Captured, OnBoard, slot_index
from minishogi.game.mini_shogi.moves import Drop, Move
from minishogi.game.mini_shogi.types import NUM_SQUARES, PieceType, Player

ONE_IN_HAND: Final[int] = NUM_SQUARES       # bucket 25
TWO_IN_HAND: Final[int] = NUM_SQUARES + 1   # bucket 26
NUM_BUCKETS: Final[int] = NUM_SQUARES + 2

_NUM_PIECE_KEYS = len(Player) * len(PieceType) * 2 * NUM_BUCKETS


@dataclass(frozen=True)
class ZobristTable:
    """Immutable random key table.

    side_keys: one base key per side to move.
    piece_keys: flat tuple indexed by (owner, piece type, promoted, bucket).
    """

    side_keys: tuple[int, int]
    piece_keys: tuple[int, ...]

    @classmethod
    def generate(cls, seed: int | None = None) -> ZobristTable:
        """Draw every key once. The same seed gives the same table."""
        rng = random.Random(seed)
        side_keys = (rng.getrandbits(64), rng.getrandbits(64))
        piece_keys = tuple(rng.getrandbits(64) for _ in range(_NUM_PIECE_KEYS))
        return cls(side_keys=side_keys, piece_keys=piece_keys)

    def side_key(self, player: Player) -> int:
        return self.side_keys[player]

    def piece_key(
        self,
        piece_type: PieceType,
        owner: Player,
        promoted: bool,
        bucket: int,
    ) -> int:
        row = (owner * len(PieceType) + piece_type) * 2 + int(promoted)
        return self.piece_keys[row * NUM_BUCKETS + bucket]

    @property
    def turn_toggle(self) -> int:
        """XOR of both side keys: flips the side to move of a hash."""
        return self.side_keys[0] ^ self.side_keys[1]


def hash_board(board: Board, side_to_move: Player, table: ZobristTable) -> int:
    """Hash a position from scratch."""
    h = table.side_key(side_to_move)
    for pt in PieceType:
        positions = [board.slots[slot_index(pt, home)] for home in Player]
        first, second = positions
        if isinstance(first, Captured) and first == second:
            h ^= table.piece_key(pt, first.owner, False, TWO_IN_HAND)
            continue
        for pos in positions:
            if isinstance(pos, Captured):
                h ^= table.piece_key(pt, pos.owner, False, ONE_IN_HAND)
            else:
                h ^= table.piece_key(pt, pos.owner, pos.promoted, pos.square.index)
    return h


def update_hash(board: Board, h: int, move: Move, table: ZobristTable) -> int:
    """Return the hash after move, given the hash of board (before move).

    Equal to ``hash_board(apply_move(board, move), side.opponent, table)``
    when h is ``hash_board(board, side, table)``, without touching the
    unchanged pieces.
    """
    player = move.player
    if isinstance(move, Drop):
        pt = move.piece_type
        # 2枚 → 1枚: TWO を外して ONE を付ける / 1枚 → 0枚: ONE を外す
        if board.captured_count(pt, player) == 2:
            h ^= table.piece_key(pt, player, False, TWO_IN_HAND)
        h ^= table.piece_key(pt, player, False, ONE_IN_HAND)
        h ^= table.piece_key(pt, player, False, move.to.index)
        return h ^ table.turn_toggle

    target = board.piece_at(move.to)
    if target is not None:
        captured_type, captured_owner, captured_slot = target
        captured = board.slots[captured_slot]
        assert isinstance(captured, OnBoard)
        h ^= table.piece_key(captured_type, captured_owner, captured.promoted, move.to.index)
        # 0枚 → 1枚: ONE を付ける / 1枚 → 2枚: ONE を外して TWO を付ける
        if board.captured_count(captured_type, player) == 1:
            h ^= table.piece_key(captured_type, player, False, TWO_IN_HAND)
        h ^= table.piece_key(captured_type, player, False, ONE_IN_HAND)

    mover = board.piece_at(move.origin)
    assert mover is not None, f"No piece at {move.origin}"
    piece_type, _, slot = mover
    origin = board.slots[slot]
    assert isinstance(origin, OnBoard)
    h ^= table.piece_key(piece_type, player, origin.promoted, move.origin.index)
    h ^= table.piece_key(
        piece_type, player, origin.promoted or move.promote, move.to.index
    )
    return h ^ table.turn_toggle
