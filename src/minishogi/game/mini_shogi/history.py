"""Game history: one position hash per half-move played.

past[k] is the hash of the position after half-move k, keyed by the side to
move in that position. The start position itself is not recorded.
turn == len(past), and turn % 2 is the side to move (0 = Attacker).
"""

from __future__ import annotations

from dataclasses import dataclass

from minishogi.game.mini_shogi.board import Board
from minishogi.game.mini_shogi.types import Player
from minishogi.game.mini_shogi.zobrist import ZobristTable, hash_board


@dataclass(frozen=True)
class History:
    """Immutable, append-only sequence of position hashes."""

    past: tuple[int, ...] = ()

    @property
    def turn(self) -> int:
        return len(self.past)

    @property
    def side_to_move(self) -> Player:
        return Player(self.turn % 2)

    @property
    def last(self) -> int | None:
        return self.past[-1] if self.past else None

    def push(self, h: int) -> History:
        """Return a new History with h appended (the turn advances by one)."""
        return History(past=self.past + (h,))

    def count(self, h: int) -> int:
        return self.past.count(h)


def advance_history(
    history: History,
    board_after: Board,
    side_just_moved: Player,
    table: ZobristTable,
) -> History:
    """Append the hash of board_after, keyed by the next side to move."""
    return history.push(hash_board(board_after, side_just_moved.opponent, table))
