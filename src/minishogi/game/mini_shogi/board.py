"""Board representation for 5五将棋.

盤面のデータ構造。駒は全部で12枚（6駒種 × 2枚）しかないため、
マス目の配列ではなく「駒ごとの位置」を持つ12スロットで盤面を表す。

スロット番号: piece_type * 2 + 初期所有者
  例: スロット0 = 攻め方の歩、スロット1 = 受け方の歩、…、スロット11 = 受け方の王

各スロットは OnBoard（盤上: マス・所有者・成り）か Captured（持ち駒: 所有者）。
駒を取ると、そのスロットの所有者が取った側に変わる。
イミュータブル（frozen=True）設計で、変更メソッドは新しい Board を返す。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.types import INITIAL_LAYOUT, PieceType, Player

NUM_SLOTS = len(PieceType) * 2  # 12


@dataclass(frozen=True)
class OnBoard:
    """A piece standing on ``square``."""

    square: Square
    owner: Player
    promoted: bool = False


@dataclass(frozen=True)
class Captured:
    """A piece held in ``owner``'s hand. Held pieces are never promoted."""

    owner: Player


Position = OnBoard | Captured


def slot_index(piece_type: PieceType, home: Player) -> int:
    """Slot of the ``piece_type`` that starts the game on ``home``'s side."""
    return piece_type * 2 + home


def slot_piece_type(slot: int) -> PieceType:
    return PieceType(slot // 2)


def _initial_slots() -> tuple[Position, ...]:
    slots: list[Position] = []
    for pt in PieceType:
        for home in Player:
            row, col = INITIAL_LAYOUT[(pt, home)]
            slots.append(OnBoard(Square(row, col), home))
    return tuple(slots)


@dataclass(frozen=True)
class Board:
    """Immutable 5x5 board state: the positions of all 12 piece slots.

    slots: 12要素のタプル。slots[slot_index(pt, home)] がその駒の位置。
    """

    slots: tuple[Position, ...] = field(default_factory=_initial_slots)

    @classmethod
    def initial(cls) -> Board:
        """Return the standard starting position.

        Row 5 (top):    DEFENDER — R B S G K
        Row 4:          _ _ _ _ P
        Row 2:          P _ _ _ _
        Row 1 (bottom): ATTACKER — K G S B R
        """
        return cls()

    def position_of(self, slot: int) -> Position:
        return self.slots[slot]

    def pieces(self) -> Iterator[tuple[int, PieceType, OnBoard]]:
        """Yield (slot, piece_type, placement) for every on-board piece."""
        for slot, pos in enumerate(self.slots):
            if isinstance(pos, OnBoard):
                yield slot, slot_piece_type(slot), pos

    def piece_at(self, square: Square) -> tuple[PieceType, Player, int] | None:
        """Return (piece_type, owner, slot) of the piece on square, or None.

        12スロットの線形探索（盤が小さいので十分速い）。
        """
        for slot, pos in enumerate(self.slots):
            if isinstance(pos, OnBoard) and pos.square == square:
                return slot_piece_type(slot), pos.owner, slot
        return None

    def occupancy(self, hide: Player | None = None) -> int:
        """Project the board to a 25-bit occupancy mask.

        hide: 指定した側の駒を除外する（None なら全駒）。
        """
        bits = 0
        for pos in self.slots:
            if isinstance(pos, OnBoard) and pos.owner != hide:
                bits |= 1 << pos.square.index
        return bits

    def find_king(self, player: Player) -> Square | None:
        """Return the square of player's king, or None if it is not on board."""
        for home in Player:
            pos = self.slots[slot_index(PieceType.KING, home)]
            if isinstance(pos, OnBoard) and pos.owner == player:
                return pos.square
        return None

    def captured_count(self, piece_type: PieceType, player: Player) -> int:
        """Number of piece_type copies held in player's hand (0, 1 or 2)."""
        return sum(
            1
            for home in Player
            if self.slots[slot_index(piece_type, home)] == Captured(player)
        )

    def hand(self, player: Player) -> tuple[PieceType, ...]:
        """Piece types held by player, sorted, one entry per copy."""
        return tuple(
            slot_piece_type(slot)
            for slot, pos in enumerate(self.slots)
            if pos == Captured(player)
        )

    def with_position(self, slot: int, position: Position) -> Board:
        """Return a new Board with one slot moved.

        スロット1つの位置を変更した新しい Board を返す（元の Board は不変）。
        """
        slots = list(self.slots)
        slots[slot] = position
        return Board(slots=tuple(slots))

    def is_consistent(self) -> bool:
        """True iff no two on-board slots share a square."""
        squares = [pos.square for pos in self.slots if isinstance(pos, OnBoard)]
        return len(squares) == len(set(squares))
