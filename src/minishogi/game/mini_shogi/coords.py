"""Coordinate system for 5五将棋.

Two representations of a square are used:

* ``Square(row, col)``: both 1..5 in the Attacker-origin frame. This is
  what the engine works with; promotion and ownership are kept elsewhere.
* Packed one-byte codes: high nibble row, low nibble column. A nibble is
  either a digit (1..5) or an alpha value (A..E = 10..14, digit + 9).
  Attacker pieces sit on a digit row, Defender pieces on an alpha row, and a
  promoted piece has its column nibble flipped into the other range. The
  codes are the wire/notation form (``"1E"`` is the hex export of 0x1E).

Sentinels 0x00 and 0xFF stand for "held by Attacker" / "held by Defender".

Flat index layout (row 5 at the top)::

    20 21 22 23 24
    15 16 17 18 19
    10 11 12 13 14
    05 06 07 08 09
    00 01 02 03 04
"""

from __future__ import annotations

from typing import Final, NamedTuple

from minishogi.game.mini_shogi.types import COLS, NUM_SQUARES, ROWS, Player

CAPTURED_BY_ATTACKER: Final[int] = 0x00
CAPTURED_BY_DEFENDER: Final[int] = 0xFF

_ALPHA_OFFSET = 0x9
_SPLIT = 0x7  # nibbles below are digits, above are alphas


class Square(NamedTuple):
    """A board cell in the Attacker-origin frame (row, col both 1..5)."""

    row: int
    col: int

    @property
    def index(self) -> int:
        return (self.row - 1) * COLS + (self.col - 1)

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index // COLS + 1, index % COLS + 1)

    def offset(self, dr: int, dc: int) -> Square | None:
        """Return the square (dr, dc) away, or None when it leaves the board."""
        row, col = self.row + dr, self.col + dc
        if 1 <= row <= ROWS and 1 <= col <= COLS:
            return Square(row, col)
        return None


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(NUM_SQUARES))


def _nibble_to_digit(n: int) -> int:
    return n if n < _SPLIT else n - _ALPHA_OFFSET


def _nibble_to_alpha(n: int) -> int:
    return n if n > _SPLIT else n + _ALPHA_OFFSET


def _flip_nibble(n: int) -> int:
    return n + _ALPHA_OFFSET if n < _SPLIT else n - _ALPHA_OFFSET


def to_digit_form(code: int) -> int:
    """Rewrite both nibbles in digit form (0xEC -> 0x53)."""
    return _nibble_to_digit(code >> 4) << 4 | _nibble_to_digit(code & 0xF)


def to_alpha_form(code: int) -> int:
    """Rewrite both nibbles in alpha form (0x53 -> 0xEC)."""
    return _nibble_to_alpha(code >> 4) << 4 | _nibble_to_alpha(code & 0xF)


def toggle_promotion(code: int) -> int:
    """Flip the column nibble between digit and alpha, keeping the row.

    成り ⇔ 不成 の切り替え。2回適用すると元に戻る。
    """
    return (code & 0xF0) | _flip_nibble(code & 0xF)


def is_promoted_form(code: int) -> bool:
    """True iff exactly one of the two nibbles is in digit range."""
    return ((code >> 4) < _SPLIT) != ((code & 0xF) < _SPLIT)


def is_on_board(code: int) -> bool:
    digit = to_digit_form(code)
    row, col = digit >> 4, digit & 0xF
    return 1 <= row <= ROWS and 1 <= col <= COLS


def owner_of(code: int) -> Player:
    """Owner encoded by the row nibble (alpha rows and 0xFF belong to Defender)."""
    return Player.DEFENDER if code > 0x77 else Player.ATTACKER


def to_index(code: int) -> int:
    """Flat index 0..24 of an on-board code. Meaningless for off-board codes."""
    digit = to_digit_form(code)
    return (digit >> 4) * COLS + (digit & 0xF) - (COLS + 1)


def from_index(index: int, owner: Player) -> int:
    """Unpromoted code of ``owner`` for a flat index (inverse of to_index)."""
    code = (index // COLS + 1) << 4 | (index % COLS + 1)
    return code if owner == Player.ATTACKER else to_alpha_form(code)


def captured_code(owner: Player) -> int:
    return CAPTURED_BY_ATTACKER if owner == Player.ATTACKER else CAPTURED_BY_DEFENDER


def encode(square: Square, owner: Player, promoted: bool = False) -> int:
    """Pack an explicit (square, owner, promoted) triple into a code."""
    code = from_index(square.index, owner)
    return toggle_promotion(code) if promoted else code


def decode(code: int) -> tuple[Square, Player, bool]:
    """Unpack an on-board code into (square, owner, promoted).

    Raises ValueError for sentinels and out-of-range nibbles.
    """
    if not is_on_board(code):
        raise ValueError(f"Not an on-board code: 0x{code:02X}")
    return Square.from_index(to_index(code)), owner_of(code), is_promoted_form(code)
