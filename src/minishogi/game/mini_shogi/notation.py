"""Move notation for 5五将棋.

Text form (棋譜表記). A square is ``<row digit><column letter>``, e.g. "1E"
for row 1, column 5, the hex export of the packed code 0x1E.

  "2A3A"   step from 2A to 3A
  "2A3AN"  step with promotion (成り)
  "3AFU"   drop a pawn on 3A (FU HI KK GI KI = 歩 飛 角 銀 金)

Packed form: a 16-bit value. High byte is the piece type for a drop (0..4)
or the origin code for a step; low byte is the target code. Codes are in the
mover's frame with promotion folded into the column nibble (see coords), so
a step promotes iff the two bytes differ in promotion form.
"""

from __future__ import annotations

from minishogi.game.mini_shogi import coords
from minishogi.game.mini_shogi.board import Board, OnBoard
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.moves import Drop, Move, Step
from minishogi.game.mini_shogi.types import PIECE_CODES, PieceType, Player

PROMOTION_MARKER = "N"

_CODE_TO_PIECE: dict[str, PieceType] = {
    code: pt for pt, code in PIECE_CODES.items() if pt != PieceType.KING
}


class NotationError(ValueError):
    """Text or packed value that does not describe a well-formed move."""


def square_to_str(square: Square) -> str:
    """Square(1, 5) -> "1E"."""
    return f"{coords.toggle_promotion(coords.encode(square, Player.ATTACKER)):02X}"


def parse_square(token: str) -> Square:
    """Parse a two-character square token ("1E", or the digit form "15")."""
    if len(token) != 2 or not token.isalnum():
        raise NotationError(f"Bad square: {token!r}")
    try:
        code = int(token, 16)
    except ValueError as exc:
        raise NotationError(f"Bad square: {token!r}") from exc
    if not coords.is_on_board(code):
        raise NotationError(f"Square off the board: {token!r}")
    square, _, _ = coords.decode(coords.to_digit_form(code))
    return square


def parse_move(text: str, player: Player) -> Move:
    """Parse a move typed by player.

    Raises NotationError for anything that is not a well-formed move.
    Legality is not checked here.
    """
    text = text.strip().upper()

    if len(text) == 5:
        if text[4] != PROMOTION_MARKER:
            raise NotationError(f"Bad promotion marker: {text!r}")
        return Step(parse_square(text[0:2]), parse_square(text[2:4]), player, promote=True)

    if len(text) != 4:
        raise NotationError(f"Move must be 4 or 5 characters: {text!r}")

    # 4文字目が列文字（A〜E）より後ろなら駒コード → 打ち手
    if text[3] > "E":
        piece_type = _CODE_TO_PIECE.get(text[2:4])
        if piece_type is None:
            raise NotationError(f"Unknown piece code: {text[2:4]!r}")
        return Drop(piece_type, parse_square(text[0:2]), player)

    return Step(parse_square(text[0:2]), parse_square(text[2:4]), player)


def format_move(move: Move) -> str:
    """Format a move in text notation."""
    if isinstance(move, Drop):
        return f"{square_to_str(move.to)}{PIECE_CODES[move.piece_type]}"
    suffix = PROMOTION_MARKER if move.promote else ""
    return f"{square_to_str(move.origin)}{square_to_str(move.to)}{suffix}"


def pack_move(board: Board, move: Move) -> int:
    """Pack a move into 16 bits. board is the position before the move."""
    if isinstance(move, Drop):
        return move.piece_type << 8 | coords.encode(move.to, move.player)

    found = board.piece_at(move.origin)
    if found is None:
        raise NotationError(f"No piece at {square_to_str(move.origin)}")
    origin = board.slots[found[2]]
    promoted = isinstance(origin, OnBoard) and origin.promoted
    origin_code = coords.encode(move.origin, move.player, promoted)
    to_code = coords.encode(move.to, move.player, promoted or move.promote)
    return origin_code << 8 | to_code


def unpack_move(packed: int) -> Move:
    """Inverse of pack_move."""
    high, low = packed >> 8 & 0xFF, packed & 0xFF
    try:
        to, player, promoted_to = coords.decode(low)
        if high < PieceType.KING:
            return Drop(PieceType(high), to, player)
        origin, _, promoted_from = coords.decode(high)
    except ValueError as exc:
        raise NotationError(f"Bad packed move: 0x{packed:04X}") from exc
    return Step(origin, to, player, promote=promoted_from != promoted_to)
