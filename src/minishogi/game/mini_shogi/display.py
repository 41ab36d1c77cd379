"""Terminal display for 5五将棋 boards."""

from __future__ import annotations

from minishogi.game.mini_shogi.board import Board, OnBoard
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.types import COLS, ROWS, PieceType, Player

# 駒の表示文字: 大文字=攻め方、小文字=受け方、"+"=成り駒
PIECE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.SILVER: "S",
    PieceType.GOLD: "G",
    PieceType.KING: "K",
}


def piece_to_char(piece_type: PieceType, owner: Player, promoted: bool = False) -> str:
    char = PIECE_CHARS[piece_type]
    if owner == Player.DEFENDER:
        char = char.lower()
    return f"+{char}" if promoted else f" {char}"


def hand_to_str(hand: tuple[PieceType, ...]) -> str:
    if not hand:
        return "-"
    return " ".join(PIECE_CHARS[pt] for pt in hand)


def board_to_str(board: Board) -> str:
    """Convert a board to a human-readable string.

    Example output (starting position):
        DEFENDER hand: -
           A B C D E
        5  r b s g k
        4  . . . . p
        3  . . . . .
        2  P . . . .
        1  K G S B R
        ATTACKER hand: -
    """
    lines: list[str] = []
    lines.append(f"DEFENDER hand: {hand_to_str(board.hand(Player.DEFENDER))}")
    lines.append("  " + "".join(f" {chr(ord('A') + c)}" for c in range(COLS)))

    for row in range(ROWS, 0, -1):
        cells: list[str] = []
        for col in range(1, COLS + 1):
            found = board.piece_at(Square(row, col))
            if found is None:
                cells.append(" .")
                continue
            piece_type, owner, slot = found
            placement = board.slots[slot]
            promoted = isinstance(placement, OnBoard) and placement.promoted
            cells.append(piece_to_char(piece_type, owner, promoted))
        lines.append(f"{row} {''.join(cells)}")

    lines.append(f"ATTACKER hand: {hand_to_str(board.hand(Player.ATTACKER))}")
    return "\n".join(lines)
