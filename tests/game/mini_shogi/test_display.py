"""Tests for board display."""

from minishogi.game.mini_shogi.board import Board, Captured, OnBoard, slot_index
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.display import board_to_str, hand_to_str, piece_to_char
from minishogi.game.mini_shogi.types import PieceType, Player


def test_attacker_piece_uppercase() -> None:
    assert piece_to_char(PieceType.KING, Player.ATTACKER) == " K"


def test_defender_piece_lowercase() -> None:
    assert piece_to_char(PieceType.KING, Player.DEFENDER) == " k"


def test_promoted_marker() -> None:
    assert piece_to_char(PieceType.PAWN, Player.ATTACKER, promoted=True) == "+P"
    assert piece_to_char(PieceType.ROOK, Player.DEFENDER, promoted=True) == "+r"


def test_all_piece_chars() -> None:
    chars = {piece_to_char(pt, Player.ATTACKER).strip() for pt in PieceType}
    assert chars == {"P", "R", "B", "S", "G", "K"}


def test_initial_board_display() -> None:
    lines = board_to_str(Board.initial()).split("\n")

    assert lines[0] == "DEFENDER hand: -"
    assert lines[1] == "   A B C D E"
    assert lines[2] == "5  r b s g k"
    assert lines[3] == "4  . . . . p"
    assert lines[4] == "3  . . . . ."
    assert lines[5] == "2  P . . . ."
    assert lines[6] == "1  K G S B R"
    assert lines[7] == "ATTACKER hand: -"


def test_hand_to_str() -> None:
    assert hand_to_str(()) == "-"
    assert hand_to_str((PieceType.PAWN, PieceType.GOLD)) == "P G"


def test_board_with_hand_and_promotion() -> None:
    board = Board.initial()
    board = board.with_position(slot_index(PieceType.PAWN, Player.DEFENDER), Captured(Player.ATTACKER))
    board = board.with_position(
        slot_index(PieceType.PAWN, Player.ATTACKER), OnBoard(Square(5, 3), Player.ATTACKER, promoted=True)
    )
    board = board.with_position(slot_index(PieceType.SILVER, Player.DEFENDER), Captured(Player.ATTACKER))
    lines = board_to_str(board).split("\n")
    assert lines[2] == "5  r b+P g k"
    assert lines[7] == "ATTACKER hand: P S"
