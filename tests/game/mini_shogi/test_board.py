"""Tests for the slot-based board representation."""

from minishogi.game.mini_shogi.board import (
    NUM_SLOTS,
    Board,
    Captured,
    OnBoard,
    slot_index,
    slot_piece_type,
)
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.types import PieceType, Player


class TestInitialBoard:
    def test_twelve_slots_on_board(self) -> None:
        board = Board.initial()
        assert len(board.slots) == NUM_SLOTS
        assert len(list(board.pieces())) == 12

    def test_attacker_back_rank(self) -> None:
        board = Board.initial()
        expected = [PieceType.KING, PieceType.GOLD, PieceType.SILVER, PieceType.BISHOP, PieceType.ROOK]
        for col, pt in enumerate(expected, start=1):
            found = board.piece_at(Square(1, col))
            assert found is not None
            assert found[0] == pt
            assert found[1] == Player.ATTACKER

    def test_defender_back_rank(self) -> None:
        board = Board.initial()
        expected = [PieceType.ROOK, PieceType.BISHOP, PieceType.SILVER, PieceType.GOLD, PieceType.KING]
        for col, pt in enumerate(expected, start=1):
            found = board.piece_at(Square(5, col))
            assert found is not None
            assert found[0] == pt
            assert found[1] == Player.DEFENDER

    def test_pawns(self) -> None:
        board = Board.initial()
        assert board.piece_at(Square(2, 1)) == (
            PieceType.PAWN, Player.ATTACKER, slot_index(PieceType.PAWN, Player.ATTACKER)
        )
        assert board.piece_at(Square(4, 5)) == (
            PieceType.PAWN, Player.DEFENDER, slot_index(PieceType.PAWN, Player.DEFENDER)
        )

    def test_empty_square(self) -> None:
        assert Board.initial().piece_at(Square(3, 3)) is None

    def test_hands_empty(self) -> None:
        board = Board.initial()
        assert board.hand(Player.ATTACKER) == ()
        assert board.hand(Player.DEFENDER) == ()

    def test_consistent(self) -> None:
        assert Board.initial().is_consistent()


class TestSlots:
    def test_slot_index(self) -> None:
        assert slot_index(PieceType.PAWN, Player.ATTACKER) == 0
        assert slot_index(PieceType.KING, Player.DEFENDER) == 11

    def test_slot_piece_type(self) -> None:
        assert slot_piece_type(7) == PieceType.SILVER


class TestQueries:
    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Player.ATTACKER) == Square(1, 1)
        assert board.find_king(Player.DEFENDER) == Square(5, 5)

    def test_find_king_missing(self) -> None:
        board = Board.initial().with_position(
            slot_index(PieceType.KING, Player.DEFENDER), Captured(Player.ATTACKER)
        )
        assert board.find_king(Player.DEFENDER) is None

    def test_occupancy(self) -> None:
        board = Board.initial()
        assert bin(board.occupancy()).count("1") == 12
        assert bin(board.occupancy(hide=Player.DEFENDER)).count("1") == 6
        assert board.occupancy(hide=Player.DEFENDER) & 1  # 1A

    def test_captured_count_and_hand(self) -> None:
        board = Board.initial()
        board = board.with_position(slot_index(PieceType.PAWN, Player.DEFENDER), Captured(Player.ATTACKER))
        board = board.with_position(slot_index(PieceType.PAWN, Player.ATTACKER), Captured(Player.ATTACKER))
        board = board.with_position(slot_index(PieceType.GOLD, Player.DEFENDER), Captured(Player.ATTACKER))
        assert board.captured_count(PieceType.PAWN, Player.ATTACKER) == 2
        assert board.captured_count(PieceType.PAWN, Player.DEFENDER) == 0
        assert board.hand(Player.ATTACKER) == (PieceType.PAWN, PieceType.PAWN, PieceType.GOLD)


def test_with_position_is_immutable() -> None:
    board = Board.initial()
    slot = slot_index(PieceType.ROOK, Player.ATTACKER)
    moved = board.with_position(slot, OnBoard(Square(3, 5), Player.ATTACKER))
    assert board.position_of(slot) == OnBoard(Square(1, 5), Player.ATTACKER)
    assert moved.position_of(slot) == OnBoard(Square(3, 5), Player.ATTACKER)


def test_inconsistent_board_detected() -> None:
    board = Board.initial().with_position(
        slot_index(PieceType.ROOK, Player.ATTACKER), OnBoard(Square(1, 1), Player.ATTACKER)
    )
    assert not board.is_consistent()
