"""Tests for mini shogi types and constants."""

from minishogi.game.mini_shogi.types import (
    HAND_PIECE_TYPES,
    INITIAL_LAYOUT,
    PIECE_CODES,
    PROMOTABLE,
    STEP_MOVES,
    PieceType,
    Player,
)


class TestPlayer:
    def test_opponent(self) -> None:
        assert Player.ATTACKER.opponent == Player.DEFENDER
        assert Player.DEFENDER.opponent == Player.ATTACKER

    def test_values(self) -> None:
        assert Player.ATTACKER == 0
        assert Player.DEFENDER == 1

    def test_forward(self) -> None:
        assert Player.ATTACKER.forward == 1
        assert Player.DEFENDER.forward == -1

    def test_far_rank(self) -> None:
        assert Player.ATTACKER.far_rank == 5
        assert Player.DEFENDER.far_rank == 1


class TestPieceType:
    def test_count(self) -> None:
        assert len(PieceType) == 6

    def test_promotable(self) -> None:
        assert PieceType.GOLD not in PROMOTABLE
        assert PieceType.KING not in PROMOTABLE
        assert len(PROMOTABLE) == 4

    def test_king_not_in_hand(self) -> None:
        assert PieceType.KING not in HAND_PIECE_TYPES
        assert len(HAND_PIECE_TYPES) == 5

    def test_piece_codes_unique(self) -> None:
        assert len(set(PIECE_CODES.values())) == len(PieceType)


def test_sliders_have_no_step_moves() -> None:
    assert PieceType.ROOK not in STEP_MOVES
    assert PieceType.BISHOP not in STEP_MOVES


def test_initial_layout_squares_distinct() -> None:
    squares = list(INITIAL_LAYOUT.values())
    assert len(squares) == 12
    assert len(set(squares)) == 12
