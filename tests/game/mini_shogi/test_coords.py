"""Tests for squares and packed square codes."""

import pytest

from minishogi.game.mini_shogi import coords
from minishogi.game.mini_shogi.coords import ALL_SQUARES, Square
from minishogi.game.mini_shogi.types import Player


class TestSquare:
    def test_index_corners(self) -> None:
        assert Square(1, 1).index == 0
        assert Square(1, 5).index == 4
        assert Square(5, 5).index == 24

    def test_from_index_roundtrip(self) -> None:
        for i in range(25):
            assert Square.from_index(i).index == i

    def test_offset_off_board(self) -> None:
        assert Square(1, 1).offset(-1, 0) is None
        assert Square(5, 5).offset(0, 1) is None
        assert Square(3, 3).offset(1, -1) == Square(4, 2)

    def test_all_squares(self) -> None:
        assert len(ALL_SQUARES) == 25


class TestCodes:
    def test_attacker_digit_form(self) -> None:
        assert coords.encode(Square(1, 5), Player.ATTACKER) == 0x15

    def test_defender_alpha_form_same_cell(self) -> None:
        """The Defender form is the same physical cell, not a mirror."""
        assert coords.encode(Square(1, 5), Player.DEFENDER) == 0xAE

    def test_form_conversions(self) -> None:
        assert coords.to_alpha_form(0x53) == 0xEC
        assert coords.to_digit_form(0xEC) == 0x53

    def test_promotion_flips_column(self) -> None:
        assert coords.toggle_promotion(0x15) == 0x1E
        assert coords.is_promoted_form(0x1E)
        assert not coords.is_promoted_form(0x15)
        assert coords.is_promoted_form(0xE1)
        assert not coords.is_promoted_form(0xEA)

    def test_toggle_twice_is_identity(self) -> None:
        for sq in ALL_SQUARES:
            for owner in Player:
                code = coords.encode(sq, owner)
                assert coords.toggle_promotion(coords.toggle_promotion(code)) == code

    def test_sentinels(self) -> None:
        assert coords.captured_code(Player.ATTACKER) == 0x00
        assert coords.captured_code(Player.DEFENDER) == 0xFF
        assert coords.owner_of(0x00) == Player.ATTACKER
        assert coords.owner_of(0xFF) == Player.DEFENDER
        assert not coords.is_on_board(0x00)
        assert not coords.is_on_board(0xFF)

    def test_bijection(self) -> None:
        """Every (square, owner, promoted) has exactly one on-board code."""
        seen = set()
        for sq in ALL_SQUARES:
            for owner in Player:
                for promoted in (False, True):
                    code = coords.encode(sq, owner, promoted)
                    assert coords.is_on_board(code)
                    assert coords.decode(code) == (sq, owner, promoted)
                    assert coords.to_index(code) == sq.index
                    seen.add(code)
        assert len(seen) == 25 * 2 * 2

    def test_from_index_inverts_to_index(self) -> None:
        for i in range(25):
            assert coords.to_index(coords.from_index(i, Player.DEFENDER)) == i

    @pytest.mark.parametrize("code", [0x00, 0xFF, 0x06, 0x61, 0x10])
    def test_decode_rejects_off_board(self, code: int) -> None:
        with pytest.raises(ValueError):
            coords.decode(code)
