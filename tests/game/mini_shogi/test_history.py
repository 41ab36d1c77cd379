"""Tests for the position hash history."""

from minishogi.game.mini_shogi.board import Board
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.history import History, advance_history
from minishogi.game.mini_shogi.moves import Step, apply_move
from minishogi.game.mini_shogi.types import Player
from minishogi.game.mini_shogi.zobrist import ZobristTable, hash_board


def test_empty_history() -> None:
    history = History()
    assert history.turn == 0
    assert history.side_to_move == Player.ATTACKER
    assert history.last is None


def test_push_is_immutable() -> None:
    history = History()
    pushed = history.push(42)
    assert history.turn == 0
    assert pushed.turn == 1
    assert pushed.last == 42
    assert pushed.side_to_move == Player.DEFENDER


def test_count() -> None:
    history = History(past=(1, 2, 1, 3, 1))
    assert history.count(1) == 3
    assert history.count(4) == 0


def test_advance_history_keys_next_side() -> None:
    table = ZobristTable.generate(0)
    board = apply_move(Board.initial(), Step(Square(2, 1), Square(3, 1), Player.ATTACKER))
    history = advance_history(History(), board, Player.ATTACKER, table)
    assert history.past == (hash_board(board, Player.DEFENDER, table),)
