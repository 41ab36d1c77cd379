"""5五将棋 (5x5 mini shogi) — rules engine and legal move generator."""

from minishogi.game.mini_shogi.board import Board, Captured, OnBoard
from minishogi.game.mini_shogi.config import GameConfig
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.display import board_to_str
from minishogi.game.mini_shogi.history import History, advance_history
from minishogi.game.mini_shogi.moves import Drop, Move, Step, apply_move
from minishogi.game.mini_shogi.notation import NotationError, format_move, parse_move
from minishogi.game.mini_shogi.rules import Outcome, is_game_over, legal_moves, new_game
from minishogi.game.mini_shogi.state import IllegalMoveError, MiniShogiState
from minishogi.game.mini_shogi.types import COLS, ROWS, PieceType, Player
from minishogi.game.mini_shogi.zobrist import ZobristTable, hash_board, update_hash

__all__ = [
    "Board",
    "COLS",
    "Captured",
    "Drop",
    "GameConfig",
    "History",
    "IllegalMoveError",
    "MiniShogiState",
    "Move",
    "NotationError",
    "OnBoard",
    "Outcome",
    "PieceType",
    "Player",
    "ROWS",
    "Square",
    "Step",
    "ZobristTable",
    "advance_history",
    "apply_move",
    "board_to_str",
    "format_move",
    "hash_board",
    "is_game_over",
    "legal_moves",
    "new_game",
    "parse_move",
    "update_hash",
]
