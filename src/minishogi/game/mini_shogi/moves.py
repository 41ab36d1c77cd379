"""Move types and board mutation for 5五将棋.

Move is a tagged union:
  Drop(piece_type, to, player)          — 持ち駒打ち
  Step(origin, to, player, promote)     — 盤上の駒の移動（promote=True で成る）

An already promoted piece stays promoted after a Step with promote=False;
``promote`` only marks the move that turns the piece over.
"""

from __future__ import annotations

from dataclasses import dataclass

from minishogi.game.mini_shogi.board import Board, Captured, OnBoard, slot_index
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.types import PROMOTABLE, PieceType, Player


@dataclass(frozen=True)
class Drop:
    """Place a held piece on an empty square."""

    piece_type: PieceType
    to: Square
    player: Player


@dataclass(frozen=True)
class Step:
    """Move an on-board piece from origin to to, capturing whatever is there."""

    origin: Square
    to: Square
    player: Player
    promote: bool = False


Move = Drop | Step


def apply_move(board: Board, move: Move) -> Board:
    """Apply a move and return the new board state.

    No legality checks: the result is meaningless for moves that were not
    produced by the legal move generator.
    """
    if isinstance(move, Drop):
        return _apply_drop(board, move)
    return _apply_step(board, move)


def _apply_drop(board: Board, move: Drop) -> Board:
    """持ち駒を1枚盤上に置く（初期所有者が攻め方のスロットから優先して使う）。"""
    for home in Player:
        slot = slot_index(move.piece_type, home)
        if board.slots[slot] == Captured(move.player):
            return board.with_position(slot, OnBoard(move.to, move.player))
    raise AssertionError(f"{move.player.name} holds no {move.piece_type.name}")


def _apply_step(board: Board, move: Step) -> Board:
    mover = board.piece_at(move.origin)
    assert mover is not None, f"No piece at {move.origin}"
    _, _, slot = mover
    origin = board.slots[slot]
    assert isinstance(origin, OnBoard)

    new_board = board
    # 駒を取る処理: 取られた駒は成りが解除され、取った側の持ち駒になる
    target = board.piece_at(move.to)
    if target is not None:
        new_board = new_board.with_position(target[2], Captured(move.player))

    promoted = origin.promoted or move.promote
    return new_board.with_position(slot, OnBoard(move.to, move.player, promoted))


def in_promotion_zone(player: Player, square: Square) -> bool:
    """Check if a square is on player's promotion rank (the enemy back rank)."""
    return square.row == player.far_rank


def is_promotable_move(board: Board, move: Move) -> bool:
    """True when move may turn its piece over.

    Drops never promote; Gold and King cannot promote; a promoted piece
    cannot promote again. Entering or leaving the far rank both qualify.
    """
    if not isinstance(move, Step):
        return False
    found = board.piece_at(move.origin)
    if found is None:
        return False
    piece_type, _, slot = found
    if piece_type not in PROMOTABLE:
        return False
    origin = board.slots[slot]
    if isinstance(origin, OnBoard) and origin.promoted:
        return False
    return in_promotion_zone(move.player, move.origin) or in_promotion_zone(
        move.player, move.to
    )
