"""Legal move generation and game-end rules for 5五将棋.

Check (王手), checkmate (詰み), drop restrictions (二歩・行き所のない駒・打ち歩詰め),
fourfold repetition (千日手) and perpetual check (連続王手の千日手).

Drop-mate detection and legal move enumeration call each other:

  legal_moves → placable_squares → is_checkmate_after → legal_moves (opponent) → ...

The recursion ends because every level consumes a held pawn: a level only
recurses through a pawn drop, the drop is applied before the next level, and
there are only two pawns. Once no side holds a pawn, placable_squares returns
without calling is_checkmate_after.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, unique

from minishogi.game.mini_shogi.bitboard import (
    FILE_MASKS,
    FULL_MASK,
    RANK_MASKS,
    iter_indices,
    movable_squares,
)
from minishogi.game.mini_shogi.board import Board, Captured, OnBoard, slot_index
from minishogi.game.mini_shogi.coords import Square
from minishogi.game.mini_shogi.history import History
from minishogi.game.mini_shogi.moves import (
    Drop,
    Move,
    Step,
    apply_move,
    is_promotable_move,
)
from minishogi.game.mini_shogi.types import MAX_TURNS, PieceType, Player
from minishogi.game.mini_shogi.zobrist import ZobristTable, hash_board

# 千日手はこの変則ルールでは攻め方の手にだけ適用する
REPETITION_RESTRICTED: frozenset[Player] = frozenset({Player.ATTACKER})

# 同一局面がこの回数目に現れる手は指せない
REPETITION_LIMIT = 4

# 連続王手の千日手: 直前の自分の手番 2, 4, 6 手前と同一局面なら4回目
_PERPETUAL_CHECK_OFFSETS = (2, 4, 6)


@unique
class Outcome(Enum):
    """Why a game is over."""

    SIDE_TO_MOVE_HAS_NO_MOVES = "side_to_move_has_no_moves"
    MAX_TURNS_REACHED = "max_turns_reached"


def new_game() -> tuple[Board, History]:
    """Return the starting board and an empty history (Attacker to move)."""
    return Board.initial(), History()


def danger_map(board: Board, player: Player) -> int:
    """Union of the squares every on-board enemy piece of player can move to."""
    bits = 0
    for _, piece_type, placement in board.pieces():
        if placement.owner != player:
            bits |= movable_squares(board, placement, piece_type)
    return bits


def is_checked(board: Board, player: Player) -> bool:
    """Check if player's king is under attack."""
    king = board.find_king(player)
    if king is None:
        return True  # King captured = in check
    return bool(danger_map(board, player) & (1 << king.index))


def would_be_checked_after(board: Board, move: Move) -> bool:
    """True when move leaves the mover's own king attacked."""
    return is_checked(apply_move(board, move), move.player)


def is_checkmate_after(
    board: Board,
    history: History,
    move: Move,
    table: ZobristTable,
) -> bool:
    """True when move leaves the opponent checked with no legal reply."""
    new_board = apply_move(board, move)
    opponent = move.player.opponent
    # 王手でなければ詰みではない（全合法手の列挙を省略）
    if not is_checked(new_board, opponent):
        return False
    new_history = history.push(hash_board(new_board, opponent, table))
    return next(_iter_legal_moves(new_board, new_history, table), None) is None


def placable_squares(
    board: Board,
    history: History,
    piece_type: PieceType,
    player: Player,
    table: ZobristTable,
) -> int:
    """Bitboard of squares where player may drop a held piece_type."""
    placable = ~board.occupancy() & FULL_MASK
    if piece_type != PieceType.PAWN:
        return placable

    # 二歩: 自分の未成の歩がある筋には打てない
    for _, pt, placement in board.pieces():
        if pt == PieceType.PAWN and placement.owner == player and not placement.promoted:
            placable &= ~FILE_MASKS[placement.square.col]

    # 行き所のない駒: 最奥の段には打てない
    placable &= ~RANK_MASKS[player.far_rank]

    # 打ち歩詰め
    for index in iter_indices(placable):
        drop = Drop(PieceType.PAWN, Square.from_index(index), player)
        if is_checkmate_after(board, history, drop, table):
            placable &= ~(1 << index)

    return placable


def is_repetitive_move(
    board: Board,
    history: History,
    move: Move,
    table: ZobristTable,
) -> bool:
    """True when move produces a position seen three times before (千日手)."""
    if history.turn < REPETITION_LIMIT - 1:
        return False
    h = hash_board(apply_move(board, move), move.player.opponent, table)
    return history.count(h) >= REPETITION_LIMIT - 1


def is_perpetual_check_move(
    board: Board,
    history: History,
    move: Move,
    table: ZobristTable,
) -> bool:
    """True when move is the mover's fourth identical checking move in a row.

    The move must give check and its resulting hash must equal the positions
    the mover produced 2, 4 and 6 half-moves ago.
    """
    if history.turn < max(_PERPETUAL_CHECK_OFFSETS):
        return False
    new_board = apply_move(board, move)
    opponent = move.player.opponent
    if not is_checked(new_board, opponent):
        return False
    h = hash_board(new_board, opponent, table)
    return all(history.past[-offset] == h for offset in _PERPETUAL_CHECK_OFFSETS)


def legal_moves(board: Board, history: History, table: ZobristTable) -> list[Move]:
    """Generate all legal moves for the side to move.

    Order: piece type, then slot, then destination index; an unpromoted step
    comes before its promoted variant.
    """
    return list(_iter_legal_moves(board, history, table))


def is_game_over(
    board: Board,
    history: History,
    table: ZobristTable,
    max_turns: int = MAX_TURNS,
) -> Outcome | None:
    """Return why the game is over, or None while it goes on."""
    if history.turn >= max_turns:
        return Outcome.MAX_TURNS_REACHED
    if next(_iter_legal_moves(board, history, table), None) is None:
        return Outcome.SIDE_TO_MOVE_HAS_NO_MOVES
    return None


def _iter_legal_moves(
    board: Board,
    history: History,
    table: ZobristTable,
) -> Iterator[Move]:
    player = history.side_to_move
    for pt in PieceType:
        dropped = False
        for home in Player:
            pos = board.slots[slot_index(pt, home)]
            if pos.owner != player:
                continue

            candidates: Iterator[Move]
            if isinstance(pos, Captured):
                if dropped:
                    continue  # 2枚目の持ち駒は同じ打ち手になる
                dropped = True
                targets = placable_squares(board, history, pt, player, table)
                candidates = (
                    Drop(pt, Square.from_index(i), player) for i in iter_indices(targets)
                )
            else:
                targets = movable_squares(board, pos, pt)
                candidates = _step_variants(board, pos, pt, targets)

            for move in candidates:
                if _is_allowed(board, history, move, table):
                    yield move


def _step_variants(
    board: Board,
    placement: OnBoard,
    piece_type: PieceType,
    targets: int,
) -> Iterator[Step]:
    """Yield steps to every target, with promotion variants where allowed."""
    for index in iter_indices(targets):
        step = Step(placement.square, Square.from_index(index), placement.owner)
        if not is_promotable_move(board, step):
            yield step
            continue
        # 歩は成れるなら必ず成る
        if piece_type != PieceType.PAWN:
            yield step
        yield Step(step.origin, step.to, step.player, promote=True)


def _is_allowed(board: Board, history: History, move: Move, table: ZobristTable) -> bool:
    if would_be_checked_after(board, move):
        return False  # 王手放置・自殺手
    if move.player in REPETITION_RESTRICTED and is_repetitive_move(board, history, move, table):
        return False
    return not is_perpetual_check_move(board, history, move, table)
