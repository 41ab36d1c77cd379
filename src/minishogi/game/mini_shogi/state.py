"""GameState implementation for 5五将棋.

5五将棋の対局状態（盤面・履歴・現局面のハッシュ）。
Board クラスが駒の位置を持ち、rules モジュールが合法手・終局判定を担当する。
MiniShogiState はそれらを束ねて GameState プロトコルを実装する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import torch

from minishogi.game.mini_shogi.board import Board
from minishogi.game.mini_shogi.config import DEFAULT_CONFIG, GameConfig
from minishogi.game.mini_shogi.history import History
from minishogi.game.mini_shogi.moves import Move, apply_move
from minishogi.game.mini_shogi.rules import Outcome, is_game_over, legal_moves
from minishogi.game.mini_shogi.types import (
    COLS,
    HAND_PIECE_TYPES,
    ROWS,
    PieceType,
    Player,
)
from minishogi.game.mini_shogi.zobrist import ZobristTable, hash_board, update_hash

logger = logging.getLogger(__name__)

NUM_PLANES = 24


class IllegalMoveError(ValueError):
    """A well-formed move that is not in the legal move list."""


@dataclass(frozen=True)  # イミュータブル: apply_move() は新しいオブジェクトを返す
class MiniShogiState:
    """Immutable game state for 5五将棋.

    Terminal conditions（終局条件）:
    1. 合法手なし（詰み）: 手番のプレイヤーの負け
    2. 最大手数到達: 引き分け
    """

    table: ZobristTable
    board: Board
    history: History
    hash: int  # 現局面のハッシュ（手番側のキーを含む）
    config: GameConfig = DEFAULT_CONFIG

    @classmethod
    def new(cls, config: GameConfig = DEFAULT_CONFIG) -> MiniShogiState:
        """Start a new game with a fresh key table seeded from config."""
        return cls.from_position(Board.initial(), History(), config=config)

    @classmethod
    def from_position(
        cls,
        board: Board,
        history: History,
        table: ZobristTable | None = None,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> MiniShogiState:
        """Wrap an arbitrary position; the side to move follows history parity."""
        if table is None:
            table = ZobristTable.generate(config.seed)
        return cls(
            table=table,
            board=board,
            history=history,
            hash=hash_board(board, history.side_to_move, table),
            config=config,
        )

    @property
    def current_player(self) -> int:
        """現在の手番プレイヤー（0=攻め方, 1=受け方）。"""
        return self.history.side_to_move.value

    @property
    def outcome(self) -> Outcome | None:
        return is_game_over(self.board, self.history, self.table, self.config.max_turns)

    @property
    def is_terminal(self) -> bool:
        """ゲームが終局ならば True。"""
        return self.outcome is not None

    @property
    def winner(self) -> int | None:
        """勝者を返す。対局中または引き分け（最大手数）は None。"""
        if self.outcome == Outcome.SIDE_TO_MOVE_HAS_NO_MOVES:
            return self.history.side_to_move.opponent.value
        return None

    def legal_moves(self) -> list[Move]:
        """合法手のリストを返す。"""
        return legal_moves(self.board, self.history, self.table)

    def apply_move(self, move: Move) -> MiniShogiState:
        """Apply a move produced by legal_moves() and return the new state.

        ハッシュは差分更新し、全計算の結果と一致することを assert で確認する。
        """
        new_board = apply_move(self.board, move)
        new_hash = update_hash(self.board, self.hash, move, self.table)
        assert new_hash == hash_board(new_board, move.player.opponent, self.table), (
            f"Incremental hash diverged after {move}"
        )
        assert new_board.is_consistent(), f"Two pieces share a square after {move}"

        logger.debug("turn %d: %s plays %s", self.history.turn, move.player.name, move)
        return MiniShogiState(
            table=self.table,
            board=new_board,
            history=self.history.push(new_hash),
            hash=new_hash,
            config=self.config,
        )

    def play(self, move: Move) -> MiniShogiState:
        """Apply move after checking it against the legal move list.

        Raises IllegalMoveError (and leaves this state untouched) otherwise.
        """
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move: {move}")
        return self.apply_move(move)

    def to_tensor_planes(self) -> torch.Tensor:
        """Convert to tensor planes (24 x 5 x 5), from the side to move's view.

        Planes（チャンネル）の構成:
        ch.0-5:   現プレイヤーの駒（6駒種）
        ch.6-11:  相手プレイヤーの駒（6駒種）
        ch.12:    成り駒（両者）
        ch.13-17: 現プレイヤーの持ち駒数（5種）
        ch.18-22: 相手プレイヤーの持ち駒数（5種）
        ch.23:    手番インジケータ（攻め方番なら全1）
        """
        planes = torch.zeros(NUM_PLANES, ROWS, COLS)
        cp = self.history.side_to_move

        for _, piece_type, placement in self.board.pieces():
            r, c = placement.square.row - 1, placement.square.col - 1
            offset = 0 if placement.owner == cp else len(PieceType)
            planes[offset + piece_type.value, r, c] = 1.0
            if placement.promoted:
                planes[12, r, c] = 1.0

        for i, pt in enumerate(HAND_PIECE_TYPES):
            cp_count = self.board.captured_count(pt, cp)
            opp_count = self.board.captured_count(pt, cp.opponent)
            if cp_count > 0:
                planes[13 + i, :, :] = float(cp_count)
            if opp_count > 0:
                planes[18 + i, :, :] = float(opp_count)

        if cp == Player.ATTACKER:
            planes[23, :, :] = 1.0

        return planes
