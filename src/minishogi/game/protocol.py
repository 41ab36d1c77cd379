"""GameState protocol — the interface opponents and the CLI play through.

ゲーム状態の共通インタフェース（プロトコル）。
ランダムプレイヤーや CLI はこのプロトコルだけに依存し、
盤面やルールの内部表現には触れない。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import torch

from minishogi.game.mini_shogi.moves import Move


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class GameState(Protocol):
    """Common interface for game states.

    重要: apply_move() は新しい状態を返す（イミュータブル設計）。
    """

    @property
    def current_player(self) -> int:
        """現在手番のプレイヤー（0=攻め方, 1=受け方）を返す。"""
        ...

    @property
    def is_terminal(self) -> bool:
        """ゲームが終了していれば True を返す。"""
        ...

    @property
    def winner(self) -> int | None:
        """勝者（0 or 1）を返す。引き分けや対局中は None。"""
        ...

    def legal_moves(self) -> list[Move]:
        """合法手のリストを返す。"""
        ...

    def apply_move(self, move: Move) -> GameState:
        """手を適用した新しい状態を返す（元の状態は変化しない）。"""
        ...

    def to_tensor_planes(self) -> torch.Tensor:
        """局面を特徴プレーンのテンソルに変換する。"""
        ...
