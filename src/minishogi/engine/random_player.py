"""Random player — selects a legal move uniformly at random.

ランダムプレイヤー: 合法手の中からランダムに手を選ぶ。

用途:
- 実装の動作確認（ルールが正しく実装されているかテスト）
- CLI 対局の相手
"""

from __future__ import annotations

import random

from minishogi.game.mini_shogi.moves import Move
from minishogi.game.protocol import GameState


def random_move(state: GameState, rng: random.Random | None = None) -> Move:
    """Return a random legal move.

    rng を渡すと再現可能な選択になる（テスト・シード付き対局用）。
    合法手がない場合は ValueError を送出する（終局局面では呼ばれないはず）。
    """
    moves = state.legal_moves()
    if not moves:
        raise ValueError("No legal moves available")
    return (rng or random).choice(moves)  # 一様ランダムサンプリング
