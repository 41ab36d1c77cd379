"""Game session configuration for 5五将棋.

対局セッションの設定。乱数シードを固定するとハッシュ表が再現可能になる。
"""

from __future__ import annotations

from dataclasses import dataclass

from minishogi.game.mini_shogi.types import MAX_TURNS


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a MiniShogiState session.

    Attributes:
        max_turns: この手数に達したら引き分け（最大手数）
        seed:      Zobrist 表の乱数シード（None なら毎回異なる表）
    """

    max_turns: int = MAX_TURNS
    seed: int | None = None


DEFAULT_CONFIG = GameConfig()
