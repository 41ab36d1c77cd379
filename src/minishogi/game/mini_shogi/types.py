"""Types and constants for 5五将棋 (5x5 mini shogi).

5×5盤ミニ将棋の基本型・定数定義。
駒は6種類（歩・飛・角・銀・金・王）で、各駒種は盤上に2枚ずつ存在する。
成りは「成っているかどうか」のフラグで表し、駒種は増やさない。
"""

from __future__ import annotations

from enum import IntEnum, unique
from typing import Final

ROWS = 5
COLS = 5
NUM_SQUARES = ROWS * COLS  # 25マス

# 1局の最大手数（これを超えたら引き分け）
MAX_TURNS: Final[int] = 150


@unique
class Player(IntEnum):
    """Player identifiers.

    攻め方（ATTACKER）は row 1 側から row 5 側へ進む。
    受け方（DEFENDER）は row 5 側から row 1 側へ進む。
    """

    ATTACKER = 0  # 先手
    DEFENDER = 1  # 後手

    @property
    def opponent(self) -> Player:
        """相手プレイヤーを返す。"""
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step (+1 for Attacker, -1 for Defender)."""
        return 1 if self == Player.ATTACKER else -1

    @property
    def far_rank(self) -> int:
        """The opponent's back rank: promotion zone and no-pawn-drop rank.

        敵陣（成れる段）。5五将棋では最奥の1段のみ。
        """
        return ROWS if self == Player.ATTACKER else 1


@unique
class PieceType(IntEnum):
    """Piece types in 5五将棋.

    値は Board のスロット番号（piece_type * 2 + 初期所有者）に使われる。
    """

    PAWN = 0    # 歩
    ROOK = 1    # 飛
    BISHOP = 2  # 角
    SILVER = 3  # 銀
    GOLD = 4    # 金
    KING = 5    # 王


# 成れる駒種（金・王は成れない）
PROMOTABLE: frozenset[PieceType] = frozenset(
    {PieceType.PAWN, PieceType.ROOK, PieceType.BISHOP, PieceType.SILVER}
)

# 持ち駒として打てる駒種（王以外の5種）
HAND_PIECE_TYPES = [
    PieceType.PAWN, PieceType.ROOK, PieceType.BISHOP,
    PieceType.SILVER, PieceType.GOLD,
]

# 棋譜表記の駒コード（打ち手で使う）
PIECE_CODES: dict[PieceType, str] = {
    PieceType.PAWN: "FU",
    PieceType.ROOK: "HI",
    PieceType.BISHOP: "KK",
    PieceType.SILVER: "GI",
    PieceType.GOLD: "KI",
    PieceType.KING: "OU",
}

# 1マス移動の方向定義（攻め方視点、前 = row 増加方向）
# 受け方の場合は行方向を反転して使う
GOLD_STEPS: list[tuple[int, int]] = [(1, -1), (1, 0), (1, 1), (0, -1), (0, 1), (-1, 0)]

STEP_MOVES: dict[PieceType, list[tuple[int, int]]] = {
    PieceType.PAWN: [(1, 0)],                                      # 歩: 1マス前のみ
    PieceType.SILVER: [(1, -1), (1, 0), (1, 1), (-1, -1), (-1, 1)],  # 銀: 前3方向+斜め後
    PieceType.GOLD: GOLD_STEPS,                                     # 金: 6方向
    PieceType.KING: [
        (1, -1), (1, 0), (1, 1),
        (0, -1), (0, 1),
        (-1, -1), (-1, 0), (-1, 1),
    ],  # 王: 全8方向1マス
}

# 遠距離移動の方向定義（盤端か駒に当たるまで進める）
SLIDE_MOVES: dict[PieceType, list[tuple[int, int]]] = {
    PieceType.ROOK: [(1, 0), (-1, 0), (0, -1), (0, 1)],      # 飛: 縦横4方向
    PieceType.BISHOP: [(1, 1), (1, -1), (-1, 1), (-1, -1)],  # 角: 斜め4方向
}

# 初期配置: (駒種, 初期所有者) → (row, col)
INITIAL_LAYOUT: dict[tuple[PieceType, Player], tuple[int, int]] = {
    (PieceType.PAWN, Player.ATTACKER): (2, 1),
    (PieceType.ROOK, Player.ATTACKER): (1, 5),
    (PieceType.BISHOP, Player.ATTACKER): (1, 4),
    (PieceType.SILVER, Player.ATTACKER): (1, 3),
    (PieceType.GOLD, Player.ATTACKER): (1, 2),
    (PieceType.KING, Player.ATTACKER): (1, 1),
    (PieceType.PAWN, Player.DEFENDER): (4, 5),
    (PieceType.ROOK, Player.DEFENDER): (5, 1),
    (PieceType.BISHOP, Player.DEFENDER): (5, 2),
    (PieceType.SILVER, Player.DEFENDER): (5, 3),
    (PieceType.GOLD, Player.DEFENDER): (5, 4),
    (PieceType.KING, Player.DEFENDER): (5, 5),
}
