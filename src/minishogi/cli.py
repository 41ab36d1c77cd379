"""CLI entry point for minishogi — Human vs Random AI.

コマンドラインで動く5五将棋対局プログラム。
プレイヤー対ランダムAIで対局できる（既定: プレイヤーが攻め方）。

起動方法: `minishogi-cli [--ai-first] [--seed N] [--max-turns N] [--verbose]`
"""

from __future__ import annotations

import argparse
import logging
import random

from minishogi.engine.random_player import random_move
from minishogi.game.mini_shogi.config import GameConfig
from minishogi.game.mini_shogi.display import board_to_str
from minishogi.game.mini_shogi.notation import NotationError, format_move, parse_move
from minishogi.game.mini_shogi.state import IllegalMoveError, MiniShogiState
from minishogi.game.mini_shogi.types import MAX_TURNS, Player

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minishogi-cli",
        description="Play 5x5 mini shogi against a random opponent.",
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="let the AI play the Attacker (first move); you play the Defender",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for hash keys and the AI")
    parser.add_argument(
        "--max-turns", type=int, default=MAX_TURNS, help="half-moves before a draw"
    )
    parser.add_argument("--verbose", action="store_true", help="log every move at DEBUG")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run a Human vs Random AI game.

    ゲームの流れ:
    1. 盤面を表示
    2. 合法手一覧を表示して棋譜表記の入力を求める（例: 2A3A, 2A3AN, 3AFU）
    3. AI が応答する
    4. 終局まで繰り返す
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    human = Player.DEFENDER if args.ai_first else Player.ATTACKER
    rng = random.Random(args.seed)
    state = MiniShogiState.new(GameConfig(max_turns=args.max_turns, seed=args.seed))

    print("=== 5五将棋 ===")
    print(f"You are {human.name} ({'uppercase' if human == Player.ATTACKER else 'lowercase'}).")
    print()

    while not state.is_terminal:
        print(board_to_str(state.board))
        print()

        if state.current_player == human:
            moves = state.legal_moves()
            print("Legal moves: " + " ".join(format_move(m) for m in moves))
            print()

            # 入力検証ループ（合法手が入力されるまで繰り返す）
            while True:
                try:
                    text = input("Your move: ")
                    state = state.play(parse_move(text, human))
                    break
                except (NotationError, IllegalMoveError) as exc:
                    logger.warning("Rejected move %r: %s", text, exc)
                    print(f"Invalid: {exc}")
                except (EOFError, KeyboardInterrupt):
                    print("\nGame aborted.")
                    return
        else:
            move = random_move(state, rng)
            print(f"AI plays: {format_move(move)}")
            state = state.apply_move(move)

        print()

    # 終局: 結果を表示
    logger.debug("game over after %d half-moves: %s", state.history.turn, state.outcome)
    print(board_to_str(state.board))
    print()
    winner = state.winner
    if winner is None:
        print(f"Draw! ({state.history.turn} half-moves played)")
    elif winner == human:
        print("You win!")
    else:
        print("AI wins!")


if __name__ == "__main__":
    main()
