# main.py
from __future__ import annotations

import argparse
import csv
import dataclasses
import logging
import os
import random
from typing import List, Tuple

from .config import CFG
from .game import GameState, new_game_state, step_game
from .observe import board_text, occupancy
from .policies import policy_greedy, policy_idle, policy_random

POLICIES = {
    "idle": policy_idle,
    "random": policy_random,
    "greedy": policy_greedy,
}


def run(state: GameState, ticks: int, delta_ms: float, policy: str) -> List[Tuple[int, int, int, int]]:
    """
    Drive the simulation for a fixed number of ticks.

    Returns one (game, ticks, length, food) row per game that ended, plus a
    final row for the game still running when the tick budget ran out.
    """
    choose = POLICIES[policy]
    input_rng = random.Random(state.cfg.seed + 1)

    rows = []
    game_start = 0
    state.arena.drain_events()  # nobody is listening to the initial spawn

    for t in range(1, ticks + 1):
        games_before = state.games
        length = len(state.snake.segments)
        food = state.food_eaten
        step_game(state, delta_ms, choose(state, input_rng))
        if state.games != games_before:
            rows.append((state.games, t - game_start, length, food))
            game_start = t

    rows.append((state.games + 1, ticks - game_start, len(state.snake.segments), state.food_eaten))
    return rows


def main():
    parser = argparse.ArgumentParser(description="Run the snake simulation headless.")
    parser.add_argument("--ticks", type=int, default=5000, help="Number of simulation ticks.")
    parser.add_argument(
        "--delta-ms",
        type=float,
        default=1000 / 60,
        help="Simulated time per tick in ms (default: 60 ticks per second).",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--policy", choices=sorted(POLICIES), default="greedy")
    parser.add_argument(
        "--no-debounce",
        action="store_true",
        help="Accept any non-reversing turn immediately.",
    )
    parser.add_argument(
        "--dump-board",
        action="store_true",
        help="Print the final board after the run.",
    )
    parser.add_argument("--out", type=str, default=None, help="Optional CSV output path.")
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = dataclasses.replace(CFG, seed=args.seed, debounce_turns=not args.no_debounce)
    state = new_game_state(cfg)

    print(
        f"Running {args.ticks} tick(s) of {args.delta_ms:.2f}ms with "
        f"policy={args.policy} seed={args.seed}"
    )
    print("game,ticks,length,food")

    rows = run(state, args.ticks, args.delta_ms, args.policy)
    for row in rows:
        print(",".join(str(v) for v in row))

    print(f"\nBest length: {state.best_length}")

    if args.dump_board:
        print()
        print(board_text(occupancy(state)))

    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(("game", "ticks", "length", "food"))
            writer.writerows(rows)
        print(f"Saved results → {args.out}")


if __name__ == "__main__":
    main()
