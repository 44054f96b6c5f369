# src/gridsnake/rl/run.py
from __future__ import annotations
import argparse
import csv
import os
from typing import Optional, Sequence, Tuple

from gridsnake.config import SNAKE_LENGTHS
from gridsnake.rl.env import SnakeEnv
from gridsnake.rl.policies import POLICIES, policy_eps_greedy

MAX_STEPS = 10_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float) -> Tuple[int, float, int]:
    """
    Run a single episode with a scripted policy (random, greedy, eps-greedy).

    Returns:
        steps: number of steps taken
        total: total return (sum of rewards)
        score: final score from info["score"]
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        if act is policy_eps_greedy:
            a = act(obs, env, epsilon)
        else:
            a = act(obs, env)

        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if done or steps >= MAX_STEPS:
            score = info.get("score", 0)
            break

    return steps, total, score


def run_episodes(env: SnakeEnv, episodes: int, policy: str, epsilon: float, out_csv: str) -> list:
    """Run ``episodes`` episodes, print progress as CSV and save the rows to ``out_csv``."""
    print(f"Running {episodes} episode(s) with policy={policy} ε={epsilon}")
    print("ep,steps,return,score")

    rows = [("ep", "steps", "return", "score")]
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nSaved results → {out_csv}")
    return rows


# --------------------------
# Main
# --------------------------
def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play headless snake rounds with a scripted policy.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--snake-length", type=int, default=1, choices=SNAKE_LENGTHS)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is saved here",
    )
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"run_{args.policy}.csv")

    env = SnakeEnv(seed_value=args.seed, initial_snake_length=args.snake_length)
    run_episodes(env, args.episodes, args.policy, args.epsilon, out_csv)
    env.close()


if __name__ == "__main__":
    main()
