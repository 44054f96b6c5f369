# src/gridsnake/rl/policies/explore.py
"""Policies that pick some or all of their actions at random.

Draws come from ``env.np_rng`` so a seeded env replays the same actions.
"""
import numpy as np # type: ignore

from gridsnake.rl.policies.greedy import policy_greedy


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    # 180° picks are dropped by the game, so this wanders into a wall fast
    return int(env.np_rng.integers(env.action_space_n))


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """Random action with probability ``epsilon``, greedy otherwise."""
    if env.np_rng.random() < epsilon:
        return policy_random(obs, env)
    return policy_greedy(obs, env)
