# src/gridsnake/rl/policies/__init__.py
"""Scripted policies for driving the headless environment."""

from gridsnake.rl.policies.greedy import policy_greedy
from gridsnake.rl.policies.explore import policy_eps_greedy, policy_random

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["POLICIES", "policy_random", "policy_greedy", "policy_eps_greedy"]
