# src/gridsnake/rl/policies/greedy.py
from typing import List

import numpy as np # type: ignore
from gridsnake.config import GRID_DIM, MOVES, Heading
from gridsnake.rl.env import ACTIONS, left_of, right_of

HEADING_ACTIONS = {heading: action for action, heading in ACTIONS.items()}


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int) -> List[Heading]:
    """
    Returns a preference ordering of headings, those that reduce Manhattan
    distance to food first. Does NOT check collisions; caller filters.
    """
    prefs = []
    if fx < hx:
        prefs.append(Heading.LEFT)
    elif fx > hx:
        prefs.append(Heading.RIGHT)
    if fy < hy:
        prefs.append(Heading.UP)
    elif fy > hy:
        prefs.append(Heading.DOWN)
    # Orthogonal options last, so the caller still has a way out when boxed in.
    for d in MOVES:
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def decode_obs(obs: np.ndarray):
    """
    Matches env.observe() layout (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    Grid coordinates come back as ints by scaling with (GRID_DIM - 1).
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    scale = GRID_DIM - 1
    return (
        int(round(hx_n * scale)), int(round(hy_n * scale)),
        int(round(fx_n * scale)), int(round(fy_n * scale)),
        Heading((int(dx), int(dy))),
        bool(dan_f), bool(dan_l), bool(dan_r),
    )


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - prefer actions that reduce Manhattan distance
    - avoid any move flagged dangerous if possible
    - the backwards action is treated as dangerous (the game ignores it anyway)
    - if every move looks dangerous, fall back to random
    """
    hx, hy, fx, fy, forward, dan_f, dan_l, dan_r = decode_obs(obs)
    prefs = best_move_toward_food(hx, hy, fx, fy)

    # Not moving yet: nothing is in the way.
    if forward is Heading.STOPPED:
        return HEADING_ACTIONS[prefs[0]]

    danger = {
        forward: dan_f,
        left_of(forward): dan_l,
        right_of(forward): dan_r,
        forward.reverse: True,
    }

    for heading in prefs:
        if not danger[heading]:
            return HEADING_ACTIONS[heading]

    # boxed in
    return int(env.np_rng.integers(env.action_space_n))
