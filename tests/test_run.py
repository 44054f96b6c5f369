import csv

import pytest

from gridsnake.rl import run
from gridsnake.rl.env import SnakeEnv


def test_run_episode_terminates():
    env = SnakeEnv(seed_value=3)
    steps, total, score = run.run_episode(env, "random", 0.0)
    assert 1 <= steps <= run.MAX_STEPS
    assert score >= 0


def test_unknown_policy():
    with pytest.raises(ValueError):
        run.run_episode(SnakeEnv(), "dqn", 0.0)


def test_main_writes_csv(tmp_path, capsys):
    run.main(["--episodes", "3", "--policy", "greedy", "--outdir", str(tmp_path)])

    with open(tmp_path / "run_greedy.csv", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["ep", "steps", "return", "score"]
    assert [r[0] for r in rows[1:]] == ["1", "2", "3"]
    assert "Saved results" in capsys.readouterr().out
