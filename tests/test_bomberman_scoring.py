from types import SimpleNamespace

import pytest

from pcg.bomberman import BombermanConfig, BombermanGenerator, grid_search, power_bonus, score_map, tally
from pcg.bomberman.scoring import DEFAULT_DESTRUCTIBLE_VALUES, DEFAULT_ENEMY_VALUES, DEFAULT_POWER_VALUES
from pcg.bomberman.tiles import DESTRUCTIBLE, EMPTY, EXIT, WALL, Enemy, PowerUp, enemy, power_up
from pcg.grid import Grid


@pytest.mark.parametrize(
    "count,expected",
    [(0, 0.0), (3, 0.0), (4, 6.0), (8, 12.0), (9, 4.5), (12, 6.0)],
)
def test_power_bonus_steps(count, expected):
    assert power_bonus(count) == pytest.approx(expected)


def test_power_bonus_drops_after_eight():
    assert power_bonus(9) < power_bonus(8)


def test_score_formula_on_handmade_grid():
    grid = Grid.from_rows(
        [
            [WALL, WALL, WALL, WALL],
            [WALL, EMPTY, DESTRUCTIBLE, WALL],
            [WALL, enemy(Enemy.ONIL), EXIT, WALL],
            [WALL, power_up(PowerUp.FIRE), DESTRUCTIBLE, WALL],
        ]
    )
    t = tally(grid)
    assert (t.empty, t.enemies, t.power_ups, t.destructibles, t.exits, t.walls) == (1, 1, 1, 2, 1, 10)
    # 0.5 * 1 - 1.5 * 1 + 0 + 3.0 * 2
    assert score_map(grid) == pytest.approx(5.0)


def test_score_counts_power_bonus():
    row = [power_up(PowerUp.BOMB)] * 4 + [EMPTY] * 2
    grid = Grid.from_rows([row])
    assert score_map(grid) == pytest.approx(0.5 * 2 + 1.5 * 4)


def _grid_with_blocks(n):
    return Grid.from_rows([[DESTRUCTIBLE] * n + [WALL] * (5 - n)])


class _StubGenerator:
    """Returns grids whose score is 3 * blocks, blocks chosen per p_destructible."""

    def __init__(self):
        self.calls = []

    def generate(self, p_destructible, p_power, p_enemy):
        self.calls.append((p_destructible, p_power, p_enemy))
        return SimpleNamespace(grid=_grid_with_blocks(int(p_destructible)))


def test_grid_search_picks_first_best():
    stub = _StubGenerator()
    best = grid_search(stub, [1, 3, 2, 3], [0.1, 0.2], [0.5])
    assert best.evaluated == 8
    assert best.score == pytest.approx(9.0)
    # Ties keep the first triple that reached the best score
    assert best.params == (3, 0.1, 0.5)
    assert stub.calls[:3] == [(1, 0.1, 0.5), (1, 0.2, 0.5), (3, 0.1, 0.5)]


def test_grid_search_empty_space():
    assert grid_search(_StubGenerator(), [], [0.1], [0.1]) is None


def test_grid_search_with_real_generator():
    gen = BombermanGenerator(BombermanConfig(seed=2024))
    best = grid_search(gen)
    assert best.evaluated == (
        len(DEFAULT_DESTRUCTIBLE_VALUES) * len(DEFAULT_POWER_VALUES) * len(DEFAULT_ENEMY_VALUES)
    )
    assert best.p_destructible in DEFAULT_DESTRUCTIBLE_VALUES
    assert best.p_power in DEFAULT_POWER_VALUES
    assert best.p_enemy in DEFAULT_ENEMY_VALUES
    assert best.score == pytest.approx(score_map(best.grid))
