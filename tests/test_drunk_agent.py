import random

import pytest

from map_test_utils import is_connected

from pcg.cave import (
    AGENT,
    EMPTY,
    FILLED,
    Direction,
    DrunkAgent,
    DrunkAgentConfig,
    generate_drunk_map,
    new_cave,
    run_drunk_agent,
    stamp_room,
)


def occupied(grid):
    return {(r, c) for r, c in grid.positions() if grid[r, c] != EMPTY}


def straight_config(**kw):
    base = dict(rows=21, cols=21, walks=1, steps=6, p_room=0.0, p_room_increment=0.0, p_turn=0.0, p_turn_increment=0.0)
    base.update(kw)
    return DrunkAgentConfig(**base)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7])
def test_single_walk_is_connected_straight_path(seed):
    cfg = straight_config()
    start = (10, 10)
    result = run_drunk_agent(new_cave(21, 21), cfg, start, random.Random(seed))
    walk = result.walks[0]
    dr, dc = walk.facing.value
    expected = {(10 + dr * k, 10 + dc * k) for k in range(cfg.steps + 1)}
    cells = occupied(result.grid)
    assert cells == expected
    assert is_connected(cells)
    assert start in cells and result.position in cells
    assert walk.steps_taken == cfg.steps
    assert not walk.hit_boundary


def test_walk_stops_at_boundary():
    cfg = straight_config(steps=10)
    grid = new_cave(5, 5)
    agent = DrunkAgent(cfg, (1, 2), random.Random(0))
    agent.facing = Direction.NORTH
    record = agent.walk(grid)
    assert record.hit_boundary
    assert record.steps_taken == 1
    assert agent.position == (0, 2)
    assert occupied(grid) == {(1, 2), (0, 2)}


def test_walk_truncated_path_still_connected():
    cfg = straight_config(steps=30)
    grid = new_cave(8, 8)
    agent = DrunkAgent(cfg, (4, 4), random.Random(1))
    agent.facing = Direction.EAST
    agent.walk(grid)
    assert agent.position == (4, 7)
    assert occupied(grid) == {(4, 4), (4, 5), (4, 6), (4, 7)}


def test_room_stamp_interior():
    grid = new_cave(10, 12)
    room = stamp_room(grid, (5, 6), 5, 4)
    assert (room.top, room.left, room.bottom, room.right) == (3, 4, 8, 8)
    assert len(occupied(grid)) == 20


@pytest.mark.parametrize("corner", [(0, 0), (0, 11), (9, 0), (9, 11)])
def test_room_stamp_clamped_at_corners(corner):
    grid = new_cave(10, 12)
    room = stamp_room(grid, corner, 5, 4)
    assert 0 <= room.top < room.bottom <= 10
    assert 0 <= room.left < room.right <= 12
    cells = occupied(grid)
    assert corner in cells
    assert len(cells) == (room.bottom - room.top) * (room.right - room.left)
    assert all(grid.in_bounds(r, c) for r, c in cells)


def test_room_stamp_top_left_values():
    grid = new_cave(10, 12)
    room = stamp_room(grid, (0, 0), 5, 4)
    assert (room.top, room.left, room.bottom, room.right) == (0, 0, 3, 2)


@pytest.mark.parametrize("corner", [(0, 0), (0, 11), (9, 0), (9, 11)])
def test_agent_room_at_corner_stays_in_bounds(corner):
    cfg = straight_config(rows=10, cols=12, steps=0, p_room=1.0)
    result = run_drunk_agent(new_cave(10, 12), cfg, corner, random.Random(5))
    assert len(result.rooms) == 1
    assert result.grid.size == (10, 12)
    assert result.grid[corner] == AGENT


def test_probabilities_grow_and_reset(scripted_rng):
    cfg = DrunkAgentConfig(
        rows=30, cols=30, walks=3, steps=1, p_room=0.3, p_room_increment=0.1, p_turn=0.25, p_turn_increment=0.15
    )
    # (room trial, turn trial) per walk
    rng = scripted_rng([0.9, 0.9, 0.35, 0.5, 0.99, 0.1])
    result = run_drunk_agent(new_cave(30, 30), cfg, (15, 15), rng)
    rooms = [w.room is not None for w in result.walks]
    turns = [w.turned for w in result.walks]
    assert rooms == [False, True, False]
    assert turns == [False, False, True]
    assert [w.p_room for w in result.walks] == pytest.approx([0.4, 0.3, 0.4])
    assert [w.p_turn for w in result.walks] == pytest.approx([0.4, 0.55, 0.25])


def test_probabilities_capped_at_one(scripted_rng):
    cfg = DrunkAgentConfig(
        rows=30, cols=30, walks=3, steps=1, p_room=0.9, p_room_increment=0.5, p_turn=0.9, p_turn_increment=0.5
    )
    rng = scripted_rng([0.95, 0.95, 0.999, 0.999, 0.2, 0.2])
    result = run_drunk_agent(new_cave(30, 30), cfg, (15, 15), rng)
    assert [w.p_room for w in result.walks] == pytest.approx([1.0, 0.9, 0.9])
    assert [w.p_turn for w in result.walks] == pytest.approx([1.0, 0.9, 0.9])
    assert [w.room is not None for w in result.walks] == [False, True, True]


def test_final_position_marked_and_input_untouched():
    grid = new_cave(15, 15)
    result = run_drunk_agent(grid, DrunkAgentConfig(rows=15, cols=15), (7, 7), random.Random(11))
    assert grid.count(lambda t: t != EMPTY) == 0
    agents = [p for p in result.grid.positions() if result.grid[p] == AGENT]
    assert agents == [result.position]
    assert len(result.walks) == 8
    for w in result.walks:
        assert result.grid.in_bounds(*w.end)


def test_generate_drunk_map_pipeline():
    dm = generate_drunk_map(DrunkAgentConfig(seed=42))
    assert dm.grid.size == (25, 40)
    assert dm.initial[dm.start] == AGENT
    assert dm.initial.count(lambda t: t != EMPTY) == 1
    assert dm.grid[dm.agent.position] == AGENT
    assert dm.metrics["seed"] == 42
    assert dm.metrics["filled"] == dm.grid.count(lambda t: t in (FILLED, AGENT))
    again = generate_drunk_map(DrunkAgentConfig(seed=42))
    assert again.grid == dm.grid
    assert again.start == dm.start


def test_generate_drunk_map_fixed_start():
    dm = generate_drunk_map(DrunkAgentConfig(rows=9, cols=9, start_row=0, start_col=8, seed=3))
    assert dm.start == (0, 8)


def test_zero_steps_still_marks_start():
    cfg = straight_config(rows=6, cols=6, steps=0)
    grid = new_cave(6, 6)
    agent = DrunkAgent(cfg, (2, 3), random.Random(0))
    record = agent.walk(grid)
    assert record.steps_taken == 0
    assert occupied(grid) == {(2, 3)}
