import random
from collections import deque

import pytest

from mymaze.generator import MazeGenerator, MazeGenerationError, generate_maze
from mymaze.grid import GridFrozenError


def _reachable(grid, start=(1, 1)):
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            n = (x + dx, y + dy)
            if n not in seen and grid.is_open(*n):
                seen.add(n)
                q.append(n)
    return seen


def _snapshot(grid):
    return grid.get_matrix()


@pytest.mark.parametrize("w,h", [(3, 3), (5, 7), (11, 11), (21, 21), (23, 23), (4, 4), (12, 9)])
def test_dimensions_are_next_odd(w, h):
    g = generate_maze(w, h, seed=1)
    assert g.width == (w if w % 2 else w + 1)
    assert g.height == (h if h % 2 else h + 1)


def test_even_input_gives_5x5():
    g = generate_maze(4, 4)
    assert (g.width, g.height) == (5, 5)


@pytest.mark.parametrize("seed", range(10))
def test_entrance_exit_open_and_border_walled(seed):
    g = generate_maze(21, 15, seed=seed)
    assert g.is_open(1, 0)
    assert g.is_open(g.width - 2, g.height - 1)
    border = set()
    for x in range(g.width):
        border.add((x, 0))
        border.add((x, g.height - 1))
    for y in range(g.height):
        border.add((0, y))
        border.add((g.width - 1, y))
    open_border = {c for c in border if g.is_open(*c)}
    assert open_border == {(1, 0), (g.width - 2, g.height - 1)}


@pytest.mark.parametrize("seed", range(10))
def test_rooms_connected_and_maze_is_a_tree(seed):
    g = generate_maze(23, 17, seed=seed)
    rooms = [(x, y) for x in range(1, g.width - 1, 2) for y in range(1, g.height - 1, 2)]
    reach = _reachable(g)
    # every room gets carved and joined to the start
    assert all(r in reach for r in rooms)
    # everything open hangs off (1, 1)
    assert reach == set(g.open_cells())
    # rooms + one connector per non-start room + entrance + exit: no cycles
    assert g.count_open() == 2 * len(rooms) - 1 + 2


def test_goal_reachable_from_start():
    g = generate_maze(11, 11, seed=7)
    assert g.goal in _reachable(g)
    assert g.exit in _reachable(g)


def test_same_seed_same_grid():
    a = generate_maze(21, 21, seed=1234)
    b = generate_maze(21, 21, seed=1234)
    assert _snapshot(a) == _snapshot(b)


def test_seeded_11x11_scenario():
    g = generate_maze(11, 11, seed=42)
    assert g.is_open(1, 0) is True
    assert g.is_open(9, 10) is True
    assert g.is_open(9, 9) is True
    assert g.is_open(0, 0) is False
    assert _snapshot(g) == _snapshot(generate_maze(11, 11, seed=42))


def test_caller_owned_rng_matches_seed():
    a = generate_maze(15, 15, rng=random.Random(99))
    b = generate_maze(15, 15, seed=99)
    assert _snapshot(a) == _snapshot(b)


def test_seed_and_rng_together_rejected():
    with pytest.raises(ValueError):
        generate_maze(11, 11, seed=1, rng=random.Random(1))


def test_different_seeds_vary():
    grids = {tuple(map(tuple, _snapshot(generate_maze(21, 21, seed=s)))) for s in range(5)}
    assert len(grids) > 1


def test_result_is_frozen():
    g = generate_maze(11, 11, seed=3)
    with pytest.raises(GridFrozenError):
        g.set_open(2, 2)


def test_generator_counts_attempts():
    gen = MazeGenerator(rng=random.Random(5))
    gen.generate(11, 11)
    assert gen.attempts == 1


def test_retry_then_success(monkeypatch):
    calls = []
    original = MazeGenerator._repair_exit

    def flaky_repair(self, grid):
        calls.append(grid)
        if len(calls) == 1:
            return False
        return original(self, grid)

    monkeypatch.setattr(MazeGenerator, "_repair_exit", flaky_repair)
    gen = MazeGenerator(rng=random.Random(0))
    g = gen.generate(11, 11)
    assert gen.attempts == 2
    assert g is calls[1]
    assert g.frozen


def test_retry_limit_raises(monkeypatch):
    monkeypatch.setattr(MazeGenerator, "_repair_exit", lambda self, grid: False)
    gen = MazeGenerator(rng=random.Random(0), max_attempts=3)
    with pytest.raises(MazeGenerationError):
        gen.generate(11, 11)
    assert gen.attempts == 3


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        MazeGenerator(max_attempts=0)
