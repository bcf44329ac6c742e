import pytest

from raycaster.constants import HEIGHT, TILE_SIZE, WIDTH
from raycaster.worldmap import get_map, has_wall_at


def test_map_shape():
    grid = get_map()
    assert len(grid) == 10
    assert all(len(row) == len(grid[0]) == 15 for row in grid)


def test_map_is_enclosed_by_walls():
    grid = get_map()
    assert set(grid[0]) == {"1"}
    assert set(grid[-1]) == {"1"}
    assert all(row[0] == "1" and row[-1] == "1" for row in grid)


def test_get_map_returns_independent_copies():
    first = get_map()
    first[1] = "1" * 15
    assert get_map()[1] != first[1]


def test_every_tile_agrees_with_grid():
    grid = get_map()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            x = c * TILE_SIZE + TILE_SIZE / 2
            y = r * TILE_SIZE + TILE_SIZE / 2
            assert has_wall_at(x, y, grid) == (cell != "0")


def test_interior_obstacle():
    grid = get_map()
    assert has_wall_at(6 * TILE_SIZE + 1, 3 * TILE_SIZE + 1, grid)
    assert not has_wall_at(5 * TILE_SIZE + 1, 3 * TILE_SIZE + 1, grid)


@pytest.mark.parametrize(
    "x, y",
    [(-0.5, 100), (100, -0.5), (WIDTH, 100), (100, HEIGHT), (WIDTH + 10, HEIGHT + 10)],
)
def test_out_of_screen_is_wall(x, y):
    assert has_wall_at(x, y, ["0" * 100] * 100)


def test_beyond_map_extent_is_wall():
    grid = ["00", "00"]
    assert not has_wall_at(1, 1, grid)
    assert has_wall_at(2 * TILE_SIZE + 1, 1, grid)
    assert has_wall_at(1, 2 * TILE_SIZE + 1, grid)


def test_empty_grid_is_wall():
    assert has_wall_at(10, 10, [])