import numpy as np
import pytest

from daisy import Daisy
from randomness import ScriptedRandom
from world import WorldGrid, albedo_or_bare

B, W = Daisy.black(), Daisy.white()

def labelled_grid(width, height, **kwargs):
    """A full grid whose daisy albedos encode their own index."""
    size = width * height
    cells = [Daisy(i / size) for i in range(size)]
    return WorldGrid((width, height), 0.3, cells, **kwargs)

@pytest.mark.parametrize("dimensions", [(0, 5), (5, 0), (-1, 3), (2.5, 2)])
def test_rejects_bad_dimensions(dimensions):
    with pytest.raises(ValueError):
        WorldGrid(dimensions, 0.3)

@pytest.mark.parametrize("death_rate", [-0.1, 1.5])
def test_rejects_bad_death_rate(death_rate):
    with pytest.raises(ValueError):
        WorldGrid((3, 3), death_rate)

def test_rejects_wrong_cell_count():
    with pytest.raises(ValueError):
        WorldGrid((2, 2), 0.3, [None] * 3)

def test_shape():
    grid = WorldGrid.empty((4, 3), 0.3)
    assert grid.dimensions == (4, 3)
    assert grid.size == 12
    assert len(grid) == 12
    assert len(grid.cells) == 12

def test_single_cell_has_no_neighbours():
    grid = WorldGrid((1, 1), 0.3, [W])
    assert grid.at(0) is W
    assert grid.above(0) is None
    assert grid.below(0) is None
    assert grid.left_of(0) is None
    assert grid.right_of(0) is None

def test_centre_neighbours():
    grid = labelled_grid(3, 3)
    assert grid.above(4) is grid.cells[1]
    assert grid.below(4) is grid.cells[7]
    assert grid.left_of(4) is grid.cells[3]
    assert grid.right_of(4) is grid.cells[5]
    assert grid.neighbors(4) == (grid.cells[1], grid.cells[5], grid.cells[7], grid.cells[3])

def test_corner_neighbours():
    grid = labelled_grid(3, 3)
    assert grid.neighbors(0) == (None, grid.cells[1], grid.cells[3], None)
    assert grid.neighbors(8) == (grid.cells[5], None, None, grid.cells[7])

def test_left_and_right_stop_at_row_ends():
    grid = labelled_grid(3, 2)
    assert grid.left_of(3) is None
    assert grid.right_of(2) is None
    assert grid.left_of(2) is grid.cells[1]
    assert grid.right_of(3) is grid.cells[4]

def test_legacy_row_bleed_crosses_row_ends():
    grid = labelled_grid(3, 2, row_bleed=True)
    assert grid.left_of(3) is grid.cells[2]
    assert grid.right_of(2) is grid.cells[3]
    assert grid.left_of(0) is None
    assert grid.right_of(5) is None

def test_out_of_range_is_absent():
    grid = labelled_grid(3, 3)
    for i in (-1, -4, 9, 100):
        assert grid.at(i) is None
        assert grid.above(i) is None
        assert grid.below(i) is None
        assert grid.left_of(i) is None
        assert grid.right_of(i) is None

def test_empty_cells_are_absent():
    grid = WorldGrid((2, 1), 0.3, [W, None])
    assert grid.right_of(0) is None
    assert grid.left_of(1) is W

def test_mean_albedo_of_empty_grid_is_bare_ground():
    assert WorldGrid.empty((20, 20), 0.3).mean_albedo() == 0.5

def test_mean_albedo_mixes_daisies_and_bare_ground():
    assert WorldGrid((2, 2), 0.3, [B, W, None, None]).mean_albedo() == pytest.approx(0.5)
    assert WorldGrid((2, 1), 0.3, [B, None]).mean_albedo() == pytest.approx(0.375)

def test_counts():
    grid = WorldGrid((3, 1), 0.3, [B, None, W])
    assert grid.empty_count() == 1
    assert grid.occupied_count() == 2
    assert grid.dark_count() == 1
    assert grid.light_count() == 1
    assert list(grid.occupied()) == [(0, B), (2, W)]
    assert not grid.is_extinct()
    assert WorldGrid.empty((3, 1), 0.3).is_extinct()

def test_albedo_array_applies_bare_ground():
    grid = WorldGrid((3, 1), 0.3, [B, None, W])
    np.testing.assert_array_equal(grid.albedo_array(), [0.25, 0.5, 0.75])
    assert albedo_or_bare(None) == 0.5

def test_new_randomized_with_high_draws_is_empty():
    rng = ScriptedRandom.constant(0.2)
    grid = WorldGrid.new_randomized((5, 4), 0.3, rng)
    assert grid.empty_count() == 20
    assert rng.draws == 20

def test_new_randomized_bands():
    rng = ScriptedRandom([0.05, 0.15, 0.5, 0.95])
    grid = WorldGrid.new_randomized((2, 2), 0.3, rng)
    assert grid.cells == [B, W, None, None]
    assert grid.death_rate == 0.3
    assert WorldGrid.new_randomized((2, 2), 0.3, ScriptedRandom.constant(0.0)).cells == [B] * 4

def test_copy_is_independent():
    grid = WorldGrid((2, 1), 0.3, [B, None])
    clone = grid.copy()
    assert clone == grid
    clone.cells[1] = W
    assert grid.cells[1] is None
    assert clone != grid

def test_copy_into_overwrites_buffer():
    grid = WorldGrid((2, 1), 0.3, [B, W], row_bleed=True)
    buffer = WorldGrid.empty((2, 1), 0.9)
    cells_list = buffer.cells
    result = grid.copy_into(buffer)
    assert result is buffer
    assert buffer.cells is cells_list
    assert buffer == grid

def test_copy_into_rejects_mismatched_buffer():
    with pytest.raises(ValueError):
        WorldGrid.empty((2, 2), 0.3).copy_into(WorldGrid.empty((4, 1), 0.3))
