"""Tests for grid loading, random sampling and queries."""

import numpy as np
import pytest
from hexlife.core.grid import Grid
from hexlife.errors import InvalidGridError, InvalidParameterError


class TestGridInitialization:
    """Test grid construction."""

    def test_initial_state_dead(self):
        grid = Grid(4)
        assert grid.size == 4
        assert grid.state.shape == (4, 4)
        assert grid.is_empty()

    def test_initial_state_from_array(self):
        state = np.eye(3, dtype=bool)
        grid = Grid(3, state)
        assert grid[1, 1] is True
        assert grid[0, 1] is False

        # Grid keeps its own copy
        state[0, 1] = True
        assert grid[0, 1] is False

    def test_initial_state_shape_mismatch(self):
        with pytest.raises(InvalidGridError):
            Grid(3, np.zeros((3, 4), dtype=bool))

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        with pytest.raises(InvalidParameterError):
            Grid(size)


class TestGridFromLines:
    """Test parsing glyph lines."""

    def test_parse_glyphs(self):
        grid = Grid.from_lines(["X..", ".X.", "..X"])
        assert grid.size == 3
        assert np.array_equal(grid.state, np.eye(3, dtype=bool))

    def test_trailing_newlines_stripped(self):
        grid = Grid.from_lines(["X.\n", ".X\r\n"])
        assert grid.size == 2
        assert grid.count_alive() == 2

    @pytest.mark.parametrize("lines", [[], [""]])
    def test_empty_input(self, lines):
        with pytest.raises(InvalidGridError, match="empty"):
            Grid.from_lines(lines)

    def test_ragged_rows(self):
        with pytest.raises(InvalidGridError, match="Row 1"):
            Grid.from_lines(["X.", "X"])

    def test_illegal_glyph(self):
        with pytest.raises(InvalidGridError, match="row 1, column 1"):
            Grid.from_lines(["X.", "XO"])

    def test_not_square(self):
        with pytest.raises(InvalidGridError, match="square"):
            Grid.from_lines(["X..", "..."])

    def test_single_cell(self):
        grid = Grid.from_lines(["X"])
        assert grid.size == 1
        assert grid[0, 0] is True


class TestGridRandom:
    """Test random grid sampling."""

    def test_probability_extremes(self):
        assert Grid.random(1.0, 5).count_alive() == 25
        assert Grid.random(0.0, 5).is_empty()

    def test_density_roughly_matches(self):
        grid = Grid.random(0.3, 100, np.random.default_rng(0))
        assert 0.25 < grid.density() < 0.35

    def test_same_seed_same_grid(self):
        a = Grid.random(0.5, 20, np.random.default_rng(42))
        b = Grid.random(0.5, 20, np.random.default_rng(42))
        assert a == b

    @pytest.mark.parametrize("probability", [-0.1, 1.01, 2.0])
    def test_probability_out_of_range(self, probability):
        with pytest.raises(InvalidParameterError):
            Grid.random(probability, 5)

    @pytest.mark.parametrize("size", [0, -3])
    def test_size_not_positive(self, size):
        with pytest.raises(InvalidParameterError):
            Grid.random(0.5, size)


class TestGridQueries:
    """Test counting, copying and equality."""

    def test_count_and_density(self):
        grid = Grid.from_lines(["XX", ".."])
        assert grid.count_alive() == 2
        assert grid.density() == 0.5

    def test_copy_is_independent(self):
        grid = Grid.from_lines(["X.", ".."])
        copy = grid.copy()
        assert copy == grid
        copy[1, 1] = True
        assert copy != grid

    def test_non_grid_comparison(self):
        assert Grid(2) != "grid"

    def test_different_sizes_inequal(self):
        assert Grid(2) != Grid(3)

    def test_str_uses_glyphs(self):
        assert str(Grid.from_lines(["X.", ".X"])) == "X.\n.X"

    def test_repr(self):
        assert repr(Grid.from_lines(["XX", ".."])) == "Grid(2x2, alive=2, density=50.0%)"
