"""
Tests for the Universe transition rule.

Tests:
- Construction (empty, random)
- Neighbour counting under both boundary policies
- The survive/birth rule
- Known patterns (still life, oscillator, glider)
- Immutability of the receiver
"""

import pytest

from ..engine_core import Cell, Universe, ToroidalUniverse, next_state


class TestConstruction:
    """Tests for empty and random universes."""

    @pytest.mark.parametrize("columns,rows", [(0, 0), (1, 1), (4, 3), (7, 2)])
    def test_new_empty_is_all_dead(self, columns, rows):
        """An empty universe has columns * rows dead cells."""
        universe = Universe.new_empty(columns, rows)

        assert len(universe.cells) == columns * rows
        assert all(cell is Cell.DEAD for cell in universe.cells.items)
        assert universe.columns == columns
        assert universe.rows == rows

    def test_new_random_draws_once_per_cell(self, alternating_bools):
        universe = Universe.new_random(3, 2, alternating_bools)

        assert universe.to_text() == "#.#\n.#.\n"

    def test_new_random_default_source(self):
        universe = Universe.new_random(8, 8)

        assert len(universe.cells) == 64
        assert set(universe.cells.items) <= {Cell.DEAD, Cell.ALIVE}

    def test_new_random_keeps_type(self, alternating_bools):
        universe = ToroidalUniverse.new_random(2, 2, alternating_bools)

        assert isinstance(universe, ToroidalUniverse)


class TestRule:
    """Tests for next_state."""

    @pytest.mark.parametrize("neighbours", [2, 3])
    def test_live_cell_survives(self, neighbours):
        assert next_state(Cell.ALIVE, neighbours) is Cell.ALIVE

    @pytest.mark.parametrize("neighbours", [0, 1, 4, 5, 8])
    def test_live_cell_dies(self, neighbours):
        assert next_state(Cell.ALIVE, neighbours) is Cell.DEAD

    def test_dead_cell_is_born_with_three(self):
        assert next_state(Cell.DEAD, 3) is Cell.ALIVE

    @pytest.mark.parametrize("neighbours", [0, 2, 4, 8])
    def test_dead_cell_stays_dead(self, neighbours):
        assert next_state(Cell.DEAD, neighbours) is Cell.DEAD


class TestBoundedUniverse:
    """Tests for the bounded boundary policy."""

    def test_count_live_neighbours(self, block_universe):
        assert block_universe.count_live_neighbours((2, 1)) == 3

    def test_count_live_neighbours_at_corner(self):
        universe = Universe.parse("##\n##")

        assert universe.count_live_neighbours((1, 0)) == 3

    def test_get_new_state(self):
        universe = Universe.parse("##\n##")

        assert universe.get_new_state((1, 0)) is Cell.ALIVE
        assert universe.get_new_state((0, 0)) is Cell.ALIVE

    def test_edges_do_not_wrap(self):
        """Cells on the opposite edge are not neighbours."""
        universe = Universe.parse(".#\n#.")

        assert universe.count_live_neighbours((0, 0)) == 2

    def test_block_is_still_life(self, block_universe):
        assert block_universe.step() == block_universe

    def test_blinker_oscillates(self, blinker_text):
        universe = Universe.parse(blinker_text)
        next_universe = universe.step()

        assert next_universe.to_text() == ".....\n.....\n.###.\n.....\n.....\n"
        assert next_universe.step() == universe

    def test_glider_moves_diagonally(self, glider_text):
        universe = Universe.parse(glider_text)
        for _ in range(4):
            universe = universe.step()

        assert universe.to_text() == (
            "......\n"
            ".#.#..\n"
            "..##..\n"
            "..#...\n"
            "......\n"
            "......\n"
        )

    def test_lone_cell_dies(self):
        universe = Universe.parse("...\n.#.\n...")

        assert universe.step() == Universe.new_empty(3, 3)


class TestToroidalUniverse:
    """Tests for the wrap-around boundary policy."""

    def test_count_live_neighbours_across_edge(self):
        universe = ToroidalUniverse.parse(".#\n#.")

        assert universe.count_live_neighbours((0, 0)) == 4

    def test_count_live_neighbours_inside(self, toroidal_block_universe):
        assert toroidal_block_universe.count_live_neighbours((2, 1)) == 3

    def test_block_is_still_life(self, toroidal_block_universe):
        assert toroidal_block_universe.step() == toroidal_block_universe

    def test_edges_touch(self):
        """A horizontal blinker split across the left/right edge still oscillates."""
        universe = ToroidalUniverse.parse(
            ".....\n"
            ".....\n"
            "##..#\n"
            ".....\n"
            "....."
        )
        next_universe = universe.step()

        assert next_universe.to_text() == (
            ".....\n"
            "#....\n"
            "#....\n"
            "#....\n"
            ".....\n"
        )
        assert next_universe.step() == universe

    def test_glider_returns_home(self, glider_text):
        """A glider crosses a 6x6 torus and comes back after 24 generations."""
        universe = ToroidalUniverse.parse(glider_text)
        current = universe
        for _ in range(24):
            current = current.step()
            assert current.live_cell_count() == 5

        assert current == universe

    def test_step_keeps_type(self, toroidal_block_universe):
        assert isinstance(toroidal_block_universe.step(), ToroidalUniverse)


class TestImmutability:
    """Tests that step() never changes its receiver."""

    def test_step_leaves_receiver_unchanged(self, blinker_text):
        universe = Universe.parse(blinker_text)
        before = universe.cells.items

        next_universe = universe.step()

        assert universe.cells.items == before
        assert universe.to_text() == blinker_text + "\n"
        assert next_universe is not universe
        assert next_universe.cells is not universe.cells

    def test_policies_are_not_equal(self, block_text):
        """Universes with different boundary policies never compare equal."""
        assert Universe.parse(block_text) != ToroidalUniverse.parse(block_text)

    def test_equal_universes_hash_equal(self, block_text):
        assert hash(Universe.parse(block_text)) == hash(Universe.parse(block_text))
