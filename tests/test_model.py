"""Unit tests for ForestFireModel class."""

import random

import numpy as np
import pytest

from forest_fire.geometry import GridPosition
from forest_fire.model import ForestFireModel, SimulationInvariantError
from forest_fire.placement import uniform_placement
from forest_fire.state import BURNT, CATCHING, UNCAUGHT, CellState, TreeState

ORDER = [CellState.Uncaught, CellState.Catching, CellState.Burning, CellState.Burnt]


def make_model(trees, ignitions, susceptibility=1.0, burn_duration=1, width=5, height=5, seed=0):
    return ForestFireModel(
        width=width,
        height=height,
        susceptibility=susceptibility,
        burn_duration=burn_duration,
        trees=trees,
        ignitions=ignitions,
        rng=random.Random(seed),
    )


def active_by_state(model):
    return {pos for pos, state in model.cells() if state.is_active}


class ScriptedRandom(random.Random):
    """Random source returning preset values from ``random()`` and counting draws."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


class TestModelCreation:
    """Test cases for building a model."""

    def test_trees_start_uncaught(self, full_grid):
        model = make_model(full_grid, [(2, 2)])
        assert len(model.trees) == 25
        for pos, state in model.cells():
            expected = CATCHING if pos == (2, 2) else UNCAUGHT
            assert state == expected

    def test_ignition_is_active(self, full_grid):
        model = make_model(full_grid, [(2, 2)])
        assert model.active_cells == (GridPosition(2, 2),)
        assert model.current_tick == 0
        assert not model.steady_state()

    def test_ignition_without_tree_gets_one(self):
        model = make_model([(0, 0)], [(3, 3)])
        assert model.state_at((3, 3)) == CATCHING
        assert len(model.trees) == 2

    def test_multiple_ignitions(self, full_grid):
        model = make_model(full_grid, [(0, 0), (4, 4)])
        assert model.active_cells == (GridPosition(0, 0), GridPosition(4, 4))

    def test_requires_ignition(self, full_grid):
        with pytest.raises(ValueError):
            make_model(full_grid, [])

    def test_mesa_seed_is_used_without_rng(self, full_grid):
        states = []
        for _ in range(2):
            model = ForestFireModel(10, 10, 0.5, 2, full_grid, [(2, 2)], seed=42)
            for _ in range(6):
                model.tick()
            states.append(list(model.cells()))
        assert states[0] == states[1]


class TestTick:
    """Test cases for a single tick."""

    def test_catching_becomes_burning(self, full_grid):
        model = make_model(full_grid, [(2, 2)], burn_duration=4)
        model.tick()
        assert model.state_at((2, 2)) == TreeState.burning(4)
        assert model.current_tick == 1
        # Catching trees do not spread fire yet
        assert model.active_cells == (GridPosition(2, 2),)

    def test_full_susceptibility_spreads_to_every_neighbour(self, full_grid):
        model = make_model(full_grid, [(2, 2)], susceptibility=1.0, burn_duration=5)
        model.tick()
        model.tick()
        neighbours = set(GridPosition(2, 2).neighbors())
        for pos, state in model.cells():
            if pos in neighbours:
                assert state == CATCHING
            elif pos != (2, 2):
                assert state == UNCAUGHT

    def test_zero_susceptibility_never_spreads(self, full_grid):
        model = make_model(full_grid, [(2, 2)], susceptibility=0.0, burn_duration=3)
        while not model.steady_state():
            model.tick()
        assert model.state_at((2, 2)) == BURNT
        counts = model.state_counts()
        assert counts[CellState.Uncaught] == 24
        assert counts[CellState.Burnt] == 1

    def test_burn_duration(self):
        model = make_model([(0, 0)], [(0, 0)], burn_duration=3)
        model.tick()  # tick 0: Catching -> Burning(3)
        assert model.state_at((0, 0)) == TreeState.burning(3)
        for _ in range(3):  # ticks 1, 2 still burning, burnt during tick 3
            assert model.state_at((0, 0)).kind is CellState.Burning
            model.tick()
        assert model.state_at((0, 0)) == BURNT
        assert model.current_tick == 4
        assert model.steady_state()

    def test_tick_after_steady_state_only_advances_clock(self):
        model = make_model([(0, 0), (5, 5)], [(0, 0)], burn_duration=1)
        while not model.steady_state():
            model.tick()
        before = list(model.cells())
        tick = model.current_tick
        model.tick()
        model.tick()
        assert list(model.cells()) == before
        assert model.current_tick == tick + 2

    def test_step_tracks_running(self):
        model = make_model([(0, 0)], [(0, 0)], burn_duration=1)
        steps = 0
        while model.running:
            model.step()
            steps += 1
        assert steps == 2
        assert model.steady_state()

    def test_corrupted_active_set_is_fatal(self, full_grid):
        model = make_model(full_grid, [(2, 2)])
        model.active.add(GridPosition(9, 9))
        with pytest.raises(SimulationInvariantError):
            model.tick()

    def test_inactive_state_in_active_set_is_fatal(self, full_grid):
        model = make_model(full_grid, [(2, 2)])
        model.active.add(GridPosition(0, 0))
        with pytest.raises(SimulationInvariantError):
            model.tick()


class TestIgnitionDraws:
    """Test cases for how ignition odds are combined and drawn."""

    def test_burning_neighbours_compound(self):
        # Row of four trees; (1, 0) touches both fires, (3, 0) only one
        rng = ScriptedRandom([0.3])
        model = ForestFireModel(
            width=4, height=1, susceptibility=0.5, burn_duration=5,
            trees=[(0, 0), (1, 0), (2, 0), (3, 0)], ignitions=[(0, 0), (2, 0)], rng=rng,
        )
        model.tick()  # both fires start burning, nothing to draw yet
        assert rng.calls == 0
        model.tick()
        # One draw per uncaught neighbour: (1, 0) stays with 0.25, (3, 0) with 0.5
        assert rng.calls == 2
        assert model.state_at((1, 0)) == CATCHING
        assert model.state_at((3, 0)) == UNCAUGHT

    def test_draws_follow_ascending_positions(self, full_grid):
        # Only the first draw lets a tree stay uncaught. Neighbours of (2, 2) are
        # discovered in offset order starting with (1, 2), but (1, 1) sorts first.
        rng = ScriptedRandom([0.0, 0.9])
        model = make_model(full_grid, [(2, 2)], susceptibility=0.5, burn_duration=5, seed=0)
        model.random = rng
        model.tick()
        model.tick()
        assert rng.calls == 8
        uncaught_neighbours = [
            pos for pos in GridPosition(2, 2).neighbors() if model.state_at(pos) == UNCAUGHT
        ]
        assert uncaught_neighbours == [GridPosition(1, 1)]

    def test_draw_order_is_pinned_for_a_seed(self, full_grid):
        model = make_model(full_grid, [(2, 2)], susceptibility=0.5, burn_duration=5, seed=0)
        model.tick()
        expected_rng = random.Random(0)
        expected = [
            pos for pos in sorted(GridPosition(2, 2).neighbors())
            if not expected_rng.random() < 0.5
        ]
        model.tick()
        caught = [pos for pos in sorted(GridPosition(2, 2).neighbors()) if model.state_at(pos) == CATCHING]
        assert caught == expected


class TestTermination:
    """Fully planted 3x3 grid, centre ignition, certain spread, one tick burns."""

    @pytest.fixture
    def model(self):
        trees = [(x, y) for x in range(3) for y in range(3)]
        return make_model(trees, [(1, 1)], susceptibility=1.0, burn_duration=1, width=3, height=3)

    def test_neighbours_ignite_together(self, model):
        model.tick()
        model.tick()
        assert model.state_at((1, 1)) == BURNT
        assert len(model.active_cells) == 8
        assert all(model.state_at(pos) == CATCHING for pos in model.active_cells)

    def test_whole_grid_burns(self, model):
        ticks = 0
        while not model.steady_state():
            model.tick()
            ticks += 1
        assert ticks == 4
        assert all(state == BURNT for _, state in model.cells())


class TestProperties:
    """Properties that hold over whole runs."""

    @pytest.fixture
    def placement(self):
        return uniform_placement(20, 20, 0.6, random.Random(7))

    def _model(self, placement, seed):
        return make_model(
            placement.trees, placement.ignitions,
            susceptibility=0.5, burn_duration=3, width=20, height=20, seed=seed,
        )

    def test_monotonic_and_consistent(self, placement):
        model = self._model(placement, seed=3)
        previous = dict(model.cells())
        for _ in range(1000):
            model.tick()
            assert model.active == active_by_state(model)
            for pos, state in model.cells():
                assert ORDER.index(state.kind) >= ORDER.index(previous[pos].kind)
            previous = dict(model.cells())
            if model.steady_state():
                break
        assert model.steady_state()

    def test_deterministic(self, placement):
        first = self._model(placement, seed=11)
        second = self._model(placement, seed=11)
        for _ in range(30):
            first.tick()
            second.tick()
            assert list(first.cells()) == list(second.cells())

    def test_no_tree_never_appears(self, full_grid):
        trees = [pos for pos in full_grid if pos != (1, 1)]
        model = make_model(trees, [(0, 0)], susceptibility=1.0)
        while not model.steady_state():
            model.tick()
            assert model.state_at((1, 1)) is None
            assert GridPosition(1, 1) not in model.active
        assert all(state == BURNT for _, state in model.cells())


class TestQueries:
    """Test cases for the read-only query surface."""

    def test_cells_sorted(self):
        trees = [(3, 1), (0, 4), (3, 0), (1, 1)]
        model = make_model(trees, [(1, 1)])
        positions = [pos for pos, _ in model.cells()]
        assert positions == sorted(positions)

    def test_state_at_missing(self):
        model = make_model([(0, 0)], [(0, 0)])
        assert model.state_at((4, 4)) is None

    def test_state_counts(self, full_grid):
        model = make_model(full_grid, [(2, 2)])
        counts = model.state_counts()
        assert counts[CellState.Uncaught] == 24
        assert counts[CellState.Catching] == 1
        assert counts[CellState.Burning] == 0

    def test_to_array(self):
        model = make_model([(0, 0), (2, 1)], [(0, 0)], width=3, height=2)
        grid = model.to_array()
        assert grid.shape == (2, 3)
        expected = np.array([
            [CellState.Catching.value, 0, 0],
            [0, 0, CellState.Uncaught.value],
        ])
        assert (grid == expected).all()
