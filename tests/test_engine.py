"""Tests for input validation, the playback Stepper and the Recorder."""

import pytest

import config
from algorithms import StepEvent
from algorithms.bubble_sort import bubble_sort_steps
from engine import (
    InputError,
    Recorder,
    Stepper,
    StepperState,
    parse_array,
    parse_probability,
    parse_seed,
    parse_target,
    prepare_search_input,
    random_array,
    validate_array,
    validate_target,
)
from graph import Graph


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------
class TestInputs:

    def test_parse_array(self):
        assert parse_array("5, 3, 8, 1, 9") == [5, 3, 8, 1, 9]

    def test_parse_array_ignores_empty_items(self):
        assert parse_array("5,,3, 8 ,1,9,") == [5, 3, 8, 1, 9]

    @pytest.mark.parametrize("text", ["5, 3, x, 1, 9", "1, 2, 3", "0, 1, 2, 3, 4", "1, 2, 3, 4, 101"])
    def test_parse_array_rejects(self, text):
        with pytest.raises(InputError):
            parse_array(text)

    def test_validate_array_size_bounds(self):
        assert len(validate_array([1] * config.MAX_ARRAY_SIZE)) == config.MAX_ARRAY_SIZE
        with pytest.raises(InputError):
            validate_array([1] * (config.MAX_ARRAY_SIZE + 1))

    def test_validate_array_coerces_numeric_strings(self):
        assert validate_array(["1", 2, 3.0, "4", 5]) == [1, 2, 3, 4, 5]

    def test_validate_array_rejects_bools(self):
        with pytest.raises(InputError):
            validate_array([True, 2, 3, 4, 5])

    def test_targets(self):
        assert parse_target(" 7 ") == 7
        assert validate_target(100) == 100
        for bad in ("", "seven", 0, 101):
            with pytest.raises(InputError):
                validate_target(bad)

    def test_input_error_is_value_error(self):
        assert issubclass(InputError, ValueError)

    def test_random_array(self):
        values = random_array(12, seed=5)
        assert len(values) == 12
        assert all(config.MIN_VALUE <= v <= config.MAX_VALUE for v in values)
        assert random_array(12, seed=5) == values
        assert len(random_array()) == config.DEFAULT_ARRAY_SIZE

    def test_parse_seed(self):
        assert parse_seed(None) is None
        assert parse_seed("7") == 7
        assert parse_seed(3.0) == 3
        for bad in ([1, 2], 2.5, True, "x"):
            with pytest.raises(InputError):
                parse_seed(bad)

    def test_parse_probability(self):
        assert parse_probability(0) == 0.0
        assert parse_probability("0.25") == 0.25
        assert parse_probability(1) == 1.0
        for bad in (None, -0.1, 1.01, "nan", "often", False, [0.5]):
            with pytest.raises(InputError):
                parse_probability(bad)

    def test_random_array_size_bounds(self):
        with pytest.raises(InputError):
            random_array(config.MIN_ARRAY_SIZE - 1)

    def test_prepare_search_input(self):
        values = [9, 1, 5]
        assert prepare_search_input("binary-search", values) == ([1, 5, 9], True)
        assert prepare_search_input("binary-search", [1, 5, 9]) == ([1, 5, 9], False)
        assert prepare_search_input("linear-search", values) == ([9, 1, 5], False)
        assert values == [9, 1, 5]


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
@pytest.fixture
def loaded():
    stepper = Stepper()
    stepper.load(bubble_sort_steps([3, 1, 2]))
    return stepper


class TestStepper:

    def test_starts_idle(self):
        stepper = Stepper()
        assert stepper.state is StepperState.IDLE
        assert stepper.current_step is None
        assert not stepper.next_step()

    def test_load_shows_first_step(self, loaded):
        assert loaded.state is StepperState.PAUSED
        assert loaded.current_idx == 0
        assert loaded.current_step.event is StepEvent.INIT

    def test_navigation(self, loaded):
        assert not loaded.prev_step()
        assert loaded.next_step()
        assert loaded.current_idx == 1
        assert loaded.prev_step()
        assert loaded.current_idx == 0

    def test_goto_and_bounds(self, loaded):
        assert loaded.goto_step(3)
        assert loaded.current_idx == 3
        assert not loaded.goto_step(loaded.total_steps)
        assert not loaded.goto_step(-1)
        assert loaded.current_idx == 3

    def test_jump_to_end_and_rewind(self, loaded):
        loaded.jump_to_end()
        assert loaded.is_finished
        assert loaded.current_step.is_final
        assert not loaded.next_step()
        loaded.rewind()
        assert loaded.current_idx == 0
        assert loaded.state is StepperState.PAUSED

    def test_reaching_last_step_finishes(self, loaded):
        while loaded.next_step():
            pass
        assert loaded.is_finished
        assert loaded.current_idx == loaded.total_steps - 1

    def test_tick_respects_speed(self, loaded):
        loaded.set_speed_value(0.5)
        loaded.play()
        start = loaded._last_tick
        assert not loaded.tick(now=start + 0.1)
        assert loaded.tick(now=start + 0.6)
        assert loaded.current_idx == 1
        assert not loaded.tick(now=start + 0.7)

    def test_tick_does_nothing_when_paused(self, loaded):
        assert not loaded.tick(now=10_000.0)
        assert loaded.current_idx == 0

    def test_play_runs_to_finish(self, loaded):
        loaded.play()
        now = loaded._last_tick
        while loaded.is_playing:
            now += loaded.speed
            loaded.tick(now=now)
        assert loaded.is_finished
        loaded.play()
        assert loaded.is_finished

    def test_toggle_play(self, loaded):
        loaded.toggle_play()
        assert loaded.is_playing
        loaded.toggle_play()
        assert loaded.state is StepperState.PAUSED

    def test_speed_presets_and_clamp(self):
        stepper = Stepper()
        stepper.set_speed("fast")
        assert stepper.speed == config.SPEED_PRESETS["fast"]
        stepper.set_speed("warp")
        assert stepper.speed == config.DEFAULT_SPEED
        stepper.set_speed_value(0.0)
        assert stepper.speed == config.MIN_SPEED
        stepper.set_speed_value(60)
        assert stepper.speed == config.MAX_SPEED

    def test_on_step_callback(self):
        seen = []
        stepper = Stepper(on_step=seen.append)
        stepper.load(bubble_sort_steps([2, 1]))
        stepper.next_step()
        assert [s.step_number for s in seen] == [0, 1]

    def test_reset(self, loaded):
        loaded.reset()
        assert loaded.state is StepperState.IDLE
        assert loaded.total_steps == 0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class TestRecorder:

    def test_sort_metrics(self):
        rec = Recorder()
        metrics = rec.run("bubble-sort", array=[5, 3, 8, 1, 9])
        assert metrics.algo_label == "Bubble Sort"
        assert metrics.category == "sort"
        assert metrics.final_array == [1, 3, 5, 8, 9]
        assert metrics.total_steps == len(rec.steps)
        assert metrics.swaps == 4
        assert metrics.comparisons == sum(1 for s in rec.steps if s.event is StepEvent.COMPARE)
        assert metrics.wall_time_ms >= 0

    def test_binary_search_presorts(self):
        rec = Recorder()
        metrics = rec.run("binary-search", array=[9, 1, 5, 7, 3], target=7)
        assert metrics.input_reordered
        assert metrics.found_index == 3
        assert list(rec.steps[0].array) == [1, 3, 5, 7, 9]

    def test_linear_search_metrics(self):
        metrics = Recorder().run("linear-search", array=[5, 3, 8, 1, 9], target=8)
        assert metrics.found_index == 2
        assert metrics.comparisons == 3

    def test_graph_metrics(self, four_node_graph):
        metrics = Recorder().run("kruskals-algorithm", graph=four_node_graph)
        assert metrics.mst_cost == 9
        assert metrics.mst_edge_count == 3
        assert metrics.spanning

    def test_prims_defaults_to_first_node(self, triangle_graph):
        rec = Recorder()
        metrics = rec.run("prims-algorithm", graph=triangle_graph)
        assert metrics.start_node_id == 0
        assert metrics.mst_cost == 3

    def test_forest_is_not_spanning(self, disconnected_graph):
        assert not Recorder().run("kruskals-algorithm", graph=disconnected_graph).spanning

    def test_empty_graph_is_not_spanning(self):
        metrics = Recorder().run("prims-algorithm", graph=Graph())
        assert metrics.total_steps == 1
        assert not metrics.spanning

    def test_stepper_is_loaded(self):
        rec = Recorder()
        rec.run("quick-sort", array=[3, 1, 2, 5, 4])
        assert rec.stepper.total_steps == len(rec.steps)
        assert rec.stepper.current_idx == 0

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            Recorder().run("bogo-sort", array=[1, 2, 3, 4, 5])

    @pytest.mark.parametrize("key, kwargs", [
        ("bubble-sort", {}),
        ("linear-search", {"array": [1, 2, 3, 4, 5]}),
        ("kruskals-algorithm", {"array": [1, 2, 3, 4, 5]}),
    ])
    def test_missing_inputs(self, key, kwargs):
        with pytest.raises(InputError):
            Recorder().run(key, **kwargs)

    def test_export(self, triangle_graph):
        rec = Recorder()
        rec.run("prims-algorithm", graph=triangle_graph, start_node_id=1)
        data = rec.export()
        assert data["algo_key"] == "prims-algorithm"
        assert data["input"]["start_node_id"] == 1
        assert data["metrics"]["mst_cost"] == 3
        assert len(data["steps"]) == len(rec.steps)
        assert data["steps"][-1]["is_final"]

    def test_export_before_run(self):
        with pytest.raises(RuntimeError):
            Recorder().export()
