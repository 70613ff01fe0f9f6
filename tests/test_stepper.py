"""Tests for the playback state machine."""

import pytest

from algorithms.bubble_sort import bubble_sort
from engine import SPEED_PRESETS, Stepper, StepperState, array_frames
from engine.stepper import MIN_SPEED
from algorithms.traversals import in_order
from structures import BinarySearchTree, make_elements


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def loaded(clock):
    items = make_elements([3, 1, 2])
    steps = bubble_sort(items)
    stepper = Stepper(family="array", clock=clock)
    stepper.start(steps, array_frames(items, steps))
    return stepper


class TestLifecycle:
    """Test start / reset transitions."""

    def test_new_stepper_is_idle(self):
        stepper = Stepper()
        assert stepper.state is StepperState.IDLE
        assert stepper.current_step is None

    def test_start_pauses_before_first_step(self, loaded):
        assert loaded.state is StepperState.PAUSED
        assert loaded.current_idx == -1
        assert loaded.current_frame.values() == [3, 1, 2]

    def test_empty_sequence_is_finished(self):
        stepper = Stepper()
        stepper.start(())
        assert stepper.is_finished
        assert stepper.progress == 1.0

    def test_frame_count_checked(self):
        with pytest.raises(ValueError):
            Stepper().start(bubble_sort(make_elements([2, 1])), frames=[])

    def test_reset(self, loaded):
        loaded.next_step()
        loaded.reset()
        assert loaded.state is StepperState.IDLE
        assert loaded.total_steps == 0


class TestNavigation:
    """Test stepping and seeking."""

    def test_next_and_prev(self, loaded):
        assert loaded.next_step()
        assert loaded.current_idx == 0
        assert loaded.current_step is loaded.steps[0]
        assert loaded.prev_step()
        assert loaded.current_idx == -1
        assert not loaded.prev_step()

    def test_reaching_end_finishes(self, loaded):
        while loaded.next_step():
            pass
        assert loaded.is_finished
        assert loaded.current_idx == loaded.total_steps - 1
        assert loaded.current_frame.values() == [1, 2, 3]
        assert loaded.progress == 1.0

    def test_prev_from_end_unfinishes(self, loaded):
        loaded.jump_to_end()
        assert loaded.is_finished
        loaded.prev_step()
        assert loaded.state is StepperState.PAUSED

    def test_goto_bounds(self, loaded):
        assert loaded.goto_step(2)
        assert loaded.current_idx == 2
        assert not loaded.goto_step(loaded.total_steps)
        assert not loaded.goto_step(-2)
        loaded.rewind()
        assert loaded.current_idx == -1

    def test_on_step_callback(self, clock):
        seen = []
        items = make_elements([2, 1])
        stepper = Stepper(on_step=seen.append, clock=clock)
        stepper.start(bubble_sort(items))
        stepper.next_step()
        stepper.next_step()
        stepper.prev_step()
        assert seen == [stepper.steps[0], stepper.steps[1], stepper.steps[0]]


class TestPlayback:
    """Test timed auto-advance."""

    def test_tick_waits_for_speed(self, loaded, clock):
        loaded.play()
        assert loaded.is_playing
        clock.advance(0.1)
        assert not loaded.tick()
        clock.advance(0.5)
        assert loaded.tick()
        assert loaded.current_idx == 0

    def test_tick_does_nothing_when_paused(self, loaded, clock):
        clock.advance(10)
        assert not loaded.tick()

    def test_plays_to_finish(self, loaded, clock):
        loaded.set_speed("fast")
        loaded.play()
        for _ in range(loaded.total_steps * 2):
            clock.advance(0.25)
            loaded.tick()
        assert loaded.is_finished
        assert not loaded.is_playing

    def test_play_ignored_when_finished(self, loaded):
        loaded.jump_to_end()
        loaded.play()
        assert loaded.is_finished

    def test_toggle(self, loaded):
        loaded.toggle_play()
        assert loaded.is_playing
        loaded.toggle_play()
        assert loaded.state is StepperState.PAUSED


class TestSpeed:
    """Test speed presets and scaling."""

    def test_family_presets(self):
        assert Stepper(family="array").speed == SPEED_PRESETS["array"]["medium"] == 0.5
        assert Stepper(family="graph").speed == 1.0
        assert Stepper(family="tree").speed == 0.8
        assert Stepper(family="list").speed == 0.3

    def test_unknown_preset_falls_back_to_medium(self):
        stepper = Stepper(family="graph")
        stepper.set_speed("slow")
        assert stepper.speed == 1.5
        stepper.set_speed("ludicrous")
        assert stepper.speed == 1.0

    def test_scale_and_floor(self):
        stepper = Stepper()
        stepper.scale_speed(2)
        assert stepper.speed == pytest.approx(0.25)
        stepper.set_speed_value(0)
        assert stepper.speed == MIN_SPEED
        with pytest.raises(ValueError):
            stepper.scale_speed(0)


class TestTraversalPlayback:
    """A stepper can also play a plain id list."""

    def test_plays_in_order_ids(self, clock):
        tree = BinarySearchTree.from_values([5, 3, 8])
        stepper = Stepper(family="tree", clock=clock)
        stepper.start(in_order(tree))
        stepper.play()
        lit = []
        for _ in range(3):
            clock.advance(1.0)
            stepper.tick()
            lit.append(tree.nodes[stepper.current_step].value)
        assert lit == [3, 5, 8]
        assert stepper.is_finished
        assert stepper.current_frame is None
