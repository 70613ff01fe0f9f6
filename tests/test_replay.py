"""Tests for replaying steps into display frames."""

from algorithms.bfs import bfs
from algorithms.dijkstra import dijkstra
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.step import Step, StepType
from engine import array_frames, graph_frames, replay_array
from engine.replay import apply_array_step, initial_array_frame
from structures import make_elements


class TestArrayReplay:
    """Test array order reconstruction."""

    def test_partial_replay(self, elements):
        items = elements(3, 1, 2)
        steps = (
            Step(StepType.COMPARE, "", indices=(0, 1)),
            Step(StepType.SWAP, "", indices=(0, 1)),
            Step(StepType.SWAP, "", indices=(1, 2)),
        )
        assert [e.value for e in replay_array(items, steps, upto=2)] == [1, 3, 2]
        assert [e.value for e in replay_array(items, steps)] == [1, 2, 3]
        assert [e.value for e in items] == [3, 1, 2]

    def test_placement_writes_named_element(self, elements):
        items = elements(5, 6)
        steps = (Step(StepType.SWAP, "", indices=(1,), element_id="elem-0"),)
        assert [e.id for e in replay_array(items, steps)] == ["elem-0", "elem-0"]

    def test_frame_count(self, elements):
        items = elements(4, 2, 9, 1)
        steps = merge_sort(items)
        frames = array_frames(items, steps)
        assert len(frames) == len(steps) + 1
        assert frames[0].values() == [4, 2, 9, 1]
        assert frames[-1].values() == [1, 2, 4, 9]

    def test_final_frame_all_sorted(self, elements):
        frames = array_frames(elements(3, 1, 2), insertion_sort(elements(3, 1, 2)))
        assert all(e.is_sorted for e in frames[-1].elements)
        assert not any(e.is_sorted for e in frames[0].elements)

    def test_no_steps_single_frame(self):
        frames = array_frames([], ())
        assert len(frames) == 1
        assert frames[0].elements == ()


class TestArrayFlags:
    """Transient flags follow the step; sorted flags stick."""

    def test_compare_flags(self, elements):
        items = elements(1, 2, 3)
        by_id = {e.id: e for e in items}
        frame = apply_array_step(initial_array_frame(items), Step(StepType.COMPARE, "c", indices=(0, 2)), by_id)
        assert [e.is_comparing for e in frame.elements] == [True, False, True]
        assert frame.description == "c"
        assert frame.step_index == 0

    def test_sorted_sticks_and_transients_clear(self, elements):
        items = elements(1, 2)
        by_id = {e.id: e for e in items}
        frame = initial_array_frame(items)
        frame = apply_array_step(frame, Step(StepType.SORT, "", indices=(0,)), by_id)
        frame = apply_array_step(frame, Step(StepType.HIGHLIGHT, "", indices=(1,)), by_id)
        assert [e.is_sorted for e in frame.elements] == [True, False]
        assert [e.is_highlighted for e in frame.elements] == [False, True]
        frame = apply_array_step(frame, Step(StepType.COMPARE, "", indices=(0, 1)), by_id)
        assert not any(e.is_highlighted for e in frame.elements)

    def test_frames_do_not_share_state(self, elements):
        items = elements(2, 1)
        frames = array_frames(items, merge_sort(items))
        assert frames[0].values() == [2, 1]
        assert not items[0].is_sorted


class TestGraphReplay:
    """Test graph frames."""

    def test_visited_grows_in_order(self, abcd_graph):
        steps = bfs(*abcd_graph.snapshot(), "A")
        frames = graph_frames(steps)
        assert frames[0].visited == ()
        assert frames[-1].visited == ("A", "B", "C", "D")
        assert frames[1].active == "A"

    def test_distances_accumulate(self, weighted_graph):
        steps = dijkstra(*weighted_graph.snapshot(), "A")
        frames = graph_frames(steps)
        assert frames[1].distances == {"A": 0}
        assert frames[-1].distances["E"] == 7
        assert frames[0].distances == {}
