"""Tests for the Step model and StepLog."""

import dataclasses

import pytest

from algorithms.step import Step, StepLog, StepType, fmt


class TestStep:
    """Test the immutable Step record."""

    def test_requires_exactly_one_target(self):
        """A step names array slots or graph nodes, never both or neither."""
        with pytest.raises(ValueError):
            Step(StepType.COMPARE, "x")
        with pytest.raises(ValueError):
            Step(StepType.COMPARE, "x", indices=(0, 1), node_ids=("A",))

    def test_normalises_lists_and_type(self):
        """Lists become tuples and string types become StepType."""
        step = Step("compare", "x", indices=[0, 1])
        assert step.type is StepType.COMPARE
        assert step.indices == (0, 1)

    def test_is_frozen(self):
        """Steps cannot be edited after creation."""
        step = Step(StepType.VISIT, "Visiting node A", node_ids=("A",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.description = "changed"

    def test_placement_flag(self):
        """Only a one-index swap counts as a placement."""
        assert Step(StepType.SWAP, "", indices=(3,), element_id="e").is_placement
        assert not Step(StepType.SWAP, "", indices=(0, 1)).is_placement
        assert not Step(StepType.HIGHLIGHT, "", indices=(3,)).is_placement

    def test_to_dict_omits_unset_fields(self):
        """Serialised steps only carry the fields they use."""
        data = Step(StepType.SWAP, "Swapping", indices=(0, 1)).to_dict()
        assert data == {"type": "swap", "description": "Swapping", "indices": [0, 1]}

        data = Step(StepType.DISTANCE, "d", node_ids=("B",), distance=3).to_dict()
        assert data["node_ids"] == ["B"]
        assert data["distance"] == 3
        assert "indices" not in data


class TestStepLog:
    """Test the append-only builder."""

    def test_freeze_returns_tuple_in_order(self):
        """Steps come back in the order they were logged."""
        log = StepLog()
        log.compare(0, 1, "c")
        log.place(2, "elem-0", "p")
        log.mark_sorted(range(3), "s")
        steps = log.freeze()

        assert isinstance(steps, tuple)
        assert len(log) == 3
        assert [s.type for s in steps] == [StepType.COMPARE, StepType.SWAP, StepType.SORT]
        assert steps[1].element_id == "elem-0"
        assert steps[2].indices == (0, 1, 2)

    def test_graph_steps(self):
        """Graph helpers fill node_ids."""
        log = StepLog()
        log.highlight_node("A", "h")
        log.visit("A", "v")
        log.distance("B", 2.5, "d")
        steps = log.freeze()
        assert all(s.indices is None for s in steps)
        assert steps[2].distance == 2.5


def test_fmt_drops_trailing_zero():
    assert fmt(3.0) == "3"
    assert fmt(2.5) == "2.5"
    assert fmt(7) == "7"
