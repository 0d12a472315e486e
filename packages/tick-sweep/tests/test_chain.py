"""Tests for Chain construction, drawing, and neighbor lookup."""
import pytest

from tick_sweep import Chain, Node, ScaleState


class RecordingPainter:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, surface) -> None:
        self.calls.append(("clear", surface))

    def draw_node(self, surface, index, scale) -> None:
        self.calls.append(("node", surface, index, scale))


class TestBuild:
    def test_build_creates_indexed_nodes(self):
        chain = Chain.build(5)
        assert len(chain) == 5
        assert [node.index for node in chain] == [0, 1, 2, 3, 4]
        assert chain.head is chain[0]

    def test_each_node_owns_its_state(self):
        chain = Chain.build(3, step=0.1)
        states = [node.state for node in chain]
        assert len({id(s) for s in states}) == 3
        assert all(s.step == 0.1 for s in states)

    def test_build_rejects_empty_chain(self):
        with pytest.raises(ValueError):
            Chain.build(0)

    def test_constructor_rejects_misnumbered_nodes(self):
        with pytest.raises(ValueError):
            Chain((Node(index=0), Node(index=2)))

    def test_single_node_chain(self):
        chain = Chain.build(1)
        assert len(chain) == 1


class TestDrawAll:
    def test_draws_head_to_tail(self):
        chain = Chain.build(3)
        chain[1].state.scale = 0.5
        painter = RecordingPainter()

        chain.draw_all("surface", painter)

        assert painter.calls == [
            ("node", "surface", 0, 0.0),
            ("node", "surface", 1, 0.5),
            ("node", "surface", 2, 0.0),
        ]


class TestNeighbor:
    def test_forward_neighbor(self):
        chain = Chain.build(5)
        assert chain.neighbor(2, 1) == 3

    def test_backward_neighbor(self):
        chain = Chain.build(5)
        assert chain.neighbor(2, -1) == 1

    def test_tail_edge_calls_on_edge(self):
        chain = Chain.build(5)
        edges = []
        assert chain.neighbor(4, 1, on_edge=lambda: edges.append("edge")) == 4
        assert edges == ["edge"]

    def test_head_edge_calls_on_edge(self):
        chain = Chain.build(5)
        edges = []
        assert chain.neighbor(0, -1, on_edge=lambda: edges.append("edge")) == 0
        assert edges == ["edge"]

    def test_interior_does_not_call_on_edge(self):
        chain = Chain.build(5)
        edges = []
        chain.neighbor(1, 1, on_edge=lambda: edges.append("edge"))
        chain.neighbor(1, -1, on_edge=lambda: edges.append("edge"))
        assert edges == []

    def test_edge_without_callback(self):
        chain = Chain.build(2)
        assert chain.neighbor(1, 1) == 1

    def test_invalid_direction_rejected(self):
        chain = Chain.build(5)
        with pytest.raises(ValueError):
            chain.neighbor(2, 0)


class TestNodeDelegation:
    def test_node_begin_and_advance_use_state(self):
        node = Node(index=0, state=ScaleState(step=0.5))
        assert node.begin() is True
        assert node.advance() is False
        assert node.scale == 0.5
        assert node.advance() is False
        done = []
        assert node.advance(lambda: done.append(True)) is True
        assert done == [True]
        assert node.scale == 1.0
