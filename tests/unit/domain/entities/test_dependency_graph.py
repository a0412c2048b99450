"""Unit tests for dependency graph entities."""

import pytest

from migration_planner.domain.entities.component import ComponentKind, DependencyKind
from migration_planner.domain.entities.dependency_graph import (
    DependencyEdge,
    DependencyGraph,
    DependencyNode,
    EdgeMetadata,
    GraphStats,
)


class TestDependencyNode:
    """Test DependencyNode entity."""

    def test_create_node(self):
        node = DependencyNode(id="c:AccountCard", name="AccountCard", kind=ComponentKind.AURA)

        assert node.in_degree == 0
        assert node.circular_group is None
        assert node.is_convertible is True

    def test_empty_id_raises(self):
        with pytest.raises(ValueError, match="node id cannot be empty"):
            DependencyNode(id="", name="X", kind=ComponentKind.AURA)

    def test_orphan_and_leaf_raises(self):
        with pytest.raises(ValueError, match="cannot be both orphan and leaf"):
            DependencyNode(
                id="c:X", name="X", kind=ComponentKind.AURA, is_orphan=True, is_leaf=True
            )

    @pytest.mark.parametrize(
        "kind,convertible",
        [
            (ComponentKind.AURA, True),
            (ComponentKind.VF, True),
            (ComponentKind.APEX, False),
            (ComponentKind.LWC, False),
            (ComponentKind.ASSET, False),
        ],
    )
    def test_is_convertible(self, kind, convertible):
        assert DependencyNode(id="x:X", name="X", kind=kind).is_convertible is convertible


class TestDependencyEdge:
    """Test DependencyEdge entity."""

    def test_default_metadata(self):
        edge = DependencyEdge(from_id="c:A", to_id="c:B", kind=DependencyKind.COMPONENT)

        assert edge.metadata == EdgeMetadata()
        assert edge.metadata.bidirectional is False
        assert edge.is_self_loop is False

    def test_self_loop(self):
        edge = DependencyEdge(from_id="c:A", to_id="c:A", kind=DependencyKind.COMPONENT)

        assert edge.is_self_loop is True


class TestGraphStats:
    """Test GraphStats aggregate."""

    def test_defaults_cover_every_kind(self):
        stats = GraphStats()

        assert set(stats.kind_counts) == set(ComponentKind)
        assert stats.aura_components == 0
        assert stats.vf_pages == 0
        assert stats.apex_controllers == 0

    def test_convenience_counts(self):
        stats = GraphStats(
            kind_counts={
                ComponentKind.AURA: 3,
                ComponentKind.VF: 2,
                ComponentKind.APEX: 1,
                ComponentKind.LWC: 0,
                ComponentKind.ASSET: 0,
            }
        )

        assert stats.aura_components == 3
        assert stats.vf_pages == 2
        assert stats.apex_controllers == 1


class TestDependencyGraph:
    """Test DependencyGraph helpers."""

    @pytest.fixture
    def graph(self):
        nodes = {
            "c:A": DependencyNode(id="c:A", name="Zeta", kind=ComponentKind.AURA),
            "vf:P": DependencyNode(id="vf:P", name="Alpha", kind=ComponentKind.VF),
            "apex:C": DependencyNode(id="apex:C", name="Ctrl", kind=ComponentKind.APEX),
            "c:B": DependencyNode(id="c:B", name="Beta", kind=ComponentKind.AURA),
        }
        edges = [
            DependencyEdge(from_id="c:A", to_id="c:B", kind=DependencyKind.COMPONENT),
            DependencyEdge(from_id="c:A", to_id="apex:C", kind=DependencyKind.CONTROLLER),
            DependencyEdge(from_id="vf:P", to_id="c:B", kind=DependencyKind.COMPONENT),
        ]
        return DependencyGraph(nodes=nodes, edges=edges)

    def test_empty_graph(self):
        graph = DependencyGraph.empty()

        assert graph.is_empty
        assert graph.stats.total_nodes == 0
        assert graph.circular_groups == []

    def test_get_node(self, graph):
        assert graph.get_node("c:A").name == "Zeta"
        assert graph.get_node("c:Missing") is None

    def test_outgoing_and_incoming(self, graph):
        assert [e.to_id for e in graph.outgoing("c:A")] == ["c:B", "apex:C"]
        assert [e.from_id for e in graph.incoming("c:B")] == ["c:A", "vf:P"]

    def test_sorted_nodes_by_kind_then_name(self, graph):
        assert [node.id for node in graph.sorted_nodes()] == ["c:B", "c:A", "vf:P", "apex:C"]
