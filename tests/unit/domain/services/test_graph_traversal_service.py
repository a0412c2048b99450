"""Unit tests for GraphTraversalService."""

import pytest

from migration_planner.domain.entities.component import (
    ComponentAnalysis,
    RawDependency,
    extract_component_name,
    infer_component_kind,
)
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_traversal_service import (
    GraphTraversalService,
    TraversalDirection,
)


class TestTraversalDirection:
    """Test cases for TraversalDirection enum."""

    def test_traversal_direction_values(self):
        """Test that all expected traversal directions exist."""
        assert TraversalDirection.UPSTREAM.value == "upstream"
        assert TraversalDirection.DOWNSTREAM.value == "downstream"
        assert TraversalDirection.BOTH.value == "both"


class TestGraphTraversalService:
    """Test cases for GraphTraversalService."""

    @pytest.fixture
    def service(self):
        """Fixture for creating GraphTraversalService instance."""
        return GraphTraversalService()

    @pytest.fixture
    def graph(self):
        """vf:Page → c:A → c:B → c:C, c:Other → c:B, c:Lonely alone."""
        edges = {
            "vf:Page": ["c:A"],
            "c:A": ["c:B"],
            "c:B": ["c:C"],
            "c:C": [],
            "c:Other": ["c:B"],
            "c:Lonely": [],
        }
        return GraphBuilder().build(
            [
                ComponentAnalysis(
                    id=component_id,
                    name=extract_component_name(component_id),
                    kind=infer_component_kind(component_id),
                    dependencies=[
                        RawDependency(target=target, kind="component")
                        for target in targets
                    ],
                )
                for component_id, targets in edges.items()
            ]
        )

    def test_both_directions_unlimited(self, service, graph):
        related = service.collect_neighborhood(graph, "c:A")

        assert related == {"vf:Page", "c:A", "c:B", "c:C", "c:Other"}

    def test_downstream_only(self, service, graph):
        related = service.collect_neighborhood(
            graph, "c:A", direction=TraversalDirection.DOWNSTREAM
        )

        assert related == {"c:A", "c:B", "c:C"}

    def test_upstream_only(self, service, graph):
        related = service.collect_neighborhood(
            graph, "c:B", direction=TraversalDirection.UPSTREAM
        )

        assert related == {"c:B", "c:A", "c:Other", "vf:Page"}

    def test_depth_bound(self, service, graph):
        related = service.collect_neighborhood(graph, "c:A", max_depth=1)

        assert related == {"vf:Page", "c:A", "c:B"}

    def test_isolated_node(self, service, graph):
        assert service.collect_neighborhood(graph, "c:Lonely") == {"c:Lonely"}

    def test_negative_depth_raises(self, service, graph):
        with pytest.raises(ValueError, match="max_depth cannot be negative"):
            service.collect_neighborhood(graph, "c:A", max_depth=-1)

    def test_unknown_start_raises(self, service, graph):
        with pytest.raises(ValueError, match="not in the graph"):
            service.collect_neighborhood(graph, "c:Missing")
