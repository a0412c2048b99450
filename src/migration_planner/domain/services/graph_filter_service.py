"""Graph filter service module.

This module derives focused views of a dependency graph: the neighborhood of
one component, the circular-only view, and the view without orphans. Each
view is rebuilt as an independent, self-consistent graph.
"""

import difflib
import logging

from migration_planner.domain.entities.dependency_graph import DependencyGraph
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_traversal_service import (
    GraphTraversalService,
    TraversalDirection,
)

logger = logging.getLogger(__name__)

# Prefixes tried, in order, when the focus target is a bare name
FOCUS_PREFIXES = ("c:", "vf:", "apex:")


class GraphFilterService:
    """Domain service for filtering dependency graphs."""

    def __init__(
        self,
        graph_builder: GraphBuilder,
        traversal_service: GraphTraversalService | None = None,
    ):
        self.graph_builder = graph_builder
        self.traversal_service = traversal_service or GraphTraversalService()

    def resolve_focus_id(self, graph: DependencyGraph, target: str) -> str | None:
        """Resolve a free-form identifier or name to a node id.

        Resolution order: exact id, prefixed id (c:, vf:, apex:), then a
        case-insensitive match on the whole id or on the part after a colon.

        Args:
            graph: Graph to search
            target: Identifier or bare component name

        Returns:
            The matching node id, or None if nothing resolves
        """
        if not target:
            return None

        if target in graph.nodes:
            return target

        for prefix in FOCUS_PREFIXES:
            candidate = f"{prefix}{target}"
            if candidate in graph.nodes:
                return candidate

        lowered = target.lower()
        for node_id in sorted(graph.nodes):
            node_lower = node_id.lower()
            if node_lower == lowered or node_lower.endswith(f":{lowered}"):
                return node_id

        return None

    def suggest_focus_ids(
        self, graph: DependencyGraph, target: str, limit: int = 3
    ) -> list[str]:
        """Suggest node ids close to an unresolved focus target."""
        names = {node.name.lower(): node.id for node in graph.sorted_nodes()}
        by_id = difflib.get_close_matches(target, sorted(graph.nodes), n=limit, cutoff=0.6)
        by_name = [
            names[match]
            for match in difflib.get_close_matches(
                target.lower(), list(names), n=limit, cutoff=0.6
            )
        ]
        return list(dict.fromkeys(by_id + by_name))[:limit]

    def focus(
        self,
        graph: DependencyGraph,
        target: str,
        max_depth: int = 0,
        direction: TraversalDirection = TraversalDirection.BOTH,
    ) -> DependencyGraph:
        """Extract the neighborhood of one component.

        Args:
            graph: Full graph
            target: Identifier or bare name of the focus component
            max_depth: Maximum distance from the focus component (0 = unlimited)
            direction: Which edges to follow from the focus component

        Returns:
            The rebuilt subgraph, or an empty graph if target does not resolve

        Raises:
            ValueError: If max_depth < 0
        """
        if max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got: {max_depth}")

        focus_id = self.resolve_focus_id(graph, target)
        if focus_id is None:
            logger.info("Focus target %r not found in graph", target)
            return DependencyGraph.empty()

        related = self.traversal_service.collect_neighborhood(
            graph, focus_id, direction=direction, max_depth=max_depth
        )
        logger.debug(
            "Focus on %s collected %d of %d nodes", focus_id, len(related), len(graph.nodes)
        )

        return self.graph_builder.rebuild(
            [node for node_id, node in graph.nodes.items() if node_id in related],
            graph.edges,
        )

    def circular_only(self, graph: DependencyGraph) -> DependencyGraph:
        """Restrict the graph to members of circular groups."""
        members = {node_id for group in graph.circular_groups for node_id in group}
        if not members:
            return DependencyGraph.empty()

        return self.graph_builder.rebuild(
            [node for node_id, node in graph.nodes.items() if node_id in members],
            graph.edges,
        )

    def exclude_orphans(self, graph: DependencyGraph) -> DependencyGraph:
        """Drop orphan nodes; edges are unaffected since orphans touch none."""
        if not graph.orphans:
            return graph

        return self.graph_builder.rebuild(
            [node for node in graph.nodes.values() if not node.is_orphan],
            graph.edges,
        )
