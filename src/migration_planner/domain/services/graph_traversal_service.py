"""Graph traversal service module.

This module defines the GraphTraversalService for traversing the dependency graph.
"""

from collections import deque
from enum import Enum

from migration_planner.domain.entities.dependency_graph import DependencyGraph


class TraversalDirection(str, Enum):
    """Direction for graph traversal."""

    UPSTREAM = "upstream"  # Components that depend on this component
    DOWNSTREAM = "downstream"  # Components this component depends on
    BOTH = "both"


class GraphTraversalService:
    """Domain service for graph traversal operations."""

    def collect_neighborhood(
        self,
        graph: DependencyGraph,
        start_id: str,
        direction: TraversalDirection = TraversalDirection.BOTH,
        max_depth: int = 0,
    ) -> set[str]:
        """Collect every node reachable from start_id by breadth-first search.

        Args:
            graph: Graph to traverse
            start_id: Node id to start from (must exist in the graph)
            direction: Which edges to follow
            max_depth: Maximum distance from start_id (0 = unlimited)

        Returns:
            Set of visited node ids, including start_id

        Raises:
            ValueError: If max_depth < 0 or start_id is not in the graph
        """
        if max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got: {max_depth}")
        if start_id not in graph.nodes:
            raise ValueError(f"node '{start_id}' is not in the graph")

        dependencies: dict[str, list[str]] = {}
        dependents: dict[str, list[str]] = {}
        for edge in graph.edges:
            dependencies.setdefault(edge.from_id, []).append(edge.to_id)
            dependents.setdefault(edge.to_id, []).append(edge.from_id)

        follow_down = direction in (TraversalDirection.DOWNSTREAM, TraversalDirection.BOTH)
        follow_up = direction in (TraversalDirection.UPSTREAM, TraversalDirection.BOTH)

        visited: set[str] = set()
        queue: deque[tuple[str, int]] = deque([(start_id, 0)])

        while queue:
            node_id, depth = queue.popleft()
            if node_id in visited:
                continue
            if max_depth > 0 and depth > max_depth:
                continue
            visited.add(node_id)

            neighbors: list[str] = []
            if follow_down:
                neighbors.extend(dependencies.get(node_id, []))
            if follow_up:
                neighbors.extend(dependents.get(node_id, []))

            for neighbor in neighbors:
                if neighbor not in visited:
                    queue.append((neighbor, depth + 1))

        return visited
