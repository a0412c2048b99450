"""Graph builder module.

This module turns per-component analysis results into a DependencyGraph:
nodes, edges, degrees, circular groups, root/leaf/orphan classification,
depth and aggregate statistics.
"""

import logging
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import replace

from migration_planner.domain.entities.component import (
    ComponentAnalysis,
    ComponentKind,
    DependencyKind,
    extract_component_name,
    infer_component_kind,
    parse_dependency_kind,
)
from migration_planner.domain.entities.dependency_graph import (
    DependencyEdge,
    DependencyGraph,
    DependencyNode,
    EdgeMetadata,
    GraphStats,
    SkippedDependency,
)
from migration_planner.domain.services.circular_dependency_detector import (
    CircularDependencyDetector,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRAVERSAL_DEPTH = 100


class GraphBuilder:
    """Domain service that assembles dependency graphs.

    Every public method returns a freshly built graph; nodes and edges of
    the inputs are never mutated.
    """

    def __init__(
        self,
        detector: CircularDependencyDetector | None = None,
        max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH,
    ):
        """Initialize the builder.

        Args:
            detector: Cycle detector (Tarjan's algorithm)
            max_traversal_depth: Ceiling for reported node depth

        Raises:
            ValueError: If max_traversal_depth < 1
        """
        if max_traversal_depth < 1:
            raise ValueError("max_traversal_depth must be at least 1")

        self.detector = detector or CircularDependencyDetector()
        self.max_traversal_depth = max_traversal_depth

    def build(
        self,
        analyses: Sequence[ComponentAnalysis],
        include_base_components: bool = False,
    ) -> DependencyGraph:
        """Build a dependency graph from analysis results.

        Args:
            analyses: One analysis result per component, in any order
            include_base_components: Keep edges to base/platform components

        Returns:
            A complete DependencyGraph
        """
        nodes: dict[str, DependencyNode] = {}
        edges: list[DependencyEdge] = []
        skipped: list[SkippedDependency] = []
        seen_edges: set[tuple[str, str, DependencyKind]] = set()

        # First pass: every analyzed component exists before any edge is added
        for analysis in analyses:
            if analysis.id in nodes:
                logger.debug("Duplicate analysis for %s; first definition kept", analysis.id)
                continue
            nodes[analysis.id] = DependencyNode(
                id=analysis.id,
                name=analysis.name,
                kind=analysis.kind,
                file_path=analysis.file_path,
                conversion_grade=analysis.conversion_grade,
                conversion_score=analysis.conversion_score,
                estimated_hours=analysis.estimated_hours,
            )

        # Second pass: edges, plus placeholder nodes for referenced-only targets
        for analysis in analyses:
            for dep in analysis.dependencies:
                problem = dep.problem()
                if problem is not None:
                    kind_tag = str(getattr(dep.kind, "value", dep.kind))
                    logger.warning(
                        "Skipping dependency %r of %s: %s",
                        dep.target,
                        analysis.id,
                        problem,
                    )
                    skipped.append(
                        SkippedDependency(
                            component_id=analysis.id,
                            target=dep.target,
                            kind=kind_tag,
                            reason=problem,
                        )
                    )
                    continue

                kind = parse_dependency_kind(dep.kind)
                if kind == DependencyKind.BASE_COMPONENT and not include_base_components:
                    continue

                # Repeated analyses of one id must not count an edge twice
                key = (analysis.id, dep.target, kind)
                if key in seen_edges:
                    continue
                seen_edges.add(key)

                if dep.target not in nodes:
                    nodes[dep.target] = DependencyNode(
                        id=dep.target,
                        name=extract_component_name(dep.target),
                        kind=infer_component_kind(dep.target),
                    )

                edges.append(
                    DependencyEdge(
                        from_id=analysis.id,
                        to_id=dep.target,
                        kind=kind,
                        metadata=EdgeMetadata(
                            line_number=dep.line_number,
                            expression=dep.expression,
                        ),
                    )
                )

        return self._assemble(nodes, edges, skipped)

    def rebuild(
        self,
        nodes: Iterable[DependencyNode],
        edges: Iterable[DependencyEdge],
    ) -> DependencyGraph:
        """Reassemble a graph from a subset of an existing graph.

        Degrees, circular groups, classification, depth and statistics are
        recomputed from scratch. Edges whose endpoints are not both in
        ``nodes`` are dropped.

        Args:
            nodes: Nodes to keep
            edges: Candidate edges

        Returns:
            A self-consistent DependencyGraph
        """
        node_map = {node.id: node for node in nodes}
        kept = [
            edge
            for edge in edges
            if edge.from_id in node_map and edge.to_id in node_map
        ]
        return self._assemble(node_map, kept, [])

    def _assemble(
        self,
        base_nodes: dict[str, DependencyNode],
        edges: list[DependencyEdge],
        skipped: list[SkippedDependency],
    ) -> DependencyGraph:
        edges = self._mark_bidirectional(edges)

        out_degree = Counter(edge.from_id for edge in edges)
        in_degree = Counter(edge.to_id for edge in edges)

        adjacency: dict[str, list[str]] = {node_id: [] for node_id in base_nodes}
        for edge in edges:
            adjacency[edge.from_id].append(edge.to_id)

        circular_groups = self.detector.detect_cycles(adjacency)
        group_of: dict[str, tuple[str, ...]] = {}
        for group in circular_groups:
            members = tuple(group)
            for node_id in group:
                group_of[node_id] = members

        roots: list[str] = []
        leaves: list[str] = []
        orphans: list[str] = []
        for node_id in sorted(base_nodes):
            ins, outs = in_degree[node_id], out_degree[node_id]
            if ins == 0 and outs > 0:
                roots.append(node_id)
            if outs == 0 and ins > 0:
                leaves.append(node_id)
            if ins == 0 and outs == 0:
                orphans.append(node_id)

        depths = self._calculate_depths(base_nodes, adjacency, roots, group_of)

        leaf_set, orphan_set = set(leaves), set(orphans)
        nodes: dict[str, DependencyNode] = {}
        for node_id, node in base_nodes.items():
            nodes[node_id] = replace(
                node,
                in_degree=in_degree[node_id],
                out_degree=out_degree[node_id],
                depth=depths.get(node_id, 0),
                is_orphan=node_id in orphan_set,
                is_leaf=node_id in leaf_set,
                is_circular=node_id in group_of,
                circular_group=group_of.get(node_id),
            )

        stats = self._calculate_stats(nodes, edges, circular_groups, orphans)

        return DependencyGraph(
            nodes=nodes,
            edges=edges,
            roots=roots,
            leaves=leaves,
            orphans=orphans,
            circular_groups=circular_groups,
            stats=stats,
            skipped_dependencies=list(skipped),
        )

    def _mark_bidirectional(self, edges: list[DependencyEdge]) -> list[DependencyEdge]:
        """Flag edges whose reverse direction also exists."""
        pairs = {(edge.from_id, edge.to_id) for edge in edges}
        marked = []
        for edge in edges:
            bidirectional = (
                not edge.is_self_loop and (edge.to_id, edge.from_id) in pairs
            )
            if edge.metadata.bidirectional != bidirectional:
                edge = replace(
                    edge, metadata=replace(edge.metadata, bidirectional=bidirectional)
                )
            marked.append(edge)
        return marked

    def _calculate_depths(
        self,
        nodes: dict[str, DependencyNode],
        adjacency: dict[str, list[str]],
        roots: list[str],
        group_of: dict[str, tuple[str, ...]],
    ) -> dict[str, int]:
        """Calculate the depth of every node (longest distance from a root).

        Breadth-first search over the real edges, starting from every root
        (or from every node when there are no roots), keeping the maximum
        distance at which each node is reached. A path never revisits a
        node, so traversal through a circular group ends once every member
        is on the path.

        Only members of the current circular group can be revisited, so a
        queued state carries just those members. Outside circular groups a
        node is expanded again only when it is reached at a greater
        distance. Distances past max_traversal_depth are capped.

        Args:
            nodes: Node map
            adjacency: Node id → dependency ids
            roots: Root node ids
            group_of: Node id → circular group it belongs to

        Returns:
            Map of node id → depth
        """
        max_depths: dict[str, int] = {}
        best_in_group: dict[tuple[str, frozenset[str]], int] = {}
        ceiling_hit = False

        start_nodes = roots if roots else sorted(nodes)
        queue: deque[tuple[str, int, frozenset[str]]] = deque(
            (start, 0, frozenset()) for start in start_nodes
        )

        while queue:
            current, depth, trail = queue.popleft()
            group = group_of.get(current)

            if group is not None:
                trail = trail | {current}
                if depth <= best_in_group.get((current, trail), -1):
                    continue
                best_in_group[(current, trail)] = depth
            elif depth <= max_depths.get(current, -1):
                continue

            if depth > max_depths.get(current, -1):
                max_depths[current] = depth

            successors = sorted(set(adjacency.get(current, ())) - trail)
            next_depth = depth + 1
            if successors and next_depth > self.max_traversal_depth:
                ceiling_hit = True
                next_depth = self.max_traversal_depth

            for successor in successors:
                same_group = group is not None and group_of.get(successor) == group
                queue.append(
                    (successor, next_depth, trail if same_group else frozenset())
                )

        if ceiling_hit:
            logger.warning(
                "Depth traversal reached the ceiling of %d; reported depths are capped",
                self.max_traversal_depth,
            )

        return {node_id: max_depths.get(node_id, 0) for node_id in nodes}

    def _calculate_stats(
        self,
        nodes: dict[str, DependencyNode],
        edges: list[DependencyEdge],
        circular_groups: list[list[str]],
        orphans: list[str],
    ) -> GraphStats:
        kind_counts = {kind: 0 for kind in ComponentKind}
        max_depth = 0
        total_connections = 0

        for node in nodes.values():
            kind_counts[node.kind] += 1
            max_depth = max(max_depth, node.depth)
            total_connections += node.in_degree + node.out_degree

        return GraphStats(
            total_nodes=len(nodes),
            total_edges=len(edges),
            kind_counts=kind_counts,
            max_depth=max_depth,
            average_connections=(
                total_connections / len(nodes) if nodes else 0.0
            ),
            circular_dependencies=len(circular_groups),
            orphaned_components=len(orphans),
        )
