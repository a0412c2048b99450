"""Analyze dependency graph use case.

This module implements the use case for building a dependency graph from
extractor output and applying the requested focus and filters.
"""

import logging
from dataclasses import dataclass, field

from migration_planner.application.dtos.common import GraphStatisticsDTO
from migration_planner.application.dtos.dependency_analysis_dto import (
    ComponentAnalysisDTO,
    DependencyAnalysisRequest,
)
from migration_planner.application.dtos.dependency_graph_dto import (
    DependencyEdgeDTO,
    DependencyGraphResponse,
    DependencyNodeDTO,
)
from migration_planner.domain.entities.component import (
    ComponentAnalysis,
    ComponentKind,
    RawDependency,
)
from migration_planner.domain.entities.dependency_graph import DependencyGraph
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_filter_service import GraphFilterService
from migration_planner.domain.services.graph_traversal_service import (
    TraversalDirection,
)

logger = logging.getLogger(__name__)


@dataclass
class PreparedGraph:
    """A built and filtered graph plus the notices collected on the way."""

    graph: DependencyGraph
    focus_id: str | None = None
    warnings: list[str] = field(default_factory=list)


def map_component_kind(kind_str: str) -> ComponentKind:
    """Map component kind string to enum.

    Args:
        kind_str: Component kind as string

    Returns:
        ComponentKind enum value

    Raises:
        ValueError: If kind is invalid
    """
    kind_map = {kind.value: kind for kind in ComponentKind}

    if kind_str not in kind_map:
        raise ValueError(
            f"component kind must be one of {list(kind_map.keys())}, "
            f"got: {kind_str}"
        )

    return kind_map[kind_str]


def to_component_analyses(
    components: list[ComponentAnalysisDTO],
) -> list[ComponentAnalysis]:
    """Convert extractor DTOs to domain analysis results.

    Dependency kind tags are passed through unvalidated; the graph builder
    skips malformed mentions individually.

    Raises:
        ValueError: If a component has an empty id/name or an unknown kind
    """
    return [
        ComponentAnalysis(
            id=dto.id,
            name=dto.name,
            kind=map_component_kind(dto.kind),
            file_path=dto.file_path,
            dependencies=[
                RawDependency(
                    target=dep.target,
                    kind=dep.kind,
                    line_number=dep.line_number,
                    expression=dep.expression,
                )
                for dep in dto.dependencies
            ],
            conversion_grade=dto.conversion_grade,
            conversion_score=dto.conversion_score,
            estimated_hours=dto.estimated_hours,
        )
        for dto in components
    ]


def skipped_dependency_warnings(graph: DependencyGraph) -> list[str]:
    return [
        f"Skipped dependency '{skipped.target}' of {skipped.component_id}: "
        f"{skipped.reason}"
        for skipped in graph.skipped_dependencies
    ]


class AnalyzeDependencyGraphUseCase:
    """Use case for analyzing component dependencies.

    This use case orchestrates the analysis workflow:
    1. Convert extractor DTOs to domain analysis results
    2. Build the full dependency graph
    3. Focus on one component (if requested)
    4. Keep only circular dependencies (if requested)
    5. Drop orphans (unless requested)
    """

    def __init__(
        self,
        graph_builder: GraphBuilder,
        graph_filter_service: GraphFilterService,
    ):
        """Initialize the use case.

        Args:
            graph_builder: Service that assembles graphs
            graph_filter_service: Service that derives focused/filtered graphs
        """
        self.graph_builder = graph_builder
        self.graph_filter_service = graph_filter_service

    def execute(self, request: DependencyAnalysisRequest) -> DependencyGraphResponse | None:
        """Execute the analyze dependency graph use case.

        Args:
            request: Analysis results and filter options

        Returns:
            DependencyGraphResponse, or None if the focus target does not
            resolve to any component

        Raises:
            ValueError: If the request is invalid
        """
        prepared = self.prepare_graph(request)
        if prepared is None:
            return None

        return self._to_response(prepared)

    def prepare_graph(self, request: DependencyAnalysisRequest) -> PreparedGraph | None:
        """Build the graph and apply the requested focus and filters.

        Returns:
            PreparedGraph, or None if the focus target does not resolve

        Raises:
            ValueError: If the request is invalid
        """
        if request.max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got: {request.max_depth}")

        direction = self._map_direction(request.direction)
        analyses = to_component_analyses(request.components)

        graph = self.graph_builder.build(
            analyses, include_base_components=request.include_base_components
        )
        warnings = skipped_dependency_warnings(graph)
        logger.info(
            "Built dependency graph: %d nodes, %d edges, %d circular groups",
            graph.stats.total_nodes,
            graph.stats.total_edges,
            graph.stats.circular_dependencies,
        )

        focus_id = None
        if request.focus:
            focus_id = self.graph_filter_service.resolve_focus_id(graph, request.focus)
            if focus_id is None:
                return None
            graph = self.graph_filter_service.focus(
                graph, focus_id, max_depth=request.max_depth, direction=direction
            )

        if request.circular_only:
            graph = self.graph_filter_service.circular_only(graph)

        if not request.show_orphans:
            graph = self.graph_filter_service.exclude_orphans(graph)

        return PreparedGraph(graph=graph, focus_id=focus_id, warnings=warnings)

    def suggest_focus(self, request: DependencyAnalysisRequest) -> list[str]:
        """Suggest component ids close to an unresolved focus target."""
        if not request.focus:
            return []
        graph = self.graph_builder.build(
            to_component_analyses(request.components),
            include_base_components=request.include_base_components,
        )
        return self.graph_filter_service.suggest_focus_ids(graph, request.focus)

    def _map_direction(self, direction_str: str) -> TraversalDirection:
        """Map traversal direction string to enum.

        Raises:
            ValueError: If direction is invalid
        """
        direction_map = {
            "upstream": TraversalDirection.UPSTREAM,
            "downstream": TraversalDirection.DOWNSTREAM,
            "both": TraversalDirection.BOTH,
        }

        if direction_str not in direction_map:
            raise ValueError(
                f"direction must be one of {list(direction_map.keys())}, "
                f"got: {direction_str}"
            )

        return direction_map[direction_str]

    def _to_response(self, prepared: PreparedGraph) -> DependencyGraphResponse:
        graph = prepared.graph
        stats = graph.stats

        node_dtos = [
            DependencyNodeDTO(
                id=node.id,
                name=node.name,
                kind=node.kind.value,
                file_path=node.file_path,
                in_degree=node.in_degree,
                out_degree=node.out_degree,
                depth=node.depth,
                is_leaf=node.is_leaf,
                is_orphan=node.is_orphan,
                is_circular=node.is_circular,
                circular_group=(
                    list(node.circular_group) if node.circular_group else None
                ),
                conversion_grade=node.conversion_grade,
                conversion_score=node.conversion_score,
            )
            for node in graph.sorted_nodes()
        ]

        edge_dtos = [
            DependencyEdgeDTO(
                from_id=edge.from_id,
                to_id=edge.to_id,
                kind=edge.kind.value,
                line_number=edge.metadata.line_number,
                expression=edge.metadata.expression,
                bidirectional=edge.metadata.bidirectional,
            )
            for edge in graph.edges
        ]

        statistics = GraphStatisticsDTO(
            total_nodes=stats.total_nodes,
            total_edges=stats.total_edges,
            aura_components=stats.aura_components,
            vf_pages=stats.vf_pages,
            apex_controllers=stats.apex_controllers,
            kind_counts={kind.value: count for kind, count in stats.kind_counts.items()},
            max_depth=stats.max_depth,
            average_connections=round(stats.average_connections, 4),
            circular_dependencies=stats.circular_dependencies,
            orphaned_components=stats.orphaned_components,
        )

        return DependencyGraphResponse(
            nodes=node_dtos,
            edges=edge_dtos,
            roots=list(graph.roots),
            leaves=list(graph.leaves),
            orphans=list(graph.orphans),
            circular_groups=[list(group) for group in graph.circular_groups],
            statistics=statistics,
            focus=prepared.focus_id,
            warnings=list(prepared.warnings),
        )
