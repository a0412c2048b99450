"""Common DTOs shared across application layer."""

from dataclasses import dataclass, field


@dataclass
class GraphStatisticsDTO:
    """Statistics about a dependency graph.

    Attributes:
        total_nodes: Total number of components in the graph
        total_edges: Total number of dependencies in the graph
        aura_components: Number of Aura components
        vf_pages: Number of Visualforce pages/components
        apex_controllers: Number of Apex controllers
        kind_counts: Number of components per kind
        max_depth: Largest component depth
        average_connections: Mean number of edges per component
        circular_dependencies: Number of circular groups
        orphaned_components: Number of components without edges
    """

    total_nodes: int
    total_edges: int
    aura_components: int
    vf_pages: int
    apex_controllers: int
    kind_counts: dict[str, int] = field(default_factory=dict)
    max_depth: int = 0
    average_connections: float = 0.0
    circular_dependencies: int = 0
    orphaned_components: int = 0
