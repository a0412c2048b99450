"""Dependency graph entity module.

This module defines the nodes, edges and aggregate statistics of a component
dependency graph. Every object here is produced by GraphBuilder and never
mutated afterwards; filtering produces a new graph.
"""

from dataclasses import dataclass, field

from migration_planner.domain.entities.component import (
    CONVERTIBLE_KINDS,
    ComponentKind,
    DependencyKind,
)

# Display order for node listings
KIND_ORDER: dict[ComponentKind, int] = {
    ComponentKind.AURA: 0,
    ComponentKind.VF: 1,
    ComponentKind.APEX: 2,
    ComponentKind.LWC: 3,
    ComponentKind.ASSET: 4,
}


@dataclass(frozen=True)
class EdgeMetadata:
    """Where and how a dependency was found.

    Attributes:
        line_number: Source line of the mention
        expression: Literal markup/code of the mention
        bidirectional: True if the graph also has an edge in the opposite direction
    """

    line_number: int | None = None
    expression: str | None = None
    bidirectional: bool = False


@dataclass(frozen=True)
class DependencyEdge:
    """Directed edge: from_id depends on to_id."""

    from_id: str
    to_id: str
    kind: DependencyKind
    metadata: EdgeMetadata = field(default_factory=EdgeMetadata)

    @property
    def is_self_loop(self) -> bool:
        return self.from_id == self.to_id


@dataclass(frozen=True)
class DependencyNode:
    """A component in the dependency graph.

    Domain invariants:
    - a node is never both orphan and leaf
    - is_circular / circular_group are only set from cycle detection

    Attributes:
        id: Node identifier (e.g., "c:AccountCard")
        name: Display name
        kind: Component kind
        file_path: Source file path, empty if the node was only referenced
        in_degree: Number of edges pointing at this node
        out_degree: Number of edges leaving this node
        depth: Longest distance from a root
        is_orphan: No incoming and no outgoing edges
        is_leaf: No outgoing edges but at least one incoming edge
        is_circular: Member of a circular group
        circular_group: Members of the circular group this node belongs to
        conversion_grade: Optional grade from the grading collaborator
        conversion_score: Optional score from the grading collaborator
        estimated_hours: Optional externally-supplied conversion estimate
    """

    id: str
    name: str
    kind: ComponentKind
    file_path: str = ""
    in_degree: int = 0
    out_degree: int = 0
    depth: int = 0
    is_orphan: bool = False
    is_leaf: bool = False
    is_circular: bool = False
    circular_group: tuple[str, ...] | None = None
    conversion_grade: str | None = None
    conversion_score: float | None = None
    estimated_hours: float | None = None

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if not self.id:
            raise ValueError("node id cannot be empty")
        if self.is_orphan and self.is_leaf:
            raise ValueError(f"node '{self.id}' cannot be both orphan and leaf")

    @property
    def is_convertible(self) -> bool:
        return self.kind in CONVERTIBLE_KINDS


@dataclass(frozen=True)
class SkippedDependency:
    """A malformed dependency mention that was dropped during graph build."""

    component_id: str
    target: str
    kind: str
    reason: str


@dataclass(frozen=True)
class GraphStats:
    """Aggregate statistics of a dependency graph.

    Attributes:
        total_nodes: Number of nodes
        total_edges: Number of edges
        kind_counts: Node count per component kind (every kind present)
        max_depth: Largest node depth
        average_connections: Mean of (in_degree + out_degree) over all nodes
        circular_dependencies: Number of circular groups
        orphaned_components: Number of orphan nodes
    """

    total_nodes: int = 0
    total_edges: int = 0
    kind_counts: dict[ComponentKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in ComponentKind}
    )
    max_depth: int = 0
    average_connections: float = 0.0
    circular_dependencies: int = 0
    orphaned_components: int = 0

    @property
    def aura_components(self) -> int:
        return self.kind_counts.get(ComponentKind.AURA, 0)

    @property
    def vf_pages(self) -> int:
        return self.kind_counts.get(ComponentKind.VF, 0)

    @property
    def apex_controllers(self) -> int:
        return self.kind_counts.get(ComponentKind.APEX, 0)


@dataclass(frozen=True)
class DependencyGraph:
    """Complete dependency graph with derived views.

    Nodes are kept in an id -> node map; edges reference nodes by id only.

    Attributes:
        nodes: Node map keyed by identifier
        edges: Edges in discovery order
        roots: Ids with in_degree 0 and out_degree > 0
        leaves: Ids with out_degree 0 and in_degree > 0
        orphans: Ids with no edges at all
        circular_groups: Groups of mutually dependent node ids
        stats: Aggregate statistics
        skipped_dependencies: Malformed mentions dropped during the build
    """

    nodes: dict[str, DependencyNode] = field(default_factory=dict)
    edges: list[DependencyEdge] = field(default_factory=list)
    roots: list[str] = field(default_factory=list)
    leaves: list[str] = field(default_factory=list)
    orphans: list[str] = field(default_factory=list)
    circular_groups: list[list[str]] = field(default_factory=list)
    stats: GraphStats = field(default_factory=GraphStats)
    skipped_dependencies: list[SkippedDependency] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "DependencyGraph":
        """Graph with no nodes and all-zero statistics."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def get_node(self, node_id: str) -> DependencyNode | None:
        return self.nodes.get(node_id)

    def outgoing(self, node_id: str) -> list[DependencyEdge]:
        """Edges whose source is node_id."""
        return [edge for edge in self.edges if edge.from_id == node_id]

    def incoming(self, node_id: str) -> list[DependencyEdge]:
        """Edges whose target is node_id."""
        return [edge for edge in self.edges if edge.to_id == node_id]

    def sorted_nodes(self) -> list[DependencyNode]:
        """Nodes ordered by kind, then name, then id."""
        return sorted(
            self.nodes.values(),
            key=lambda node: (KIND_ORDER[node.kind], node.name, node.id),
        )
