"""Dependency graph view DTOs.

This module defines the serializable view of a dependency graph returned by
the analysis use case.
"""

from dataclasses import dataclass, field

from migration_planner.application.dtos.common import GraphStatisticsDTO


@dataclass
class DependencyNodeDTO:
    """Component node in a graph response.

    Attributes:
        id: Component identifier
        name: Display name
        kind: Component kind
        file_path: Source file path (empty if only referenced)
        in_degree: Number of components depending on this one
        out_degree: Number of dependencies of this component
        depth: Longest distance from a root
        is_leaf: Depended on, but depends on nothing
        is_orphan: No dependencies either way
        is_circular: Member of a circular group
        circular_group: Members of its circular group
        conversion_grade: Optional grade from the grading collaborator
        conversion_score: Optional score from the grading collaborator
    """

    id: str
    name: str
    kind: str
    file_path: str
    in_degree: int
    out_degree: int
    depth: int
    is_leaf: bool
    is_orphan: bool
    is_circular: bool
    circular_group: list[str] | None = None
    conversion_grade: str | None = None
    conversion_score: float | None = None


@dataclass
class DependencyEdgeDTO:
    """Dependency edge in a graph response.

    Attributes:
        from_id: Component that has the dependency
        to_id: Component it depends on
        kind: Dependency kind tag
        line_number: Source line of the mention
        expression: Literal markup/code of the mention
        bidirectional: Both components reference each other
    """

    from_id: str
    to_id: str
    kind: str
    line_number: int | None = None
    expression: str | None = None
    bidirectional: bool = False


@dataclass
class DependencyGraphResponse:
    """Response containing a dependency graph view.

    Attributes:
        nodes: Components sorted by kind, then name
        edges: Dependencies in discovery order
        roots: Ids nothing depends on (with dependencies of their own)
        leaves: Ids that depend on nothing (but are depended on)
        orphans: Ids without any dependency edge
        circular_groups: Groups of mutually dependent component ids
        statistics: Graph statistics
        focus: Resolved focus component id, if a focus was requested
        warnings: Skipped dependency mentions and similar notices
    """

    nodes: list[DependencyNodeDTO]
    edges: list[DependencyEdgeDTO]
    roots: list[str]
    leaves: list[str]
    orphans: list[str]
    circular_groups: list[list[str]]
    statistics: GraphStatisticsDTO
    focus: str | None = None
    warnings: list[str] = field(default_factory=list)
