"""
Pydantic schemas for dependency graph API endpoints.

These schemas define the API request/response contracts and provide validation.
They are separate from application layer DTOs (which use dataclasses).
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Analysis Request Schemas
# ============================================================================


class RawDependencyApiModel(BaseModel):
    """A dependency mention reported by a source extractor."""

    target: str = Field(..., description="Referenced identifier, e.g. c:AccountCard")
    kind: str = Field(
        ...,
        description="Dependency kind: component, event, controller, extension, "
        "interface, extends, include, lms, staticResource, label, baseComponent",
    )
    line_number: int | None = Field(None, ge=1, description="Source line of the mention")
    expression: str | None = Field(None, description="Literal markup of the mention")


class ComponentAnalysisApiModel(BaseModel):
    """Extractor output for one Aura component, Visualforce page or Apex class."""

    id: str = Field(..., min_length=1, description="Component identifier")
    name: str = Field(..., min_length=1, description="Display name")
    kind: str = Field(
        ..., description="Component kind: aura, vf, apex, lwc, or asset"
    )
    file_path: str = Field("", description="Source file path")
    dependencies: list[RawDependencyApiModel] = Field(
        default_factory=list, description="Dependency mentions found in the source"
    )
    conversion_grade: str | None = Field(None, description="Complexity grade, if graded")
    conversion_score: float | None = Field(None, description="Complexity score, if graded")
    estimated_hours: float | None = Field(
        None, ge=0.0, description="External conversion estimate (hours)"
    )


class DependencyAnalysisApiRequest(BaseModel):
    """Request to analyze a set of components."""

    components: list[ComponentAnalysisApiModel] = Field(
        default_factory=list, description="Analysis results to build the graph from"
    )
    include_base_components: bool | None = Field(
        None,
        description="Keep lightning:/ui:/force: base component edges "
        "(server default when omitted)",
    )
    focus: str | None = Field(
        None, description="Component id or bare name to focus on"
    )
    max_depth: int = Field(
        0, ge=0, description="Maximum distance from the focus component (0 = unlimited)"
    )
    direction: str = Field(
        "both",
        description="Traversal direction from the focus: upstream, downstream, or both",
        pattern="^(upstream|downstream|both)$",
    )
    circular_only: bool = Field(
        False, description="Keep only components involved in circular dependencies"
    )
    show_orphans: bool = Field(
        True, description="Keep components with no dependencies in either direction"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "components": [
                    {
                        "id": "c:AccountCard",
                        "name": "AccountCard",
                        "kind": "aura",
                        "file_path": "aura/AccountCard/AccountCard.cmp",
                        "dependencies": [
                            {
                                "target": "apex:AccountController",
                                "kind": "controller",
                                "line_number": 1,
                                "expression": 'controller="AccountController"',
                            },
                            {
                                "target": "c:AddressBlock",
                                "kind": "component",
                                "line_number": 7,
                                "expression": "<c:AddressBlock />",
                            },
                        ],
                    }
                ],
                "focus": "AccountCard",
                "direction": "both",
            }
        }
    )


# ============================================================================
# Graph Response Schemas
# ============================================================================


class DependencyNodeApiModel(BaseModel):
    """A component in the dependency graph."""

    id: str
    name: str
    kind: str
    file_path: str
    in_degree: int = Field(..., description="Number of components depending on this one")
    out_degree: int = Field(..., description="Number of dependencies of this component")
    depth: int = Field(..., description="Longest distance from a root")
    is_leaf: bool
    is_orphan: bool
    is_circular: bool
    circular_group: list[str] | None = None
    conversion_grade: str | None = None
    conversion_score: float | None = None


class DependencyEdgeApiModel(BaseModel):
    """A directed dependency: from_id depends on to_id."""

    from_id: str
    to_id: str
    kind: str
    line_number: int | None = None
    expression: str | None = None
    bidirectional: bool = False


class GraphStatisticsApiModel(BaseModel):
    """Aggregate graph statistics."""

    total_nodes: int
    total_edges: int
    aura_components: int
    vf_pages: int
    apex_controllers: int
    kind_counts: dict[str, int] = Field(
        default_factory=dict, description="Node count per component kind"
    )
    max_depth: int
    average_connections: float
    circular_dependencies: int
    orphaned_components: int


class DependencyGraphApiResponse(BaseModel):
    """Dependency graph view."""

    nodes: list[DependencyNodeApiModel]
    edges: list[DependencyEdgeApiModel]
    roots: list[str] = Field(..., description="Components nothing depends on")
    leaves: list[str] = Field(..., description="Components that depend on nothing")
    orphans: list[str] = Field(..., description="Components with no dependencies at all")
    circular_groups: list[list[str]]
    statistics: GraphStatisticsApiModel
    focus: str | None = Field(None, description="Resolved focus component id")
    warnings: list[str] = Field(
        default_factory=list, description="Dependency mentions skipped as malformed"
    )
