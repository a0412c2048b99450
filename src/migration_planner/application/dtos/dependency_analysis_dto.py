"""Dependency analysis request DTOs.

This module defines data transfer objects for handing extractor output to the
graph use cases. Uses dataclasses for application layer (not Pydantic - that's
for infrastructure/API).
"""

from dataclasses import dataclass, field


@dataclass
class RawDependencyDTO:
    """A dependency mention found in a component's source.

    Attributes:
        target: Referenced identifier (e.g., "c:AccountCard", "apex:AccountController")
        kind: Dependency kind tag (component, event, controller, ...)
        line_number: Source line of the mention
        expression: Literal markup/code of the mention
    """

    target: str
    kind: str
    line_number: int | None = None
    expression: str | None = None


@dataclass
class ComponentAnalysisDTO:
    """Extractor output for one component.

    Attributes:
        id: Component identifier (e.g., "c:AccountCard")
        name: Display name
        kind: Component kind (aura, vf, apex, lwc, asset)
        file_path: Source file path
        dependencies: Dependency mentions in discovery order
        conversion_grade: Optional grade from the grading collaborator
        conversion_score: Optional score from the grading collaborator
        estimated_hours: Optional externally-supplied conversion estimate
    """

    id: str
    name: str
    kind: str
    file_path: str = ""
    dependencies: list[RawDependencyDTO] = field(default_factory=list)
    conversion_grade: str | None = None
    conversion_score: float | None = None
    estimated_hours: float | None = None


@dataclass
class DependencyAnalysisRequest:
    """Request to build (and optionally filter) a dependency graph.

    Attributes:
        components: Analysis results, one per component
        include_base_components: Keep edges to base/platform components
        focus: Component id or name to focus on
        max_depth: Focus traversal depth (0 = unlimited)
        direction: Focus traversal direction (upstream/downstream/both)
        circular_only: Keep only members of circular groups
        show_orphans: Keep components without any dependency edge
    """

    components: list[ComponentAnalysisDTO]
    include_base_components: bool = False
    focus: str | None = None
    max_depth: int = 0
    direction: str = "both"
    circular_only: bool = False
    show_orphans: bool = True
