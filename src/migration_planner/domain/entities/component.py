"""Component entity module.

This module defines the input contract handed over by the source extractors:
one ComponentAnalysis per analyzed Aura component or Visualforce page, each
carrying the raw dependency mentions found in its markup and scripts.
"""

from dataclasses import dataclass, field
from enum import Enum


class ComponentKind(str, Enum):
    """Kind of a node in the dependency graph."""

    AURA = "aura"  # Custom Aura component (c:*)
    VF = "vf"  # Visualforce page or component (vf:*)
    APEX = "apex"  # Server-side Apex controller (apex:*)
    LWC = "lwc"  # Base/platform component (lightning:*, ui:*, force:*)
    ASSET = "asset"  # Static resource, custom label, or sObject reference


class DependencyKind(str, Enum):
    """Kind of a dependency mention."""

    COMPONENT = "component"
    EVENT = "event"
    CONTROLLER = "controller"
    EXTENSION = "extension"
    INTERFACE = "interface"
    EXTENDS = "extends"
    INCLUDE = "include"
    LMS = "lms"
    STATIC_RESOURCE = "staticResource"
    LABEL = "label"
    BASE_COMPONENT = "baseComponent"


# Kinds eligible for conversion scheduling
CONVERTIBLE_KINDS = frozenset({ComponentKind.AURA, ComponentKind.VF})

# Checked in order; the first matching prefix wins
KIND_PREFIXES: tuple[tuple[str, ComponentKind], ...] = (
    ("c:", ComponentKind.AURA),
    ("vf:", ComponentKind.VF),
    ("apex:", ComponentKind.APEX),
    ("lightning:", ComponentKind.LWC),
    ("ui:", ComponentKind.LWC),
    ("force:", ComponentKind.LWC),
    ("resource:", ComponentKind.ASSET),
    ("label:", ComponentKind.ASSET),
    ("sobject:", ComponentKind.ASSET),
)

FALLBACK_KIND = ComponentKind.AURA


def infer_component_kind(component_id: str) -> ComponentKind:
    """Infer the kind of a node from its identifier prefix.

    Args:
        component_id: Node identifier (e.g., "c:AccountCard", "apex:AccountController")

    Returns:
        The kind mapped to the identifier's prefix, or FALLBACK_KIND for
        identifiers without a known prefix
    """
    for prefix, kind in KIND_PREFIXES:
        if component_id.startswith(prefix):
            return kind
    return FALLBACK_KIND


def extract_component_name(component_id: str) -> str:
    """Strip a known kind prefix from an identifier.

    Args:
        component_id: Node identifier

    Returns:
        The readable name ("c:AccountCard" -> "AccountCard"); identifiers
        without a known prefix are returned unchanged
    """
    for prefix, _ in KIND_PREFIXES:
        if component_id.startswith(prefix) and len(component_id) > len(prefix):
            return component_id[len(prefix):]
    return component_id


def parse_dependency_kind(value: "DependencyKind | str") -> DependencyKind | None:
    """Map a dependency kind tag to the enum, or None when unknown."""
    if isinstance(value, DependencyKind):
        return value
    try:
        return DependencyKind(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class RawDependency:
    """A single dependency mention extracted from component source.

    The kind may still be the raw tag string produced by the extractor; it is
    only resolved to DependencyKind when the graph is built, so one bad tag
    does not invalidate the whole analysis.

    Attributes:
        target: Identifier of the referenced node (e.g., "c:AccountCard")
        kind: Dependency kind tag
        line_number: Source line of the mention, if known
        expression: Literal markup/code of the mention, if captured
    """

    target: str
    kind: DependencyKind | str
    line_number: int | None = None
    expression: str | None = None

    def problem(self) -> str | None:
        """Describe why this mention cannot become an edge.

        Returns:
            A human-readable reason, or None if the mention is well-formed
        """
        if not self.target or not self.target.strip():
            return "empty target identifier"
        if parse_dependency_kind(self.kind) is None:
            return f"unknown dependency kind '{self.kind}'"
        return None


@dataclass
class ComponentAnalysis:
    """Analysis result for one component, as produced by an extractor.

    Domain invariants:
    - id and name must be non-empty
    - identical (kind, target) mentions are collapsed, first mention wins

    Attributes:
        id: Node identifier (e.g., "c:AccountCard", "vf:AccountPage")
        name: Display name
        kind: Component kind
        file_path: Path of the analyzed source file
        dependencies: Raw dependency mentions in discovery order
        conversion_grade: Optional grade from the grading collaborator
        conversion_score: Optional score from the grading collaborator
        estimated_hours: Optional externally-supplied conversion estimate
    """

    id: str
    name: str
    kind: ComponentKind
    file_path: str = ""
    dependencies: list[RawDependency] = field(default_factory=list)
    conversion_grade: str | None = None
    conversion_score: float | None = None
    estimated_hours: float | None = None

    def __post_init__(self):
        """Validate domain invariants and collapse duplicate mentions."""
        if not self.id:
            raise ValueError("component id cannot be empty")
        if not self.name:
            raise ValueError("component name cannot be empty")
        if self.estimated_hours is not None and self.estimated_hours < 0:
            raise ValueError(
                f"estimated_hours must be non-negative, got: {self.estimated_hours}"
            )

        seen: set[tuple[str, str]] = set()
        unique: list[RawDependency] = []
        for dep in self.dependencies:
            key = (str(getattr(dep.kind, "value", dep.kind)), dep.target)
            if key in seen:
                continue
            seen.add(key)
            unique.append(dep)
        self.dependencies = unique
