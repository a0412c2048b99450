"""Conversion order entity module.

This module defines the waves produced by ConversionOrderCalculator.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WaveEffort:
    """Effort estimate for one wave.

    Attributes:
        estimated_hours: Estimated conversion effort in hours
        components: Number of components in the wave
    """

    estimated_hours: float
    components: int


@dataclass(frozen=True)
class ConversionWave:
    """A batch of components that can be converted together.

    Domain invariants:
    - wave numbers start at 1
    - a wave contains at least one component

    Attributes:
        wave: 1-based position in the conversion sequence
        components: Component ids in conversion order
        blocked_by: Already-scheduled ids this wave had to wait for
        effort: Effort estimate
        requires_coordination: Contains circular dependencies that must be
            converted together
    """

    wave: int
    components: list[str]
    blocked_by: list[str]
    effort: WaveEffort
    requires_coordination: bool = False

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if self.wave < 1:
            raise ValueError(f"wave number must be >= 1, got: {self.wave}")
        if not self.components:
            raise ValueError("a conversion wave must contain at least one component")


@dataclass(frozen=True)
class ConversionOrderResult:
    """Recommended conversion order for a dependency graph.

    Attributes:
        waves: Waves in conversion order
        circular_dependencies: Circular groups of the graph
        recommendations: Human-readable advisories
        total_components: Number of convertible components
        estimated_waves: Number of waves
    """

    waves: list[ConversionWave] = field(default_factory=list)
    circular_dependencies: list[list[str]] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    total_components: int = 0
    estimated_waves: int = 0

    @property
    def ordered_components(self) -> list[str]:
        """All scheduled component ids, wave by wave."""
        return [component for wave in self.waves for component in wave.components]

    @property
    def estimated_hours(self) -> float:
        return sum(wave.effort.estimated_hours for wave in self.waves)


@dataclass(frozen=True)
class ConversionReadiness:
    """Whether one component can be converted given what is already converted."""

    component_id: str
    can_convert: bool
    blocked_by: list[str] = field(default_factory=list)
