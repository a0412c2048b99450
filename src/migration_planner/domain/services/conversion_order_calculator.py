"""Conversion order calculator module.

This module computes the recommended order in which Aura components and
Visualforce pages should be converted, as a sequence of waves. A component
is scheduled only after every component it depends on, except for
dependencies inside a circular group, which are converted together.
"""

import logging

from migration_planner.domain.entities.component import ComponentKind
from migration_planner.domain.entities.conversion_order import (
    ConversionOrderResult,
    ConversionReadiness,
    ConversionWave,
    WaveEffort,
)
from migration_planner.domain.entities.dependency_graph import (
    DependencyGraph,
    DependencyNode,
)

logger = logging.getLogger(__name__)

DEFAULT_HOURS_PER_COMPONENT = 2.0
DEFAULT_HOURS_PER_COORDINATED_COMPONENT = 4.0

NO_COMPONENTS_MESSAGE = "No Aura or Visualforce components found to convert."


class ConversionOrderCalculator:
    """Domain service that schedules components into conversion waves.

    Algorithm:
    1. Keep only convertible nodes (Aura, Visualforce) and the edges between them
    2. Repeatedly collect every unscheduled node whose non-circular
       dependencies are all scheduled; that set is the next wave
    3. If no node is eligible but some remain, schedule the remainder as one
       final coordinated wave
    """

    def __init__(
        self,
        hours_per_component: float = DEFAULT_HOURS_PER_COMPONENT,
        hours_per_coordinated_component: float = DEFAULT_HOURS_PER_COORDINATED_COMPONENT,
    ):
        """Initialize the calculator.

        Args:
            hours_per_component: Effort per component in a regular wave
            hours_per_coordinated_component: Effort per component in a wave
                containing circular dependencies

        Raises:
            ValueError: If either rate is negative
        """
        if hours_per_component < 0 or hours_per_coordinated_component < 0:
            raise ValueError("hours per component must be non-negative")

        self.hours_per_component = hours_per_component
        self.hours_per_coordinated_component = hours_per_coordinated_component

    def calculate(self, graph: DependencyGraph) -> ConversionOrderResult:
        """Calculate the conversion order for a graph.

        Args:
            graph: A finished dependency graph

        Returns:
            ConversionOrderResult with waves and advisories
        """
        convertible = {
            node_id: node
            for node_id, node in graph.nodes.items()
            if node.is_convertible
        }

        if not convertible:
            return ConversionOrderResult(
                waves=[],
                circular_dependencies=graph.circular_groups,
                recommendations=[NO_COMPONENTS_MESSAGE],
                total_components=0,
                estimated_waves=0,
            )

        # edge.from_id depends on edge.to_id; only convertible pairs block
        depends_on: dict[str, set[str]] = {node_id: set() for node_id in convertible}
        for edge in graph.edges:
            if edge.from_id in convertible and edge.to_id in convertible:
                depends_on[edge.from_id].add(edge.to_id)

        in_circular_dep = {
            node_id
            for group in graph.circular_groups
            for node_id in group
            if node_id in convertible
        }

        converted: set[str] = set()
        waves: list[ConversionWave] = []
        recommendations: list[str] = []
        candidates = sorted(convertible)

        while len(converted) < len(convertible):
            wave_number = len(waves) + 1
            wave_components = [
                node_id
                for node_id in candidates
                if node_id not in converted
                and all(
                    dep in converted or dep in in_circular_dep
                    for dep in depends_on[node_id]
                )
            ]

            if not wave_components:
                # Everything left is blocked by unresolved circular dependencies
                remaining = [node_id for node_id in candidates if node_id not in converted]
                logger.info(
                    "Scheduling %d circular-blocked components in wave %d",
                    len(remaining),
                    wave_number,
                )
                waves.append(
                    self._make_wave(
                        wave_number, remaining, convertible, depends_on, converted, True
                    )
                )
                converted.update(remaining)
                break

            coordinated = any(node_id in in_circular_dep for node_id in wave_components)
            waves.append(
                self._make_wave(
                    wave_number,
                    wave_components,
                    convertible,
                    depends_on,
                    converted,
                    coordinated,
                )
            )
            converted.update(wave_components)

        recommendations.extend(self._recommendations(graph, waves))

        return ConversionOrderResult(
            waves=waves,
            circular_dependencies=graph.circular_groups,
            recommendations=recommendations,
            total_components=len(convertible),
            estimated_waves=len(waves),
        )

    def check_readiness(
        self,
        graph: DependencyGraph,
        component_id: str,
        already_converted: set[str],
    ) -> ConversionReadiness:
        """Check whether a component can be converted now.

        Args:
            graph: A finished dependency graph
            component_id: Component to check
            already_converted: Ids of components already converted

        Returns:
            ConversionReadiness; unknown components are never ready
        """
        if component_id not in graph.nodes:
            return ConversionReadiness(component_id=component_id, can_convert=False)

        blocked_by: list[str] = []
        for edge in graph.outgoing(component_id):
            target = graph.nodes.get(edge.to_id)
            if target is None or not target.is_convertible:
                continue
            if edge.to_id not in already_converted and edge.to_id not in blocked_by:
                blocked_by.append(edge.to_id)

        return ConversionReadiness(
            component_id=component_id,
            can_convert=not blocked_by,
            blocked_by=blocked_by,
        )

    def _make_wave(
        self,
        wave_number: int,
        components: list[str],
        convertible: dict[str, DependencyNode],
        depends_on: dict[str, set[str]],
        converted: set[str],
        coordinated: bool,
    ) -> ConversionWave:
        ordered = sorted(
            components,
            key=lambda node_id: (
                0 if convertible[node_id].kind == ComponentKind.AURA else 1,
                convertible[node_id].name,
                node_id,
            ),
        )

        blocked_by = sorted(
            {dep for node_id in ordered for dep in depends_on[node_id] if dep in converted}
        )

        rate = (
            self.hours_per_coordinated_component
            if coordinated
            else self.hours_per_component
        )
        estimated = sum(
            convertible[node_id].estimated_hours
            if convertible[node_id].estimated_hours is not None
            else rate
            for node_id in ordered
        )

        return ConversionWave(
            wave=wave_number,
            components=ordered,
            blocked_by=blocked_by,
            effort=WaveEffort(estimated_hours=estimated, components=len(ordered)),
            requires_coordination=coordinated,
        )

    def _recommendations(
        self,
        graph: DependencyGraph,
        waves: list[ConversionWave],
    ) -> list[str]:
        recommendations: list[str] = []

        if waves:
            recommendations.append(
                f"Start with Wave 1 ({len(waves[0].components)} components) - "
                "these have no dependencies on other custom components."
            )

        for wave in waves:
            if wave.requires_coordination:
                recommendations.append(
                    f"Wave {wave.wave} contains circular dependencies that require "
                    "coordinated conversion."
                )

        if graph.circular_groups:
            recommendations.append(
                f"{len(graph.circular_groups)} circular dependency group(s) detected. "
                "These components should be converted together."
            )
            for number, group in enumerate(graph.circular_groups, start=1):
                names = ", ".join(graph.nodes[node_id].name for node_id in group)
                recommendations.append(f"  Circular group {number}: {names}")

        apex_count = graph.stats.apex_controllers
        if apex_count > 0:
            recommendations.append(
                f"{apex_count} Apex controllers detected. Stabilize their "
                "@AuraEnabled contracts before or alongside the conversion, "
                "and consider LWC wire adapters."
            )

        return recommendations
