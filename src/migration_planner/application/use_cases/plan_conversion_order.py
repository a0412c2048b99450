"""Plan conversion order use case.

This module implements the use case for computing the wave-based conversion
order of the analyzed components.
"""

from migration_planner.application.dtos.conversion_order_dto import (
    ConversionOrderResponse,
    ConversionWaveDTO,
)
from migration_planner.application.dtos.dependency_analysis_dto import (
    DependencyAnalysisRequest,
)
from migration_planner.application.use_cases.analyze_dependency_graph import (
    AnalyzeDependencyGraphUseCase,
)
from migration_planner.domain.services.conversion_order_calculator import (
    ConversionOrderCalculator,
)


class PlanConversionOrderUseCase:
    """Use case for planning the conversion order.

    The order is computed on the same prepared graph the analysis use case
    returns, so focus and filters apply to the plan as well.
    """

    def __init__(
        self,
        analyze_use_case: AnalyzeDependencyGraphUseCase,
        calculator: ConversionOrderCalculator,
    ):
        """Initialize the use case.

        Args:
            analyze_use_case: Use case that builds and filters the graph
            calculator: Conversion order calculator
        """
        self.analyze_use_case = analyze_use_case
        self.calculator = calculator

    def execute(self, request: DependencyAnalysisRequest) -> ConversionOrderResponse | None:
        """Execute the plan conversion order use case.

        Args:
            request: Analysis results and filter options

        Returns:
            ConversionOrderResponse, or None if the focus target does not resolve

        Raises:
            ValueError: If the request is invalid
        """
        prepared = self.analyze_use_case.prepare_graph(request)
        if prepared is None:
            return None

        result = self.calculator.calculate(prepared.graph)

        return ConversionOrderResponse(
            waves=[
                ConversionWaveDTO(
                    wave=wave.wave,
                    components=list(wave.components),
                    blocked_by=list(wave.blocked_by),
                    estimated_hours=wave.effort.estimated_hours,
                    component_count=wave.effort.components,
                    requires_coordination=wave.requires_coordination,
                )
                for wave in result.waves
            ],
            circular_dependencies=[list(group) for group in result.circular_dependencies],
            recommendations=list(result.recommendations),
            total_components=result.total_components,
            estimated_waves=result.estimated_waves,
            ordered_components=result.ordered_components,
            estimated_hours=result.estimated_hours,
            warnings=list(prepared.warnings),
        )
