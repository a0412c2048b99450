"""Check conversion readiness use case."""

from migration_planner.application.dtos.conversion_order_dto import (
    ConversionReadinessRequest,
    ConversionReadinessResponse,
)
from migration_planner.application.use_cases.analyze_dependency_graph import (
    to_component_analyses,
)
from migration_planner.domain.services.conversion_order_calculator import (
    ConversionOrderCalculator,
)
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_filter_service import GraphFilterService


class CheckConversionReadinessUseCase:
    """Use case for checking whether one component can be converted now.

    The component may be given by id or bare name; it is resolved the same
    way as a focus target.
    """

    def __init__(
        self,
        graph_builder: GraphBuilder,
        graph_filter_service: GraphFilterService,
        calculator: ConversionOrderCalculator,
    ):
        self.graph_builder = graph_builder
        self.graph_filter_service = graph_filter_service
        self.calculator = calculator

    def execute(self, request: ConversionReadinessRequest) -> ConversionReadinessResponse:
        """Execute the check conversion readiness use case.

        Raises:
            ValueError: If a component in the request is invalid
        """
        graph = self.graph_builder.build(
            to_component_analyses(request.components),
            include_base_components=request.include_base_components,
        )

        component_id = self.graph_filter_service.resolve_focus_id(
            graph, request.component_id
        )
        if component_id is None:
            return ConversionReadinessResponse(
                component_id=request.component_id,
                found=False,
                can_convert=False,
            )

        readiness = self.calculator.check_readiness(
            graph, component_id, set(request.already_converted)
        )

        return ConversionReadinessResponse(
            component_id=readiness.component_id,
            found=True,
            can_convert=readiness.can_convert,
            blocked_by=list(readiness.blocked_by),
        )
