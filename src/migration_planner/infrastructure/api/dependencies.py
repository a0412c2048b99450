"""
Dependency injection for FastAPI routes.

Provides factory functions for creating use cases with their required dependencies.
Uses FastAPI's Depends() for dependency injection.
"""

from fastapi import Depends

from migration_planner.application.use_cases.analyze_dependency_graph import (
    AnalyzeDependencyGraphUseCase,
)
from migration_planner.application.use_cases.check_conversion_readiness import (
    CheckConversionReadinessUseCase,
)
from migration_planner.application.use_cases.plan_conversion_order import (
    PlanConversionOrderUseCase,
)
from migration_planner.domain.services.circular_dependency_detector import (
    CircularDependencyDetector,
)
from migration_planner.domain.services.conversion_order_calculator import (
    ConversionOrderCalculator,
)
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_filter_service import GraphFilterService
from migration_planner.domain.services.graph_traversal_service import (
    GraphTraversalService,
)
from migration_planner.infrastructure.config import AnalysisSettings, get_settings


def get_analysis_settings() -> AnalysisSettings:
    """Get analysis settings from the global settings instance."""
    return get_settings().analysis


# Domain service factories


def get_circular_dependency_detector() -> CircularDependencyDetector:
    """Get CircularDependencyDetector instance."""
    return CircularDependencyDetector()


def get_graph_traversal_service() -> GraphTraversalService:
    """Get GraphTraversalService instance."""
    return GraphTraversalService()


def get_graph_builder(
    detector: CircularDependencyDetector = Depends(get_circular_dependency_detector),
    settings: AnalysisSettings = Depends(get_analysis_settings),
) -> GraphBuilder:
    """Get GraphBuilder instance."""
    return GraphBuilder(
        detector=detector,
        max_traversal_depth=settings.max_traversal_depth,
    )


def get_graph_filter_service(
    graph_builder: GraphBuilder = Depends(get_graph_builder),
    traversal_service: GraphTraversalService = Depends(get_graph_traversal_service),
) -> GraphFilterService:
    """Get GraphFilterService instance."""
    return GraphFilterService(
        graph_builder=graph_builder,
        traversal_service=traversal_service,
    )


def get_conversion_order_calculator(
    settings: AnalysisSettings = Depends(get_analysis_settings),
) -> ConversionOrderCalculator:
    """Get ConversionOrderCalculator instance."""
    return ConversionOrderCalculator(
        hours_per_component=settings.hours_per_component,
        hours_per_coordinated_component=settings.hours_per_coordinated_component,
    )


# Use case factories


def get_analyze_dependency_graph_use_case(
    graph_builder: GraphBuilder = Depends(get_graph_builder),
    graph_filter_service: GraphFilterService = Depends(get_graph_filter_service),
) -> AnalyzeDependencyGraphUseCase:
    """Get AnalyzeDependencyGraphUseCase instance."""
    return AnalyzeDependencyGraphUseCase(
        graph_builder=graph_builder,
        graph_filter_service=graph_filter_service,
    )


def get_plan_conversion_order_use_case(
    analyze_use_case: AnalyzeDependencyGraphUseCase = Depends(
        get_analyze_dependency_graph_use_case
    ),
    calculator: ConversionOrderCalculator = Depends(get_conversion_order_calculator),
) -> PlanConversionOrderUseCase:
    """Get PlanConversionOrderUseCase instance."""
    return PlanConversionOrderUseCase(
        analyze_use_case=analyze_use_case,
        calculator=calculator,
    )


def get_check_conversion_readiness_use_case(
    graph_builder: GraphBuilder = Depends(get_graph_builder),
    graph_filter_service: GraphFilterService = Depends(get_graph_filter_service),
    calculator: ConversionOrderCalculator = Depends(get_conversion_order_calculator),
) -> CheckConversionReadinessUseCase:
    """Get CheckConversionReadinessUseCase instance."""
    return CheckConversionReadinessUseCase(
        graph_builder=graph_builder,
        graph_filter_service=graph_filter_service,
        calculator=calculator,
    )
