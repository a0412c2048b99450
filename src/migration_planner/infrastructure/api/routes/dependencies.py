"""
Dependency graph API routes.

Implements the REST API for dependency graph analysis and conversion planning.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from migration_planner.application.dtos.conversion_order_dto import (
    ConversionOrderResponse,
    ConversionReadinessRequest,
)
from migration_planner.application.dtos.dependency_analysis_dto import (
    ComponentAnalysisDTO,
    DependencyAnalysisRequest,
    RawDependencyDTO,
)
from migration_planner.application.dtos.dependency_graph_dto import (
    DependencyGraphResponse,
)
from migration_planner.application.use_cases.analyze_dependency_graph import (
    AnalyzeDependencyGraphUseCase,
)
from migration_planner.application.use_cases.check_conversion_readiness import (
    CheckConversionReadinessUseCase,
)
from migration_planner.application.use_cases.plan_conversion_order import (
    PlanConversionOrderUseCase,
)
from migration_planner.infrastructure.api.dependencies import (
    get_analysis_settings,
    get_analyze_dependency_graph_use_case,
    get_check_conversion_readiness_use_case,
    get_plan_conversion_order_use_case,
)
from migration_planner.infrastructure.api.middleware.error_handler import (
    ComponentNotFoundError,
)
from migration_planner.infrastructure.api.schemas.conversion_order_schema import (
    ConversionOrderApiResponse,
    ConversionReadinessApiRequest,
    ConversionReadinessApiResponse,
    ConversionWaveApiModel,
)
from migration_planner.infrastructure.api.schemas.dependency_schema import (
    ComponentAnalysisApiModel,
    DependencyAnalysisApiRequest,
    DependencyEdgeApiModel,
    DependencyGraphApiResponse,
    DependencyNodeApiModel,
    GraphStatisticsApiModel,
)
from migration_planner.infrastructure.api.schemas.error_schema import ProblemDetails
from migration_planner.infrastructure.config import AnalysisSettings
from migration_planner.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ProblemDetails, "description": "Invalid component or option"},
    404: {"model": ProblemDetails, "description": "Component not found"},
    422: {"model": ProblemDetails, "description": "Request schema validation failed"},
    500: {"model": ProblemDetails, "description": "Internal server error"},
}


def _to_component_dtos(
    components: list[ComponentAnalysisApiModel],
) -> list[ComponentAnalysisDTO]:
    """Convert API component models to application DTOs."""
    return [
        ComponentAnalysisDTO(
            id=component.id,
            name=component.name,
            kind=component.kind,
            file_path=component.file_path,
            dependencies=[
                RawDependencyDTO(
                    target=dep.target,
                    kind=dep.kind,
                    line_number=dep.line_number,
                    expression=dep.expression,
                )
                for dep in component.dependencies
            ],
            conversion_grade=component.conversion_grade,
            conversion_score=component.conversion_score,
            estimated_hours=component.estimated_hours,
        )
        for component in components
    ]


def _to_analysis_request(
    request: DependencyAnalysisApiRequest, settings: AnalysisSettings
) -> DependencyAnalysisRequest:
    include_base_components = request.include_base_components
    if include_base_components is None:
        include_base_components = settings.include_base_components

    return DependencyAnalysisRequest(
        components=_to_component_dtos(request.components),
        include_base_components=include_base_components,
        focus=request.focus,
        max_depth=request.max_depth,
        direction=request.direction,
        circular_only=request.circular_only,
        show_orphans=request.show_orphans,
    )


def _to_graph_api_response(result: DependencyGraphResponse) -> DependencyGraphApiResponse:
    stats = result.statistics
    return DependencyGraphApiResponse(
        nodes=[
            DependencyNodeApiModel(
                id=node.id,
                name=node.name,
                kind=node.kind,
                file_path=node.file_path,
                in_degree=node.in_degree,
                out_degree=node.out_degree,
                depth=node.depth,
                is_leaf=node.is_leaf,
                is_orphan=node.is_orphan,
                is_circular=node.is_circular,
                circular_group=node.circular_group,
                conversion_grade=node.conversion_grade,
                conversion_score=node.conversion_score,
            )
            for node in result.nodes
        ],
        edges=[
            DependencyEdgeApiModel(
                from_id=edge.from_id,
                to_id=edge.to_id,
                kind=edge.kind,
                line_number=edge.line_number,
                expression=edge.expression,
                bidirectional=edge.bidirectional,
            )
            for edge in result.edges
        ],
        roots=result.roots,
        leaves=result.leaves,
        orphans=result.orphans,
        circular_groups=result.circular_groups,
        statistics=GraphStatisticsApiModel(
            total_nodes=stats.total_nodes,
            total_edges=stats.total_edges,
            aura_components=stats.aura_components,
            vf_pages=stats.vf_pages,
            apex_controllers=stats.apex_controllers,
            kind_counts=stats.kind_counts,
            max_depth=stats.max_depth,
            average_connections=stats.average_connections,
            circular_dependencies=stats.circular_dependencies,
            orphaned_components=stats.orphaned_components,
        ),
        focus=result.focus,
        warnings=result.warnings,
    )


def _to_order_api_response(result: ConversionOrderResponse) -> ConversionOrderApiResponse:
    return ConversionOrderApiResponse(
        waves=[
            ConversionWaveApiModel(
                wave=wave.wave,
                components=wave.components,
                blocked_by=wave.blocked_by,
                estimated_hours=wave.estimated_hours,
                component_count=wave.component_count,
                requires_coordination=wave.requires_coordination,
            )
            for wave in result.waves
        ],
        circular_dependencies=result.circular_dependencies,
        recommendations=result.recommendations,
        total_components=result.total_components,
        estimated_waves=result.estimated_waves,
        ordered_components=result.ordered_components,
        estimated_hours=result.estimated_hours,
        warnings=result.warnings,
    )


def _focus_not_found(
    use_case: AnalyzeDependencyGraphUseCase, app_request: DependencyAnalysisRequest
) -> ComponentNotFoundError:
    suggestions = use_case.suggest_focus(app_request)
    logger.info(
        "Focus component not found",
        focus=app_request.focus,
        suggestions=suggestions,
    )
    return ComponentNotFoundError(app_request.focus or "", suggestions)


@router.post(
    "/analyze",
    response_model=DependencyGraphApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Analyze component dependencies",
    description="Build the dependency graph of the given components, optionally "
    "focused on one component and filtered to circular dependencies",
    responses={200: {"description": "Graph built successfully"}, **ERROR_RESPONSES},
)
async def analyze_dependencies(
    request: DependencyAnalysisApiRequest,
    use_case: AnalyzeDependencyGraphUseCase = Depends(
        get_analyze_dependency_graph_use_case
    ),
    settings: AnalysisSettings = Depends(get_analysis_settings),
) -> DependencyGraphApiResponse:
    """
    Analyze the dependencies between Aura components, Visualforce pages and
    Apex controllers.

    - Builds nodes and edges from the extractor output
    - Detects circular dependencies using Tarjan's algorithm
    - Computes roots, leaves, orphans and per-node depth
    - Skips malformed dependency mentions and reports them as warnings
    """
    try:
        app_request = _to_analysis_request(request, settings)
        result = use_case.execute(app_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if result is None:
        raise _focus_not_found(use_case, app_request)

    return _to_graph_api_response(result)


@router.post(
    "/conversion-order",
    response_model=ConversionOrderApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Plan conversion order",
    description="Group Aura components and Visualforce pages into conversion waves",
    responses={200: {"description": "Conversion order computed"}, **ERROR_RESPONSES},
)
async def plan_conversion_order(
    request: DependencyAnalysisApiRequest,
    use_case: PlanConversionOrderUseCase = Depends(get_plan_conversion_order_use_case),
    settings: AnalysisSettings = Depends(get_analysis_settings),
) -> ConversionOrderApiResponse:
    """
    Compute the recommended conversion order.

    Each wave contains components whose dependencies were all converted in
    earlier waves; circular dependency groups are converted together in a
    coordinated wave. Focus and filter options apply before planning.
    """
    try:
        app_request = _to_analysis_request(request, settings)
        result = use_case.execute(app_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if result is None:
        raise _focus_not_found(use_case.analyze_use_case, app_request)

    return _to_order_api_response(result)


@router.post(
    "/conversion-readiness",
    response_model=ConversionReadinessApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Check conversion readiness",
    description="Check whether a component can be converted given the components "
    "already converted",
    responses={200: {"description": "Readiness computed"}, **ERROR_RESPONSES},
)
async def check_conversion_readiness(
    request: ConversionReadinessApiRequest,
    use_case: CheckConversionReadinessUseCase = Depends(
        get_check_conversion_readiness_use_case
    ),
    settings: AnalysisSettings = Depends(get_analysis_settings),
) -> ConversionReadinessApiResponse:
    """Check whether every Aura/Visualforce dependency of a component is converted."""
    include_base_components = request.include_base_components
    if include_base_components is None:
        include_base_components = settings.include_base_components

    try:
        result = use_case.execute(
            ConversionReadinessRequest(
                components=_to_component_dtos(request.components),
                component_id=request.component_id,
                already_converted=request.already_converted,
                include_base_components=include_base_components,
            )
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if not result.found:
        raise ComponentNotFoundError(request.component_id)

    return ConversionReadinessApiResponse(
        component_id=result.component_id,
        can_convert=result.can_convert,
        blocked_by=result.blocked_by,
    )
