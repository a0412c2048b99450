"""Use cases - Application-specific business rules.

This package contains use cases that orchestrate domain logic
and implement application-specific workflows.
"""

from migration_planner.application.use_cases.analyze_dependency_graph import (
    AnalyzeDependencyGraphUseCase,
)
from migration_planner.application.use_cases.check_conversion_readiness import (
    CheckConversionReadinessUseCase,
)
from migration_planner.application.use_cases.plan_conversion_order import (
    PlanConversionOrderUseCase,
)

__all__ = [
    "AnalyzeDependencyGraphUseCase",
    "PlanConversionOrderUseCase",
    "CheckConversionReadinessUseCase",
]
