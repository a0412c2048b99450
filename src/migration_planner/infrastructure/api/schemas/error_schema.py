"""
RFC 7807 Problem Details error response schemas.

Implements standard error response format for the API.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details for HTTP APIs.

    Standard error response format that provides machine-readable details
    about errors in a consistent structure.
    """

    type: str = Field(
        ...,
        description="URI reference that identifies the problem type",
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code", ge=100, le=599)
    detail: str = Field(
        ..., description="Human-readable explanation specific to this occurrence"
    )
    instance: str = Field(
        ..., description="URI reference that identifies the specific occurrence"
    )
    correlation_id: str | None = Field(
        None, description="Correlation ID for request tracing"
    )
    suggestions: list[str] | None = Field(
        None, description="Close matches for an unresolved component identifier"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "about:blank",
                    "title": "Bad Request",
                    "status": 400,
                    "detail": "direction must be one of ['upstream', 'downstream', 'both'], got: sideways",
                    "instance": "/api/v1/dependency-graph/analyze",
                },
                {
                    "type": "about:blank",
                    "title": "Not Found",
                    "status": 404,
                    "detail": "Component 'AcountCard' not found",
                    "instance": "/api/v1/dependency-graph/analyze",
                    "suggestions": ["c:AccountCard"],
                },
            ]
        }
    )
