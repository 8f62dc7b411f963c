"""REST API error response models.

Documented in the OpenAPI schema for the screen routes.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error detail."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "query",
                "message": "Must not be empty",
                "code": "EMPTY_QUERY",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Screen session is not initialized",
                "code": "INTERNAL_ERROR"
            }

        Validation error:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "query", "message": "Must not be empty", "code": "EMPTY_QUERY"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Screen session is not initialized", "code": "INTERNAL_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "query",
                            "message": "Must not be empty",
                            "code": "EMPTY_QUERY",
                        },
                    ],
                },
            ]
        }
    )
