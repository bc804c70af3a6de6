"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "days",
                "message": "Must be a positive integer",
                "code": "INVALID_DAYS",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field errors:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "car_id",
                        "message": "Car is not available for rent",
                        "code": "CAR_UNAVAILABLE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "car_id",
                            "message": "Car is not available for rent",
                            "code": "CAR_UNAVAILABLE",
                        }
                    ],
                },
            ]
        }
    )
