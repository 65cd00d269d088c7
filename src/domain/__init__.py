"""Domain layer: errors, schemas, constants."""

from .errors import (
    AppError,
    BadRequestError,
    ErrorCodes,
    InternalError,
    NotFoundError,
    RenderError,
)
from .schemas import ContactSubmission, UiSignalState, ValidationOutcome

__all__ = [
    "AppError",
    "BadRequestError",
    "ErrorCodes",
    "InternalError",
    "NotFoundError",
    "RenderError",
    "ContactSubmission",
    "UiSignalState",
    "ValidationOutcome",
]
