"""
Error handling utilities for standardized error payloads.

Standard Error Format:
{
    "code": "ERROR_CODE",
    "message": "Human readable message"
}

Screen responses carry this payload next to the element states; API
errors wrap it in FastAPI's "detail" field.
"""
from enum import Enum
from typing import Optional, Dict, Any
from loguru import logger
from fastapi import HTTPException

from pushcapture.exceptions import (
    ConfigValidationError,
    ConfigurationLockedError,
    MultipleConfigurationRowsError,
    PushCaptureError,
    PushServiceCreationError,
    StoreUnavailableError,
)


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    CONFIG_LOCKED = "CONFIG_LOCKED"
    SAVE_IN_PROGRESS = "SAVE_IN_PROGRESS"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    CONFIG_CORRUPTED = "CONFIG_CORRUPTED"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"


_ERROR_CODES = {
    ConfigValidationError: ErrorCode.VALIDATION_ERROR,
    ConfigurationLockedError: ErrorCode.CONFIG_LOCKED,
    StoreUnavailableError: ErrorCode.DATABASE_ERROR,
    MultipleConfigurationRowsError: ErrorCode.CONFIG_CORRUPTED,
    PushServiceCreationError: ErrorCode.EXTERNAL_SERVICE_ERROR,
}


def error_code_for(error: PushCaptureError) -> ErrorCode:
    """Map a configuration error to its error code."""
    return _ERROR_CODES.get(type(error), ErrorCode.INTERNAL_ERROR)


def error_details(error: PushCaptureError) -> Optional[Dict[str, Any]]:
    """Extra fields a frontend can use to react to the error."""
    if isinstance(error, ConfigValidationError):
        return {"kind": error.kind.value}
    if isinstance(error, MultipleConfigurationRowsError):
        return {"row_count": error.row_count}
    return None


def create_error_response(
    code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error payload.

    Args:
        code: Error code enum value
        message: Human-readable error message
        details: Optional additional details

    Returns:
        Error dict suitable for HTTPException detail
    """
    response = {
        "code": code.value,
        "message": message
    }
    if details:
        response["details"] = details
    return response


def raise_error(
    code: ErrorCode,
    message: str,
    status_code: int = 500,
    log: bool = True
) -> None:
    """
    Raise a standardized HTTP exception.

    Args:
        code: Error code enum value
        message: Human-readable error message
        status_code: HTTP status code
        log: Whether to log the error (default True)
    """
    if log:
        logger.error(f"API Error [{code.value}]: {message}")

    raise HTTPException(
        status_code=status_code,
        detail=create_error_response(code, message)
    )
