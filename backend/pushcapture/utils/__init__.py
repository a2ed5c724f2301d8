"""
Utility modules for PushCapture.
"""
from pushcapture.utils.logger import setup_logger
from pushcapture.utils.errors import ErrorCode, create_error_response, error_code_for, error_details, raise_error

__all__ = [
    "setup_logger",
    "ErrorCode",
    "create_error_response",
    "error_code_for",
    "error_details",
    "raise_error",
]
