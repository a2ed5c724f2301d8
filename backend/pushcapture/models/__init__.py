"""
Database models for PushCapture.
"""
from pushcapture.models.configuration import configuration_table

__all__ = [
    "configuration_table",
]
