"""
Service layer for PushCapture business logic.
"""
from pushcapture.services.config_manager import ConfigurationManager
from pushcapture.services.config_store import ConfigurationStore, SaveStage
from pushcapture.services.push_service import LocalPushServiceFactory, PushService, PushServiceFactory
from pushcapture.services.validation import validate_configuration
from pushcapture.visibility import FieldVisibility, derive_visibility

__all__ = [
    "ConfigurationManager",
    "ConfigurationStore",
    "SaveStage",
    "LocalPushServiceFactory",
    "PushService",
    "PushServiceFactory",
    "validate_configuration",
    "FieldVisibility",
    "derive_visibility",
]
