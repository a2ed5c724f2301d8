"""
Configuration screen API endpoints.
"""
from typing import Any, Dict, Literal, Optional
from fastapi import APIRouter, Request, status
from pydantic import BaseModel
from loguru import logger

from pushcapture.config import ConfigurationState
from pushcapture.exceptions import ConfigurationLockedError
from pushcapture.services.config_manager import ConfigurationManager
from pushcapture.utils.errors import (
    ErrorCode,
    create_error_response,
    error_code_for,
    error_details,
    raise_error,
)

router = APIRouter(prefix="/api/configuration", tags=["configuration"])


class GatewayTypeRequest(BaseModel):
    """Request to switch the gateway type."""

    type: Literal["public", "enterprise"]


class UseSdkRequest(BaseModel):
    """Request to change the "use SDK as Push Initiator" checkbox."""

    checked: bool


class ScreenResponse(BaseModel):
    """Current state of the configuration screen."""

    elements: Dict[str, Dict[str, Any]]
    focused: Optional[str] = None
    stage: str
    locked: bool
    error: Optional[Dict[str, Any]] = None


def get_manager(request: Request) -> ConfigurationManager:
    return request.app.state.config_manager


def screen_response(manager: ConfigurationManager) -> ScreenResponse:
    """Serialize the screen, including the error banner payload if shown."""
    error = None
    if manager.screen.error_message is not None and manager.last_error is not None:
        error = create_error_response(
            error_code_for(manager.last_error),
            manager.screen.error_message,
            details=error_details(manager.last_error),
        )

    snapshot = manager.screen.model_dump()
    return ScreenResponse(
        elements=snapshot["elements"],
        focused=snapshot["focused"],
        stage=manager.stage.value,
        locked=manager.locked,
        error=error,
    )


@router.get("", response_model=ScreenResponse)
async def load_screen(request: Request):
    """Initialize the screen from the stored configuration."""
    manager = get_manager(request)
    await manager.load_configuration()
    return screen_response(manager)


@router.post("/gateway", response_model=ScreenResponse)
async def select_gateway(body: GatewayTypeRequest, request: Request):
    """Switch between the public and enterprise gateway."""
    manager = get_manager(request)
    try:
        if body.type == "public":
            manager.select_public_gateway()
        else:
            manager.select_enterprise_gateway()
    except ConfigurationLockedError as e:
        raise_error(ErrorCode.CONFIG_LOCKED, e.message, status_code=status.HTTP_409_CONFLICT)
    return screen_response(manager)


@router.post("/use-sdk", response_model=ScreenResponse)
async def use_sdk(body: UseSdkRequest, request: Request):
    """Change whether the Push Service SDK is used by the Push Initiator."""
    manager = get_manager(request)
    manager.toggle_use_sdk_as_initiator(body.checked)
    return screen_response(manager)


@router.post("", response_model=ScreenResponse)
async def submit(body: ConfigurationState, request: Request):
    """
    Submit the configuration form.

    Validation and storage errors are reported on the screen (error banner
    plus the "error" payload), not as HTTP errors.
    """
    manager = get_manager(request)
    if manager.saving:
        raise_error(
            ErrorCode.SAVE_IN_PROGRESS,
            "A save is already in progress.",
            status_code=status.HTTP_409_CONFLICT,
        )

    manager.screen.fill(body)
    saved = await manager.configure()
    logger.debug(f"Configuration submit handled (saved: {saved})")
    return screen_response(manager)
