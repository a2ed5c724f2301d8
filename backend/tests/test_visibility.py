import pytest

from pushcapture.screen import ConfigurationScreen
from pushcapture.visibility import derive_visibility, focus_target


@pytest.mark.parametrize(
    "public, sdk, app_id, gateway_url, initiator_url",
    [
        (True, False, True, True, False),
        (True, True, True, True, True),
        (False, False, False, False, False),
        (False, True, True, False, True),
    ],
)
def test_derive_visibility(public, sdk, app_id, gateway_url, initiator_url):
    visibility = derive_visibility(public, sdk)
    assert visibility.app_id is app_id
    assert visibility.gateway_url is gateway_url
    assert visibility.initiator_url is initiator_url


def test_focus_prefers_gateway_url():
    assert focus_target(derive_visibility(True, True)) == "ppgurl"
    assert focus_target(derive_visibility(False, True)) == "piurl"
    assert focus_target(derive_visibility(False, False)) is None


def test_default_screen_is_public_gateway_without_sdk():
    screen = ConfigurationScreen()
    assert screen.using_public_gateway
    assert not screen.uses_sdk_as_initiator
    assert screen["appid"].visible
    assert screen["ppgurl"].visible
    assert not screen["piurl"].visible
    assert not screen["errordiv"].visible
    assert not screen["progressinfo"].visible


@pytest.mark.parametrize("public", [True, False])
@pytest.mark.parametrize("sdk", [True, False])
def test_manager_events_match_derived_visibility(screen_manager, public, sdk):
    # Reach each combination through a different event order
    screen_manager.toggle_use_sdk_as_initiator(sdk)
    if public:
        screen_manager.select_public_gateway()
    else:
        screen_manager.select_enterprise_gateway()

    expected = derive_visibility(public, sdk)
    screen = screen_manager.screen
    assert screen["appid"].visible is expected.app_id
    assert screen["ppgurl"].visible is expected.gateway_url
    assert screen["piurl"].visible is expected.initiator_url


def test_enterprise_gateway_hides_app_id_until_sdk_checked(screen_manager):
    screen_manager.select_enterprise_gateway()
    assert not screen_manager.screen["appid"].visible
    assert not screen_manager.screen["ppgurl"].visible

    screen_manager.toggle_use_sdk_as_initiator()
    assert screen_manager.screen["usesdkaspi"].checked
    assert screen_manager.screen["appid"].visible
    assert screen_manager.screen["piurl"].visible

    screen_manager.toggle_use_sdk_as_initiator()
    assert not screen_manager.screen["appid"].visible
    assert not screen_manager.screen["piurl"].visible


def test_unchecking_sdk_keeps_app_id_for_public_gateway(screen_manager):
    screen_manager.toggle_use_sdk_as_initiator(True)
    screen_manager.toggle_use_sdk_as_initiator(False)
    assert screen_manager.screen["appid"].visible
    assert not screen_manager.screen["piurl"].visible
    assert screen_manager.screen["publicradio"].checked
    assert not screen_manager.screen["enterpriseradio"].checked
