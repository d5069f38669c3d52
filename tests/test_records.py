import pytest

from barutil.records import (
    BacklightDevice,
    ControllerInfo,
    DeviceInfo,
    PlaybackStatus,
    PlayerInfo,
    SwaybarConfig,
)


def test_backlight_defaults():
    device = BacklightDevice("intel_backlight")
    assert device.actual == 1
    assert device.max == 1
    assert device.powered is True


def test_backlight_equality_ignores_powered():
    on = BacklightDevice("intel_backlight", 40, 100, True)
    off = BacklightDevice("intel_backlight", 40, 100, False)
    assert on == off


@pytest.mark.parametrize(
    "other",
    [
        BacklightDevice("acpi_video0", 40, 100),
        BacklightDevice("intel_backlight", 41, 100),
        BacklightDevice("intel_backlight", 40, 200),
    ],
)
def test_backlight_inequality(other):
    assert not (BacklightDevice("intel_backlight", 40, 100) == other)


def test_backlight_compared_with_other_type():
    assert (BacklightDevice("x") == "x") is False


def test_backlight_is_mutable_and_unhashable():
    device = BacklightDevice("intel_backlight")
    device.actual = 50
    assert device == BacklightDevice("intel_backlight", 50, 1)
    with pytest.raises(TypeError):
        hash(device)


def test_controller_info_fields():
    controller = ControllerInfo(path="/org/bluez/hci0", alias="laptop", powered=True)
    assert controller.path == "/org/bluez/hci0"
    assert controller.powered is True
    assert controller.discovering is False


def test_device_info_optional_defaults():
    device = DeviceInfo(alias="headphones", connected=True)
    assert device.icon is None
    assert device.battery_percentage is None
    assert device.connected is True


def test_device_info_battery_range():
    assert DeviceInfo(battery_percentage=80).battery_percentage == 80
    with pytest.raises(ValueError):
        DeviceInfo(battery_percentage=256)
    with pytest.raises(ValueError):
        DeviceInfo(battery_percentage=-1)


def test_player_info_defaults():
    player = PlayerInfo("spotify")
    assert player.status is PlaybackStatus.STOPPED
    assert player.artist is None
    assert player.position is None


def test_player_info_values():
    player = PlayerInfo("spotify", PlaybackStatus.PLAYING, "Playing", title="Song")
    assert player.status_string == "Playing"
    assert player.title == "Song"


def test_swaybar_config_equality():
    config = SwaybarConfig(id="bar-0", mode="dock", hidden_state="hide")
    assert config == SwaybarConfig("bar-0", "dock", "hide")
    assert config.mode == "dock"