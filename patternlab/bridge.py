"""Remote controls decoupled from the devices they drive."""

from __future__ import annotations

_VOLUME_MODULUS = 1 << 16
_CHANNEL_MODULUS = 1 << 32


class Device:
    """A switchable device with an unsigned 16-bit volume and 32-bit channel."""

    def __init__(self) -> None:
        self._enabled = False
        self._volume = 0
        self._channel = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def channel(self) -> int:
        return self._channel

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def set_volume(self, volume: int) -> None:
        """Store *volume*, wrapping it into the unsigned 16-bit range."""
        self._volume = volume % _VOLUME_MODULUS

    def set_channel(self, channel: int) -> None:
        """Store *channel*, wrapping it into the unsigned 32-bit range."""
        self._channel = channel % _CHANNEL_MODULUS


class TV(Device):
    pass


class Radio(Device):
    pass


class Remote:
    """Basic remote working with any device."""

    def __init__(self, device: Device) -> None:
        self._device = device

    @property
    def device(self) -> Device:
        return self._device

    def toggle_power(self) -> None:
        if self._device.enabled:
            self._device.disable()
        else:
            self._device.enable()
        print(f"TogglePower: enable is {str(self._device.enabled).lower()}")

    def volume_down(self) -> None:
        self._device.set_volume(self._device.volume - 10)
        print(f"VolumeDown: {self._device.volume}")

    def volume_up(self) -> None:
        self._device.set_volume(self._device.volume + 10)
        print(f"VolumeUp: {self._device.volume}")

    def channel_down(self) -> None:
        self._device.set_channel(self._device.channel - 1)
        print(f"ChannelDown: {self._device.channel}")

    def channel_up(self) -> None:
        self._device.set_channel(self._device.channel + 1)
        print(f"ChannelUp: {self._device.channel}")


class AdvancedRemote(Remote):
    """Remote that can also mute the device."""

    def mute(self) -> None:
        self._device.set_volume(0)
        print(f"Volume muted: {self._device.volume}")


def run() -> None:
    print("TV")
    remote_tv = Remote(TV())
    remote_tv.toggle_power()
    remote_tv.volume_up()
    remote_tv.channel_up()
    remote_tv.channel_up()
    remote_tv.channel_down()
    remote_tv.channel_down()
    remote_tv.volume_down()
    remote_tv.toggle_power()

    print("\nRadio")
    remote_radio = AdvancedRemote(Radio())
    remote_radio.toggle_power()
    for _ in range(4):
        remote_radio.volume_up()
    remote_radio.channel_up()
    remote_radio.channel_up()
    remote_radio.mute()
    remote_radio.toggle_power()