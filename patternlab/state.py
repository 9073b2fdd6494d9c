"""A camera switcher whose behaviour follows its current state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto


class CameraState(Enum):
    TARGET = auto()
    FREE = auto()


class Camera(ABC):
    """A camera that reports what it does."""

    name = "Camera"

    @abstractmethod
    def move(self) -> str:
        """Move the camera and return the message printed."""

    @abstractmethod
    def look(self) -> str:
        """Point the camera and return the message printed."""

    def _report(self, action: str) -> str:
        message = f"{self.name} is {action}"
        print(message)
        return message


class TargetCamera(Camera):
    name = "TargetCamera"

    def move(self) -> str:
        return self._report("moves")

    def look(self) -> str:
        return self._report("looking")


class FreeCamera(Camera):
    name = "FreeCamera"

    def move(self) -> str:
        return self._report("moves")

    def look(self) -> str:
        return self._report("looking")


class CameraSwitcher:
    """Holds one camera per state and toggles between them."""

    DEFAULT_STATE = CameraState.TARGET

    def __init__(self, state: CameraState = DEFAULT_STATE) -> None:
        self._state = state
        self._cameras: dict[CameraState, Camera] = {
            CameraState.TARGET: TargetCamera(),
            CameraState.FREE: FreeCamera(),
        }

    @property
    def state(self) -> CameraState:
        return self._state

    @property
    def camera(self) -> Camera:
        return self._cameras[self._state]

    def switch(self) -> None:
        if self._state is CameraState.TARGET:
            self._state = CameraState.FREE
        elif self._state is CameraState.FREE:
            self._state = CameraState.TARGET
        else:
            self._state = self.DEFAULT_STATE


def run() -> None:
    switcher = CameraSwitcher()
    for index in range(3):
        if index:
            switcher.switch()
        label = "Target" if switcher.state is CameraState.TARGET else "Free"
        print(f"Camera State: {label}")
        switcher.camera.move()
        switcher.camera.look()