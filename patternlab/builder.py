"""A foreman directing house builders through fixed construction plans."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto


class HouseType(Enum):
    ONE_ROOM_HOUSE = auto()
    ONE_ROOM_HOUSE_WITHOUT_WINDOWS_AND_DOORS = auto()
    ONE_ROOM_SPACE_HOUSE = auto()


def _say(line: str) -> str:
    print(line)
    return line


class OneRoomHouse:
    description = "I'm One-Room House"

    def about(self) -> str:
        """Print and return the house's description."""
        return _say(self.description)


class OneRoomSpaceHouse:
    description = "I'm One-Room Space House"

    def about(self) -> str:
        """Print and return the house's description."""
        return _say(self.description)


class HouseBuilder(ABC):
    """Builder interface; a step without a message for this builder is skipped."""

    _step_messages: dict[str, str] = {}

    def __init__(self) -> None:
        self._built: list[str] = []

    @property
    def built(self) -> list[str]:
        """Parts built since the last reset, in order."""
        return list(self._built)

    def _build(self, part: str) -> str | None:
        message = self._step_messages.get(part)
        if message is None:
            return None
        self._built.append(part)
        return _say(message)

    def _demolish(self, message: str) -> str:
        self._built.clear()
        return _say(message)

    @abstractmethod
    def reset(self) -> str:
        """Start a fresh house."""

    def build_walls(self) -> str | None:
        return self._build("walls")

    def build_doors(self) -> str | None:
        return self._build("doors")

    def build_windows(self) -> str | None:
        return self._build("windows")

    def build_roof(self) -> str | None:
        return self._build("roof")


class OneRoomHouseBuilder(HouseBuilder):
    _step_messages = {
        "walls": "Walls built for one-room house.",
        "doors": "Doors built for one-room house.",
        "windows": "Windows built for one-room house.",
        "roof": "Roof built for one-room house.",
    }

    def __init__(self) -> None:
        super().__init__()
        self._house = OneRoomHouse()

    def reset(self) -> str:
        return self._demolish("One-room house was demolished.")

    def get(self) -> OneRoomHouse:
        return self._house


class OneRoomSpaceHouseBuilder(HouseBuilder):
    _step_messages = {
        "walls": "Walls built for one-room space house.",
        "doors": "Doors built for one-room space house.",
        "windows": "Windows built for one-room space house.",
    }

    def __init__(self) -> None:
        super().__init__()
        self._house = OneRoomSpaceHouse()

    def reset(self) -> str:
        return self._demolish("One-room space house was demolished.")

    def get(self) -> OneRoomSpaceHouse:
        return self._house


class HouseForeman:
    """Runs a builder through the steps a house type requires."""

    _PLANS = {
        HouseType.ONE_ROOM_HOUSE: ("walls", "windows", "doors", "roof"),
        HouseType.ONE_ROOM_HOUSE_WITHOUT_WINDOWS_AND_DOORS: ("walls", "roof"),
        HouseType.ONE_ROOM_SPACE_HOUSE: ("walls", "windows", "doors"),
    }

    def __init__(self, house_builder: HouseBuilder) -> None:
        self._builder = house_builder

    @property
    def builder(self) -> HouseBuilder:
        return self._builder

    def change_builder(self, house_builder: HouseBuilder) -> None:
        self._builder = house_builder

    def build_house(self, house_type: HouseType) -> None:
        steps = self._PLANS.get(house_type)
        if steps is None:
            return
        builder = self._builder
        actions = {
            "walls": builder.build_walls,
            "windows": builder.build_windows,
            "doors": builder.build_doors,
            "roof": builder.build_roof,
        }
        builder.reset()
        for step in steps:
            actions[step]()


def run() -> None:
    builder = OneRoomHouseBuilder()
    foreman = HouseForeman(builder)
    foreman.build_house(HouseType.ONE_ROOM_HOUSE)
    builder.get().about()

    print("=================")

    builder = OneRoomHouseBuilder()
    foreman = HouseForeman(builder)
    house = builder.get()
    foreman.build_house(HouseType.ONE_ROOM_HOUSE)
    house.about()
    foreman.build_house(HouseType.ONE_ROOM_HOUSE_WITHOUT_WINDOWS_AND_DOORS)
    house.about()

    print("=================")

    builder = OneRoomHouseBuilder()
    foreman = HouseForeman(builder)
    house = builder.get()
    foreman.build_house(HouseType.ONE_ROOM_HOUSE)
    house.about()
    foreman.build_house(HouseType.ONE_ROOM_HOUSE_WITHOUT_WINDOWS_AND_DOORS)
    house.about()

    space_builder = OneRoomSpaceHouseBuilder()
    foreman.change_builder(space_builder)
    space_house = space_builder.get()
    foreman.build_house(HouseType.ONE_ROOM_SPACE_HOUSE)
    space_house.about()