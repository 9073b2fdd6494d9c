"""Levels whose factories populate them with habitat-specific monsters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar


class LevelType(Enum):
    FOREST = auto()
    DESERT = auto()
    UNDERGROUND_PRISON = auto()


class Habitat(Enum):
    FOREST = "Forest"
    DESERT = "Desert"
    UNDERGROUND_PRISON = "Underground Prison"


class Monster:
    """A numbered monster living in a habitat; announces its creation."""

    kind: ClassVar[str] = "Monster"

    def __init__(self, counter: int, habitat: Habitat) -> None:
        self.counter = counter
        self.habitat = habitat
        print(self.created_message())

    def created_message(self) -> str:
        return f"{self.counter}) {self.kind} {self.habitat.value} "

    def destroyed_message(self) -> str:
        return f"{self.habitat.value} {self.kind} destroyed"


class Zombie(Monster):
    kind = "Zombie"


class Skeleton(Monster):
    kind = "Skeleton"


class Spider(Monster):
    kind = "Spider"


class LevelFactory(ABC):
    """Creates the monsters of one habitat following a fixed roster."""

    roster: ClassVar[tuple[tuple[type[Monster], int], ...]] = ()

    def __init__(self) -> None:
        self._groups: dict[type[Monster], list[Monster]] = {
            kind: [] for kind, _ in self.roster
        }

    @property
    @abstractmethod
    def habitat(self) -> Habitat:
        """Habitat of the monsters this factory creates."""

    @property
    def monsters(self) -> list[Monster]:
        return [monster for group in self._groups.values() for monster in group]

    def create_monsters(self) -> None:
        for kind, count in self.roster:
            self._groups[kind].extend(kind(i, self.habitat) for i in range(count))
        print(f"Created {self.habitat.value} monsters")

    def release(self) -> None:
        """Destroy every monster, last-declared kind first."""
        for group in reversed(list(self._groups.values())):
            for monster in group:
                print(monster.destroyed_message())
            group.clear()


class ForestLevelFactory(LevelFactory):
    habitat = Habitat.FOREST
    roster = ((Zombie, 3), (Spider, 4))


class DesertLevelFactory(LevelFactory):
    habitat = Habitat.DESERT
    roster = ((Skeleton, 2), (Spider, 1))


class UndergroundPrisonLevelFactory(LevelFactory):
    habitat = Habitat.UNDERGROUND_PRISON
    roster = ((Zombie, 4), (Skeleton, 3), (Spider, 1))


_FACTORIES: dict[LevelType, type[LevelFactory]] = {
    LevelType.FOREST: ForestLevelFactory,
    LevelType.DESERT: DesertLevelFactory,
    LevelType.UNDERGROUND_PRISON: UndergroundPrisonLevelFactory,
}


class Level:
    """A game level using the factory that matches its type."""

    def __init__(self, level_type: LevelType) -> None:
        self.level_type = level_type
        self.factory = _FACTORIES[level_type]()
        self._closed = False
        print(f"Level {self.factory.habitat.value}")

    def generate(self) -> None:
        self.factory.create_monsters()
        print("Level generated")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.factory.release()
        print("Level destroyed\n")

    def __enter__(self) -> Level:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def run() -> None:
    for level_type in LevelType:
        with Level(level_type) as level:
            level.generate()