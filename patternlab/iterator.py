"""Monster collections walked by several iteration strategies."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar


class Monster:
    """A monster identified by a string."""

    def __init__(self, monster_id: str) -> None:
        self.monster_id = monster_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.monster_id!r})"


class Zombie(Monster):
    TYPE: ClassVar[str] = "_Zombie"

    def __init__(self, monster_id: str) -> None:
        super().__init__(monster_id + self.TYPE)


class Skeleton(Monster):
    TYPE: ClassVar[str] = "_Skeleton"

    def __init__(self, monster_id: str) -> None:
        super().__init__(monster_id + self.TYPE)


class MonsterIteratorType(Enum):
    ODD = auto()
    EVEN = auto()
    LOOP = auto()
    RANDOM = auto()


class MonsterIteratorError(Exception):
    """Raised when an iterator has no current item."""


class MonsterIterator(ABC):
    """Cursor over a monster collection."""

    default_index: ClassVar[int] = 0

    def __init__(self, monsters: Monsters) -> None:
        self._monsters = monsters
        self._index = self.default_index

    @property
    def index(self) -> int:
        return self._index

    def current_item(self) -> Monster:
        if self.is_done():
            raise MonsterIteratorError("iterator has no current item")
        return self._monsters[self._index]

    def is_done(self) -> bool:
        return self._index >= len(self._monsters)

    def reset(self) -> None:
        self._index = self.default_index

    @abstractmethod
    def advance(self) -> None:
        """Move to the next position."""


class ThroughStepIterator(MonsterIterator):
    """Visits every second monster starting from a fixed index."""

    step: ClassVar[int] = 2

    def advance(self) -> None:
        if not self.is_done():
            self._index += self.step


class OddIterator(ThroughStepIterator):
    default_index = 1

    def __init__(self, monsters: Monsters) -> None:
        super().__init__(monsters)


class EvenIterator(ThroughStepIterator):
    default_index = 0

    def __init__(self, monsters: Monsters) -> None:
        super().__init__(monsters)


class LoopIterator(MonsterIterator):
    """Visits every monster, starting over after the last."""

    step: ClassVar[int] = 1

    def __init__(self, monsters: Monsters) -> None:
        super().__init__(monsters)

    def advance(self) -> None:
        if self.is_done():
            self.reset()
            return
        self._index += self.step
        if self.is_done():
            self.reset()


class RandomIterator(MonsterIterator):
    """Jumps to a random monster on every step."""

    def __init__(self, monsters: Monsters, rng: random.Random | None = None) -> None:
        super().__init__(monsters)
        self._rng = rng if rng is not None else random.Random()

    def advance(self) -> None:
        count = len(self._monsters)
        if count == 0:
            return
        self._index = self._rng.randrange(count)


class Monsters:
    """Ordered collection of monsters."""

    def __init__(self) -> None:
        self._monsters: list[Monster] = []

    def add(self, monster: Monster) -> None:
        self._monsters.append(monster)

    def create_iterator(self, iterator_type: MonsterIteratorType) -> MonsterIterator:
        if iterator_type is MonsterIteratorType.ODD:
            return OddIterator(self)
        if iterator_type is MonsterIteratorType.EVEN:
            return EvenIterator(self)
        if iterator_type is MonsterIteratorType.LOOP:
            return LoopIterator(self)
        if iterator_type is MonsterIteratorType.RANDOM:
            return RandomIterator(self)
        raise ValueError(f"unknown iterator type: {iterator_type!r}")

    def __len__(self) -> int:
        return len(self._monsters)

    def __getitem__(self, index: int) -> Monster:
        if not 0 <= index < len(self._monsters):
            raise IndexError(f"monster index out of range: {index}")
        return self._monsters[index]


def run() -> None:
    monsters = Monsters()
    monsters.add(Zombie("OneZ"))
    monsters.add(Zombie("TwoZ"))
    monsters.add(Skeleton("OneS"))

    for title, iterator_type in (
        ("Odd Iterator:", MonsterIteratorType.ODD),
        ("Even Iterator:", MonsterIteratorType.EVEN),
    ):
        iterator = monsters.create_iterator(iterator_type)
        print(title)
        while not iterator.is_done():
            print(iterator.current_item().monster_id)
            iterator.advance()
        iterator.reset()
        print()

    for title, iterator_type in (
        ("Loop Iterator:", MonsterIteratorType.LOOP),
        ("Random Iterator:", MonsterIteratorType.RANDOM),
    ):
        iterator = monsters.create_iterator(iterator_type)
        print(title)
        counter = 0
        while not iterator.is_done() and counter < 10:
            print(f"{counter}){iterator.current_item().monster_id}")
            iterator.advance()
            counter += 1
        iterator.reset()
        print()