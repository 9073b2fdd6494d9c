"""Adapters that expose moving things through another interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(message: str) -> str:
    print(message)
    return message


class Runnable(ABC):
    """Client-side interface."""

    @abstractmethod
    def run(self) -> str:
        """Run and return the message that was printed."""


class Moveable(ABC):
    """Something that can move."""

    @abstractmethod
    def move(self) -> str:
        """Move and return the message that was printed."""


class MovingObject(Moveable):
    """Service with a normal and a fast way of moving."""

    def __init__(self, movement: float = 7.0, fast: float = 2.0) -> None:
        self.movement = movement
        self.fast = fast

    def move(self) -> str:
        return _say(f"I am moving at speed {self.movement:g}")

    def fast_moving(self) -> str:
        return _say(f"I am fast moving at speed {self.fast * self.movement:g}")


class MovingCanRunning(Runnable):
    """Makes a moving object usable where something runnable is expected."""

    def __init__(self, moveable: MovingObject) -> None:
        self._moveable = moveable

    def run(self) -> str:
        return self._moveable.fast_moving()


class Mammal:
    pass


class Human(Mammal):
    def walk(self) -> str:
        return _say("Human is walking.")


class Hawk(Mammal):
    def fly(self) -> str:
        return _say("Hawk is flying.")


class Python(Mammal):
    def crawl(self) -> str:
        return _say("Python is crawling.")


class HumanMoveAdapter(Moveable):
    def __init__(self, human: Human) -> None:
        self._human = human

    def move(self) -> str:
        return self._human.walk()


class HawkMoveAdapter(Moveable):
    def __init__(self, hawk: Hawk) -> None:
        self._hawk = hawk

    def move(self) -> str:
        return self._hawk.fly()


class PythonMoveAdapter(Moveable):
    def __init__(self, python: Python) -> None:
        self._python = python

    def move(self) -> str:
        return self._python.crawl()


def run() -> None:
    moving_object = MovingObject()
    print("MovingObject:")
    moving_object.move()
    moving_object.fast_moving()

    runnable: Runnable = MovingCanRunning(moving_object)
    print("Runnable:")
    runnable.run()

    print("***\nAdapterMammal example:")
    moveables: list[Moveable] = [
        HumanMoveAdapter(Human()),
        HawkMoveAdapter(Hawk()),
        PythonMoveAdapter(Python()),
    ]
    for moveable in moveables:
        moveable.move()