"""Shared scene objects cached by name, transformed by extrinsic state."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class XYZ:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:g}; {self.y:g}; {self.z:g})"


@dataclass
class Position(XYZ):
    pass


@dataclass
class Rotation(XYZ):
    pass


@dataclass
class Scale(XYZ):
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


@dataclass
class Transform:
    position: Position = field(default_factory=Position)
    rotation: Rotation = field(default_factory=Rotation)
    scale: Scale = field(default_factory=Scale)

    def __str__(self) -> str:
        return (
            f"Position: {self.position}\n"
            f"Rotation: {self.rotation}\n"
            f"Scale: {self.scale}\n"
        )


@dataclass(frozen=True, order=True)
class SceneObject:
    """Intrinsic, shareable part of a scene object."""

    name: str

    def transformation(self, transform: Transform) -> None:
        print(f"Object name: {self.name}\n{transform}")


class ObjectFactory:
    """Hands out one shared object per name."""

    def __init__(self) -> None:
        self._cache: dict[str, SceneObject] = {}

    def get(self, name: str) -> SceneObject:
        obj = self._cache.get(name)
        if obj is None:
            obj = self._cache[name] = SceneObject(name)
        return obj

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, name: object) -> bool:
        return name in self._cache

    def close(self) -> None:
        """Drop every cached object, reporting each in name order."""
        for name in sorted(self._cache):
            print(f'Object "{name}" deleted from ObjectFactory')
        self._cache.clear()

    def __enter__(self) -> ObjectFactory:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def run(wait: Callable[[], object] | None = None) -> None:
    pause = wait if wait is not None else sys.stdin.readline
    with ObjectFactory() as factory:
        for letters in itertools.permutations("abcdefghi"):
            factory.get("".join(letters))
        print(len(factory))
        pause()
        pause()