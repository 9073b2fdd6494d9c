"""Monsters that produce independent copies of themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Monster(ABC):
    """A monster with a moving speed that can clone itself."""

    def __init__(self, speed_moving: float) -> None:
        self.speed_moving = speed_moving

    @abstractmethod
    def clone(self) -> Monster:
        """Return an independent copy."""


class Zombie(Monster):
    def clone(self) -> Zombie:
        return Zombie(self.speed_moving)


class Skeleton(Monster):
    def __init__(self, speed_moving: float, amount_bones: int) -> None:
        super().__init__(speed_moving)
        self.amount_bones = amount_bones

    def clone(self) -> Skeleton:
        return Skeleton(self.speed_moving, self.amount_bones)


_RULE = "-" * 25


def _describe(label: str, monster: Monster) -> list[str]:
    lines = [f"{label} SpeedMoving: {monster.speed_moving:g}"]
    if isinstance(monster, Skeleton):
        lines.append(f"{label} AmountBones: {monster.amount_bones}")
    return lines


def _section(*groups: list[tuple[str, Monster]]) -> str:
    lines: list[str] = []
    for position, group in enumerate(groups):
        if position:
            lines.append("")
        for label, monster in group:
            lines.extend(_describe(label, monster))
    lines.append(_RULE)
    return "\n".join(lines)


def run() -> None:
    zombie = Zombie(1.2)
    skeleton = Skeleton(1.1, 128)
    originals = [("Zombie", zombie), ("Skeleton", skeleton)]

    print(_section(originals))

    zombie_clone = zombie.clone()
    skeleton_clone = skeleton.clone()
    clones = [("ZombieClone", zombie_clone), ("SkeletonClone", skeleton_clone)]

    print(_section(originals, clones))

    zombie_clone.speed_moving = 0.3
    skeleton_clone.amount_bones = 96

    print(_section(originals, clones))

    skeleton_clone_clone = skeleton_clone.clone()
    second_clones = [("SkeletonCloneClone", skeleton_clone_clone)]

    print(_section(originals, clones, second_clones))

    skeleton_clone.speed_moving = 2.2
    skeleton_clone_clone.speed_moving = 0.2

    print(_section(originals, clones, second_clones))