"""A chain of craft handlers, each answering for one craft type."""

from __future__ import annotations

from enum import Enum, auto
from typing import ClassVar


class CraftType(Enum):
    NONE = auto()
    WEAPON = auto()
    AXE = auto()
    ONE_HANDED_AXE = auto()


class CraftSystem:
    """Answers for its own craft type, otherwise passes the query on."""

    craft_type: ClassVar[CraftType] = CraftType.NONE
    name: ClassVar[str] = "CraftSystem"

    def __init__(self) -> None:
        self.handler: CraftSystem | None = None

    def set_handler(self, handler: CraftSystem) -> None:
        self.handler = handler

    def show_info(self, craft_type: CraftType) -> str | None:
        """Print and return the name of the handler that answered, if any."""
        if craft_type is CraftType.NONE:
            return None
        if craft_type is self.craft_type:
            print(f"I'm {self.name}!")
            return self.name
        if self.handler is not None:
            return self.handler.show_info(craft_type)
        return None


class Weapon(CraftSystem):
    craft_type = CraftType.WEAPON
    name = "Weapon"


class Axe(Weapon):
    craft_type = CraftType.AXE
    name = "Axe"


class OneHandedAxe(Axe):
    craft_type = CraftType.ONE_HANDED_AXE
    name = "OneHandedAxe"


class CraftInfo:
    """Entry point that queries the head of a craft chain."""

    def __init__(self, craft_system: CraftSystem) -> None:
        self._craft_system = craft_system

    def show_info(self, craft_type: CraftType) -> str | None:
        return self._craft_system.show_info(craft_type)


def run() -> None:
    one_handed_axe = OneHandedAxe()
    axe = Axe()
    axe.set_handler(one_handed_axe)
    weapon = Weapon()
    weapon.set_handler(axe)
    craft_system = CraftSystem()
    craft_system.set_handler(weapon)

    info = CraftInfo(craft_system)
    for craft_type in (
        CraftType.WEAPON,
        CraftType.ONE_HANDED_AXE,
        CraftType.WEAPON,
        CraftType.NONE,
        CraftType.WEAPON,
        CraftType.AXE,
    ):
        info.show_info(craft_type)