"""A base class keeping one shared instance per subclass."""

from __future__ import annotations

from typing import Any


class SingletonBase:
    """The first instance created of a class becomes its shared instance."""

    _instance: Any = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None

    def __init__(self) -> None:
        cls = type(self)
        if cls._instance is None:
            cls._instance = self

    @classmethod
    def get_instance(cls) -> Any:
        """Return the shared instance, or None if there is none."""
        return cls._instance

    def release(self) -> None:
        """Forget the shared instance of this object's class."""
        type(self)._instance = None


class PlayerManager(SingletonBase):
    def __init__(self) -> None:
        super().__init__()
        self.name = "noname"
        self.can_moving = True
        self.current_speed = 7.0


def run() -> None:
    PlayerManager()
    player = PlayerManager.get_instance()
    print(f"Player Name: {player.name}")
    print(f"Player Can Moving: {str(player.can_moving).lower()}")
    print(f"Player Speed: {player.current_speed:g}")