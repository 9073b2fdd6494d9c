"""Images shown directly or through a proxy inside a widget."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

DEFAULT_LOAD_DELAY = 0.8


class Showable(ABC):
    """Something a widget can display."""

    @abstractmethod
    def show(self) -> None:
        """Display the item."""


class Image(Showable):
    """An image that takes a while to load before it is displayed."""

    def __init__(self, name: str, load_delay: float = DEFAULT_LOAD_DELAY) -> None:
        self.name = name
        self.load_delay = load_delay

    def show(self) -> None:
        print(f"Image {self.name} is loading")
        time.sleep(self.load_delay)
        print(f"Image {self.name} is displayed")


class ImageProxy(Showable):
    """Stands in for an image and forwards display requests to it."""

    def __init__(self, image: Image | None) -> None:
        self.image = image

    def show(self) -> None:
        print("ImageProxy is displayed")
        if self.image is not None:
            self.image.show()


class Widget:
    """A container drawing its components in insertion order."""

    def __init__(self) -> None:
        self._components: list[Showable | None] = []

    @property
    def components(self) -> list[Showable | None]:
        return list(self._components)

    def add_component(self, component: Showable | None) -> None:
        self._components.append(component)

    def draw(self) -> None:
        print("Widget is drawing")
        for component in self._components:
            if component is not None:
                component.show()
        print()


def run(load_delay: float = DEFAULT_LOAD_DELAY) -> None:
    img_01 = Image("Image.001", load_delay)
    img_02 = Image("Image.002", load_delay)

    # Proxies are created alongside the images but the widget shows the images.
    ImageProxy(img_01)
    ImageProxy(img_02)

    widget = Widget()
    widget.draw()

    widget.add_component(img_01)
    widget.draw()

    widget.add_component(img_02)
    widget.draw()