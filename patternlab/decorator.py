"""Formula elements drawn with optional brackets, spaces and joins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Formula(ABC):
    """Something that can be drawn as part of a formula."""

    @abstractmethod
    def render(self) -> str:
        """Return the text of this formula part."""

    def draw(self) -> str:
        """Print the rendered text without a newline and return it."""
        text = self.render()
        print(text, end="")
        return text


class Element(Formula, ABC):
    """A basic formula part."""


class OperatorType(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQUALS = "="


class Operator(Element):
    def __init__(self, operator_type: OperatorType) -> None:
        self.operator_type = operator_type

    def render(self) -> str:
        return self.operator_type.value


class Operand(Element, Generic[T]):
    def __init__(self, operand: T) -> None:
        self.operand = operand

    def render(self) -> str:
        return f"{self.operand}"


class FormulaDecorator(Formula):
    """Wraps a formula and draws it unchanged."""

    def __init__(self, formula: Formula) -> None:
        self._formula = formula

    def render(self) -> str:
        return self._formula.render()


class WrapperDecorator(FormulaDecorator):
    pass


class BracketsDecorator(WrapperDecorator):
    def render(self) -> str:
        return f"({super().render()})"


class SpacesDecorator(WrapperDecorator):
    def render(self) -> str:
        return f" {super().render()} "


class JoinDecorator(FormulaDecorator):
    """Draws a formula together with another one."""

    def __init__(self, formula: Formula, join: Formula) -> None:
        super().__init__(formula)
        self._join = join

    @abstractmethod
    def render(self) -> str:
        """Return the joined text."""


class HeadDecorator(JoinDecorator):
    def render(self) -> str:
        return self._join.render() + FormulaDecorator.render(self)


class TailDecorator(JoinDecorator):
    def render(self) -> str:
        return FormulaDecorator.render(self) + self._join.render()


def _draw_all(elements: list[Formula]) -> None:
    for element in elements:
        element.draw()
    print()


def run() -> None:
    _draw_all([
        Operand(5),
        Operator(OperatorType.ADD),
        Operand(6),
        Operator(OperatorType.EQUALS),
        Operand(11),
    ])

    _draw_all([
        Operand(5),
        SpacesDecorator(Operator(OperatorType.ADD)),
        Operand(6),
        SpacesDecorator(Operator(OperatorType.EQUALS)),
        Operand(11),
    ])

    five = Operand(5)
    add = Operator(OperatorType.ADD)
    _draw_all([
        five,
        SpacesDecorator(add),
        Operand(3),
        SpacesDecorator(add),
        BracketsDecorator(Operand(-3)),
        SpacesDecorator(Operator(OperatorType.EQUALS)),
        five,
    ])