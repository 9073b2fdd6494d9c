"""Queued arithmetic commands applied to a shared value."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass


class Value:
    """Receiver holding an integer."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __int__(self) -> int:
        return self.value

    def add(self, value: int) -> None:
        self.value += value

    def sub(self, value: int) -> None:
        self.value -= value


class Operation(ABC):
    """A command taking one integer argument."""

    @abstractmethod
    def run(self, value: int) -> None:
        """Execute the command."""


class ValueAddOperation(Operation):
    def __init__(self, target: Value) -> None:
        self.target = target

    def run(self, value: int) -> None:
        self.target.add(value)


class ValueSubOperation(Operation):
    def __init__(self, target: Value) -> None:
        self.target = target

    def run(self, value: int) -> None:
        self.target.sub(value)


@dataclass
class Request:
    operation: Operation
    value: int = 0


class HandlerOperations:
    """Invoker executing queued requests in insertion order."""

    def __init__(self) -> None:
        self._queue: deque[Request] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def insert(self, request: Request) -> None:
        self._queue.append(request)

    def execute_next(self) -> bool:
        """Run the oldest request; return False if the queue was empty."""
        if not self._queue:
            return False
        request = self._queue.popleft()
        request.operation.run(request.value)
        return True


def _drain(handler: HandlerOperations, value: Value) -> None:
    while handler.execute_next():
        print(value.value)


def run(rng: random.Random | None = None) -> None:
    rng = rng if rng is not None else random.Random()

    value = Value(23)
    handler = HandlerOperations()
    print(f"{value.value}\n")
    handler.insert(Request(ValueAddOperation(value), 7))
    if handler.execute_next():
        print(value.value)

    print("-" * 4)

    value = Value(23)
    handler = HandlerOperations()
    print(f"{value.value}\n")
    handler.insert(Request(ValueAddOperation(value), 7))
    handler.insert(Request(ValueAddOperation(value), 2))
    _drain(handler, value)

    print("-" * 4)

    value = Value(23)
    handler = HandlerOperations()
    print(f"{value.value}\n")
    handler.insert(Request(ValueAddOperation(value), 7))
    handler.insert(Request(ValueAddOperation(value), 2))
    handler.insert(Request(ValueSubOperation(value), 18))
    _drain(handler, value)

    print("-" * 4)

    value = Value(rng.randint(-20, 20))
    handler = HandlerOperations()
    print(f"{value.value}\n")
    for _ in range(rng.randint(0, 15)):
        amount = rng.randint(-20, 20)
        kind = ValueAddOperation if rng.random() < 0.5 else ValueSubOperation
        handler.insert(Request(kind(value), amount))
    _drain(handler, value)