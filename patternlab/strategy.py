"""Sorted-sequence search that swaps strategies to find first occurrences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import NamedTuple


class SearchResult(NamedTuple):
    """Found index (None if absent) and the bounds the search ended with."""

    index: int | None
    left: int
    right: int


class BinarySearchStrategy(ABC):
    """A way of searching a sorted sequence between two bounds."""

    def __init__(self, items: Sequence) -> None:
        self.items = items

    @abstractmethod
    def find(self, target, left: int, right: int) -> SearchResult:
        """Search ``items[left:right + 1]`` for *target*."""


class SearchElement(BinarySearchStrategy):
    """Interpolation search for any position holding the target."""

    def find(self, target, left: int, right: int) -> SearchResult:
        items = self.items
        while left <= right:
            if target < items[left] or target > items[right]:
                break
            num = int((target - items[left]) * (right - left))
            den = int(items[right] - items[left])
            middle = left + num // den if den else left
            if items[middle] < target:
                left = middle + 1
            elif items[middle] > target:
                right = middle - 1
            else:
                return SearchResult(middle, left, right)
        return SearchResult(None, left, right)


class SearchFirstOccurrence(BinarySearchStrategy):
    """Bisection narrowing towards the earliest position holding the target."""

    def find(self, target, left: int, right: int) -> SearchResult:
        result = right
        items = self.items
        while left < right:
            middle = left + (right - left) // 2
            if items[middle] == target:
                result = middle
                right = middle - 1
            else:
                left = middle + 1
        return SearchResult(result, left, right)


class BinarySearch:
    """Searches a sorted sequence for the first position of a value."""

    def __init__(self, items: Sequence) -> None:
        self.items = items
        self._element = SearchElement(items)
        self._first = SearchFirstOccurrence(items)

    def find(self, item) -> int | None:
        """Return the index of *item*, or None if it is absent."""
        if not self.items:
            return None
        found = self._element.find(item, 0, len(self.items) - 1)
        if found.index is not None and found.left < found.index:
            return self._first.find(item, found.left, found.index).index
        return found.index


def _report(search: BinarySearch, value, expected: int) -> None:
    ok = str(search.find(value) == expected).lower()
    print(f"bs.Find({value}) == {expected}: {ok}")


def _search_for_unique_elements(numbers: Sequence[int], search: BinarySearch) -> None:
    for index, number in enumerate(numbers):
        _report(search, number, index)


def run() -> None:
    print("[Test 1]")
    numbers = [2, 3, 3, 4]
    search = BinarySearch(numbers)
    _report(search, numbers[0], 0)
    _report(search, numbers[1], 1)
    _report(search, numbers[2], 1)
    _report(search, numbers[3], 3)

    print("[Test 2]")
    numbers = [2, 7, 12, 31, 90, 114]
    _search_for_unique_elements(numbers, BinarySearch(numbers))

    print("[Test 3]")
    numbers = [
        8, 14, 26, 28, 38, 47, 56,
        60, 64, 69, 70, 78, 80, 82,
        84, 87, 90, 92, 98, 108,
    ]
    _search_for_unique_elements(numbers, BinarySearch(numbers))