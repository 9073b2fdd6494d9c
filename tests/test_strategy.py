import pytest

from patternlab.strategy import (
    BinarySearch,
    SearchElement,
    SearchFirstOccurrence,
    run,
)

UNIQUE_SMALL = [2, 7, 12, 31, 90, 114]
UNIQUE_LARGE = [
    8, 14, 26, 28, 38, 47, 56,
    60, 64, 69, 70, 78, 80, 82,
    84, 87, 90, 92, 98, 108,
]


def test_duplicates_report_first_occurrence():
    search = BinarySearch([2, 3, 3, 4])
    assert search.find(2) == 0
    assert search.find(3) == 1
    assert search.find(4) == 3


@pytest.mark.parametrize("numbers", [UNIQUE_SMALL, UNIQUE_LARGE])
def test_unique_elements_found_at_their_index(numbers):
    search = BinarySearch(numbers)
    assert [search.find(n) for n in numbers] == list(range(len(numbers)))


def test_missing_value_returns_none():
    search = BinarySearch(UNIQUE_SMALL)
    assert search.find(5) is None
    assert search.find(1) is None
    assert search.find(200) is None


def test_empty_sequence():
    assert BinarySearch([]).find(3) is None


def test_search_element_reports_bounds():
    result = SearchElement([2, 3, 3, 4]).find(3, 0, 3)
    assert result.index == 1
    assert result.left == 0


def test_first_occurrence_strategy():
    items = [1, 5, 5, 5, 9]
    result = SearchFirstOccurrence(items).find(5, 0, 3)
    assert items[result.index] == 5
    assert result.index <= 3


def test_run_reports_all_true(capsys):
    run()
    out = capsys.readouterr().out
    assert "false" not in out
    assert out.count(": true") == 4 + len(UNIQUE_SMALL) + len(UNIQUE_LARGE)
    assert "bs.Find(3) == 1: true" in out