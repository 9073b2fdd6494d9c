"""Scaffolding of per-pattern source directories."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from pathlib import Path

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _upper(name: str) -> str:
    return name.translate(_TO_UPPER)


def _lower(name: str) -> str:
    return name.translate(_TO_LOWER)


def run_header(pattern_name: str) -> str:
    """Text of the ``run.h`` header for a pattern."""
    guard = f"{_upper(pattern_name)}_RUN_H"
    return (
        "#pragma once\n\n"
        f"#ifndef {guard}\n"
        f"#define {guard}\n\n"
        f'#include "{_lower(pattern_name)}.h"\n\n'
        f"namespace {pattern_name} {{\n\n"
        "void Run();\n\n"
        "}\n\n"
        f"#endif // !{guard}\n"
    )


def run_source(pattern_name: str) -> str:
    """Text of the ``run.cpp`` source for a pattern."""
    return (
        '#include "run.h"\n\n'
        f"namespace {pattern_name} {{\n\n"
        "void Run() {\n\n\n\n}\n\n"
        f"}} // namespace {pattern_name}\n"
    )


def pattern_header(pattern_name: str) -> str:
    """Text of the header named after the pattern."""
    big = _upper(pattern_name)
    guard = f"{big}_{big}_H"
    return (
        "#pragma once\n\n"
        f"#ifndef {guard}\n"
        f"#define {guard}\n\n"
        f"namespace {pattern_name} {{\n\n\n\n"
        f"}} // namespace {pattern_name}\n\n"
        f"#endif // !{guard}\n"
    )


def pattern_source(pattern_name: str) -> str:
    """Text of the source file named after the pattern."""
    return (
        f'#include "{_lower(pattern_name)}.h"\n\n'
        f"namespace {pattern_name} {{\n\n\n\n"
        f"}} // namespace {pattern_name}\n"
    )


class PatternStructureGenerator:
    """Creates a skeleton directory for every registered pattern name."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: set[str] = set(patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)

    def add_pattern_name(self, pattern_name: str) -> None:
        self._patterns.add(pattern_name)

    def remove_pattern_name(self, pattern_name: str) -> None:
        try:
            self._patterns.remove(pattern_name)
        except KeyError:
            raise KeyError(f"unknown pattern name: {pattern_name!r}") from None

    def has_pattern_name(self, pattern_name: str) -> bool:
        return pattern_name in self._patterns

    def generate(self, base_dir: str | Path = ".") -> list[str]:
        """Create missing pattern directories under *base_dir*; return their names."""
        base = Path(base_dir)
        generated = []
        for name in sorted(self._patterns):
            directory = base / name
            if directory.is_dir():
                continue
            directory.mkdir()
            small = _lower(name)
            files = {
                directory / "run.h": run_header(name),
                directory / "run.cpp": run_source(name),
                directory / f"{small}.h": pattern_header(name),
                directory / f"{small}.cpp": pattern_source(name),
            }
            for path, text in files.items():
                path.write_text(text, encoding="utf-8", newline="\n")
            print(f"The structure for the {name} pattern was generated")
            generated.append(name)
        return generated