"""Command line entry: scaffold pending patterns and run pattern demos."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from patternlab import (
    abstract_factory,
    adapter,
    bridge,
    builder,
    chain,
    command,
    composite,
    decorator,
    facade,
    flyweight,
    iterator,
    observer,
    prototype,
    proxy,
    singleton,
    state,
    strategy,
    template_method,
)
from patternlab.generator import PatternStructureGenerator

PENDING_PATTERNS = ("FactoryMethod", "Interpreter", "Mediator", "Memento", "Visitor")

_DEMOS: dict[str, Callable[[argparse.Namespace], None]] = {
    "abstract_factory": lambda args: abstract_factory.run(),
    "adapter": lambda args: adapter.run(),
    "bridge": lambda args: bridge.run(),
    "builder": lambda args: builder.run(),
    "chain": lambda args: chain.run(),
    "command": lambda args: command.run(),
    "composite": lambda args: composite.run(),
    "decorator": lambda args: decorator.run(),
    "facade": lambda args: facade.run(),
    "flyweight": lambda args: flyweight.run(),
    "iterator": lambda args: iterator.run(),
    "observer": lambda args: observer.run(),
    "prototype": lambda args: prototype.run(),
    "proxy": lambda args: proxy.run(args.load_delay),
    "singleton": lambda args: singleton.run(),
    "state": lambda args: state.run(),
    "strategy": lambda args: strategy.run(),
    "template_method": lambda args: template_method.run(),
}


def init_patterns(base_dir: str | Path = ".") -> list[str]:
    """Scaffold the patterns that have no directory yet; return those created."""
    generator = PatternStructureGenerator(set())
    for name in PENDING_PATTERNS:
        generator.add_pattern_name(name)
    return generator.generate(base_dir)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternlab", description="Run design pattern demonstrations."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        choices=sorted(_DEMOS),
        metavar="DEMO",
        help="demonstrations to run (default: proxy)",
    )
    parser.add_argument(
        "--base-dir", default=".", help="where pattern skeletons are generated"
    )
    parser.add_argument(
        "--load-delay",
        type=float,
        default=proxy.DEFAULT_LOAD_DELAY,
        help="seconds each image takes to load in the proxy demo",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    init_patterns(args.base_dir)
    for name in args.demos or ["proxy"]:
        _DEMOS[name](args)
    return 0