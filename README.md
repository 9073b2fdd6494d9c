# patternlab

Small, self-contained examples of classic design patterns, together with a
generator that lays out skeleton directories (`run.h`, `run.cpp`, `<name>.h`,
`<name>.cpp`) for pattern examples that are still to be written.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Command line

```
patternlab [DEMO ...] [--base-dir DIR] [--load-delay SECONDS]
```

Every call first creates skeleton directories under `--base-dir` (default: the
current directory) for the patterns FactoryMethod, Interpreter, Mediator,
Memento and Visitor, printing a line for each one it creates. A directory that
already exists is left alone.

It then runs the demonstrations named as `DEMO`, in the order given. With no
names it runs only the `proxy` demonstration. The names are:

`abstract_factory`, `adapter`, `bridge`, `builder`, `chain`, `command`,
`composite`, `decorator`, `facade`, `flyweight`, `iterator`, `observer`,
`prototype`, `proxy`, `singleton`, `state`, `strategy`, `template_method`.

`--load-delay` sets how many seconds each image takes to load in the `proxy`
demonstration (default 0.8).

```
patternlab observer strategy --base-dir /tmp/skeletons
```

Some demonstrations have particular behaviour:

- `command` ends with a random sequence of additions and subtractions, so its
  last block differs from run to run.
- `flyweight` builds one shared object for each of the 362880 orderings of
  `abcdefghi`, prints their count, then waits for two lines on standard input.
- `proxy` pauses for the load delay each time an image is shown.

## The examples

Every module has a `run()` function that prints its demonstration:

| Module | Pattern |
| --- | --- |
| `patternlab.abstract_factory` | Abstract Factory: levels whose factories create monsters |
| `patternlab.adapter` | Adapter: moving objects and animals behind a common interface |
| `patternlab.bridge` | Bridge: remotes driving a TV and a radio |
| `patternlab.builder` | Builder: houses built by a foreman |
| `patternlab.chain` | Chain of Responsibility: craft information handlers |
| `patternlab.command` | Command: queued arithmetic operations (`run(rng=None)`) |
| `patternlab.composite` | Composite: prices of orders made of ingredients |
| `patternlab.decorator` | Decorator: formulas drawn with spaces and brackets |
| `patternlab.facade` | Facade: video conversion behind one call |
| `patternlab.flyweight` | Flyweight: shared scene objects (`run(wait=None)`) |
| `patternlab.iterator` | Iterator: odd, even, looping and random walks |
| `patternlab.observer` | Observer: alarm, monitor and log |
| `patternlab.prototype` | Prototype: cloning monsters |
| `patternlab.proxy` | Proxy: images inside a widget (`run(load_delay=0.8)`) |
| `patternlab.singleton` | Singleton: player manager |
| `patternlab.state` | State: camera switcher |
| `patternlab.strategy` | Strategy: interpolation search switching to bisection for first occurrences |
| `patternlab.template_method` | Template Method: centroid of a selection |

The classes can be used directly as well:

```python
from patternlab.decorator import Operand, Operator, OperatorType, SpacesDecorator

parts = [Operand(5), SpacesDecorator(Operator(OperatorType.ADD)), Operand(6)]
print("".join(part.render() for part in parts))  # 5 + 6
```

```python
from patternlab.strategy import BinarySearch

BinarySearch([2, 3, 3, 4]).find(3)  # 1
BinarySearch([2, 3, 3, 4]).find(5)  # None
```

## Generating skeletons

```python
from patternlab.generator import PatternStructureGenerator

generator = PatternStructureGenerator({"Visitor"})
generator.add_pattern_name("Mediator")
created = generator.generate(".")  # ["Mediator", "Visitor"]
```

`generate` creates one directory per registered name, in sorted order, inside
an existing base directory, skipping names whose directory is already there. It
returns the names it created. Each directory holds `run.h`, `run.cpp`,
`<name>.h` and `<name>.cpp`, with the file name in lower case. The functions
`run_header`, `run_source`, `pattern_header` and `pattern_source` return the
text of those files without writing anything. `remove_pattern_name` raises
`KeyError` for a name that was never added.

## What is not included

Factory Method, Interpreter, Mediator, Memento and Visitor have no examples in
this package: the command only generates empty skeleton directories for them.
The generated files are empty templates and are not compiled or run.