"""
Demonstration runs.

The same age-range predicate (older than 10 and younger than 20) is spelled
several ways and handed to the report routine under both call styles:

1. A lambda bound to a variable annotated with ``Predicate``
2. An inline function built from named intermediate steps
3. A module-level function, ``apply_age_range``

Every spelling produces the same callable kind, so every run prints the same
two people.
"""

from __future__ import annotations

import logging
import sys
from collections import namedtuple
from typing import List, Optional, TextIO

from lambdas.model import Person
from lambdas.predicates import Predicate, apply_age_range
from lambdas.report import CallStyle, display_people

logger = logging.getLogger(__name__)

DemoRun = namedtuple("DemoRun", ["style", "title", "predicate"])


def build_people() -> List[Person]:
    return [
        Person(name="Ando", age=47),
        Person(name="Danika", age=48),
        Person(name="Margie", age=12),
        Person(name="Bart", age=13),
    ]


def demo_runs() -> List[DemoRun]:
    """Return every demonstration run, in display order."""
    typed_filter: Predicate = lambda p: p.age > 10 and p.age < 20

    def stepwise_filter(p: Person) -> bool:
        greater_than_10 = p.age > 10
        less_than_20 = p.age < 20

        return greater_than_10 and less_than_20

    filter_function = lambda p: p.age > 10 and p.age < 20

    return [
        DemoRun(CallStyle.DELEGATE, "Dogs", typed_filter),
        DemoRun(CallStyle.DELEGATE, "Lambda via delegate Dogs", stepwise_filter),
        DemoRun(CallStyle.FUNCTION_POINTER, "Dogs", filter_function),
        DemoRun(CallStyle.FUNCTION_POINTER, "Lambda via function pointer Dogs", stepwise_filter),
        DemoRun(CallStyle.DELEGATE, "Another lambda via delegate Dogs", apply_age_range),
        DemoRun(CallStyle.FUNCTION_POINTER, "Another lambda via function pointer Dogs", apply_age_range),
    ]


def main(out: Optional[TextIO] = None) -> int:
    """Print every demonstration run, each followed by a blank line.

    Args:
        out: Text stream to write to (defaults to ``sys.stdout``)

    Returns:
        Process exit code, always 0
    """
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    stream = out if out is not None else sys.stdout

    people = build_people()
    runs = demo_runs()
    logger.info("Running %d demonstrations over %d people", len(runs), len(people))

    for run in runs:
        display_people(run.title, people, run.predicate, run.style, out=stream)
        print(file=stream)

    return 0


if __name__ == "__main__":
    sys.exit(main())
