"""
Filter-and-Report routine.

Filters an ordered sequence of ``Person`` records with a predicate and writes
the survivors, one per line, under a header naming the call style and title:

    DisplayPeopleViaDelegate Dogs:
    Margie, 12 years old
    Bart, 13 years old

The two call styles differ only in the header label; filtering and rendering
are shared.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from lambdas.model import Person
from lambdas.predicates import Predicate, require_predicate

logger = logging.getLogger(__name__)


class CallStyle(Enum):
    """How the predicate was handed to the report routine."""

    DELEGATE = "DisplayPeopleViaDelegate"
    FUNCTION_POINTER = "DisplayPeopleViaFunctionPointer"

    @property
    def label(self) -> str:
        return self.value


def filter_people(people: Iterable[Person], predicate: Predicate) -> List[Person]:
    """Return the people matching ``predicate``, in their original order.

    The input is read once and never modified; a new list is returned.

    Args:
        people: Ordered sequence of records
        predicate: Callable of shape ``Person -> bool``

    Returns:
        New list holding the matching records in input order

    Raises:
        InvalidPredicateError: If predicate is None or not callable
    """
    predicate = require_predicate(predicate)

    total = 0
    matches = []
    for person in people:
        total += 1
        if predicate(person):
            matches.append(person)

    logger.debug("Kept %d of %d people", len(matches), total)
    return matches


def format_person(person: Person) -> str:
    return f"{person.name}, {person.age} years old"


def format_header(title: str, style: CallStyle = CallStyle.DELEGATE) -> str:
    return f"{style.label} {title}:"


def display_people(
    title: str,
    people: Iterable[Person],
    predicate: Predicate,
    style: CallStyle = CallStyle.DELEGATE,
    out: Optional[TextIO] = None,
) -> None:
    """Write a header line and one line per matching person.

    Args:
        title: Title shown after the call-style label in the header
        people: Ordered sequence of records
        predicate: Callable of shape ``Person -> bool``
        style: Call style whose label starts the header
        out: Text stream to write to (defaults to ``sys.stdout``)

    Raises:
        InvalidPredicateError: If predicate is None or not callable. Nothing
            is written in that case.
    """
    matches = filter_people(people, predicate)
    stream = out if out is not None else sys.stdout

    print(format_header(title, style), file=stream)
    for person in matches:
        print(format_person(person), file=stream)


def display_people_via_delegate(
    title: str,
    people: Iterable[Person],
    predicate: Predicate,
    out: Optional[TextIO] = None,
) -> None:
    """``display_people`` with the delegate header label."""
    display_people(title, people, predicate, CallStyle.DELEGATE, out)


def display_people_via_function_pointer(
    title: str,
    people: Iterable[Person],
    predicate: Predicate,
    out: Optional[TextIO] = None,
) -> None:
    """``display_people`` with the function-pointer header label."""
    display_people(title, people, predicate, CallStyle.FUNCTION_POINTER, out)
