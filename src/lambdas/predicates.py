"""
Predicates over ``Person`` records.

A predicate is any callable taking one ``Person`` and returning a bool. A
lambda bound to an annotated variable, an inline lambda, a nested ``def`` and
a module-level function are all the same kind of value here, so a single
``Predicate`` alias covers every spelling.
"""

from typing import Any, Callable

from lambdas.exceptions import InvalidPredicateError
from lambdas.model import Person

Predicate = Callable[[Person], bool]


def apply_age_range(person: Person) -> bool:
    """Return True for people strictly older than 10 and younger than 20."""
    greater_than_10 = person.age > 10
    less_than_20 = person.age < 20

    return greater_than_10 and less_than_20


def require_predicate(predicate: Any) -> Predicate:
    """Check that ``predicate`` can be invoked with a ``Person``.

    Args:
        predicate: Candidate predicate value

    Returns:
        The same predicate, unchanged

    Raises:
        InvalidPredicateError: If predicate is None or not callable
    """
    if predicate is None:
        raise InvalidPredicateError("Predicate is required, got None")
    if not callable(predicate):
        raise InvalidPredicateError(
            f"Predicate must be callable, got {type(predicate).__name__}"
        )
    return predicate
