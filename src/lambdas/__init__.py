"""
lambdas - Three ways to spell the same predicate over an in-memory list.

A small teaching package: a predicate is any callable taking a ``Person``
and returning a bool, whether it is written as an annotated lambda, an inline
function, or a module-level function. The report routine filters a list with
it and prints the survivors.

Usage:
    >>> from lambdas import Person, filter_people
    >>> people = [Person("Margie", 12), Person("Ando", 47)]
    >>> filter_people(people, lambda p: p.age < 20)
    [Person(name='Margie', age=12)]

Key components:
- Person: immutable name/age record
- Predicate: the ``Person -> bool`` callable type
- filter_people / display_people: stable filter and console report
- main: the demonstration entry point
"""

from .model import Person
from .predicates import Predicate, apply_age_range, require_predicate
from .report import (
    CallStyle,
    display_people,
    display_people_via_delegate,
    display_people_via_function_pointer,
    filter_people,
    format_header,
    format_person,
)
from .demo import build_people, demo_runs, main
from .exceptions import *

# Version
__version__ = "0.1.0"

__all__ = [
    'Person',
    'Predicate',
    'apply_age_range',
    'require_predicate',
    'CallStyle',
    'filter_people',
    'format_person',
    'format_header',
    'display_people',
    'display_people_via_delegate',
    'display_people_via_function_pointer',
    'build_people',
    'demo_runs',
    'main',
    'InvalidPredicateError',
]
