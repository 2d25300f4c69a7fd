"""Shared pytest configuration and fixtures for lambdas tests."""

from typing import List

import pytest

from lambdas.model import Person


@pytest.fixture
def people() -> List[Person]:
    return [
        Person(name="Ando", age=47),
        Person(name="Danika", age=48),
        Person(name="Margie", age=12),
        Person(name="Bart", age=13),
    ]


@pytest.fixture
def classroom() -> List[Person]:
    return [
        Person(name="Alice", age=10),
        Person(name="Bob", age=11),
        Person(name="Charlie", age=19),
        Person(name="Diana", age=20),
        Person(name="Eve", age=15),
        Person(name="Frank", age=0),
        Person(name="Grace", age=15),
        Person(name="Heidi", age=-3),
    ]
