"""
Record model.

Provides the immutable ``Person`` record that every routine in the package
reads. Records carry no identity beyond their field values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """An immutable name/age pair.

    Attributes:
        name: Display name of the person
        age: Age in whole years
    """

    name: str
    age: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Person name must be a string, got {type(self.name).__name__}")
        # bool is an int subclass but never a meaningful age
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"Person age must be an integer, got {type(self.age).__name__}")
