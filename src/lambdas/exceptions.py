"""
Exception classes for lambdas.

These exceptions signal programming errors in how the filtering routines are
called. They are raised eagerly and never caught inside the package.
"""


class InvalidPredicateError(Exception):
    """Raised when a predicate is missing or cannot be called.

    Every filtering routine takes a predicate of shape ``Person -> bool``.
    Passing ``None`` or any other non-callable value is a precondition
    violation, reported before a single record is examined or any output
    is written. Examples:
        - ``filter_people(people, None)``
        - ``display_people("Dogs", people, "age > 10")``
    """
    pass
