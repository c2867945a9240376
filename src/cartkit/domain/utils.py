"""Domain layer utilities."""

from typing import Never

from cartkit.domain.errors import UnreachableError


def assert_never(value: Never) -> Never:
    """Fail hard on a branch that exhaustive matching should make impossible.

    Place in the ``case _:`` arm of a ``match`` over a closed union. Static
    checkers report an error at the call site when a variant is left unhandled,
    because the leftover type is no longer ``Never``.

    Raises:
        UnreachableError: Always.
    """
    raise UnreachableError(value)
