"""Validator port.

The domain never talks to a schema library directly. Value objects ask the
installed `Validator` to check a raw value against one of a small set of
`Rule`s and get back a list of `Issue`s; an empty list means the value is
acceptable.
"""

import abc
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class Rule(Enum):
    """Shape/range checks the domain needs."""

    UUID = "uuid"
    NON_NEGATIVE_NUMBER = "non_negative_number"
    INSTANT = "instant"


@dataclass(frozen=True, slots=True)
class Issue:
    """A single validation problem.

    Attributes:
        path: Field path the issue refers to, outermost first
            (e.g. ``("Price",)``).
        message: Human-readable description of the problem.
    """

    path: tuple[str, ...]
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(self.path)}: {self.message}"


class Validator(abc.ABC):
    """Contract for a validation engine."""

    @abc.abstractmethod
    def validate(self, rule: Rule, label: str, value: object) -> list[Issue]:
        """Check `value` against `rule`.

        Args:
            rule: The check to perform.
            label: Field label used as the first element of each issue path.
            value: The raw value to check.

        Returns:
            The issues found; empty when the value is valid.
        """
