"""Module including value objects used across the domain layer.

Every value object validates itself on construction through the installed
`Validator` and raises `ValidationError` when the raw value is rejected.
`of()` is the canonical construction path; identifiers also offer `create()`
for a fresh value.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, TypeAlias, TypeVar

from cartkit.domain import collaborators
from cartkit.domain.errors import ValidationError
from cartkit.interfaces.id_generator import IdGenerator
from cartkit.interfaces.validator import Rule

Number: TypeAlias = int | float

I = TypeVar("I", bound="Identifier")


def _check(rule: Rule, label: str, value: object) -> None:
    if issues := collaborators.validator().validate(rule, label, value):
        raise ValidationError(label, issues)


# ============================================================================
#                               Identifiers
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Base for UUID-v4 string identifiers. Equality is by class and value."""

    LABEL: ClassVar[str] = "Identifier"

    value: str

    def __post_init__(self) -> None:
        _check(Rule.UUID, self.LABEL, self.value)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls: type[I], value: str) -> I:
        """Wrap an existing identifier string."""
        return cls(value)

    @classmethod
    def create(cls: type[I], id_generator: IdGenerator | None = None) -> I:
        """Create a fresh identifier.

        Args:
            id_generator: Generator to draw from. Defaults to the installed one.
        """
        generator = id_generator or collaborators.id_generator()
        return cls(generator.new_id())


class CartId(Identifier):
    """Identifier of a cart."""

    __slots__ = ()
    LABEL = "CartId"


class ItemId(Identifier):
    """Identifier of a catalog item placed in a cart."""

    __slots__ = ()
    LABEL = "ItemId"


# ============================================================================
#                               Amounts
# ============================================================================


@dataclass(frozen=True, slots=True)
class Price:
    """Non-negative unit price."""

    value: Number

    def __post_init__(self) -> None:
        _check(Rule.NON_NEGATIVE_NUMBER, "Price", self.value)

    @classmethod
    def of(cls, value: Number) -> "Price":
        return cls(value)

    @classmethod
    def zero(cls) -> "Price":
        return cls(0)

    def add(self, other: "Price") -> "Price":
        """Return a new price holding the sum of both values."""
        return Price(self.value + other.value)


@dataclass(frozen=True, slots=True)
class Quantity:
    """Non-negative quantity of an item."""

    value: Number

    def __post_init__(self) -> None:
        _check(Rule.NON_NEGATIVE_NUMBER, "Quantity", self.value)

    @classmethod
    def of(cls, value: Number) -> "Quantity":
        return cls(value)

    def add(self, other: "Quantity") -> "Quantity":
        """Return a new quantity holding the sum of both values."""
        return Quantity(self.value + other.value)


# ============================================================================
#                               Time
# ============================================================================


@dataclass(frozen=True, slots=True)
class OccurredOn:
    """Instant at which a domain event happened (timezone-aware).

    Two values are equal when they denote the same instant, whatever their
    UTC offsets.
    """

    value: datetime

    def __post_init__(self) -> None:
        _check(Rule.INSTANT, "OccurredOn", self.value)

    @classmethod
    def of(cls, value: datetime) -> "OccurredOn":
        return cls(value)

    @classmethod
    def now(cls) -> "OccurredOn":
        return cls(datetime.now(timezone.utc))

    def isoformat(self) -> str:
        return self.value.isoformat()
