"""Pydantic-backed implementation of the `Validator` port.

Each `Rule` maps to a strict pydantic `TypeAdapter`; pydantic's error list is
translated into `Issue`s labelled with the caller's field name and a message
describing the rule.
"""

from typing import Annotated, Any

import pydantic
from pydantic import AwareDatetime, Field, StringConstraints, TypeAdapter

from cartkit.interfaces.validator import Issue, Rule, Validator

UUID_V4_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-"
    r"[0-9a-fA-F]{12}$"
)

_ADAPTERS: dict[Rule, TypeAdapter[Any]] = {
    Rule.UUID: TypeAdapter(
        Annotated[str, StringConstraints(strict=True, pattern=UUID_V4_PATTERN)]
    ),
    Rule.NON_NEGATIVE_NUMBER: TypeAdapter(
        Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
    ),
    Rule.INSTANT: TypeAdapter(Annotated[AwareDatetime, Field(strict=True)]),
}

MESSAGES: dict[Rule, str] = {
    Rule.UUID: "must be a UUID v4 string",
    Rule.NON_NEGATIVE_NUMBER: "must be a finite number greater than or equal to 0",
    Rule.INSTANT: "must be a timezone-aware datetime",
}


class PydanticValidator(Validator):
    """Validator built on pydantic `TypeAdapter`s in strict mode."""

    def validate(self, rule: Rule, label: str, value: object) -> list[Issue]:
        try:
            _ADAPTERS[rule].validate_python(value)
        except pydantic.ValidationError as exc:
            return [
                Issue((label, *(str(part) for part in error["loc"])), MESSAGES[rule])
                for error in exc.errors()
            ]
        return []
