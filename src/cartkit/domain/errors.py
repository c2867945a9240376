"""Domain-layer error definitions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cartkit.interfaces.validator import Issue

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when a value object is built from a value that fails its checks.

    The message joins every issue as ``"<field path>: <message>"``.
    """

    def __init__(self, field: str, issues: Sequence[Issue]) -> None:
        super().__init__(", ".join(str(issue) for issue in issues))
        self.field = field
        self.issues = tuple(issues)


class UnreachableError(DomainError):
    """Raised when a closed union receives a member it does not know.

    This signals a programming error (a new variant was added without updating
    every consumer), not a recoverable business condition.
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"Unreachable: unexpected value {value!r}")
        self.value = value


class CollaboratorNotInstalledError(DomainError):
    """Raised when the domain needs a collaborator that was never installed."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"No {name} installed. Call cartkit.bootstrap.bootstrap() first."
        )
        self.name = name


# ============================================================================
#                           Cart related errors
# ============================================================================


class ItemNotFoundError(DomainError):
    """Raised when a cart command targets an item the cart does not hold."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id
