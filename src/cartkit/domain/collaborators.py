"""Process-wide access to the collaborators the domain depends on.

The composition root (`cartkit.bootstrap`) installs concrete adapters here;
value objects look them up when they need a fresh identifier or need to
validate a raw value.
"""

from cartkit.domain.errors import CollaboratorNotInstalledError
from cartkit.interfaces.id_generator import IdGenerator
from cartkit.interfaces.validator import Validator

# pylint: disable=global-statement

_id_generator: IdGenerator | None = None
_validator: Validator | None = None


def install(
    *, id_generator: IdGenerator | None = None, validator: Validator | None = None
) -> None:
    """Install collaborators. Arguments left as None keep the current value."""
    global _id_generator, _validator
    if id_generator is not None:
        _id_generator = id_generator
    if validator is not None:
        _validator = validator


def reset() -> None:
    """Forget all installed collaborators."""
    global _id_generator, _validator
    _id_generator = None
    _validator = None


def id_generator() -> IdGenerator:
    """Return the installed ID generator.

    Raises:
        CollaboratorNotInstalledError: If none has been installed.
    """
    if _id_generator is None:
        raise CollaboratorNotInstalledError("id_generator")
    return _id_generator


def validator() -> Validator:
    """Return the installed validator.

    Raises:
        CollaboratorNotInstalledError: If none has been installed.
    """
    if _validator is None:
        raise CollaboratorNotInstalledError("validator")
    return _validator
