"""Configuration utilities for cartkit.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ID_GENERATOR_ENV_VAR = "CARTKIT_ID_GENERATOR"  # pragma: no mutate
DEFAULT_ID_GENERATOR = "uuid4"  # pragma: no mutate
SUPPORTED_ID_GENERATORS = ("uuid4", "sequential")


class UnsupportedIdGeneratorError(Exception):
    """Raised when CARTKIT_ID_GENERATOR names an unknown generator."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Unsupported ID generator {kind!r}; "
            f"expected one of {', '.join(SUPPORTED_ID_GENERATORS)}."
        )
        self.kind = kind


def get_id_generator_kind() -> str:
    """Get the ID generator kind from the environment.

    Returns:
        The lower-cased value of `CARTKIT_ID_GENERATOR`, or ``"uuid4"`` when unset.

    Raises:
        UnsupportedIdGeneratorError: If the value is not a supported kind.
    """
    raw = os.environ.get(ID_GENERATOR_ENV_VAR) or DEFAULT_ID_GENERATOR
    kind = raw.strip().lower()
    if kind not in SUPPORTED_ID_GENERATORS:
        raise UnsupportedIdGeneratorError(kind)
    return kind
