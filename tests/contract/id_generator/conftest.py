"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from cartkit.adapters.id_generators import SequentialUUIDGenerator, UUIDv4Generator
from cartkit.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["uuid4", "sequential"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"uuid4"` → UUIDv4Generator
      - `"sequential"` → SequentialUUIDGenerator

    Extend by adding new identifiers to `params` and branching below to
    construct the corresponding backend. Each invocation yields a brand-new
    IdGenerator instance for isolation.
    """

    match request.param:
        case "uuid4":
            yield UUIDv4Generator()
        case "sequential":
            yield SequentialUUIDGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
