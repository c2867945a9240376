"""Bootstrap the domain collaborators and service-layer helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cartkit import config
from cartkit.adapters.id_generators import SequentialUUIDGenerator, UUIDv4Generator
from cartkit.adapters.validators import PydanticValidator
from cartkit.domain import collaborators
from cartkit.interfaces.id_generator import IdGenerator
from cartkit.interfaces.validator import Validator
from cartkit.service_layer.event_mapper import EventMapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    id_generator: IdGenerator
    validator: Validator
    event_mapper: EventMapper


def build_id_generator(kind: str) -> IdGenerator:
    """Build the ID generator named by `kind` (see `config.SUPPORTED_ID_GENERATORS`)."""
    match kind:
        case "uuid4":
            return UUIDv4Generator()
        case "sequential":
            return SequentialUUIDGenerator()
        case _:
            raise config.UnsupportedIdGeneratorError(kind)


def bootstrap(
    id_generator: IdGenerator | None = None, validator: Validator | None = None
) -> AppContainer:
    """Install the domain collaborators and return the wired container.

    Args:
        id_generator: Overrides the generator chosen by `CARTKIT_ID_GENERATOR`.
        validator: Overrides the default `PydanticValidator`.
    """
    if id_generator is None:
        id_generator = build_id_generator(config.get_id_generator_kind())
    if validator is None:
        validator = PydanticValidator()

    collaborators.install(id_generator=id_generator, validator=validator)
    logger.debug(
        "Installed collaborators: id_generator=%s, validator=%s",
        type(id_generator).__name__,
        type(validator).__name__,
    )

    return AppContainer(
        id_generator=id_generator,
        validator=validator,
        event_mapper=EventMapper(),
    )
