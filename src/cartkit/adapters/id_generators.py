"""ID generators for cartkit."""

import itertools
import threading
import uuid

from cartkit.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    This generator uses Python's built-in `uuid` library to create UUIDv4 identifiers.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SequentialUUIDGenerator(IdGenerator):
    """Thread-safe generator of predictable, UUID-v4-shaped identifiers.

    IDs look like ``00000000-0000-4000-8000-000000000001`` and count up from
    `start`, which keeps test output and demos readable.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    MAX_COUNTER = 10**12 - 1

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next identifier in the sequence."""
        with self._lock:
            value = next(self._counter)
        if value > self.MAX_COUNTER:
            raise OverflowError("SequentialUUIDGenerator exhausted its 12-digit range")
        return f"00000000-0000-4000-8000-{value:012d}"
