"""Base class for all aggregates."""

import abc
from collections.abc import Iterable
from typing import Generic, TypeVar

A = TypeVar("A", bound="Aggregate")
E = TypeVar("E")


class Aggregate(abc.ABC, Generic[E]):
    """Generic base class for immutable, event-sourced aggregates.

    Aggregates never change in place. Applying an event returns a new instance,
    and so does recording one; the pending-event tuple is rebuilt on every
    record so earlier snapshots keep the events they had.
    """

    __slots__ = ()

    pending_events: tuple[E, ...]

    # --- Construction Paths ---

    def replay(self: A, events: Iterable[E]) -> A:
        """Rebuild state from past events.

        Starts from an empty aggregate carrying this aggregate's ID and folds the
        events in order. The result has no pending events: replay reconstructs
        state, it does not record new facts.

        Args:
            events: Events to fold, oldest first. Their own aggregate IDs are not
                checked.

        Returns:
            A new aggregate in the state the event sequence describes.
        """
        aggregate = self._blank()
        for event in events:
            aggregate = aggregate._apply(event)
        return aggregate

    # --- Event Application ---

    @abc.abstractmethod
    def _blank(self: A) -> A:
        """Return an empty aggregate with the same ID and no pending events."""

    @abc.abstractmethod
    def _apply(self: A, event: E) -> A:
        """Return a new aggregate with `event` folded into its state.

        Pending events are carried over unchanged.

        Raises:
            UnreachableError: If the concrete aggregate does not know the event.
        """

    @abc.abstractmethod
    def _with_pending_events(self: A, pending_events: tuple[E, ...]) -> A:
        """Return a copy of this aggregate holding `pending_events`."""

    # --- Plumbing ---

    def _record(self: A, event: E) -> A:
        applied = self._apply(event)
        return applied._with_pending_events((*self.pending_events, event))
