"""cartkit

An event-sourced shopping cart. Cart state is never mutated in place: every
command records an immutable domain event and folds it into a new snapshot,
and any snapshot can be rebuilt by replaying its events.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
