"""Concrete implementations of the ports declared in `cartkit.interfaces`."""
