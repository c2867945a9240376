"""Ports (framework-free ABCs) that the domain depends on.

Concrete implementations live in `cartkit.adapters` and are wired by
`cartkit.bootstrap`.
"""
