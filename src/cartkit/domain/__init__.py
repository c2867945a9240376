"""Domain layer for cartkit.

Contains business rules: the cart aggregate, value objects and domain events.
The ports it relies on (ID generation, validation) are declared in
`cartkit.interfaces` and reached through `cartkit.domain.collaborators`.

Dependency rule: do not import from `cartkit.adapters`, `cartkit.bootstrap`
or `cartkit.entrypoints`.
"""
