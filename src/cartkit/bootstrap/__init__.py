"""Bootstrap (composition root) for cartkit.

Assembles the application at runtime: picks concrete adapters for the ports in
`cartkit.interfaces`, installs them into the domain's collaborator registry,
reads configuration, and exposes a small container for entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `cartkit.adapters`, `cartkit.service_layer`,
  `cartkit.interfaces`, `cartkit.domain`, and `cartkit.config`.
- Inner layers must not import `cartkit.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_id_generator

__all__ = ["AppContainer", "bootstrap", "build_id_generator"]
