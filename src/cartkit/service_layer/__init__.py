"""Service layer for cartkit: translation between domain objects and the plain
structures surrounding infrastructure exchanges."""
