"""cartkit command-line interface."""
