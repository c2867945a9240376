"""Entry points into cartkit (currently the command-line interface)."""
