"""Command-line entry points for the inventory utilities."""
