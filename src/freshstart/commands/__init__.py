"""Command implementations for the freshstart CLI."""
