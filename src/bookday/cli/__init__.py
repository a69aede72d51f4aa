"""Command-line interface for bookday."""
