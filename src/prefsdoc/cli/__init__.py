"""Command-line interface for prefsdoc."""
