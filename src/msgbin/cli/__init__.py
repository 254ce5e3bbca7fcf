"""Command-line interface for msgbin."""
