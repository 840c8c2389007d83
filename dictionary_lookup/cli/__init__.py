"""Command-line interface for Dictionary Lookup."""
