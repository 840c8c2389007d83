"""PyQt6 desktop interface for Dictionary Lookup."""
