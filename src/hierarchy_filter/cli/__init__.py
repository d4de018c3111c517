"""Command-line interface for hierarchy-filter."""
