"""Command line interface for URI template expansion."""
