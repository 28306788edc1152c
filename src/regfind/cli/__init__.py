"""Command-line interface for regfind."""
