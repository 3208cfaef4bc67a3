"""Command-line entry points for crossrelease."""
