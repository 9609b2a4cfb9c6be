"""Command line interface for Hourglass."""
