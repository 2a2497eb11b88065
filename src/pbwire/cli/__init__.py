"""Command line interface for pbwire."""
