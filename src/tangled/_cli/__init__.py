"""Command line interface for tangled."""
