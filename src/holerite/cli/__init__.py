"""Command-line interface for Holerite."""
