"""Command line interface for configtool."""
