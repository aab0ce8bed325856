"""Command line interface for indic-id."""
