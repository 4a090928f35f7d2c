"""Command-line interface for landscape takeoffs."""
