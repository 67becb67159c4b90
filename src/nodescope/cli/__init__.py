"""Command line interface for nodescope."""
