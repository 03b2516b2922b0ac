"""Loading, validating and path-checking tile maps for a collect-and-exit puzzle, with text and buffer helpers."""

__version__ = "0.1.0"