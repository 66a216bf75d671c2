"""A cinema ticket book kept in plain text files, with a one-shot menu command."""

__version__ = "0.1.0"
__all__ = ["cli", "tickets"]