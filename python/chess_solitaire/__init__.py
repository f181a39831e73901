"""Chess solitaire: capture down to a single piece."""

__version__ = "0.1.0"
