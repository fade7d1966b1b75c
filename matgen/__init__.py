"""Material descriptor generation for low-code editors."""

__version__ = "0.1.0"
