"""todokit - a small todo domain core with reference adapters."""

__version__ = "0.1.0"
