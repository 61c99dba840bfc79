"""Browser-driven end-to-end checks for a public content website."""

__version__ = "0.1.0"
