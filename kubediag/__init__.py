"""KubeDiag TUI - browse pod and service diagnostics by namespace."""

__version__ = "0.1.0"
