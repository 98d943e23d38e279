"""Data models for the KubeDiag TUI."""
