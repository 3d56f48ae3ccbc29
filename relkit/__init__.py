"""Release automation helpers for GitHub milestones."""

__version__ = "0.1.0"
