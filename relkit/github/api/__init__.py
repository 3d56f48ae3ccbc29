"""GitHub REST API v3 operations."""

from relkit.github.api.create_milestone import CreateMilestoneFailed, CreateMilestoneThroughApiCall

__all__ = ["CreateMilestoneFailed", "CreateMilestoneThroughApiCall"]
