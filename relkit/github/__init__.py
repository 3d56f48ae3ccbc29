"""GitHub value types and API v3 calls."""

from relkit.github.value import InvalidRepositoryName, RepositoryName

__all__ = ["InvalidRepositoryName", "RepositoryName"]
