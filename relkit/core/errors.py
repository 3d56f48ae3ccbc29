"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (malformed repository name or version)
    - 2: Environment error (missing API token, unreadable config)
    - 3: API error (unexpected status or payload from GitHub)
    - 4: Network error (connection failed, timed out)
    - 6: Milestone already exists
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    API_ERROR = 3
    NETWORK_ERROR = 4
    ALREADY_EXISTS = 6

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
