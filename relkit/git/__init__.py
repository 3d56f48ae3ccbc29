"""Git-level value types."""

from relkit.git.semver import InvalidSemVerVersion, ReleaseBump, SemVerVersion

__all__ = ["InvalidSemVerVersion", "ReleaseBump", "SemVerVersion"]
