from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["InvalidRepositoryName", "RepositoryName"]

# GitHub owner and repository names; both end up as URL path segments.
_FULL_NAME_RE = re.compile(r"([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)", re.ASCII)
_DOT_SEGMENTS = frozenset({".", ".."})


class InvalidRepositoryName(ValueError):
    """Text is not a usable ``owner/name`` repository identifier."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid repository name (expected owner/name): {text!r}")
        self.text = text


@dataclass(frozen=True, slots=True)
class RepositoryName:
    """A GitHub repository identified by ``owner/name``."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        full_name = f"{self.owner}/{self.name}"
        if _FULL_NAME_RE.fullmatch(full_name) is None or {self.owner, self.name} & _DOT_SEGMENTS:
            raise InvalidRepositoryName(full_name)

    @classmethod
    def from_full_name(cls, text: str) -> RepositoryName:
        """Parse ``owner/name``.

        Raises:
            InvalidRepositoryName: When there is not exactly one slash, a part
                is empty, `.` or `..`, or uses characters outside `[A-Za-z0-9_.-]`
        """
        m = _FULL_NAME_RE.fullmatch(text)
        if m is None:
            raise InvalidRepositoryName(text)
        return cls(owner=m.group(1), name=m.group(2))

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def api_path(self, suffix: str) -> str:
        """Path below the API root, e.g. ``repos/foo/bar/milestones``."""
        return f"repos/{self.full_name}/{suffix.lstrip('/')}"

    def __str__(self) -> str:
        return self.full_name
