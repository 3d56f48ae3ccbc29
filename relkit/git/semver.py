from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, TypeAlias

__all__ = ["InvalidSemVerVersion", "ReleaseBump", "SemVerVersion"]

ReleaseBump = Literal["major", "minor", "patch"]

_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_RE = re.compile(
    r"v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)

# (is_alphanumeric, numeric_value, text); numeric identifiers sort first.
_IdentKey: TypeAlias = tuple[int, int, str]


class InvalidSemVerVersion(ValueError):
    """Text (or fields) that do not form a SemVer 2.0.0 version."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid semantic version: {text!r}")
        self.text = text


def _ident_key(ident: str) -> _IdentKey:
    if ident.isdigit():
        return (0, int(ident), "")
    return (1, 0, ident)


@dataclass(frozen=True, slots=True)
class SemVerVersion:
    """A SemVer 2.0.0 version used as a milestone title.

    Equality compares every field, build metadata included. Ordering follows
    SemVer precedence, where build metadata is ignored and a pre-release sorts
    before its release.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __post_init__(self) -> None:
        text = self.render()
        if _SEMVER_RE.fullmatch(text) is None:
            raise InvalidSemVerVersion(text)

    @classmethod
    def from_milestone_name(cls, text: str) -> SemVerVersion:
        """Parse ``MAJOR.MINOR.PATCH[-pre][+build]``, optionally prefixed by ``v``.

        Raises:
            InvalidSemVerVersion: When text is not a valid semantic version
        """
        m = _SEMVER_RE.fullmatch(text)
        if m is None:
            raise InvalidSemVerVersion(text)
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4), m.group(5))

    def render(self) -> str:
        """Canonical text, used verbatim as the milestone title."""
        out = self.full_release_name()
        if self.prerelease is not None:
            out += f"-{self.prerelease}"
        if self.build is not None:
            out += f"+{self.build}"
        return out

    def __str__(self) -> str:
        return self.render()

    def full_release_name(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump(self, kind: ReleaseBump) -> SemVerVersion:
        match kind:
            case "major":
                return SemVerVersion(self.major + 1, 0, 0)
            case "minor":
                return SemVerVersion(self.major, self.minor + 1, 0)
            case "patch":
                return SemVerVersion(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")

    def next_patch(self) -> SemVerVersion:
        return self.bump("patch")

    def next_minor(self) -> SemVerVersion:
        return self.bump("minor")

    def next_major(self) -> SemVerVersion:
        return self.bump("major")

    def _precedence(self) -> tuple[int, int, int, int, tuple[_IdentKey, ...]]:
        if self.prerelease is None:
            return (self.major, self.minor, self.patch, 1, ())
        idents = tuple(_ident_key(i) for i in self.prerelease.split("."))
        return (self.major, self.minor, self.patch, 0, idents)

    def __lt__(self, other: SemVerVersion) -> bool:
        return self._precedence() < other._precedence()

    def __le__(self, other: SemVerVersion) -> bool:
        return self._precedence() <= other._precedence()

    def __gt__(self, other: SemVerVersion) -> bool:
        return self._precedence() > other._precedence()

    def __ge__(self, other: SemVerVersion) -> bool:
        return self._precedence() >= other._precedence()
