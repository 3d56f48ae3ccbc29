from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from relkit.git.semver import SemVerVersion
from relkit.github.api.create_milestone import CreateMilestoneFailed
from relkit.github.value import RepositoryName
from relkit.output.console import ConsoleProtocol

__all__ = ["CreateMilestone", "CreatedMilestone", "create_milestone_once", "create_next_milestones"]

CreateMilestone = Callable[[RepositoryName, SemVerVersion], str]


@dataclass(frozen=True, slots=True)
class CreatedMilestone:
    """Result for one milestone; ``url`` is None when it already existed."""

    version: SemVerVersion
    url: str | None

    @property
    def already_existed(self) -> bool:
        return self.url is None


def create_milestone_once(
    create_milestone: CreateMilestone,
    repository: RepositoryName,
    version: SemVerVersion,
    *,
    console: ConsoleProtocol,
) -> CreatedMilestone:
    """Create one milestone, treating an existing one as done.

    Other ``CreateMilestoneFailed`` reasons and transport errors propagate.
    """
    try:
        url = create_milestone(repository, version)
    except CreateMilestoneFailed as e:
        if not e.is_already_exists:
            raise
        console.warning(f"milestone {version} already exists in {repository}")
        return CreatedMilestone(version=version, url=None)

    console.success(f"milestone {version}: {url}")
    return CreatedMilestone(version=version, url=url)


def create_next_milestones(
    create_milestone: CreateMilestone,
    repository: RepositoryName,
    released: SemVerVersion,
    *,
    console: ConsoleProtocol,
) -> tuple[CreatedMilestone, ...]:
    """Open the next patch, minor and major milestones after ``released``."""
    targets = (released.next_patch(), released.next_minor(), released.next_major())
    return tuple(
        create_milestone_once(create_milestone, repository, version, console=console)
        for version in targets
    )
