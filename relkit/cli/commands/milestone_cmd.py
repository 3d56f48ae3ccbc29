"""Milestone commands - create release milestones on GitHub."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from relkit.cli.context import build_context, exit_with
from relkit.core.errors import ErrorCode
from relkit.git.semver import InvalidSemVerVersion, SemVerVersion
from relkit.github.api.create_milestone import CreateMilestoneFailed
from relkit.github.value import InvalidRepositoryName, RepositoryName
from relkit.http.client import TransportError
from relkit.services.milestones import create_next_milestones

milestone_app = typer.Typer(add_completion=False, no_args_is_help=True)


def _parse_inputs(repository: str, version: str) -> tuple[RepositoryName, SemVerVersion]:
    try:
        return RepositoryName.from_full_name(repository), SemVerVersion.from_milestone_name(version)
    except (InvalidRepositoryName, InvalidSemVerVersion) as e:
        exit_with(str(e), code=ErrorCode.USER_ERROR)


def _exit_failed(e: CreateMilestoneFailed) -> NoReturn:
    if e.is_already_exists:
        exit_with(
            f"milestone {e.version} already exists in {e.repository}",
            code=ErrorCode.ALREADY_EXISTS,
        )
    exit_with(f"creating milestone {e.version} failed: {e}", code=ErrorCode.API_ERROR)


@milestone_app.command("create")
def create(
    repository: str = typer.Argument(..., help="Repository as owner/name"),
    version: str = typer.Argument(..., help="Semantic version used as milestone title"),
    allow_existing: bool = typer.Option(
        False, "--allow-existing", help="Succeed when the milestone already exists"
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to relkit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API requests"),
) -> None:
    """Create a milestone named VERSION in REPOSITORY."""
    repo, semver = _parse_inputs(repository, version)
    ctx = build_context(config_path=config, verbose=verbose)

    try:
        url = ctx.create_milestone(repo, semver)
    except CreateMilestoneFailed as e:
        if e.is_already_exists and allow_existing:
            ctx.console.warning(f"milestone {semver} already exists in {repo}")
            return
        _exit_failed(e)
    except TransportError as e:
        exit_with(str(e), code=ErrorCode.NETWORK_ERROR)

    ctx.console.success(f"milestone {semver}: {url}")


@milestone_app.command("create-next")
def create_next(
    repository: str = typer.Argument(..., help="Repository as owner/name"),
    version: str = typer.Argument(..., help="Version that was just released"),
    config: Path | None = typer.Option(None, "--config", help="Path to relkit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API requests"),
) -> None:
    """Create the next patch, minor and major milestones after VERSION."""
    repo, semver = _parse_inputs(repository, version)
    ctx = build_context(config_path=config, verbose=verbose)

    try:
        create_next_milestones(ctx.create_milestone, repo, semver, console=ctx.console)
    except CreateMilestoneFailed as e:
        _exit_failed(e)
    except TransportError as e:
        exit_with(str(e), code=ErrorCode.NETWORK_ERROR)
