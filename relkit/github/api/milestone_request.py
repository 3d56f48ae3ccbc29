"""Request building for ``POST /repos/{owner}/{name}/milestones``."""

from __future__ import annotations

import json

from relkit.git.semver import SemVerVersion
from relkit.github.value import RepositoryName
from relkit.http.message import HttpRequest, RequestFactory

__all__ = [
    "API_ROOT",
    "USER_AGENT",
    "milestones_url",
    "build_create_milestone_request",
]

# Single-platform client: the host is part of the contract, not a setting.
API_ROOT = "https://api.github.com"
USER_AGENT = "Ocramius's minimal API V3 client"


def milestones_url(repository: RepositoryName) -> str:
    return f"{API_ROOT}/{repository.api_path('milestones')}"


def build_create_milestone_request(
    request_factory: RequestFactory,
    repository: RepositoryName,
    version: SemVerVersion,
    api_token: str,
) -> HttpRequest:
    """Build the authenticated create-milestone request.

    Headers end up as Host (from the factory), Content-Type, User-Agent and
    Authorization, in that order. The body is compact JSON with the rendered
    version as ``title``.
    """
    body = json.dumps({"title": version.render()}, separators=(",", ":"))
    return (
        request_factory.create_request("POST", milestones_url(repository))
        .with_header("Content-Type", "application/json")
        .with_header("User-Agent", USER_AGENT)
        .with_header("Authorization", f"token {api_token}")
        .with_body(body)
    )
