from __future__ import annotations

from relkit.git.semver import SemVerVersion
from relkit.github.api.milestone_request import (
    USER_AGENT,
    build_create_milestone_request,
    milestones_url,
)
from relkit.github.value import RepositoryName
from relkit.http.message import DefaultRequestFactory


def test_milestones_url_uses_fixed_api_host() -> None:
    repo = RepositoryName.from_full_name("laminas/automatic-releases")
    assert milestones_url(repo) == (
        "https://api.github.com/repos/laminas/automatic-releases/milestones"
    )


def test_milestones_url_keeps_dotted_names_inside_the_repo_path() -> None:
    repo = RepositoryName.from_full_name("my.org/..hidden")
    assert milestones_url(repo) == "https://api.github.com/repos/my.org/..hidden/milestones"


def test_build_request_with_default_factory() -> None:
    request = build_create_milestone_request(
        DefaultRequestFactory(),
        RepositoryName.from_full_name("foo/bar"),
        SemVerVersion.from_milestone_name("2.0.0-rc.1"),
        "secret",
    )

    assert request.method == "POST"
    assert request.url == "https://api.github.com/repos/foo/bar/milestones"
    assert request.header_map() == {
        "Host": ["api.github.com"],
        "Content-Type": ["application/json"],
        "User-Agent": [USER_AGENT],
        "Authorization": ["token secret"],
    }
    assert request.body == '{"title":"2.0.0-rc.1"}'
