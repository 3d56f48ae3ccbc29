"""Create a GitHub milestone named after a release version."""

from __future__ import annotations

from typing import Literal

from relkit.git.semver import SemVerVersion
from relkit.github.api.milestone_request import build_create_milestone_request
from relkit.github.api.milestone_response import (
    MilestoneAlreadyExists,
    MilestoneCreated,
    UnexpectedStatus,
    UnexpectedSuccessPayload,
    classify_create_milestone_response,
)
from relkit.github.value import RepositoryName
from relkit.http.client import HttpClient
from relkit.http.message import RequestFactory
from relkit.output.log import LoggerProtocol, NullLogger

__all__ = ["CreateMilestoneFailed", "CreateMilestoneThroughApiCall", "FailureReason"]

FailureReason = Literal["already_exists", "unexpected_success_payload", "unexpected_status"]


class CreateMilestoneFailed(RuntimeError):
    """The API did not create the milestone.

    Attributes:
        reason: Machine-readable classification
        status: HTTP status code of the response
        body: Raw response body
        repository: Target repository
        version: Requested milestone version
    """

    def __init__(
        self,
        message: str,
        *,
        reason: FailureReason,
        status: int,
        body: str,
        repository: RepositoryName,
        version: SemVerVersion,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason: FailureReason = reason
        self.status = status
        self.body = body
        self.repository = repository
        self.version = version

    @classmethod
    def already_exists(
        cls, repository: RepositoryName, version: SemVerVersion, *, status: int, body: str
    ) -> CreateMilestoneFailed:
        return cls(
            "already_exists",
            reason="already_exists",
            status=status,
            body=body,
            repository=repository,
            version=version,
        )

    @classmethod
    def unexpected_success_payload(
        cls, repository: RepositoryName, version: SemVerVersion, *, status: int, body: str
    ) -> CreateMilestoneFailed:
        return cls(
            "unexpected success payload",
            reason="unexpected_success_payload",
            status=status,
            body=body,
            repository=repository,
            version=version,
        )

    @classmethod
    def unexpected_status(
        cls, repository: RepositoryName, version: SemVerVersion, *, status: int, body: str
    ) -> CreateMilestoneFailed:
        return cls(
            f"unexpected status {status}",
            reason="unexpected_status",
            status=status,
            body=body,
            repository=repository,
            version=version,
        )

    @property
    def is_already_exists(self) -> bool:
        return self.reason == "already_exists"

    def __str__(self) -> str:
        if self.reason == "unexpected_status":
            return f"{self.message}: {self.body}"
        return self.message


class CreateMilestoneThroughApiCall:
    """Creates milestone ``version`` in ``repository`` with one API call.

    The operation makes exactly one ``send_request`` call per invocation and
    never retries. Transport exceptions propagate unchanged; every response
    other than a well-formed 201 becomes ``CreateMilestoneFailed``.

    Usage:
        create = CreateMilestoneThroughApiCall(
            DefaultRequestFactory(), UrllibHttpClient(), token, StdLogger()
        )
        url = create(RepositoryName.from_full_name("foo/bar"),
                     SemVerVersion.from_milestone_name("1.2.3"))
    """

    def __init__(
        self,
        request_factory: RequestFactory,
        http_client: HttpClient,
        api_token: str,
        logger: LoggerProtocol | None = None,
    ) -> None:
        if not api_token:
            raise ValueError("api_token must not be empty")
        self._request_factory = request_factory
        self._http_client = http_client
        self._api_token = api_token
        self._logger: LoggerProtocol = logger if logger is not None else NullLogger()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(http_client={self._http_client!r})"

    def invoke(self, repository: RepositoryName, version: SemVerVersion) -> str:
        """Create the milestone and return its web URL.

        Raises:
            CreateMilestoneFailed: On any response other than 201 with ``html_url``
        """
        request = build_create_milestone_request(
            self._request_factory, repository, version, self._api_token
        )
        self._log_request(request.method, request.url, version)

        response = self._http_client.send_request(request)

        match classify_create_milestone_response(response):
            case MilestoneCreated(html_url=html_url):
                return html_url
            case MilestoneAlreadyExists(status=status, body=body):
                raise CreateMilestoneFailed.already_exists(
                    repository, version, status=status, body=body
                )
            case UnexpectedSuccessPayload(status=status, body=body):
                raise CreateMilestoneFailed.unexpected_success_payload(
                    repository, version, status=status, body=body
                )
            case UnexpectedStatus(status=status, body=body):
                raise CreateMilestoneFailed.unexpected_status(
                    repository, version, status=status, body=body
                )

    __call__ = invoke

    def _log_request(self, method: str, url: str, version: SemVerVersion) -> None:
        # Logging must never change the outcome of the call.
        try:
            self._logger.debug("creating milestone", method=method, url=url, title=version.render())
        except Exception:  # noqa: BLE001
            return
