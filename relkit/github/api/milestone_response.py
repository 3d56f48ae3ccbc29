"""Classification of create-milestone responses.

Every response maps to exactly one ``MilestoneOutcome`` variant. The status
code selects which shapes to try, but the body decides: a 422 is only an
already-exists conflict when its ``errors`` list says so.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from relkit.core.structured import as_str_dict, get_list, get_str, parse_json_object
from relkit.http.message import HttpResponse

__all__ = [
    "MilestoneCreated",
    "MilestoneAlreadyExists",
    "UnexpectedSuccessPayload",
    "UnexpectedStatus",
    "MilestoneOutcome",
    "classify_create_milestone_response",
]

HTTP_CREATED = 201
HTTP_UNPROCESSABLE_ENTITY = 422


@dataclass(frozen=True, slots=True)
class MilestoneCreated:
    html_url: str


@dataclass(frozen=True, slots=True)
class MilestoneAlreadyExists:
    status: int
    body: str


@dataclass(frozen=True, slots=True)
class UnexpectedSuccessPayload:
    status: int
    body: str


@dataclass(frozen=True, slots=True)
class UnexpectedStatus:
    status: int
    body: str


MilestoneOutcome: TypeAlias = (
    MilestoneCreated | MilestoneAlreadyExists | UnexpectedSuccessPayload | UnexpectedStatus
)


def _parse_created(body: str) -> MilestoneCreated | None:
    data = parse_json_object(body)
    if data is None:
        return None
    html_url = get_str(data, "html_url")
    if html_url is None:
        return None
    return MilestoneCreated(html_url=html_url)


def _is_already_exists(body: str) -> bool:
    data = parse_json_object(body)
    if data is None:
        return False
    errors = get_list(data, "errors")
    if errors is None:
        return False
    for item in errors:
        entry = as_str_dict(item)
        if entry is not None and entry.get("code") == "already_exists":
            return True
    return False


def classify_create_milestone_response(response: HttpResponse) -> MilestoneOutcome:
    status = response.status
    body = response.body

    if status == HTTP_CREATED:
        created = _parse_created(body)
        if created is None:
            return UnexpectedSuccessPayload(status=status, body=body)
        return created

    if status == HTTP_UNPROCESSABLE_ENTITY and _is_already_exists(body):
        return MilestoneAlreadyExists(status=status, body=body)

    return UnexpectedStatus(status=status, body=body)
