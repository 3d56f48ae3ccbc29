from __future__ import annotations

import pytest

from relkit.git.semver import InvalidSemVerVersion, SemVerVersion


@pytest.mark.parametrize(
    "text",
    [
        "0.0.0",
        "1.2.3",
        "10.20.30",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-0.3.7",
        "1.0.0-x.7.z.92",
        "1.0.0+20130313144700",
        "1.0.0-beta+exp.sha.5114f85",
        "1.0.0-x-y-z.--",
    ],
)
def test_canonical_versions_render_unchanged(text: str) -> None:
    assert SemVerVersion.from_milestone_name(text).render() == text


def test_parse_fields() -> None:
    v = SemVerVersion.from_milestone_name("1.2.3-rc.1+build.5")
    assert (v.major, v.minor, v.patch) == (1, 2, 3)
    assert v.prerelease == "rc.1"
    assert v.build == "build.5"
    assert str(v) == "1.2.3-rc.1+build.5"


def test_leading_v_is_normalized_away() -> None:
    assert SemVerVersion.from_milestone_name("v1.2.3").render() == "1.2.3"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1",
        "1.2",
        "1.2.3.4",
        "01.2.3",
        "1.02.3",
        "1.2.03",
        "-1.2.3",
        "1.2.3-",
        "1.2.3-01",
        "1.2.3+",
        "1.2.3-alpha..1",
        "V1.2.3",
        " 1.2.3",
        "1.2.3\n",
        "milestone 1.2.3",
    ],
)
def test_invalid_versions_are_rejected(text: str) -> None:
    with pytest.raises(InvalidSemVerVersion):
        SemVerVersion.from_milestone_name(text)


def test_negative_components_are_rejected() -> None:
    with pytest.raises(InvalidSemVerVersion):
        SemVerVersion(1, -1, 0)


@pytest.mark.parametrize(
    ("prerelease", "build"),
    [
        ("", None),
        (None, ""),
        ("", "bad build!"),
        ("01", None),
        ("alpha..1", None),
        (None, "sha/abc"),
        ("rc.1\n", None),
    ],
)
def test_direct_construction_rejects_malformed_labels(
    prerelease: str | None, build: str | None
) -> None:
    with pytest.raises(InvalidSemVerVersion):
        SemVerVersion(1, 2, 3, prerelease=prerelease, build=build)


def test_direct_construction_renders_parseable_text() -> None:
    v = SemVerVersion(1, 2, 3, prerelease="rc.1", build="sha.5114f85")
    assert v.render() == "1.2.3-rc.1+sha.5114f85"
    assert SemVerVersion.from_milestone_name(v.render()) == v


def test_full_release_name_drops_prerelease_and_build() -> None:
    v = SemVerVersion.from_milestone_name("1.2.3-rc.1+sha.abc")
    assert v.full_release_name() == "1.2.3"


def test_next_versions_drop_prerelease_and_build() -> None:
    v = SemVerVersion.from_milestone_name("1.2.3-rc.1+sha.abc")
    assert v.next_patch() == SemVerVersion(1, 2, 4)
    assert v.next_minor() == SemVerVersion(1, 3, 0)
    assert v.next_major() == SemVerVersion(2, 0, 0)


def test_precedence_ordering() -> None:
    ordered = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
        "1.0.1",
        "1.1.0",
        "2.0.0",
    ]
    versions = [SemVerVersion.from_milestone_name(t) for t in ordered]
    assert sorted(reversed(versions)) == versions
    assert versions[0] < versions[1]
    assert versions[-1] > versions[-2]


def test_build_metadata_is_ignored_for_precedence() -> None:
    a = SemVerVersion.from_milestone_name("1.0.0+a")
    b = SemVerVersion.from_milestone_name("1.0.0+b")
    assert a <= b
    assert b <= a
    assert a != b
