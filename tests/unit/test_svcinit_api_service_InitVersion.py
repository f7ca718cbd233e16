"""Unit tests for svcinit.api.service.InitVersion."""

import pytest

from svcinit.api.service.InitVersion import InitVersion, VersionRelation


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("init (upstart 1.4)", "1.4"),
        ("init (upstart 1.12.1)\nCopyright (C) 2006-2014 Canonical Ltd.\n", "1.12.1"),
        ("init  (upstart   0.6.5)", "0.6.5"),
    ],
)
def test_parse_extracts_version(output, expected):
    assert InitVersion.parse(output).value == expected


@pytest.mark.parametrize("output", ["", "systemd 249 (249.11-0ubuntu3)", "init (sysvinit 2.88)", "upstart 1.4"])
def test_parse_unrecognised_output_is_unknown(output):
    version = InitVersion.parse(output)
    assert version.is_unknown
    assert str(version) == ""


def test_from_string_empty_is_unknown():
    assert InitVersion.from_string("").is_unknown
    assert InitVersion.from_string(None).is_unknown
    assert InitVersion.from_string("1.4") == InitVersion("1.4")


def test_relation_unknown():
    assert InitVersion.unknown().relation_to("1.4") is VersionRelation.UNKNOWN


@pytest.mark.parametrize(
    ("value", "threshold", "relation"),
    [
        ("1.3", "1.4", VersionRelation.BELOW),
        ("1.4", "1.4", VersionRelation.EQUAL),
        ("1.5", "1.4", VersionRelation.ABOVE),
        ("0.6.3", "0.6.5", VersionRelation.BELOW),
        ("0.6.5", "0.6.5", VersionRelation.EQUAL),
        ("0.10", "0.6.5", VersionRelation.BELOW),
    ],
)
def test_relation_to(value, threshold, relation):
    assert InitVersion(value).relation_to(threshold) is relation


def test_comparison_is_lexicographic_not_semantic():
    # "1.10" is newer than "1.9" but sorts before it as a string
    assert InitVersion("1.10").relation_to("1.9") is VersionRelation.BELOW
    assert InitVersion("1.10").relation_to("1.4") is VersionRelation.BELOW
