# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import pytest

from j2clbuild.base.exceptions import InvalidExclusion
from j2clbuild.jvm.coordinate import Coordinate
from j2clbuild.jvm.exclusion import Exclusion, is_excluded

_rule = Exclusion("com.foo", "bar")


@pytest.mark.parametrize(
    "coordinate",
    [
        Coordinate("com.foo", "bar", "1.0"),
        Coordinate("com.foo", "bar", "2.0", "sources"),
        Coordinate("com.foo", "bar", "", packaging="zip"),
    ],
)
def test_matches_any_version_or_classifier(coordinate: Coordinate) -> None:
    assert _rule.matches(coordinate)


@pytest.mark.parametrize(
    "coordinate",
    [
        Coordinate("com.foo", "baz", "1.0"),
        Coordinate("com.fooo", "bar", "1.0"),
        Coordinate("bar", "com.foo", "1.0"),
    ],
)
def test_does_not_match_other_artifacts(coordinate: Coordinate) -> None:
    assert not _rule.matches(coordinate)


def test_none_never_matches() -> None:
    assert not _rule.matches(None)
    assert not is_excluded([_rule], None)


def test_is_excluded_any_rule() -> None:
    rules = [Exclusion("g1", "a1"), Exclusion("g2", "a2")]
    assert is_excluded(rules, Coordinate("g2", "a2", "1"))
    assert is_excluded(rules, Coordinate("g1", "a1", "1"))
    assert not is_excluded(rules, Coordinate("g1", "a2", "1"))
    assert not is_excluded([], Coordinate("g1", "a1", "1"))


def test_requires_group_and_artifact() -> None:
    with pytest.raises(InvalidExclusion):
        Exclusion("", "bar")
    with pytest.raises(InvalidExclusion):
        Exclusion("com.foo", "")
    with pytest.raises(InvalidExclusion):
        Exclusion(" ", "bar")


def test_coord_str() -> None:
    assert Exclusion.from_coord_str("com.foo:bar") == _rule
    assert _rule.to_coord_str() == "com.foo:bar"
    assert str(_rule) == "com.foo:bar"


@pytest.mark.parametrize("coord_str", ["com.foo", "com.foo:bar:1.0", ":bar", "com.foo:"])
def test_invalid_coord_str(coord_str: str) -> None:
    with pytest.raises(InvalidExclusion):
        Exclusion.from_coord_str(coord_str)
