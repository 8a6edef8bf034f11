# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import pytest

from j2clbuild.util.unique_list import UniqueList


def test_add_reports_whether_added() -> None:
    values: UniqueList[str] = UniqueList()
    assert values.add("a") is True
    assert values.add("b") is True
    assert values.add("a") is False
    assert values.size() == 2
    assert len(values) == 2


def test_first_insertion_order_is_kept() -> None:
    values = UniqueList("abracadabra")
    assert list(values) == ["a", "b", "r", "c", "d"]
    assert list(reversed(values)) == ["d", "c", "r", "b", "a"]

    values.add("a")
    assert values.get(0) == "a"
    assert list(values) == ["a", "b", "r", "c", "d"]


def test_equal_value_is_not_replaced() -> None:
    first = (1, "first")
    values = UniqueList([first])
    assert values.add((1, "first")) is False
    assert values.get(0) is first


def test_extend() -> None:
    values = UniqueList([1, 2])
    assert values.extend([2, 3, 3, 4]) == 2
    assert list(values) == [1, 2, 3, 4]


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_out_of_range(index: int) -> None:
    values = UniqueList([1, 2, 3])
    with pytest.raises(IndexError):
        values.get(index)
    with pytest.raises(IndexError):
        values[index]


def test_get_on_empty() -> None:
    with pytest.raises(IndexError):
        UniqueList().get(0)


def test_slice() -> None:
    values = UniqueList([1, 2, 3])
    assert values[1:] == UniqueList([2, 3])


def test_contains() -> None:
    values = UniqueList(["a", "b"])
    assert "a" in values
    assert "z" not in values
    assert ["unhashable"] not in values


def test_equality() -> None:
    assert UniqueList([1, 2]) == UniqueList([1, 1, 2, 2])
    assert UniqueList([1, 2]) != UniqueList([2, 1])
    assert UniqueList([1, 2]) != [1, 2]


def test_sequence_mixins() -> None:
    values = UniqueList(["a", "b", "c"])
    assert values.index("b") == 1
    assert values.count("c") == 1


def test_repr() -> None:
    assert repr(UniqueList()) == "UniqueList()"
    assert repr(UniqueList("abcabc")) == "UniqueList(['a', 'b', 'c'])"
