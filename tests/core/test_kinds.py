"""Tests for value classification.

Critical Invariants:
- None is NULL and never anything else
- Immutable scalars and text are LEAF, even though str/bytes are sequences
- Arrays, sequences and mappings are recognized by runtime type
- Everything else is a RECORD
"""

import array
import datetime
import re
import sys
import uuid
from collections import Counter, OrderedDict, UserDict, UserList, defaultdict, deque, namedtuple
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import Path
from types import MappingProxyType

import pytest
from pydantic import BaseModel

from graphcopy import ValueKind, classify, is_leaf


class Color(Enum):
    RED = "red"


Pair = namedtuple("Pair", ["left", "right"])


@dataclass
class Point:
    x: int
    y: int


class Profile(BaseModel):
    name: str


def test_none_is_null():
    assert classify(None) is ValueKind.NULL


@pytest.mark.parametrize(
    "value",
    [
        0,
        True,
        1.5,
        2j,
        "text",
        b"bytes",
        range(3),
        Decimal("1.10"),
        Fraction(1, 3),
        datetime.date(2024, 1, 1),
        datetime.datetime(2024, 1, 1, 12, 0),
        datetime.timedelta(seconds=5),
        datetime.timezone.utc,
        uuid.UUID(int=7),
        Path("a/b"),
        re.compile("x+"),
        Color.RED,
        int,
        len,
        "text".upper,
        dict.fromkeys,
        lambda: None,
        sys,
        Ellipsis,
    ],
)
def test_immutable_values_are_leaves(value):
    assert classify(value) is ValueKind.LEAF
    assert is_leaf(value)


def test_text_is_leaf_before_sequence():
    """str and bytes are Sequences; the leaf check must win.

    Why: Cloning text element by element would be both wasteful and wrong.
    """
    assert classify("abc") is ValueKind.LEAF
    assert classify(b"abc") is ValueKind.LEAF


@pytest.mark.parametrize("value", [array.array("i", [1, 2]), bytearray(b"xy")])
def test_arrays(value):
    assert classify(value) is ValueKind.ARRAY


@pytest.mark.parametrize(
    "value",
    [[], deque(), set(), (1, 2), frozenset({1}), Pair(1, 2), UserList([1])],
)
def test_sequences(value):
    assert classify(value) is ValueKind.SEQUENCE
    assert not is_leaf(value)


@pytest.mark.parametrize(
    "value",
    [
        {},
        OrderedDict(),
        defaultdict(list),
        Counter("aab"),
        UserDict(),
        MappingProxyType({"a": 1}),
    ],
)
def test_mappings(value):
    assert classify(value) is ValueKind.MAPPING


@pytest.mark.parametrize("value", [Point(1, 2), object(), Profile(name="x"), memoryview(b"x")])
def test_everything_else_is_record(value):
    assert classify(value) is ValueKind.RECORD


@pytest.mark.parametrize("value", [[].append, Point(1, 2).__eq__, [].__len__])
def test_methods_bound_to_mutable_receivers(value):
    """A bound method carries its receiver, so it is not safe to alias."""
    assert classify(value) is ValueKind.METHOD
    assert not is_leaf(value)
