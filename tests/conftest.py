"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from graphcopy import CopySettings, GraphCopier, Instantiator


@pytest.fixture
def settings():
    """Settings with every optional behavior at its default."""
    return CopySettings()


@pytest.fixture
def copier(settings):
    """Fresh GraphCopier bound to explicit settings."""
    return GraphCopier(settings=settings)


@pytest.fixture
def instantiator(settings):
    """Fresh Instantiator bound to explicit settings."""
    return Instantiator(settings)


@dataclass
class FixturePerson:
    name: str
    age: int
    favorite_books: list[str] = field(default_factory=list)


class FixtureNode:
    def __init__(self, label: str) -> None:
        self.label = label
        self.next: FixtureNode | None = None


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def node_cls():
    return FixtureNode
