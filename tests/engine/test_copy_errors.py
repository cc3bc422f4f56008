"""Tests for fatal copy errors.

Every error aborts the whole copy and reaches the caller unchanged.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from unittest.mock import patch

import pytest

from graphcopy import (
    ConstructionError,
    CopySettings,
    FieldAccessError,
    GraphCopier,
    GraphCopyError,
    IdentityRegistry,
    RegistrationError,
    UnsupportedContainerError,
    copy,
)


class Singleton:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        self.settings = {"debug": False}


class NeedsArgs:
    def __new__(cls, count: int):
        return super().__new__(cls)


class FixedMapping(Mapping):
    def __init__(self) -> None:
        self._data = {"a": [1]}

    def __getitem__(self, key: str) -> list[int]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


@dataclass
class Box:
    content: object


def test_error_taxonomy():
    for error in (ConstructionError, FieldAccessError, UnsupportedContainerError):
        assert issubclass(error, GraphCopyError)


def test_uninstantiable_type_raises_construction_error():
    with pytest.raises(ConstructionError) as exc_info:
        copy({"view": memoryview(b"abc")})

    assert exc_info.value.target_type is memoryview


def test_instantiation_returning_original_is_rejected():
    """CRITICAL: A singleton __new__ must not let the copy overwrite the original.

    Why: Filling the "copy" would mutate the original graph.
    """
    original = Singleton()
    settings_before = original.settings

    with pytest.raises(ConstructionError, match="returned the original instance"):
        copy(Box(original))

    assert original.settings is settings_before


def test_probing_disabled_surfaces_construction_error():
    copier = GraphCopier(settings=CopySettings(constructor_probing=False))

    with pytest.raises(ConstructionError):
        copier.copy([NeedsArgs(1)])


def test_probing_enabled_recovers():
    copier = GraphCopier(settings=CopySettings(constructor_probing=True))

    clone = copier.copy([NeedsArgs(1)])

    assert type(clone[0]) is NeedsArgs


def test_field_write_failure_raises_field_access_error():
    with patch(
        "graphcopy.core.fields.models.FieldDescriptor.write",
        side_effect=PermissionError("sealed"),
    ):
        with pytest.raises(FieldAccessError) as exc_info:
            copy(Box([1]))

    assert exc_info.value.operation == "write"
    assert exc_info.value.field_name == "content"
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_field_read_failure_raises_field_access_error():
    with patch(
        "graphcopy.core.fields.models.FieldDescriptor.read",
        side_effect=PermissionError("hidden"),
    ):
        with pytest.raises(FieldAccessError) as exc_info:
            copy(Box([1]))

    assert exc_info.value.operation == "read"


def test_unbuildable_container_raises():
    with pytest.raises(UnsupportedContainerError) as exc_info:
        copy([FixedMapping()])

    assert exc_info.value.target_type is FixedMapping


def test_container_without_empty_shell_raises():
    class OneShotDict(dict):
        made = False

        def __new__(cls, *args, **kwargs):
            if cls.made:
                raise TypeError("only one")
            cls.made = True
            return super().__new__(cls, *args, **kwargs)

    original = OneShotDict(a=1)

    with pytest.raises(UnsupportedContainerError):
        copy(Box(original))


def test_forgetful_registry_detected_as_engine_bug(node_cls):
    """A registry that loses entries must fail loudly, not loop forever."""
    node = node_cls("n")
    node.next = node

    with patch.object(
        IdentityRegistry, "lookup", side_effect=lambda original, default=None: default
    ):
        with pytest.raises(RegistrationError):
            copy(node)
