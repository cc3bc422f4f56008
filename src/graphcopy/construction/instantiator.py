"""Empty-instance construction for types whose shape is only known at runtime.

Records are allocated without running their initializer whenever possible.
Only when raw allocation and a zero-argument call both fail is the
initializer probed with placeholder arguments, and that path can be switched
off through CopySettings.
"""

from __future__ import annotations

import array
import inspect
import logging
from collections.abc import Callable
from typing import Any

from graphcopy.config import CopySettings, get_settings
from graphcopy.core.errors import ConstructionError, UnsupportedContainerError

logger = logging.getLogger(__name__)

_PLACEHOLDERS: dict[Any, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    "bool": False,
    "int": 0,
    "float": 0.0,
    "complex": 0j,
}


def placeholder_for(annotation: Any) -> Any:
    """Synthesize a default argument for a parameter annotation.

    Args:
        annotation: Parameter annotation, a type or a postponed string.

    Returns:
        Zero for numeric scalars, False for bool, None for everything else.
    """
    try:
        return _PLACEHOLDERS.get(annotation)
    except TypeError:
        # unhashable annotation objects
        return None


def _argument_plans(cls: type) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
    """Build placeholder argument sets for a class initializer.

    The first plan fills only required parameters, the second fills every
    named parameter. Variadic parameters are always left empty.
    """
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return []

    plans = []
    for fill_optional in (False, True):
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in signature.parameters.values():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            if parameter.default is not parameter.empty and not fill_optional:
                continue
            value = placeholder_for(parameter.annotation)
            if parameter.kind is parameter.KEYWORD_ONLY:
                kwargs[parameter.name] = value
            else:
                args.append(value)
        plan = (tuple(args), kwargs)
        if plan not in plans:
            plans.append(plan)
    return plans


class Instantiator:
    """Produces empty, unpopulated instances of concrete runtime types.

    Args:
        settings: Copy settings (defaults to the process-wide settings).
    """

    def __init__(self, settings: CopySettings | None = None):
        """Initialize the instantiator.

        Args:
            settings: Copy settings (defaults to the process-wide settings).
        """
        self._settings = settings if settings is not None else get_settings()

    def instantiate(self, cls: type) -> Any:
        """Create an empty record instance.

        Tries in order:
        1. Raw allocation via ``cls.__new__(cls)``, skipping ``__init__``
        2. Zero-argument call ``cls()``
        3. Initializer probing with placeholder arguments (if enabled)

        Args:
            cls: Concrete record type.

        Returns:
            A new instance whose type is exactly cls.

        Raises:
            ConstructionError: If every strategy fails.
        """
        last_error: Exception | None = None
        strategies: list[tuple[str, Callable[[], Any]]] = [
            ("raw allocation", lambda: cls.__new__(cls)),
            ("zero-argument call", cls),
        ]
        for name, strategy in strategies:
            try:
                return self._checked(cls, strategy())
            except Exception as e:
                logger.debug("%s failed for %s: %s", name, cls.__qualname__, e)
                last_error = e

        if self._settings.constructor_probing:
            for args, kwargs in _argument_plans(cls):
                try:
                    instance = self._checked(cls, cls(*args, **kwargs))
                except Exception as e:
                    logger.debug("Probing %s%r failed: %s", cls.__qualname__, args, e)
                    last_error = e
                    continue
                logger.warning(
                    "Constructed %s by probing its initializer with placeholder arguments",
                    cls.__qualname__,
                )
                return instance

        raise ConstructionError(cls, str(last_error) if last_error else None) from last_error

    def instantiate_container(self, cls: type, seed: Any) -> Any:
        """Create an empty container of the same concrete shape.

        Tries ``cls()``, then ``cls(seed)`` with an empty container of the same
        kind, then raw allocation.

        Args:
            cls: Concrete sequence, set or mapping type.
            seed: Empty builtin container of the same kind ([], set() or {}).

        Returns:
            A new empty container whose type is exactly cls.

        Raises:
            UnsupportedContainerError: If every strategy fails.
        """
        last_error: Exception | None = None
        strategies: list[tuple[str, Callable[[], Any]]] = [
            ("zero-argument call", cls),
            ("empty-seed call", lambda: cls(seed)),
            ("raw allocation", lambda: cls.__new__(cls)),
        ]
        for name, strategy in strategies:
            try:
                return self._checked(cls, strategy())
            except Exception as e:
                logger.debug("%s failed for container %s: %s", name, cls.__qualname__, e)
                last_error = e
        raise UnsupportedContainerError(cls) from last_error

    def allocate_array(self, original: Any) -> Any:
        """Allocate a zero-filled array of the same type, element type and length.

        Args:
            original: ``array.array`` or ``bytearray`` instance.

        Returns:
            New array of the same concrete type and length.

        Raises:
            ConstructionError: If the array cannot be allocated.
        """
        cls = type(original)
        try:
            if isinstance(original, array.array):
                shell = cls(original.typecode, bytes(len(original) * original.itemsize))
            else:
                shell = cls(len(original))
            return self._checked(cls, shell)
        except Exception as e:
            raise ConstructionError(cls, str(e)) from e

    @staticmethod
    def _checked(cls: type, instance: Any) -> Any:
        if type(instance) is not cls:
            raise TypeError(f"expected {cls.__qualname__}, got {type(instance).__qualname__}")
        return instance
