"""Summary: Convert serializable objects into plain trees the codecs understand.
Why: Keep format adapters free of knowledge about dataclasses or model types."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, Protocol, runtime_checkable

import humps

from .enums import KeyCase


@runtime_checkable
class SupportsModelDump(Protocol):
    """Objects exposing a pydantic-style ``model_dump``."""

    def model_dump(self) -> Mapping[str, Any]:
        """Return the model fields as a mapping."""
        ...


@runtime_checkable
class SupportsToDict(Protocol):
    """Objects exposing a ``to_dict`` export."""

    def to_dict(self) -> Mapping[str, Any]:
        """Return the object fields as a mapping."""
        ...


_KEY_CASE_CONVERTERS: dict[KeyCase, Callable[[Any], Any]] = {
    KeyCase.SNAKE: humps.decamelize,
    KeyCase.CAMEL: humps.camelize,
    KeyCase.PASCAL: humps.pascalize,
    KeyCase.KEBAB: humps.kebabize,
}


def _convert(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _convert(item) for key, item in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)
        }
    if isinstance(value, SupportsModelDump):
        return _convert(value.model_dump())
    if isinstance(value, SupportsToDict):
        return _convert(value.to_dict())
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Enum):
        return _convert(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_convert(item) for item in value]
    return value


def to_payload(obj: object, key_case: KeyCase | None = None) -> dict[str, Any]:
    """Turn ``obj`` into nested dicts, lists and scalars.

    Mappings, dataclass instances and objects exposing ``model_dump`` or
    ``to_dict`` are accepted at the top level. Nested paths become strings,
    enum members their value and tuples or sets become lists.

    Args:
        obj: Object holding the default configuration.
        key_case: Optional naming convention applied to every mapping key.

    Returns:
        The converted tree.

    Raises:
        TypeError: If ``obj`` does not expose its fields in a supported way.
    """

    is_record = (
        isinstance(obj, (Mapping, SupportsModelDump, SupportsToDict))
        or (dataclasses.is_dataclass(obj) and not isinstance(obj, type))
    )
    if not is_record:
        raise TypeError(f"Object of type {type(obj).__name__} is not serializable")

    payload = _convert(obj)
    if key_case is not None:
        payload = _KEY_CASE_CONVERTERS[key_case](payload)
    return payload


__all__ = ["SupportsModelDump", "SupportsToDict", "to_payload"]
