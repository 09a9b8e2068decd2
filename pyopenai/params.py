"""A request field that is either a single string or a list of strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple, Union

from .errors import EncodeDecodeError


@dataclass(frozen=True)
class StringParam:
    value: str

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListParam:
    values: Tuple[str, ...]

    def to_json(self) -> List[str]:
        return list(self.values)


StringOrList = Union[StringParam, ListParam]

StringOrListInput = Union[StringParam, ListParam, str, Iterable[str]]


def to_string_or_list(value: StringOrListInput) -> StringOrList:
    if isinstance(value, (StringParam, ListParam)):
        return value
    if isinstance(value, str):
        return StringParam(value)
    if isinstance(value, (bytes, bytearray)):
        raise TypeError("expected str or iterable of str, got bytes")
    return ListParam(tuple(str(item) for item in value))


def from_json(value: Any) -> StringOrList:
    """Pick the variant from the JSON shape: a string or an array of strings."""
    if isinstance(value, str):
        return StringParam(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return ListParam(tuple(value))
    raise EncodeDecodeError(f"expected string or list of strings, got {value!r}")
