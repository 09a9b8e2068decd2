"""Response records mirroring the JSON returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from .util import decode_base64

T = TypeVar("T")


class ShapeMismatch(ValueError):
    """Decoded JSON does not have the shape of the record being built."""


def _require(data: Any, key: str, kind: Union[type, tuple]) -> Any:
    if not isinstance(data, dict):
        raise ShapeMismatch(f"expected object, got {type(data).__name__}")
    if key not in data:
        raise ShapeMismatch(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or isinstance(value, bool) and kind is int:
        raise ShapeMismatch(f"field `{key}` has type {type(value).__name__}")
    return value


def _optional(data: Any, key: str, kind: Union[type, tuple]) -> Any:
    if not isinstance(data, dict):
        raise ShapeMismatch(f"expected object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise ShapeMismatch(f"field `{key}` has type {type(value).__name__}")
    return value


# === Errors ===

@dataclass(frozen=True)
class ApiErrorDetails:
    message: str
    code: Optional[str] = None
    param: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ApiErrorDetails":
        details = _require(data, "error", dict)
        code = details.get("code")
        return cls(
            message=_require(details, "message", str),
            # some endpoints send numeric codes
            code=None if code is None else str(code),
            param=_optional(details, "param", str),
            type=_optional(details, "type", str),
        )


# === Models ===

@dataclass(frozen=True)
class ModelPermission:
    id: str
    object: str
    created: int
    allow_create_engine: bool = False
    allow_sampling: bool = False
    allow_logprobs: bool = False
    allow_search_indices: bool = False
    allow_view: bool = False
    allow_fine_tuning: bool = False
    organization: str = "*"
    group: Optional[str] = None
    is_blocking: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "ModelPermission":
        permission_id = _require(data, "id", str)
        flags = {
            name: _optional(data, name, bool) or False
            for name in (
                "allow_create_engine",
                "allow_sampling",
                "allow_logprobs",
                "allow_search_indices",
                "allow_view",
                "allow_fine_tuning",
                "is_blocking",
            )
        }
        return cls(
            id=permission_id,
            object=_require(data, "object", str),
            created=_require(data, "created", int),
            organization=_optional(data, "organization", str) or "*",
            group=_optional(data, "group", str),
            **flags,
        )


@dataclass(frozen=True)
class Model:
    id: str
    object: str
    created: int
    owned_by: str
    permission: List[ModelPermission] = field(default_factory=list)
    root: Optional[str] = None
    parent: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Model":
        return cls(
            id=_require(data, "id", str),
            object=_require(data, "object", str),
            created=_require(data, "created", int),
            owned_by=_require(data, "owned_by", str),
            permission=[
                ModelPermission.from_dict(item)
                for item in _optional(data, "permission", list) or []
            ],
            root=_optional(data, "root", str),
            parent=_optional(data, "parent", str),
        )


@dataclass(frozen=True)
class ModelList:
    data: List[Model]
    object: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ModelList":
        return cls(
            data=[Model.from_dict(item) for item in _require(data, "data", list)],
            object=_optional(data, "object", str),
        )


# === Text ===

@dataclass(frozen=True)
class TextChoice:
    text: str
    index: int
    logprobs: Optional[Any] = None
    finish_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "TextChoice":
        return cls(
            text=_require(data, "text", str),
            index=_require(data, "index", int),
            logprobs=data.get("logprobs"),
            finish_reason=_optional(data, "finish_reason", str),
        )


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    @classmethod
    def from_dict(cls, data: Any) -> "Usage":
        return cls(
            prompt_tokens=_require(data, "prompt_tokens", int),
            # edits responses omit it on older models
            completion_tokens=_optional(data, "completion_tokens", int) or 0,
            total_tokens=_require(data, "total_tokens", int),
        )


@dataclass(frozen=True)
class TextResult:
    """Body of a completion or edit response."""

    object: str
    created: int
    choices: List[TextChoice]
    usage: Optional[Usage] = None
    id: Optional[str] = None
    model: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "TextResult":
        usage = _optional(data, "usage", dict)
        return cls(
            object=_require(data, "object", str),
            created=_require(data, "created", int),
            choices=[TextChoice.from_dict(item) for item in _require(data, "choices", list)],
            usage=Usage.from_dict(usage) if usage is not None else None,
            id=_optional(data, "id", str),
            model=_optional(data, "model", str),
        )


# === Images ===

@dataclass(frozen=True)
class ImageItem:
    url: Optional[str] = None
    b64_json: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ImageItem":
        if not isinstance(data, dict):
            raise ShapeMismatch(f"expected object, got {type(data).__name__}")
        item = cls(url=_optional(data, "url", str), b64_json=_optional(data, "b64_json", str))
        if item.url is None and item.b64_json is None:
            raise ShapeMismatch("image item carries neither `url` nor `b64_json`")
        return item

    def image_bytes(self) -> bytes:
        """Decoded image for ``b64_json`` responses."""
        if self.b64_json is None:
            raise ValueError("image was returned as a URL, not embedded data")
        return decode_base64(self.b64_json)


@dataclass(frozen=True)
class ImageResult:
    created: int
    data: List[ImageItem]

    @classmethod
    def from_dict(cls, data: Any) -> "ImageResult":
        return cls(
            created=_require(data, "created", int),
            data=[ImageItem.from_dict(item) for item in _require(data, "data", list)],
        )


# === Response union ===

@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class ErrorResponse:
    details: ApiErrorDetails


@dataclass(frozen=True)
class Unrecognized:
    raw: Any


ApiResponse = Union[Success[T], ErrorResponse, Unrecognized]


def decode_response(raw: Any, model: Type[T]) -> "ApiResponse[T]":
    """
    Match a decoded body against the success shape, then the error envelope.

    Bodies are not self-describing, so the order matters: a payload that
    satisfies ``model`` is a success even if it also carries an ``error`` key.
    """
    try:
        return Success(model.from_dict(raw))  # type: ignore[attr-defined]
    except ShapeMismatch:
        pass
    try:
        return ErrorResponse(ApiErrorDetails.from_dict(raw))
    except ShapeMismatch:
        pass
    return Unrecognized(raw)
