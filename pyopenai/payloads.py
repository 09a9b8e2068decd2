"""
Request bodies for the completion, edit and image endpoints.

Each request is a frozen dataclass produced by its builder. Builders take
loosely typed input, coerce it per field and refuse to build while a
required field is unset. Optional fields stay ``None`` and are left out of
the JSON body so the service applies its own defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, MISSING
from typing import Any, Dict, Mapping, Optional

from .errors import MissingParameterError
from .params import StringOrList, StringOrListInput, ListParam, StringParam, to_string_or_list
from .util import optional_bool, optional_float, optional_int, optional_str, strip_none


class _RequestBody:
    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, (StringParam, ListParam)):
                value = value.to_json()
            elif isinstance(value, Mapping):
                value = dict(value)
            body[item.name] = value
        return strip_none(body)


@dataclass(frozen=True)
class CompletionRequest(_RequestBody):
    model: str
    prompt: Optional[StringOrList] = None
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[StringOrList] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    # left out of the hash; dicts are unhashable
    logit_bias: Optional[Mapping[str, int]] = field(default=None, hash=False)
    user: Optional[str] = None

    @staticmethod
    def builder() -> "CompletionRequestBuilder":
        return CompletionRequestBuilder()


@dataclass(frozen=True)
class EditRequest(_RequestBody):
    model: str
    instruction: str
    input: Optional[str] = None
    n: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    @staticmethod
    def builder() -> "EditRequestBuilder":
        return EditRequestBuilder()


@dataclass(frozen=True)
class CreateImageRequest(_RequestBody):
    prompt: str
    n: Optional[int] = None
    size: Optional[str] = None
    response_format: Optional[str] = None
    user: Optional[str] = None

    @staticmethod
    def builder() -> "CreateImageRequestBuilder":
        return CreateImageRequestBuilder()


# ---------------------------------------------------------------------- #
# Builders
# ---------------------------------------------------------------------- #
class _RequestBuilder:
    request_type: type = _RequestBody

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def _set(self, name: str, value: Any):
        self._values[name] = value
        return self

    def build(self):
        for item in fields(self.request_type):
            required = item.default is MISSING and item.default_factory is MISSING
            if required and self._values.get(item.name) is None:
                raise MissingParameterError(item.name, self.request_type.__name__)
        return self.request_type(**self._values)


class CompletionRequestBuilder(_RequestBuilder):
    request_type = CompletionRequest

    def model(self, value: str) -> "CompletionRequestBuilder":
        return self._set("model", optional_str(value))

    def prompt(self, value: StringOrListInput) -> "CompletionRequestBuilder":
        return self._set("prompt", None if value is None else to_string_or_list(value))

    def suffix(self, value: str) -> "CompletionRequestBuilder":
        return self._set("suffix", optional_str(value))

    def max_tokens(self, value: int) -> "CompletionRequestBuilder":
        return self._set("max_tokens", optional_int(value))

    def temperature(self, value: float) -> "CompletionRequestBuilder":
        return self._set("temperature", optional_float(value))

    def top_p(self, value: float) -> "CompletionRequestBuilder":
        return self._set("top_p", optional_float(value))

    def n(self, value: int) -> "CompletionRequestBuilder":
        return self._set("n", optional_int(value))

    def stream(self, value: bool) -> "CompletionRequestBuilder":
        return self._set("stream", optional_bool(value))

    def logprobs(self, value: int) -> "CompletionRequestBuilder":
        return self._set("logprobs", optional_int(value))

    def echo(self, value: bool) -> "CompletionRequestBuilder":
        return self._set("echo", optional_bool(value))

    def stop(self, value: StringOrListInput) -> "CompletionRequestBuilder":
        return self._set("stop", None if value is None else to_string_or_list(value))

    def presence_penalty(self, value: float) -> "CompletionRequestBuilder":
        return self._set("presence_penalty", optional_float(value))

    def frequency_penalty(self, value: float) -> "CompletionRequestBuilder":
        return self._set("frequency_penalty", optional_float(value))

    def best_of(self, value: int) -> "CompletionRequestBuilder":
        return self._set("best_of", optional_int(value))

    def logit_bias(self, value: Mapping[str, int]) -> "CompletionRequestBuilder":
        if value is None:
            return self._set("logit_bias", None)
        return self._set("logit_bias", {str(k): int(v) for k, v in value.items()})

    def user(self, value: str) -> "CompletionRequestBuilder":
        return self._set("user", optional_str(value))

    def build(self) -> CompletionRequest:
        return super().build()


class EditRequestBuilder(_RequestBuilder):
    request_type = EditRequest

    def model(self, value: str) -> "EditRequestBuilder":
        return self._set("model", optional_str(value))

    def instruction(self, value: str) -> "EditRequestBuilder":
        return self._set("instruction", optional_str(value))

    def input(self, value: str) -> "EditRequestBuilder":
        return self._set("input", optional_str(value))

    def n(self, value: int) -> "EditRequestBuilder":
        return self._set("n", optional_int(value))

    def temperature(self, value: float) -> "EditRequestBuilder":
        return self._set("temperature", optional_float(value))

    def top_p(self, value: float) -> "EditRequestBuilder":
        return self._set("top_p", optional_float(value))

    def build(self) -> EditRequest:
        return super().build()


class CreateImageRequestBuilder(_RequestBuilder):
    request_type = CreateImageRequest

    def prompt(self, value: str) -> "CreateImageRequestBuilder":
        return self._set("prompt", optional_str(value))

    def n(self, value: int) -> "CreateImageRequestBuilder":
        return self._set("n", optional_int(value))

    def size(self, value: str) -> "CreateImageRequestBuilder":
        return self._set("size", optional_str(value))

    def response_format(self, value: str) -> "CreateImageRequestBuilder":
        return self._set("response_format", optional_str(value))

    def user(self, value: str) -> "CreateImageRequestBuilder":
        return self._set("user", optional_str(value))

    def build(self) -> CreateImageRequest:
        return super().build()
