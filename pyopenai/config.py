"""Connection settings for the OpenAI HTTP API."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from . import constants
from .errors import MissingTokenError


@dataclass(frozen=True)
class OpenAIConfig:
    """
    Immutable settings shared by every call of a client.

    An empty ``access_token`` means the token is read from the
    ``OPENAI_API_KEY`` environment variable each time a request is sent.
    """

    base_url: str = constants.BASE_URL
    version: str = constants.DEFAULT_VERSION
    access_token: str = ""
    timeout: Optional[float] = constants.DEFAULT_TIMEOUT

    @classmethod
    def create(cls, base_url: str, version: str, access_token: str) -> "OpenAIConfig":
        return cls(base_url=base_url, version=version, access_token=access_token)

    @classmethod
    def new(cls, access_token: str) -> "OpenAIConfig":
        return cls.create(constants.BASE_URL, constants.DEFAULT_VERSION, access_token)

    @classmethod
    def default(cls) -> "OpenAIConfig":
        return cls.new("")

    # ------------------------------------------------------------------ #
    # Fluent setters
    # ------------------------------------------------------------------ #
    def with_base_url(self, url: str) -> "OpenAIConfig":
        return replace(self, base_url=url)

    def with_version(self, version: str) -> "OpenAIConfig":
        return replace(self, version=version)

    def with_access_token(self, access_token: str) -> "OpenAIConfig":
        return replace(self, access_token=access_token)

    def with_timeout(self, timeout: Optional[float]) -> "OpenAIConfig":
        return replace(self, timeout=timeout)

    # ------------------------------------------------------------------ #
    # Auth
    # ------------------------------------------------------------------ #
    def resolve_token(self) -> str:
        if self.access_token:
            return self.access_token
        token = os.environ.get(constants.ENV_TOKEN)
        if token is None:
            raise MissingTokenError(
                f"no access token configured and {constants.ENV_TOKEN} is not set"
            )
        return token

    # ------------------------------------------------------------------ #
    # URLs
    # ------------------------------------------------------------------ #
    def api_url(self) -> str:
        return f"{self.base_url}/{self.version}"

    def endpoint_url(self, path: str) -> str:
        return f"{self.api_url()}/{path}"

    def models_path(self) -> str:
        return constants.MODELS_PATH

    def model_path(self, model: str) -> str:
        return f"{constants.MODELS_PATH}/{model}"

    def completion_path(self) -> str:
        return constants.COMPLETION_PATH

    def edit_path(self) -> str:
        return constants.EDIT_PATH

    def image_path(self) -> str:
        return constants.IMAGE_PATH

    def __repr__(self) -> str:
        token = "***" if self.access_token else ""
        return (
            f"OpenAIConfig(base_url={self.base_url!r}, version={self.version!r}, "
            f"access_token={token!r}, timeout={self.timeout!r})"
        )
