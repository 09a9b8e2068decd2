from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import requests

from . import core
from .config import OpenAIConfig
from .logging import get_logger
from .payloads import CompletionRequest, CreateImageRequest, EditRequest
from .types import ImageResult, Model, ModelList, TextResult

logger = get_logger()


class ClientApi(ABC):
    """Operations offered by the OpenAI HTTP API."""

    @abstractmethod
    def list_models(self) -> ModelList: ...

    @abstractmethod
    def get_model(self, model: str) -> Model: ...

    @abstractmethod
    def create_completion(self, request: CompletionRequest) -> TextResult: ...

    @abstractmethod
    def create_edit(self, request: EditRequest) -> TextResult: ...

    @abstractmethod
    def create_image(self, request: CreateImageRequest) -> ImageResult: ...


class OpenAIClient(ClientApi):
    """
    Synchronous client for the OpenAI HTTP API.

    Each call is a single request/response exchange. The result is either
    the typed payload or one raised ``OpenAIError``.

    Without a config the client uses ``OpenAIConfig.default()`` and reads
    its token from ``OPENAI_API_KEY``.
    """

    def __init__(
        self,
        config: Optional[OpenAIConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config or OpenAIConfig.default()
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def config(self) -> OpenAIConfig:
        return self._config

    # ------------------------------------------------------------------ #
    # Models
    # ------------------------------------------------------------------ #
    def list_models(self) -> ModelList:
        response, status = core.get(
            self._config, self._config.models_path(), ModelList, session=self._session
        )
        return core.unwrap(response, status)

    def get_model(self, model: str) -> Model:
        response, status = core.get(
            self._config, self._config.model_path(model), Model, session=self._session
        )
        return core.unwrap(response, status)

    # ------------------------------------------------------------------ #
    # Generation
    # ------------------------------------------------------------------ #
    def create_completion(self, request: CompletionRequest) -> TextResult:
        response, status = core.post(
            self._config,
            self._config.completion_path(),
            request,
            TextResult,
            session=self._session,
        )
        return core.unwrap(response, status)

    def create_edit(self, request: EditRequest) -> TextResult:
        response, status = core.post(
            self._config,
            self._config.edit_path(),
            request,
            TextResult,
            session=self._session,
        )
        return core.unwrap(response, status)

    def create_image(self, request: CreateImageRequest) -> ImageResult:
        response, status = core.post(
            self._config,
            self._config.image_path(),
            request,
            ImageResult,
            session=self._session,
        )
        result = core.unwrap(response, status)
        logger.info("generated %s image(s)", len(result.data))
        return result

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "OpenAIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
