"""
Python client for the OpenAI text and image generation HTTP API.

Configure a client, build a request with its builder and call the
matching method::

    from pyopenai import EditRequest, OpenAIClient, OpenAIConfig

    client = OpenAIClient(OpenAIConfig.new("<ACCESS_TOKEN>"))
    request = (
        EditRequest.builder()
        .model("text-davinci-edit-001")
        .input("What day of the wek is it?")
        .instruction("Fix the spelling mistakes")
        .build()
    )
    result = client.create_edit(request)

``OpenAIClient()`` without a config reads the token from ``OPENAI_API_KEY``.
"""

from . import constants
from .config import OpenAIConfig
from .errors import (
    ApiErrorResponse,
    EncodeDecodeError,
    MissingParameterError,
    MissingTokenError,
    OpenAIError,
    TransportError,
    UnexpectedResponseError,
)
from .params import ListParam, StringParam
from .payloads import (
    CompletionRequest,
    CompletionRequestBuilder,
    CreateImageRequest,
    CreateImageRequestBuilder,
    EditRequest,
    EditRequestBuilder,
)
from .service import ClientApi, OpenAIClient
from .types import (
    ApiErrorDetails,
    ErrorResponse,
    ImageItem,
    ImageResult,
    Model,
    ModelList,
    ModelPermission,
    Success,
    TextChoice,
    TextResult,
    Unrecognized,
    Usage,
)

__all__ = [
    "OpenAIClient",
    "ClientApi",
    "OpenAIConfig",
    # Requests
    "CompletionRequest",
    "CompletionRequestBuilder",
    "EditRequest",
    "EditRequestBuilder",
    "CreateImageRequest",
    "CreateImageRequestBuilder",
    "StringParam",
    "ListParam",
    # Responses
    "ApiErrorDetails",
    "Model",
    "ModelList",
    "ModelPermission",
    "TextChoice",
    "TextResult",
    "Usage",
    "ImageItem",
    "ImageResult",
    "Success",
    "ErrorResponse",
    "Unrecognized",
    # Errors
    "OpenAIError",
    "MissingTokenError",
    "MissingParameterError",
    "ApiErrorResponse",
    "UnexpectedResponseError",
    "TransportError",
    "EncodeDecodeError",
]

__version__ = constants.VERSION
