from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import requests

from . import constants
from .config import OpenAIConfig
from .errors import ApiErrorResponse, EncodeDecodeError, TransportError, UnexpectedResponseError
from .logging import get_logger
from .types import ApiResponse, ErrorResponse, Success, Unrecognized, decode_response

logger = get_logger()

SESSION = requests.Session()

T = TypeVar("T")

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": f"pyopenai/{constants.VERSION}",
}


def encode_body(body: Any) -> str:
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    try:
        return json.dumps(body)
    except (TypeError, ValueError) as exc:
        raise EncodeDecodeError(f"request body is not JSON serialisable: {exc}") from exc


def check_result(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        logger.warning(
            "non-JSON response status=%s %s", response.status_code, response.text[:200]
        )
        raise TransportError(
            f"failed to decode response body: {exc}", status_code=response.status_code
        ) from exc


def request(
    method: str,
    url: str,
    token: str,
    *,
    body: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Tuple[Any, int]:
    """Send one authenticated request and return the decoded body and status."""
    req_headers = {**DEFAULT_HEADERS, "Authorization": f"Bearer {token}"}
    data = None
    if body is not None:
        data = encode_body(body)
        req_headers["Content-Type"] = "application/json"
    if headers:
        req_headers.update(headers)

    logger.info("request %s %s", method.upper(), url)
    try:
        resp = (session or SESSION).request(
            method=method.upper(),
            url=url,
            data=data,
            headers=req_headers,
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.warning("request %s %s failed: %s", method.upper(), url, exc)
        raise TransportError(str(exc)) from exc

    logger.debug("response %s %s status=%s", method.upper(), url, resp.status_code)
    return check_result(resp), resp.status_code


def get(
    config: OpenAIConfig,
    path: str,
    model: Type[T],
    *,
    session: Optional[requests.Session] = None,
) -> Tuple["ApiResponse[T]", int]:
    raw, status = request(
        "GET",
        config.endpoint_url(path),
        config.resolve_token(),
        timeout=config.timeout,
        session=session,
    )
    return decode_response(raw, model), status


def post(
    config: OpenAIConfig,
    path: str,
    body: Any,
    model: Type[T],
    *,
    session: Optional[requests.Session] = None,
) -> Tuple["ApiResponse[T]", int]:
    raw, status = request(
        "POST",
        config.endpoint_url(path),
        config.resolve_token(),
        body=body,
        timeout=config.timeout,
        session=session,
    )
    return decode_response(raw, model), status


def unwrap(response: "ApiResponse[T]", status_code: Optional[int] = None) -> T:
    if isinstance(response, Success):
        return response.payload
    if isinstance(response, ErrorResponse):
        logger.warning(
            "api error status=%s code=%s: %s",
            status_code,
            response.details.code,
            response.details.message,
        )
        raise ApiErrorResponse(response.details, status_code=status_code)
    if isinstance(response, Unrecognized):
        raise UnexpectedResponseError(response.raw, status_code=status_code)
    raise TypeError(f"not an api response: {response!r}")
