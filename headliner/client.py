"""Request executor shared by the News API endpoint functions."""

from typing import TypeVar

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from headliner.config import get_settings
from headliner.encoding import encode_params
from headliner.exceptions import APIError, DecodeError, TransportError
from headliner.http_client import get_session
from headliner.models.news import ErrorResponse

ResponseT = TypeVar("ResponseT", bound=BaseModel)

API_KEY_HEADER = "X-Api-Key"

EVERYTHING_ENDPOINT = "/everything"
TOP_HEADLINES_ENDPOINT = "/top-headlines"
SOURCES_ENDPOINT = "/top-headlines/sources"


def build_url(base_url: str, endpoint: str, query: str) -> str:
    url = f"{base_url.rstrip('/')}{endpoint}"
    if query:
        url = f"{url}?{query}"
    return url


def _decode_error(resp: requests.Response) -> ErrorResponse:
    # An undecodable error body still yields an (empty) envelope.
    try:
        return ErrorResponse.model_validate_json(resp.content)
    except ValidationError:
        return ErrorResponse()


def request(
    api_key: str,
    endpoint: str,
    params: BaseModel,
    response_model: type[ResponseT],
    *,
    base_url: str | None = None,
    timeout: float | tuple[float, float] | None = None,
    session: requests.Session | None = None,
) -> ResponseT:
    """Issue one GET against ``endpoint`` and decode the body into ``response_model``.

    Raises TransportError when no response arrives, APIError on any non-200
    status and DecodeError when a 200 body does not fit ``response_model``.
    """
    settings = get_settings()
    url = build_url(base_url or settings.base_url, endpoint, encode_params(params))
    if timeout is None:
        timeout = settings.request_timeout
    session = session or get_session()

    try:
        resp = session.get(url, headers={API_KEY_HEADER: api_key}, timeout=timeout)
    except requests.RequestException as e:
        logger.warning(f"GET {endpoint} failed: {e}")
        raise TransportError(str(e)) from e
    logger.debug(f"GET {endpoint} -> {resp.status_code}")

    if resp.status_code != 200:
        error = _decode_error(resp)
        logger.warning(f"News API error on {endpoint}: {resp.status_code} {error.code}")
        raise APIError(resp.status_code, error)

    try:
        return response_model.model_validate_json(resp.content)
    except ValidationError as e:
        logger.warning(f"Could not decode {endpoint} response as {response_model.__name__}")
        raise DecodeError(str(e)) from e
