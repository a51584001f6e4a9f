"""HTTP helpers: one request per call, single timeout, no retries."""
import time
from typing import Any

import httpx

from ollama_rest.errors import (
    UNKNOWN_ERROR,
    HTTPStatusError,
    ParseError,
    ServerError,
    TransportError,
)
from ollama_rest.logging import get_logger
from ollama_rest.schemas import JSONValue

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def create_http_client(
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create async HTTP client; ``timeout`` covers connect and read alike."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport or httpx.AsyncHTTPTransport(retries=0),
    )


def error_message(error: Any) -> str:
    """Text of a server ``error`` field: plain string or OpenAI-style object."""
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return UNKNOWN_ERROR


def raise_for_error_field(data: JSONValue) -> None:
    if isinstance(data, dict) and "error" in data:
        raise ServerError(error_message(data["error"]))


def _status_detail(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and "error" in data:
        return error_message(data["error"])
    return None


async def request_json(
    method: str,
    url: str,
    *,
    timeout: float,
    json: Any = None,
    stream: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JSONValue:
    """Perform one request and return the parsed JSON body.

    With ``stream`` set the body is dropped unread and ``{}`` is returned;
    incremental delivery is not supported.
    """
    headers = JSON_HEADERS if json is not None else None
    started = time.perf_counter()
    try:
        async with create_http_client(timeout, transport) as client:
            async with client.stream(method, url, json=json, headers=headers) as resp:
                if resp.status_code != 200:
                    await resp.aread()
                    raise HTTPStatusError(resp.status_code, resp.reason_phrase, _status_detail(resp))
                if stream:
                    data: JSONValue = {}
                else:
                    await resp.aread()
                    try:
                        data = resp.json()
                    except ValueError as e:
                        raise ParseError(f"Invalid JSON in response from {url}: {e}") from e
    except httpx.DecodingError as e:
        raise ParseError(f"Undecodable response body from {url}: {e}") from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise TransportError(str(e) or type(e).__name__) from e

    logger.debug(
        "ollama_request",
        method=method,
        url=url,
        status=resp.status_code,
        stream=stream,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    raise_for_error_field(data)
    return data


async def post_json(
    url: str,
    payload: dict[str, Any],
    *,
    timeout: float,
    stream: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JSONValue:
    return await request_json(
        "POST", url, timeout=timeout, json=payload, stream=stream, transport=transport
    )


async def get_json(
    url: str,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JSONValue:
    return await request_json("GET", url, timeout=timeout, transport=transport)
