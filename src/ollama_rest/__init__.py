"""Python client for the Ollama REST API."""
from ollama_rest.client import OllamaClient
from ollama_rest.config import DEFAULT_HOST, DEFAULT_TIMEOUT, OllamaSettings
from ollama_rest.errors import (
    HTTPStatusError,
    OllamaError,
    ParseError,
    RequestFailedError,
    ServerError,
    TransportError,
)
from ollama_rest.formatting import extract_reply, to_pretty_json
from ollama_rest.schemas import JSONValue, Message

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "HTTPStatusError",
    "JSONValue",
    "Message",
    "OllamaClient",
    "OllamaError",
    "OllamaSettings",
    "ParseError",
    "RequestFailedError",
    "ServerError",
    "TransportError",
    "extract_reply",
    "to_pretty_json",
]
