"""Async client for the Ollama REST API.

Covers the native endpoints (``/api/...``) and the OpenAI-compatible ones
(``/v1/...``). Every method is one independent round trip; the client keeps
no state besides ``host`` and ``timeout``.
"""
from collections.abc import Sequence
from datetime import timedelta
from typing import Any

import httpx

from ollama_rest.config import DEFAULT_HOST, DEFAULT_TIMEOUT, OllamaSettings
from ollama_rest.http_client import get_json, post_json
from ollama_rest.schemas import (
    ChatCompletionsRequest,
    ChatRequest,
    CompletionsRequest,
    CreateModelRequest,
    GenerateRequest,
    JSONValue,
    Message,
    ShowModelRequest,
    max_tokens_or_none,
)


class OllamaClient:
    """Client for an Ollama server at ``host``.

    ``stream`` arguments are sent to the server as requested, but streamed
    bodies are discarded and the call returns ``{}``.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        timeout: float | timedelta = DEFAULT_TIMEOUT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._transport = transport
        self.set_timeout(timeout)

    @classmethod
    def from_settings(cls, settings: OllamaSettings | None = None) -> "OllamaClient":
        settings = settings or OllamaSettings()
        return cls(settings.host, settings.timeout)

    @property
    def host(self) -> str:
        return self._host

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_timeout(self, timeout: float | timedelta) -> None:
        """Replace the timeout (seconds or timedelta) used by subsequent requests."""
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        if seconds <= 0:
            raise ValueError(f"timeout must be positive, got {seconds}")
        self._timeout = seconds

    def _url(self, path: str) -> str:
        return f"{self._host}{path}"

    async def _post(self, path: str, payload: dict[str, Any], stream: bool = False) -> JSONValue:
        return await post_json(
            self._url(path),
            payload,
            timeout=self._timeout,
            stream=stream,
            transport=self._transport,
        )

    async def _get(self, path: str) -> JSONValue:
        return await get_json(self._url(path), timeout=self._timeout, transport=self._transport)

    async def generate(
        self,
        model: str,
        prompt: str,
        options: dict[str, Any] | None = None,
        stream: bool = False,
    ) -> JSONValue:
        """Complete ``prompt`` with ``model``. Generated text is under ``response``."""
        body = GenerateRequest(model=model, prompt=prompt, options=options or {}, stream=stream)
        return await self._post("/api/generate", body.to_payload(), stream=stream)

    async def chat(
        self,
        model: str,
        messages: Sequence[Message],
        options: dict[str, Any] | None = None,
        stream: bool = False,
    ) -> JSONValue:
        """Continue the conversation. The reply is under ``message.content``."""
        body = ChatRequest(model=model, messages=list(messages), options=options or {}, stream=stream)
        return await self._post("/api/chat", body.to_payload(), stream=stream)

    async def list_models(self) -> JSONValue:
        """Locally installed models (``/api/tags``)."""
        return await self._get("/api/tags")

    async def show_model(self, model: str) -> JSONValue:
        return await self._post("/api/show", ShowModelRequest(name=model).to_payload())

    async def create_model(self, name: str, modelfile: str) -> JSONValue:
        body = CreateModelRequest(name=name, modelfile=modelfile)
        return await self._post("/api/create", body.to_payload())

    async def chat_completions(
        self,
        model: str,
        messages: Sequence[Message],
        max_tokens: int = 0,
        temperature: float = 1.0,
        stream: bool = False,
    ) -> JSONValue:
        """OpenAI-style chat completion. ``max_tokens <= 0`` leaves the limit to the server."""
        body = ChatCompletionsRequest(
            model=model,
            messages=list(messages),
            max_tokens=max_tokens_or_none(max_tokens),
            temperature=temperature,
            stream=stream,
        )
        return await self._post("/v1/chat/completions", body.to_payload(), stream=stream)

    async def completions(
        self,
        model: str,
        prompt: str,
        max_tokens: int = 0,
        temperature: float = 1.0,
        stream: bool = False,
    ) -> JSONValue:
        """OpenAI-style text completion. ``max_tokens <= 0`` leaves the limit to the server."""
        body = CompletionsRequest(
            model=model,
            prompt=prompt,
            max_tokens=max_tokens_or_none(max_tokens),
            temperature=temperature,
            stream=stream,
        )
        return await self._post("/v1/completions", body.to_payload(), stream=stream)

    async def get_models(self) -> JSONValue:
        """Models in OpenAI list format (``/v1/models``)."""
        return await self._get("/v1/models")
