"""Fixtures: in-process fake Ollama server and a client wired to it."""
import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import Response

from ollama_rest import OllamaClient

FAKE_HOST = "http://ollama.test"


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: bytes

    @property
    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


@dataclass
class _Route:
    status_code: int
    content: bytes
    media_type: str = "application/json"


@dataclass
class FakeOllamaServer:
    """Answers configured (method, path) pairs and records every request."""

    requests: list[RecordedRequest] = field(default_factory=list)
    _routes: dict[tuple[str, str], _Route] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.app = FastAPI(title="Fake Ollama")

        @self.app.api_route("/{path:path}", methods=["GET", "POST"])
        async def handle(path: str, request: Request) -> Response:
            route_path = "/" + path
            self.requests.append(
                RecordedRequest(
                    method=request.method,
                    path=route_path,
                    headers=dict(request.headers),
                    body=await request.body(),
                )
            )
            route = self._routes.get((request.method, route_path))
            if route is None:
                return Response(
                    content=json.dumps({"error": f"no route for {route_path}"}),
                    status_code=404,
                    media_type="application/json",
                )
            return Response(
                content=route.content,
                status_code=route.status_code,
                media_type=route.media_type,
            )

    def respond(
        self,
        method: str,
        path: str,
        body: Any = None,
        status_code: int = 200,
        raw: bytes | None = None,
    ) -> None:
        content = raw if raw is not None else json.dumps(body).encode()
        self._routes[(method, path)] = _Route(status_code=status_code, content=content)

    @property
    def transport(self) -> httpx.AsyncBaseTransport:
        return httpx.ASGITransport(app=self.app)

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "no request reached the fake server"
        return self.requests[-1]


@pytest.fixture
def fake_server() -> FakeOllamaServer:
    return FakeOllamaServer()


@pytest.fixture
def client(fake_server: FakeOllamaServer) -> OllamaClient:
    return OllamaClient(FAKE_HOST, transport=fake_server.transport)
