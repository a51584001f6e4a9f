"""Request payloads for the Ollama REST API.

Field order matches the JSON body the server receives. ``stream`` is always
sent for generation endpoints; ``max_tokens`` is dropped when unset.
"""
from typing import Any, Union

from pydantic import BaseModel, Field

from ollama_rest.schemas.message import Message

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]


class GenerateRequest(BaseModel):
    model: str
    prompt: str
    options: dict[str, Any] = Field(default_factory=dict)
    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ChatRequest(BaseModel):
    model: str
    messages: list[Message] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)
    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump()
        payload["messages"] = [m.to_json() for m in self.messages]
        return payload


class ShowModelRequest(BaseModel):
    name: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class CreateModelRequest(BaseModel):
    name: str
    modelfile: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ChatCompletionsRequest(BaseModel):
    """OpenAI-compatible chat completion body."""

    model: str
    messages: list[Message] = Field(default_factory=list)
    max_tokens: int | None = Field(default=None, description="Omitted from the body when None.")
    temperature: float = 1.0
    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump()
        payload["messages"] = [m.to_json() for m in self.messages]
        if self.max_tokens is None:
            del payload["max_tokens"]
        return payload


class CompletionsRequest(BaseModel):
    """OpenAI-compatible text completion body."""

    model: str
    prompt: str
    max_tokens: int | None = Field(default=None, description="Omitted from the body when None.")
    temperature: float = 1.0
    stream: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump()
        if self.max_tokens is None:
            del payload["max_tokens"]
        return payload


def max_tokens_or_none(max_tokens: int) -> int | None:
    """Non-positive limits mean "server default" and are not sent."""
    return max_tokens if max_tokens > 0 else None
