"""Message value and request payloads."""
from ollama_rest.schemas.message import Message
from ollama_rest.schemas.requests import (
    ChatCompletionsRequest,
    ChatRequest,
    CompletionsRequest,
    CreateModelRequest,
    GenerateRequest,
    JSONValue,
    ShowModelRequest,
    max_tokens_or_none,
)

__all__ = [
    "ChatCompletionsRequest",
    "ChatRequest",
    "CompletionsRequest",
    "CreateModelRequest",
    "GenerateRequest",
    "JSONValue",
    "Message",
    "ShowModelRequest",
    "max_tokens_or_none",
]
