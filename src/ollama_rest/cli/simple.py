"""Demo: walk through every endpoint against a running Ollama server.

Requires ``ollama serve`` and the demo model pulled (``ollama pull llama3.1:8b``).
A failing step is reported and the demo moves on to the next one.
"""
import argparse
import asyncio
from collections.abc import Awaitable, Callable

from ollama_rest.client import OllamaClient
from ollama_rest.config import OllamaSettings
from ollama_rest.errors import OllamaError
from ollama_rest.formatting import extract_reply, to_pretty_json
from ollama_rest.logging import configure_logging
from ollama_rest.schemas import JSONValue, Message

DEMO_TIMEOUT = 30.0


def _field(response: JSONValue, key: str) -> JSONValue:
    return response.get(key) if isinstance(response, dict) else None


def _show_reply(response: JSONValue) -> None:
    print("Response:", extract_reply(response))
    print("Done:", _field(response, "done"))


def _show_openai_reply(response: JSONValue) -> None:
    print("Choice:", extract_reply(response))
    print("Model:", _field(response, "model"))


def _show_document(label: str) -> Callable[[JSONValue], None]:
    def show(response: JSONValue) -> None:
        print(f"{label}:", to_pretty_json(response))

    return show


async def run_step(
    name: str,
    title: str,
    call: Callable[[], Awaitable[JSONValue]],
    show: Callable[[JSONValue], None],
) -> bool:
    """Run one demo step; report a client failure instead of raising it."""
    print(f"\n=== {title} ===")
    try:
        response = await call()
    except OllamaError as e:
        print(f"Exception in {name}: {e}")
        return False
    show(response)
    return True


async def run_demo(client: OllamaClient, model: str) -> int:
    """Run all steps and return how many of them failed."""
    messages = [Message("user", "Hello, how are you?")]
    steps = [
        (
            "generate",
            "Generate Text (Non-Streaming)",
            lambda: client.generate(model, "Why is the sky blue?"),
            _show_reply,
        ),
        (
            "chat",
            "Chat Interaction (Non-Streaming)",
            lambda: client.chat(model, messages),
            _show_reply,
        ),
        ("list_models", "List Models", client.list_models, _show_document("Models")),
        (
            "show_model",
            "Show Model Info",
            lambda: client.show_model(model),
            _show_document("Model Info"),
        ),
        (
            "chat_completions",
            "OpenAI Chat Completions (Non-Streaming)",
            lambda: client.chat_completions(model, messages, 50, 0.7),
            _show_openai_reply,
        ),
        (
            "completions",
            "OpenAI Text Completions (Non-Streaming)",
            lambda: client.completions(model, "Once upon a time", 100, 0.9),
            _show_openai_reply,
        ),
        ("get_models", "OpenAI List Models", client.get_models, _show_document("Models")),
    ]
    failed = 0
    for name, title, call, show in steps:
        if not await run_step(name, title, call, show):
            failed += 1
    return failed


def main(argv: list[str] | None = None) -> int:
    settings = OllamaSettings()
    p = argparse.ArgumentParser(description="Exercise every Ollama endpoint once.")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--model", default=settings.demo_model)
    args = p.parse_args(argv)

    configure_logging(json_logs=settings.log_json, level=settings.log_level)
    client = OllamaClient(args.host)
    client.set_timeout(DEMO_TIMEOUT)
    print("Ollama client initialized with host:", client.host)
    asyncio.run(run_demo(client, args.model))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
