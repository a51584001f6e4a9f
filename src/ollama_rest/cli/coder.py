"""Generate code with one chat call and save the reply to a file.

Usage:
    ollama-coder --prompt "Create a C function to sort an array" --model llama3.1:8b \
        --output sort.md --verbose
"""
import argparse
import asyncio
import sys
from pathlib import Path

from ollama_rest.client import OllamaClient
from ollama_rest.config import OllamaSettings
from ollama_rest.errors import OllamaError
from ollama_rest.formatting import to_pretty_json
from ollama_rest.logging import configure_logging, get_logger
from ollama_rest.schemas import JSONValue, Message

CODER_TIMEOUT = 30.0
DEFAULT_OUTPUT = "generated.md"
PROMPT_PREFIX = "Generate code: "

logger = get_logger(__name__)


def build_parser(default_host: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ollama-coder",
        description="Generate code with an Ollama model and write it to a file.",
    )
    p.add_argument("--prompt", required=True, help="What the code should do.")
    p.add_argument("--model", required=True, help="Model name, e.g. llama3.1:8b.")
    p.add_argument("--output", default=DEFAULT_OUTPUT)
    p.add_argument("--host", default=default_host)
    p.add_argument("--verbose", action="store_true", help="Print the full API response.")
    return p


async def generate_code(client: OllamaClient, model: str, prompt: str) -> tuple[str, JSONValue]:
    """Return the generated text and the raw chat response."""
    response = await client.chat(model, [Message("user", PROMPT_PREFIX + prompt)])
    message = response.get("message") if isinstance(response, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise OllamaError("response has no message.content")
    return content, response


def main(argv: list[str] | None = None) -> int:
    settings = OllamaSettings()
    args = build_parser(settings.host).parse_args(argv)
    configure_logging(json_logs=settings.log_json, level="DEBUG" if args.verbose else settings.log_level)

    client = OllamaClient(args.host)
    client.set_timeout(CODER_TIMEOUT)
    try:
        code, response = asyncio.run(generate_code(client, args.model, args.prompt))
    except OllamaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        Path(args.output).write_text(code, encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("code_written", output=args.output, chars=len(code))
    print("Code successfully generated and saved to", args.output)
    if args.verbose:
        print("\nFull API Response:")
        print(to_pretty_json(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
