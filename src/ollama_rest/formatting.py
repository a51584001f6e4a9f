"""Helpers for presenting responses."""
import json

from ollama_rest.schemas import JSONValue


def to_pretty_json(value: JSONValue) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def extract_reply(response: JSONValue) -> str | None:
    """Generated text from any endpoint's response shape, or None if absent.

    Looks at ``message.content`` (chat), ``response`` (generate),
    ``choices[0].message.content`` (chat completions) and ``choices[0].text``
    (completions), in that order.
    """
    if not isinstance(response, dict):
        return None
    message = response.get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    if isinstance(response.get("response"), str):
        return response["response"]
    choices = response.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        first = choices[0]
        choice_message = first.get("message")
        if isinstance(choice_message, dict) and isinstance(choice_message.get("content"), str):
            return choice_message["content"]
        if isinstance(first.get("text"), str):
            return first["text"]
    return None
