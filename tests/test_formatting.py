"""Tests for response presentation helpers."""
import json

import pytest

from ollama_rest import extract_reply, to_pretty_json


@pytest.mark.parametrize(
    "response,expected",
    [
        ({"message": {"role": "assistant", "content": "Hi!"}, "done": True}, "Hi!"),
        ({"response": "Blue light scatters.", "done": True}, "Blue light scatters."),
        ({"choices": [{"message": {"role": "assistant", "content": "Sunny"}}]}, "Sunny"),
        ({"choices": [{"text": "there was a llama"}]}, "there was a llama"),
        ({"choices": []}, None),
        ({"models": []}, None),
        (["not", "an", "object"], None),
        (None, None),
    ],
)
def test_extract_reply(response, expected) -> None:
    assert extract_reply(response) == expected


def test_pretty_json_round_trips() -> None:
    document = {"models": [{"name": "llama3.2", "details": {"family": "llama"}}], "note": "café"}
    text = to_pretty_json(document)
    assert "\n  " in text
    assert "café" in text
    assert json.loads(text) == document
