"""Chat message value."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Message:
    """One chat turn. ``role`` is usually "user", "assistant" or "system"; it is not validated."""

    role: str
    content: str

    def to_json(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Message":
        return cls(role=str(data["role"]), content=str(data["content"]))
