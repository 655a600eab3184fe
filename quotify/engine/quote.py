"""Quote value type and its JSON mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

UNKNOWN_AUTHOR = "Unknown"


@dataclass(frozen=True)
class Quote:
    text: str
    author: str

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "author": self.author}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quote":
        """Build a Quote from a cached record ({text, author})."""
        return cls(text=str(data["text"]), author=str(data.get("author") or UNKNOWN_AUTHOR))

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Quote":
        """Build a Quote from a quotable.io record ({content, author, ...})."""
        author = (item.get("author") or "").strip() or UNKNOWN_AUTHOR
        return cls(text=str(item["content"]).strip(), author=author)
