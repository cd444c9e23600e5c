"""Data contracts for technical search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class SearchCategory(str, Enum):
    CODE = "code"
    DOCS = "docs"
    DEBUG = "debug"
    LEARN = "learn"

    @classmethod
    def parse(cls, value: Any) -> "SearchCategory":
        """Resolve a caller-supplied category, defaulting to CODE when absent or unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.CODE

    @classmethod
    def is_known(cls, value: Any) -> bool:
        return isinstance(value, str) and value.strip().lower() in {c.value for c in cls}


class SearchDepth(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class SearchPolicy:
    """Provider-call options attached to a category."""

    max_results: int
    search_depth: SearchDepth
    include_answer: bool = True
    include_raw_content: bool = True

    def __post_init__(self):
        if self.max_results < 1:
            raise ValueError(f"max_results must be positive, got {self.max_results}")

    def to_provider_kwargs(self) -> dict[str, Any]:
        return {
            "max_results": self.max_results,
            "search_depth": self.search_depth.value,
            "include_answer": self.include_answer,
            "include_raw_content": self.include_raw_content,
        }


@dataclass(frozen=True)
class SearchResult:
    """One hit returned by the search provider."""

    url: str
    title: str = ""
    content: str = ""
    raw_content: str | None = None

    @classmethod
    def from_payload(cls, item: Mapping[str, Any]) -> "SearchResult":
        raw_content = item.get("raw_content")
        if raw_content is None:
            raw_content = item.get("rawContent")
        return cls(
            url=_as_text(item.get("url")),
            title=_as_text(item.get("title")),
            content=_as_text(item.get("content")),
            raw_content=raw_content if isinstance(raw_content, str) else None,
        )


@dataclass(frozen=True)
class SearchResultSet:
    """Synthesized answer plus ordered hits for a single query."""

    answer: str | None = None
    results: list[SearchResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.answer and not self.results

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchResultSet | None":
        """
        Build a result set from a raw provider response.

        Only the shape is checked: anything that isn't a mapping means the provider
        returned nothing, and malformed entries inside ``results`` are skipped.
        """
        if not isinstance(payload, Mapping):
            return None

        raw_results = payload.get("results")
        if not isinstance(raw_results, list):
            raw_results = []

        answer = payload.get("answer")
        return cls(
            answer=answer if isinstance(answer, str) else None,
            results=[SearchResult.from_payload(item) for item in raw_results if isinstance(item, Mapping)],
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
