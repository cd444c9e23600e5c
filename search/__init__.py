"""Technical search engine: category policies, code extraction and report formatting."""

from .base_provider import BaseSearchProvider
from .contracts import SearchCategory, SearchDepth, SearchPolicy, SearchResult, SearchResultSet
from .formatter import format_results
from .policy import policy_for

__all__ = [
    "BaseSearchProvider",
    "SearchCategory",
    "SearchDepth",
    "SearchPolicy",
    "SearchResult",
    "SearchResultSet",
    "format_results",
    "policy_for",
]
