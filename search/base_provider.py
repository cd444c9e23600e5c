from abc import ABC, abstractmethod

from .contracts import SearchPolicy, SearchResultSet


class BaseSearchProvider(ABC):
    """
    Abstract base class for web search providers.
    Concrete providers translate a query plus a SearchPolicy into a SearchResultSet.
    """

    name: str = "base"

    @abstractmethod
    async def search(self, query: str, policy: SearchPolicy) -> SearchResultSet | None:
        """
        Run a search.

        Args:
            query: Free-text search query
            policy: Result count, depth and content options for this request

        Returns:
            The parsed result set, or None if the provider returned nothing

        Raises:
            Exception: Provider failures propagate unchanged; callers classify them
        """
        pass
