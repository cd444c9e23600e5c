"""Turns a search tool call into a provider request and a formatted report."""

from typing import Any, Mapping

from orchestrator.error_classifier import classify_search_error
from search.base_provider import BaseSearchProvider
from search.contracts import SearchCategory
from search.formatter import format_results
from search.policy import policy_for
from utils.logger import get_logger

logger = get_logger(__name__)

INVALID_ARGUMENTS_TEXT = "Error: Invalid arguments. A 'query' parameter is required."


class SearchOrchestrator:
    """
    Validates search arguments, applies the category policy, calls the provider
    and formats the result.

    Every outcome is returned as report text; provider failures never propagate.
    """

    def __init__(self, provider: BaseSearchProvider):
        self.provider = provider

    def resolve_category(self, raw_category: Any) -> SearchCategory:
        if raw_category is None:
            return SearchCategory.CODE
        if not SearchCategory.is_known(raw_category):
            logger.warning(
                "Unrecognized search type, defaulting to code",
                extra={"extra_fields": {"requested_type": str(raw_category)}},
            )
        return SearchCategory.parse(raw_category)

    async def handle_search(self, arguments: Mapping[str, Any] | None) -> str:
        """
        Run a search tool call.

        Args:
            arguments: Tool arguments; ``query`` is required, ``type`` defaults to "code"

        Returns:
            Report text (including validation and provider error messages)
        """
        if not isinstance(arguments, Mapping) or "query" not in arguments:
            logger.warning("Search called without a query")
            return INVALID_ARGUMENTS_TEXT

        query = str(arguments["query"])
        category = self.resolve_category(arguments.get("type"))
        policy = policy_for(category)

        try:
            result_set = await self.provider.search(query, policy)
        except Exception as e:
            error = classify_search_error(e)
            logger.error(
                f"Search error: {error.message}",
                extra={
                    "extra_fields": {
                        "error_code": error.code,
                        "error_type": type(e).__name__,
                        "category": category.value,
                    }
                },
            )
            return error.report

        report = format_results(result_set, category)
        logger.info(
            "Search completed",
            extra={
                "extra_fields": {
                    "category": category.value,
                    "result_count": len(result_set.results) if result_set else 0,
                }
            },
        )
        return report
