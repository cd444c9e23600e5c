"""Build category-specific text reports from search results."""

from typing import Callable

from .code_extractor import extract_code_blocks
from .contracts import SearchCategory, SearchResult, SearchResultSet

NO_RESULTS_TEXT = "No results were found for your query. Please try a different search term."
NOTHING_RELEVANT_TEXT = (
    "The search was completed but no relevant information was found. "
    "Please try refining your query."
)


def _overview(lines: list[str], label: str, answer: str | None) -> None:
    if answer:
        lines.append(label)
        lines.append(answer + "\n")


def _section(lines: list[str], label: str, text: str) -> None:
    if text:
        lines.append(f"\n{label}")
        lines.append(text)


def _format_code(result_set: SearchResultSet) -> list[str]:
    lines = ["Code Examples & Implementation:\n"]
    _overview(lines, "Overview:", result_set.answer)

    for idx, result in enumerate(result_set.results, start=1):
        lines.append(f"Example {idx}:")
        lines.append(f"Source: {result.url}")

        if result.raw_content:
            for block in extract_code_blocks(result.raw_content):
                _section(lines, "Code:", block.strip())

        _section(lines, "Description:", result.content)
        lines.append("")

    return lines


def _format_reference(header: str, overview_label: str, details_label: str):
    """Shared layout for docs and learn: title, source, then the snippet."""

    def _format(result_set: SearchResultSet) -> list[str]:
        lines = [header]
        _overview(lines, overview_label, result_set.answer)

        for result in result_set.results:
            lines.append(result.title)
            lines.append(f"Source: {result.url}")
            _section(lines, details_label, result.content)
            lines.append("")

        return lines

    return _format


def _format_debug(result_set: SearchResultSet) -> list[str]:
    lines = ["Debugging Solutions:\n"]
    _overview(lines, "Quick Solution:", result_set.answer)

    for idx, result in enumerate(result_set.results, start=1):
        lines.append(f"Solution {idx}:")
        lines.append(f"Context: {result.title}")
        lines.append(f"Source: {result.url}")
        _section(lines, "Fix:", result.content)
        lines.append("")

    return lines


CATEGORY_FORMATTERS: dict[SearchCategory, Callable[[SearchResultSet], list[str]]] = {
    SearchCategory.CODE: _format_code,
    SearchCategory.DOCS: _format_reference("Technical Documentation:\n", "Quick Reference:", "Details:"),
    SearchCategory.DEBUG: _format_debug,
    SearchCategory.LEARN: _format_reference("Learning Resources:\n", "Overview:", "Key Points:"),
}


def format_results(result_set: SearchResultSet | None, category: SearchCategory) -> str:
    """
    Render a provider result set as a human-readable report.

    Args:
        result_set: Parsed provider response, or None when the provider returned nothing
        category: Category whose template is applied

    Returns:
        Report text; fixed informational messages when there is nothing to show
    """
    if result_set is None:
        return NO_RESULTS_TEXT

    if result_set.is_empty:
        return NOTHING_RELEVANT_TEXT

    formatter = CATEGORY_FORMATTERS.get(category)
    lines = formatter(result_set) if formatter else []
    if not lines:
        return NOTHING_RELEVANT_TEXT

    return "\n".join(lines)
