"""Heuristics for pulling code fragments out of scraped page text."""

import re
from typing import Callable

# ```lang\n ... ``` (tag optional, body may span lines) or `inline` on one line
FENCED_OR_INLINE_RE = re.compile(r"```(?:\w+\n)?([\s\S]*?)```|`([^`\n]+)`")

DECLARATION_RE = re.compile(r"\b(?:const|let|var|function|class|import|export)\b[\s\S]*?(?:;|\})")
HOOK_CALL_RE = re.compile(r"\b(?:useEffect|useState|useCallback|useMemo)\([\s\S]*?\)(?:;|\})")
MARKUP_RE = re.compile(r"<[\w\s=\"']+>[\s\S]*?</\w+>")


def match_fenced_and_inline(text: str) -> list[str]:
    """Fenced and inline code spans in document order, trimmed, empties dropped."""
    blocks: list[str] = []
    for match in FENCED_OR_INLINE_RE.finditer(text):
        block = match.group(1) or match.group(2)
        if block and block.strip():
            blocks.append(block.strip())
    return blocks


def _find_all(pattern: re.Pattern, text: str) -> list[str]:
    return [m.group(0).strip() for m in pattern.finditer(text) if m.group(0).strip()]


def match_declarations(text: str) -> list[str]:
    return _find_all(DECLARATION_RE, text)


def match_hook_calls(text: str) -> list[str]:
    return _find_all(HOOK_CALL_RE, text)


def match_markup(text: str) -> list[str]:
    return _find_all(MARKUP_RE, text)


def match_code_like_statements(text: str) -> list[str]:
    """
    Keyword-driven fallback for prose without any code delimiters.

    All three families run over the whole text and their matches are
    concatenated in family order (declarations, hook calls, markup).
    """
    fragments: list[str] = []
    for family in (match_declarations, match_hook_calls, match_markup):
        fragments.extend(family(text))
    return fragments


# Highest-confidence signal first; a later strategy only runs if every earlier one found nothing
EXTRACTION_STRATEGIES: tuple[Callable[[str], list[str]], ...] = (
    match_fenced_and_inline,
    match_code_like_statements,
)


def extract_code_blocks(text: str | None) -> list[str]:
    """
    Extract candidate code fragments from free-form text.

    Args:
        text: Raw page content (may be empty or None)

    Returns:
        Ordered list of trimmed fragments; empty if nothing looks like code
    """
    if not text:
        return []

    for strategy in EXTRACTION_STRATEGIES:
        fragments = strategy(text)
        if fragments:
            return fragments

    return []
