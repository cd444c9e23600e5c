"""Category policy table: which provider options each search category uses."""

from .contracts import SearchCategory, SearchDepth, SearchPolicy

CATEGORY_POLICIES: dict[SearchCategory, SearchPolicy] = {
    SearchCategory.CODE: SearchPolicy(max_results=3, search_depth=SearchDepth.ADVANCED),
    SearchCategory.DOCS: SearchPolicy(max_results=2, search_depth=SearchDepth.BASIC),
    SearchCategory.DEBUG: SearchPolicy(max_results=5, search_depth=SearchDepth.ADVANCED),
    SearchCategory.LEARN: SearchPolicy(max_results=3, search_depth=SearchDepth.BASIC),
}


def policy_for(category: SearchCategory) -> SearchPolicy:
    """
    Return the provider options for a category.

    Args:
        category: A resolved SearchCategory

    Returns:
        The fixed SearchPolicy for that category
    """
    return CATEGORY_POLICIES[SearchCategory(category)]
