"""Factory for creating the search provider from environment configuration."""

from config.config import Config
from utils.logger import get_logger

from .tavily_client import TavilySearchProvider

logger = get_logger(__name__)


def create_search_provider_from_env(config: Config | None = None) -> TavilySearchProvider:
    """
    Create the Tavily search provider from configuration.

    Environment variables:
        TAVILY_API_KEY: Tavily API key (required)

    Returns:
        Configured TavilySearchProvider instance

    Raises:
        ValueError: If TAVILY_API_KEY is not set
    """
    config = config or Config()

    if not config.TAVILY_API_KEY:
        raise ValueError("TAVILY_API_KEY not set in environment")

    logger.info("Using Tavily for technical search")

    return TavilySearchProvider(api_key=config.TAVILY_API_KEY)
