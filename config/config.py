import os
from dotenv import load_dotenv
from pathlib import Path

from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SERVER_NAME = "tavily-search-server"
DEFAULT_SERVER_VERSION = "0.1.0"


class Config:
    """Configuration management for the search server."""

    def __init__(self):
        """Initialize configuration with environment variables."""
        # Load environment variables from .env file if it exists
        env_path = Path(__file__).parent.parent / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        # Provider credential
        self.TAVILY_API_KEY = (os.getenv('TAVILY_API_KEY') or '').strip() or None

        # MCP server identity
        self.SERVER_NAME = os.getenv('MCP_SERVER_NAME', DEFAULT_SERVER_NAME)
        self.SERVER_VERSION = os.getenv('MCP_SERVER_VERSION', DEFAULT_SERVER_VERSION)

    def validate(self) -> bool:
        """
        Validate that all required configuration is present.

        Returns:
            bool: True if configuration is valid, False otherwise
        """
        if not self.TAVILY_API_KEY:
            logger.error("TAVILY_API_KEY environment variable not found")
            return False

        return True

    def get_server_info(self) -> str:
        """
        Get a printable identity of the server.

        Returns:
            str: Server name and version
        """
        return f"{self.SERVER_NAME} ({self.SERVER_VERSION})"
