"""Configuration management for Rapid7 MCP Server."""

import os
from typing import Optional
from dataclasses import dataclass
import structlog
from dotenv import load_dotenv

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://eu.rest.logs.insight.rapid7.com"


class ConfigurationError(Exception):
    """Exception raised when required configuration is missing."""
    pass


@dataclass(frozen=True)
class Rapid7Config:
    """Rapid7 log search API configuration."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    def __repr__(self) -> str:
        return f"Rapid7Config(api_key='***', base_url={self.base_url!r})"


@dataclass(frozen=True)
class MCPConfig:
    """MCP server configuration."""
    server_name: str = "rapid7-mcp-server"
    version: str = "1.0.0"


@dataclass(frozen=True)
class Config:
    """Main configuration container."""
    rapid7: Rapid7Config
    mcp: MCPConfig


class ConfigLoader:
    """Configuration loader using environment variables only."""

    def __init__(self):
        """Initialize configuration loader."""
        self._config: Optional[Config] = None
        # Load .env file if it exists
        load_dotenv()

    def load(self) -> Config:
        """Load configuration from environment variables.

        Returns:
            Config: Loaded configuration

        Raises:
            ConfigurationError: If RAPID7_API_KEY is not set
        """
        if self._config is not None:
            return self._config

        logger.info("Loading configuration from environment variables")

        self._config = self._create_config_from_env()

        logger.info("Configuration loaded successfully", base_url=self._config.rapid7.base_url)
        return self._config

    def _create_config_from_env(self) -> Config:
        """Create configuration objects from environment variables."""
        api_key = os.getenv('RAPID7_API_KEY')
        if not api_key:
            raise ConfigurationError(
                "Environment variable RAPID7_API_KEY is not set. "
                "Please set it before running the server."
            )

        base_url = os.getenv('RAPID7_BASE_URL') or DEFAULT_BASE_URL

        rapid7_config = Rapid7Config(
            api_key=api_key,
            base_url=base_url.rstrip('/')
        )

        mcp_config = MCPConfig(
            server_name=os.getenv('MCP_SERVER_NAME', 'rapid7-mcp-server'),
            version=os.getenv('MCP_VERSION', '1.0.0')
        )

        return Config(rapid7=rapid7_config, mcp=mcp_config)

    def reload(self) -> Config:
        """Reload configuration from environment variables."""
        # Reload .env file
        load_dotenv(override=True)
        self._config = None
        return self.load()


# Global configuration instance
_config_loader = ConfigLoader()


def get_config() -> Config:
    """Get the global configuration instance."""
    return _config_loader.load()


def reload_config() -> Config:
    """Reload the global configuration."""
    return _config_loader.reload()
