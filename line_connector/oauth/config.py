"""
Local host configuration for the LINE connector.

Loaded from environment variables. The connector itself never reads the
environment; it receives get_config() from the host.
"""

import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from line_connector.integrations.line.config import DEFAULT_METADATA


logger = logging.getLogger(__name__)


@dataclass
class HostConfig:
    """
    Host configuration settings.

    Loaded from environment variables.
    """

    base_url: str
    line_client_id: str | None
    line_client_secret: str | None

    @classmethod
    def from_env(cls) -> "HostConfig":
        """Load configuration from environment variables."""
        return cls(
            base_url=os.getenv("BASE_URL", ""),
            line_client_id=os.getenv("LINE_CLIENT_ID"),
            line_client_secret=os.getenv("LINE_CLIENT_SECRET"),
        )

    def get_callback_url(self) -> str:
        """Generate the LINE callback URL."""
        return f"{self.base_url}/connectors/line/callback"

    def is_configured(self) -> bool:
        """Check if LINE credentials are configured."""
        return bool(self.line_client_id and self.line_client_secret)

    def connector_configs(self) -> dict[str, dict[str, Any]]:
        """Raw connector configurations keyed by connector ID."""
        if not self.is_configured():
            return {}
        return {
            DEFAULT_METADATA.id: {
                "clientId": self.line_client_id,
                "clientSecret": self.line_client_secret,
            }
        }

    async def get_config(self, connector_id: str) -> Any:
        """
        Configuration accessor handed to connectors.

        Returns None for unknown connectors; the connector rejects it as
        invalid config.
        """
        config = self.connector_configs().get(connector_id)
        if config is None:
            logger.warning(f"No configuration for connector: {connector_id}")
        return config


@lru_cache()
def get_host_config() -> HostConfig:
    """Get host configuration singleton."""
    return HostConfig.from_env()
