"""
Port definitions (interfaces) for the connector core.

The host implements these; the core depends on the interface only.
"""

from typing import Any, Protocol


class GetConnectorConfig(Protocol):
    """
    Port for looking up a connector's configuration.

    The returned value is untyped; the connector validates it before use.
    """

    async def __call__(self, connector_id: str) -> Any:
        """
        Fetch configuration for a connector.

        Args:
            connector_id: Connector identifier (e.g. "line-universal")

        Returns:
            Raw configuration mapping
        """
        ...
