"""
FastAPI dependencies for connector endpoints.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from line_connector.core.domain import SocialConnector
from line_connector.integrations.line.service import create_line_connector
from line_connector.oauth.config import HostConfig, get_host_config


async def get_configured_host(
    config: Annotated[HostConfig, Depends(get_host_config)],
) -> HostConfig:
    """
    Provide host configuration, requiring LINE credentials.

    Raises:
        HTTPException: If LINE is not configured
    """
    if not config.is_configured():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="LINE connector is not configured",
        )
    return config


async def get_line_connector(
    config: Annotated[HostConfig, Depends(get_configured_host)],
) -> SocialConnector:
    """Provide a LINE connector bound to the host configuration."""
    return await create_line_connector(config.get_config)


# Type aliases for cleaner dependency injection
ConfiguredHost = Annotated[HostConfig, Depends(get_configured_host)]
LineConnector = Annotated[SocialConnector, Depends(get_line_connector)]
