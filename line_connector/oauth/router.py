"""
Connector API endpoints.

Exposes the LINE connector over HTTP for local end-to-end testing:
- GET /connectors/line/metadata - Connector metadata
- GET /connectors/line/authorize - Redirect to LINE login
- GET /connectors/line/callback - Resolve the callback to a user identity
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from line_connector.oauth.dependencies import ConfiguredHost, LineConnector


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/connectors/line", tags=["line"])


@router.get("/metadata")
async def metadata(connector: LineConnector):
    """Return connector metadata."""
    return {
        "type": connector.type.value,
        "metadata": connector.metadata.model_dump(mode="json"),
    }


@router.get("/authorize")
async def authorize(state: str, connector: LineConnector, config: ConfiguredHost):
    """
    Start the LINE login flow.

    Args:
        state: Opaque state echoed back by LINE on the callback

    Returns:
        Redirect to the LINE authorization page
    """
    authorization_uri = await connector.get_authorization_uri(
        state=state, redirect_uri=config.get_callback_url()
    )

    logger.info("Redirecting to LINE authorization")

    return RedirectResponse(url=authorization_uri)


@router.get("/callback")
async def callback(request: Request, connector: LineConnector, config: ConfiguredHost):
    """
    Handle the LINE redirect.

    Passes the query parameters to the connector; the redirect URI is added
    for successful callbacks so the code exchange can echo it.

    Returns:
        Normalized user identity (absent optional fields omitted)
    """
    parameters: dict[str, str] = dict(request.query_params)
    if "code" in parameters:
        parameters["redirectUri"] = config.get_callback_url()

    user_info = await connector.get_user_info(parameters)

    return {
        "status": "success",
        "user": user_info.to_dict(),
    }
