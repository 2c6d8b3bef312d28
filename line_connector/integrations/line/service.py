"""
LINE Login service integration.

Implements OpenID Connect login against LINE Login v2.1:
- Authorization URI for the browser redirect
- Authorization code exchange
- Profile fetch and ID token verification, normalized to SocialUserInfo

Every call is a single attempt bounded by DEFAULT_TIMEOUT.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlencode

import httpx
from pydantic import ValidationError

from line_connector.core.domain import ConnectorType, SocialConnector, SocialUserInfo
from line_connector.core.exceptions import ConnectorError, ConnectorErrorCode
from line_connector.core.ports import GetConnectorConfig
from line_connector.integrations.line.config import (
    ACCESS_DENIED_ERROR,
    ACCESS_TOKEN_ENDPOINT,
    AUTHORIZATION_ENDPOINT,
    DEFAULT_METADATA,
    DEFAULT_TIMEOUT,
    SCOPE,
    USER_INFO_ENDPOINT,
    VERIFY_ID_TOKEN_ENDPOINT,
)
from line_connector.integrations.line.models import (
    AccessTokenResponse,
    AuthError,
    AuthResponse,
    IdTokenResponse,
    LineConfig,
    UserInfoResponse,
    parse_response,
    validate_config,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessTokenResult:
    """Tokens obtained from the authorization code exchange."""

    access_token: str
    id_token: str


def _serialize(value: Any) -> str:
    """Compact JSON used as error detail."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


async def _request(method: str, url: str, **kwargs) -> httpx.Response:
    """
    Send a single request to LINE.

    DEFAULT_TIMEOUT bounds the whole request, not each transport phase.

    Raises:
        httpx.HTTPStatusError: On non-2xx responses
        httpx.RequestError: On transport failures
        TimeoutError: If the request does not complete in time
    """
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
        async with asyncio.timeout(DEFAULT_TIMEOUT):
            response = await client.request(method, url, **kwargs)

    response.raise_for_status()
    return response


async def get_access_token(
    config: LineConfig, code: str, redirect_uri: str
) -> AccessTokenResult:
    """
    Exchange an authorization code for an access token and ID token.

    Args:
        config: Validated connector configuration
        code: Authorization code, possibly still percent-encoded
        redirect_uri: Redirect URI used for the authorization request

    Returns:
        AccessTokenResult with both tokens

    Raises:
        ConnectorError: INVALID_RESPONSE, SOCIAL_ACCESS_TOKEN_INVALID or
            SOCIAL_ID_TOKEN_INVALID
        httpx.HTTPError: Transport failures and non-2xx responses, unwrapped
        TimeoutError: If the exchange exceeds DEFAULT_TIMEOUT, unwrapped
    """
    response = await _request(
        "POST",
        ACCESS_TOKEN_ENDPOINT,
        data={
            "code": unquote(code),
            "client_id": config.client_id,
            "client_secret": config.client_secret,
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        },
    )

    result = parse_response(AccessTokenResponse, response.content)

    # Shape validation accepts empty strings
    if not result.access_token:
        logger.warning("LINE token response has an empty access_token")
        raise ConnectorError(ConnectorErrorCode.SOCIAL_ACCESS_TOKEN_INVALID)

    if not result.id_token:
        logger.warning("LINE token response has an empty id_token")
        raise ConnectorError(ConnectorErrorCode.SOCIAL_ID_TOKEN_INVALID)

    return AccessTokenResult(access_token=result.access_token, id_token=result.id_token)


def _parse_auth_error(parameters: Any) -> AuthError | None:
    try:
        return AuthError.model_validate(parameters)
    except ValidationError:
        return None


def authorization_callback_handler(parameters: Any) -> AuthResponse:
    """
    Extract the authorization code from the callback parameters.

    Raises:
        ConnectorError: AUTHORIZATION_FAILED if the user denied access,
            GENERAL with the serialized parameters for anything else
    """
    try:
        return AuthResponse.model_validate(parameters)
    except ValidationError as e:
        auth_error = _parse_auth_error(parameters)

        if auth_error is not None and auth_error.error == ACCESS_DENIED_ERROR:
            logger.info("LINE authorization denied by user")
            raise ConnectorError(ConnectorErrorCode.AUTHORIZATION_FAILED) from e

        logger.warning("Unrecognized LINE authorization callback")
        raise ConnectorError(ConnectorErrorCode.GENERAL, _serialize(parameters)) from e


def user_info_error(error: httpx.HTTPStatusError) -> ConnectorError:
    """Map an HTTP error from the profile or verify endpoint."""
    status_code = error.response.status_code

    if status_code == 401:
        return ConnectorError(ConnectorErrorCode.SOCIAL_ACCESS_TOKEN_INVALID)

    logger.warning(f"LINE API error: {status_code}")
    return ConnectorError(ConnectorErrorCode.GENERAL, _serialize(error.response.text))


class LineConnectorService:
    """
    LINE connector operations bound to a configuration accessor.

    Holds no state besides the accessor; configuration is looked up on every
    call.
    """

    def __init__(self, get_config: GetConnectorConfig):
        self._get_config = get_config

    async def _load_config(self) -> LineConfig:
        config = await self._get_config(DEFAULT_METADATA.id)
        return validate_config(config)

    async def get_authorization_uri(
        self, state: str, redirect_uri: str, **_: Any
    ) -> str:
        """
        Build the LINE authorization URI.

        Additional host parameters (connector id, jti, headers) are ignored.
        """
        config = await self._load_config()

        query = urlencode(
            {
                "client_id": config.client_id,
                "redirect_uri": redirect_uri,
                "response_type": "code",
                "state": state,
                "scope": SCOPE,
            }
        )

        return f"{AUTHORIZATION_ENDPOINT}?{query}"

    async def get_user_info(self, data: Any) -> SocialUserInfo:
        """
        Resolve callback parameters to a normalized user identity.

        Steps run strictly in order and the first failure aborts:
        callback parsing, config lookup, code exchange, profile fetch,
        ID token verification.

        Raises:
            ConnectorError: On any recognized failure
            httpx.HTTPError: Unrecognized transport failures, unwrapped
            TimeoutError: If a LINE call exceeds DEFAULT_TIMEOUT, unwrapped
        """
        auth = authorization_callback_handler(data)
        config = await self._load_config()
        tokens = await get_access_token(
            config, code=auth.code, redirect_uri=auth.redirect_uri
        )

        try:
            logger.debug("Fetching LINE profile")
            user_info_response = await _request(
                "GET",
                USER_INFO_ENDPOINT,
                headers={"Authorization": f"Bearer {tokens.access_token}"},
            )
            user_info = parse_response(UserInfoResponse, user_info_response.content)

            logger.debug("Verifying LINE ID token")
            id_token_response = await _request(
                "POST",
                VERIFY_ID_TOKEN_ENDPOINT,
                data={
                    "id_token": tokens.id_token,
                    "client_id": config.client_id,
                },
            )
            id_token = parse_response(IdTokenResponse, id_token_response.content)

        except httpx.HTTPStatusError as e:
            raise user_info_error(e) from e

        logger.info(
            "LINE user info resolved",
            extra={"extra_fields": {"line_user_id": user_info.user_id}},
        )

        return SocialUserInfo(
            id=user_info.user_id,
            name=user_info.display_name,
            avatar=user_info.picture_url or None,
            email=id_token.email or None,
        )


async def create_line_connector(get_config: GetConnectorConfig) -> SocialConnector:
    """
    Create the LINE social connector.

    Performs no I/O; only captures the configuration accessor.
    """
    service = LineConnectorService(get_config)

    return SocialConnector(
        metadata=DEFAULT_METADATA,
        type=ConnectorType.SOCIAL,
        config_guard=LineConfig,
        get_authorization_uri=service.get_authorization_uri,
        get_user_info=service.get_user_info,
    )
