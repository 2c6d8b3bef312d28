"""
LINE request and response models.

Pydantic models for every payload that crosses the connector boundary.
No field is read from a LINE response or a callback payload before it has
been validated against one of these.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from line_connector.core.exceptions import ConnectorError, ConnectorErrorCode


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class LineConfig(BaseModel):
    """Connector configuration supplied by the host."""

    client_id: str = Field(alias="clientId", description="LINE channel ID")
    client_secret: str = Field(
        alias="clientSecret", description="LINE channel secret"
    )

    model_config = ConfigDict(frozen=True)


class AccessTokenResponse(BaseModel):
    """Response model for the token endpoint."""

    access_token: str = Field(description="OAuth2 access token")
    id_token: str = Field(description="OpenID Connect ID token")
    scope: str = Field(description="Granted scopes")
    token_type: str = Field(description="Token type")

    model_config = ConfigDict(extra="allow")


class UserInfoResponse(BaseModel):
    """Response model for the profile endpoint."""

    user_id: str = Field(alias="userId", description="LINE user ID")
    display_name: str = Field(alias="displayName", description="Display name")
    picture_url: str | None = Field(
        default=None, alias="pictureUrl", description="Profile image URL"
    )

    model_config = ConfigDict(extra="allow")


class IdTokenResponse(BaseModel):
    """
    Response model for the ID token verification endpoint.

    Only the email claim is used; iss, sub, aud, exp and the rest are kept
    as extras.
    """

    email: str | None = Field(default=None, description="Verified email")

    model_config = ConfigDict(extra="allow")


class AuthResponse(BaseModel):
    """Successful authorization callback parameters."""

    code: str = Field(description="Authorization code")
    redirect_uri: str = Field(alias="redirectUri", description="Redirect URI")


class AuthError(BaseModel):
    """Authorization callback parameters describing a failure."""

    error: str = Field(description="Error code")
    error_description: str | None = Field(
        default=None, description="Human readable error description"
    )

    model_config = ConfigDict(extra="allow")


def validate_config(config: Any) -> LineConfig:
    """
    Validate raw configuration returned by the host.

    Raises:
        ConnectorError: INVALID_CONFIG with the validator errors
    """
    try:
        return LineConfig.model_validate(config)
    except ValidationError as e:
        logger.warning(f"Invalid LINE connector config: {e.error_count()} error(s)")
        errors = e.errors(include_url=False, include_input=False)
        raise ConnectorError(ConnectorErrorCode.INVALID_CONFIG, errors) from e


def parse_response(model: Type[ModelT], body: str | bytes) -> ModelT:
    """
    Parse a raw response body into a model.

    Malformed JSON and shape mismatches are reported the same way.

    Raises:
        ConnectorError: INVALID_RESPONSE with the validator errors
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning(
            f"Invalid {model.__name__} from LINE: {e.error_count()} error(s)"
        )
        errors = e.errors(include_url=False, include_input=False)
        raise ConnectorError(ConnectorErrorCode.INVALID_RESPONSE, errors) from e
