"""
Core domain models for social connectors.

These models describe what a connector exposes to its host and are
independent of the LINE wire format.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class ConnectorType(str, Enum):
    """Connector category."""

    SOCIAL = "Social"


class ConnectorPlatform(str, Enum):
    """Platform a connector can run on."""

    UNIVERSAL = "Universal"


class ConnectorMetadata(BaseModel):
    """Static description of a connector, shown by the host."""

    id: str = Field(description="Unique connector identifier")
    target: str = Field(description="Identity provider the connector targets")
    platform: ConnectorPlatform = Field(description="Supported platform")
    name: Dict[str, str] = Field(description="Display name per locale")
    logo: str = Field(description="Logo asset path")
    logo_dark: Optional[str] = Field(default=None, description="Dark mode logo")
    description: Dict[str, str] = Field(description="Description per locale")
    readme: str = Field(description="Readme asset path")
    config_template: str = Field(description="Config template asset path")

    model_config = ConfigDict(frozen=True)


class SocialUserInfo(BaseModel):
    """
    Provider-agnostic user identity.

    Optional fields are left as None when the provider does not supply them
    and are dropped by to_dict().
    """

    id: str = Field(description="Provider user ID")
    name: str = Field(description="Display name")
    avatar: Optional[str] = Field(default=None, description="Profile picture URL")
    email: Optional[str] = Field(default=None, description="Verified email")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting absent optional fields."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class SocialConnector:
    """
    The public surface a social connector hands to its host.

    Both operations are bound to the configuration accessor captured when
    the connector was created.
    """

    metadata: ConnectorMetadata
    type: ConnectorType
    config_guard: Type[BaseModel]
    get_authorization_uri: Callable[..., Awaitable[str]]
    get_user_info: Callable[[Any], Awaitable[SocialUserInfo]]
