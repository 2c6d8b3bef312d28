"""
Connector exceptions.

Every failure the connector reports to its host is a ConnectorError tagged
with one of the ConnectorErrorCode members. Transport failures that are not
recognized (DNS errors, timeouts, ...) are never wrapped and reach the host
as raised by httpx.
"""

from enum import Enum
from typing import Any


class ConnectorErrorCode(str, Enum):
    """Closed set of failure kinds surfaced to the host."""

    GENERAL = "general"
    INVALID_CONFIG = "invalid_config"
    INVALID_RESPONSE = "invalid_response"
    SOCIAL_ACCESS_TOKEN_INVALID = "social_access_token_invalid"
    SOCIAL_ID_TOKEN_INVALID = "social_id_token_invalid"
    AUTHORIZATION_FAILED = "authorization_failed"


class ConnectorError(Exception):
    """
    Raised when a connector operation fails in a recognized way.

    Attributes:
        code: The failure kind
        data: Optional detail (validator errors, serialized upstream payload)
    """

    def __init__(self, code: ConnectorErrorCode, data: Any = None):
        self.code = code
        self.data = data
        message = code.value if data is None else f"{code.value}: {data}"
        super().__init__(message)
