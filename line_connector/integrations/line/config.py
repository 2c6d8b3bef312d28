"""
LINE Login configuration.

Contains endpoints, metadata and defaults for LINE Login v2.1.
https://developers.line.biz/en/reference/line-login
"""

from line_connector.core.domain import ConnectorMetadata, ConnectorPlatform


# LINE Login v2.1 endpoints
AUTHORIZATION_ENDPOINT = "https://access.line.me/oauth2/v2.1/authorize"
ACCESS_TOKEN_ENDPOINT = "https://api.line.me/oauth2/v2.1/token"
USER_INFO_ENDPOINT = "https://api.line.me/v2/profile"
VERIFY_ID_TOKEN_ENDPOINT = "https://api.line.me/oauth2/v2.1/verify"

SCOPE = "profile openid email"

# Sent back by LINE when the user cancels the consent screen
ACCESS_DENIED_ERROR = "ACCESS_DENIED"

# Seconds, applied to every outbound request
DEFAULT_TIMEOUT = 5.0

DEFAULT_METADATA = ConnectorMetadata(
    id="line-universal",
    target="line",
    platform=ConnectorPlatform.UNIVERSAL,
    name={
        "en": "Line",
        "zh-CN": "Line",
        "tr-TR": "Line",
        "ko": "라인",
    },
    logo="./logo.svg",
    logo_dark=None,
    description={"en": "Line"},
    readme="./README.md",
    config_template="./docs/config-template.json",
)
