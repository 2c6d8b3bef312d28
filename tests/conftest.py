"""
Shared test configuration and fixtures.
"""

from unittest.mock import AsyncMock

import pytest


MOCKED_CONFIG = {
    "clientId": "<client-id>",
    "clientSecret": "<client-secret>",
}


@pytest.fixture
def mocked_config():
    """Raw connector configuration as the host returns it."""
    return dict(MOCKED_CONFIG)


@pytest.fixture
def get_config(mocked_config):
    """Async configuration accessor returning the mocked config."""
    return AsyncMock(return_value=mocked_config)


@pytest.fixture
def token_response():
    """Successful LINE token endpoint payload."""
    return {
        "access_token": "access_token",
        "id_token": "id_token",
        "scope": "scope",
        "token_type": "token_type",
    }


@pytest.fixture
def profile_response():
    """LINE profile endpoint payload."""
    return {
        "userId": "U1234567890abcdef1234567890abcdef",
        "displayName": "Brown",
        "pictureUrl": "https://profile.line-scdn.net/abcdefghijklmn",
        "statusMessage": "Hello, LINE!",
    }


@pytest.fixture
def verify_response():
    """LINE ID token verification payload."""
    return {
        "iss": "https://access.line.me",
        "sub": "U1234567890abcdef1234567890abcdef",
        "aud": "<client-id>",
        "exp": 1504169092,
        "iat": 1504263657,
        "amr": ["pwd"],
        "name": "Brown",
        "picture": "https://profile.line-scdn.net/abcdefghijklmn",
        "email": "brown@example.com",
    }
