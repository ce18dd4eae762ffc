"""
getpocket-sdk - A client library for the Pocket API.

This package provides the OAuth request-token/authorize flow and
adding items to a user's Pocket list.
"""

import logging

from .api.auth import PocketAuth
from .api.client import PocketClient
from .api.errors import (
    APIError,
    ConfigError,
    DecodeError,
    PocketError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .api.models import AddInput, AuthorizationResponse
from .utils.context import Context

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'PocketClient',
    'PocketAuth',
    'AddInput',
    'AuthorizationResponse',
    'Context',
    'PocketError',
    'ConfigError',
    'ValidationError',
    'TransportError',
    'APIError',
    'DecodeError',
    'ProtocolError',
]
