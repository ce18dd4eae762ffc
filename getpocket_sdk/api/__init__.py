"""
Pocket API integration.

This module provides direct integration with the Pocket API:
- OAuth request-token/authorize flow
- Adding items to a Pocket list
- Error types for every failure the client reports
"""

from .auth import PocketAuth
from .client import PocketClient
from .models import AddInput, AuthorizationResponse

__all__ = [
    'PocketAuth',
    'PocketClient',
    'AddInput',
    'AuthorizationResponse'
]
