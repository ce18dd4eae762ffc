"""
Utility functions and helpers for the Pocket client.

This module contains shared utilities:
- Cancellation and deadline contexts
- URL-encoded response body parsing
"""

from .context import Context
from .forms import parse_form_body

__all__ = [
    'Context',
    'parse_form_body'
]
