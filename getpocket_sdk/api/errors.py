"""
Pocket API error types.

Every failure raised by the client is a PocketError subclass:
- ConfigError: bad construction input
- ValidationError: bad caller input, detected before any I/O
- TransportError: network failure, cancellation or deadline expiry
- APIError: non-200 response, text taken from the X-Error header
- DecodeError: request could not be marshalled or response body not parseable
- ProtocolError: response parsed but a required field is missing
"""


class PocketError(Exception):
    """Base class for all Pocket client errors."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigError(PocketError):
    pass


class ValidationError(PocketError):
    pass


class TransportError(PocketError):
    pass


class APIError(PocketError):
    """Non-200 response from the Pocket API."""

    def __init__(self, status_code, error_message):
        super().__init__(f"API Error: {error_message}")
        self.status_code = status_code
        self.error_message = error_message


class DecodeError(PocketError):
    pass


class ProtocolError(PocketError):
    pass
