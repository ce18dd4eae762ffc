#!/usr/bin/env python3
"""
Pocket API client.
Handles the OAuth request-token/authorize exchange and adding items.
"""

import json
import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout

import requests

from ..utils.context import Context
from ..utils.forms import parse_form_body
from .errors import (
    APIError,
    ConfigError,
    DecodeError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .models import AuthorizationRequest, AuthorizationResponse, RequestTokenRequest

logger = logging.getLogger(__name__)

# Pocket API endpoints
API_HOST = "https://getpocket.com/v3"
AUTHORIZE_URL = "https://getpocket.com/auth/authorize"

ENDPOINT_ADD = "/add"
ENDPOINT_REQUEST_TOKEN = "/oauth/request"
ENDPOINT_AUTHORIZE = "/oauth/authorize"

# Error text on non-200 responses is carried in this header, not the body
X_ERROR_HEADER = "X-Error"

DEFAULT_TIMEOUT = 5
REQUEST_HEADERS = {"Content-Type": "application/json; charset=UTF8"}

# How often a waiting call re-checks its context for cancellation
POLL_INTERVAL = 0.05


class PocketClient:
    def __init__(self, consumer_key, session=None, timeout=DEFAULT_TIMEOUT,
                 host=API_HOST, authorize_url=AUTHORIZE_URL):
        """Initialize Pocket API client."""
        if not consumer_key:
            raise ConfigError("consumer key is empty")
        self.consumer_key = consumer_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.host = host
        self.authorize_url = authorize_url

    def get_request_token(self, ctx, redirect_url):
        """Obtain the request token used to authorize a user in your application."""
        payload = RequestTokenRequest(consumer_key=self.consumer_key, redirect_uri=redirect_url)
        values = self._do_http(ctx, ENDPOINT_REQUEST_TOKEN, payload.to_dict())

        code = values.get("code", "")
        if not code:
            raise ProtocolError("empty request token in API response")
        return code

    def get_authorization_url(self, request_token, redirect_url):
        """
        Build the link the user opens to authorize the application.

        Both values are inserted verbatim; callers must escape redirect_url
        themselves if it contains reserved characters.
        """
        if not request_token:
            raise ValidationError("request token is empty")
        if not redirect_url:
            raise ValidationError("redirect URL is empty")

        return f"{self.authorize_url}?request_token={request_token}&redirect_uri={redirect_url}"

    def authorize(self, ctx, request_token):
        """Exchange an authorized request token for the user's access token."""
        if not request_token:
            raise ValidationError("request token is empty")

        payload = AuthorizationRequest(consumer_key=self.consumer_key, code=request_token)
        values = self._do_http(ctx, ENDPOINT_AUTHORIZE, payload.to_dict())

        access_token = values.get("access_token", "")
        if not access_token:
            raise ProtocolError("empty access token in API response")

        return AuthorizationResponse(access_token=access_token, username=values.get("username", ""))

    def add(self, ctx, add_input):
        """Create a new item in the user's Pocket list."""
        add_input.validate()

        payload = add_input.generate_request(self.consumer_key)
        self._do_http(ctx, ENDPOINT_ADD, payload.to_dict())

    def _do_http(self, ctx, endpoint, payload):
        """
        POST a JSON payload and parse the URL-encoded response body.

        Args:
            ctx: Context bounding the call, or None for the default timeout only
            endpoint: API path appended to the host
            payload: JSON-serializable request body

        Returns:
            Dict of response values (first value per key)
        """
        if ctx is None:
            ctx = Context.background()

        # Payloads built by the public operations are plain strings; only a
        # hand-built payload passed here directly can fail to serialize
        try:
            body = json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise DecodeError("failed to marshal body", cause=e) from e

        if ctx.done():
            raise TransportError("failed to send http request", cause=ctx.reason())

        url = self.host + endpoint
        deadline = time.monotonic() + self.timeout
        remaining = ctx.remaining()
        if remaining is not None:
            deadline = min(deadline, time.monotonic() + remaining)

        logger.debug("POST %s", url)
        response = self._round_trip(ctx, url, body, deadline)
        logger.debug("POST %s -> %s", url, response.status_code)

        if response.status_code != 200:
            error_message = response.headers.get(X_ERROR_HEADER, "")
            logger.warning("Pocket API %s returned HTTP %s: %s", endpoint, response.status_code, error_message)
            raise APIError(response.status_code, error_message)

        try:
            return parse_form_body(response.content)
        except ValueError as e:
            raise DecodeError("failed to parse response body", cause=e) from e

    def _round_trip(self, ctx, url, body, deadline):
        """
        Run the request on a worker thread, giving up when ctx is done or the deadline passes.

        An abandoned worker keeps running until requests gives up. Its timeout
        bounds each socket read, not the whole body, so a server trickling out a
        response can keep the thread alive (and delay interpreter exit, which
        joins executor threads) past the deadline.
        """
        timeout = deadline - time.monotonic()
        if timeout <= 0:
            raise TransportError("failed to send http request", cause="request timed out")

        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._send, url, body, timeout)
            while True:
                try:
                    return future.result(timeout=POLL_INTERVAL)
                except FutureTimeout:
                    pass
                except requests.RequestException as e:
                    raise TransportError("failed to send http request", cause=e) from e

                if ctx.done():
                    future.cancel()
                    raise TransportError("failed to send http request", cause=ctx.reason())
                if time.monotonic() >= deadline:
                    future.cancel()
                    raise TransportError("failed to send http request", cause="request timed out")
        finally:
            executor.shutdown(wait=False)

    def _send(self, url, body, timeout):
        response = self.session.post(url, data=body, headers=REQUEST_HEADERS,
                                     timeout=timeout, stream=True)
        if response.status_code == 200:
            # Read the body on the worker so a slow body never blocks the caller
            response.content
        else:
            response.close()
        return response
