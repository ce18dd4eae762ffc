#!/usr/bin/env python3
"""
Pocket API OAuth authentication module.
Drives the 3-step OAuth flow for Pocket API access on top of PocketClient.
"""

import os
import webbrowser

from .client import PocketClient
from .errors import PocketError
from .models import AddInput

DEFAULT_REDIRECT_URI = "pocketapp1234:authorizationFinished"


class PocketAuth:
    def __init__(self, consumer_key=None, redirect_uri=None, client=None):
        """Initialize Pocket authentication."""
        if client is None:
            client = PocketClient(consumer_key or os.getenv("POCKET_CONSUMER_KEY", ""))
        self.client = client
        self.redirect_uri = redirect_uri or os.getenv("POCKET_REDIRECT_URI", DEFAULT_REDIRECT_URI)

    def get_request_token(self, ctx=None):
        """Get a request token from Pocket."""
        return self.client.get_request_token(ctx, self.redirect_uri)

    def authorization_url(self, request_token):
        return self.client.get_authorization_url(request_token, self.redirect_uri)

    def authorize_app(self, request_token, open_browser=True, prompt=None):
        """Show the authorization link and wait for the user to approve it."""
        auth_url = self.authorization_url(request_token)

        print("Open the URL and confirm the authorization")
        print(f"URL: {auth_url}")
        print()

        if open_browser:
            try:
                webbrowser.open(auth_url)
            except webbrowser.Error as e:
                print(f"Failed to open browser automatically: {e}")
                print(f"Please manually open this URL: {auth_url}")

        prompt = prompt or input
        prompt("Press Enter after you've completed authorization in your browser...")
        return auth_url

    def get_access_token(self, request_token, ctx=None):
        """Exchange request token for access token."""
        return self.client.authorize(ctx, request_token)

    def authenticate(self, ctx=None, open_browser=True, prompt=None):
        """Complete authentication flow and return the authorization response."""
        print("Starting Pocket API authentication...")
        print("=" * 50)

        print("Step 1: Getting request token...")
        request_token = self.get_request_token(ctx)
        print("✓ Request token obtained")

        print("\nStep 2: User authorization...")
        self.authorize_app(request_token, open_browser=open_browser, prompt=prompt)

        print("\nStep 3: Getting access token...")
        response = self.get_access_token(request_token, ctx)
        print(f"✓ Access token obtained for {response.username or 'unknown user'}")
        return response


def main(argv=None):
    """Run the authentication flow, then optionally save a URL given on the command line."""
    import sys

    argv = sys.argv[1:] if argv is None else argv

    try:
        auth = PocketAuth()
        response = auth.authenticate()

        if argv:
            auth.client.add(None, AddInput(url=argv[0], access_token=response.access_token))
            print(f"✓ Saved {argv[0]}")
    except PocketError as e:
        print(f"✗ Authentication failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
