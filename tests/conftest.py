import json
import threading
from typing import Any, Dict, List

import pytest
from requests.structures import CaseInsensitiveDict

from getpocket_sdk.api.client import PocketClient


class FakeResponse:
    def __init__(self, status_code=200, body=b"", headers=None):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self._body = body
        self.content_read = False
        self.closed = False

    @property
    def content(self):
        self.content_read = True
        return self._body

    def close(self):
        self.closed = True


class RecordingSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def last_payload(self):
        return json.loads(self.calls[-1]["kwargs"]["data"].decode("utf-8"))


class BlockingSession(RecordingSession):
    """Session whose post() hangs until released."""

    def __init__(self, response=None):
        super().__init__(response)
        self.started = threading.Event()
        self.release = threading.Event()

    def post(self, url, **kwargs):
        self.calls.append({"url": url, "kwargs": kwargs})
        self.started.set()
        self.release.wait(10)
        return self.response


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def client(session):
    return PocketClient("ck-123", session=session)
