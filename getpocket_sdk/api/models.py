"""
Value objects and request payloads for the Pocket API.
"""

from dataclasses import dataclass, field
from typing import List

from .errors import ValidationError


@dataclass(frozen=True)
class RequestTokenRequest:
    consumer_key: str
    redirect_uri: str

    def to_dict(self):
        return {"consumer_key": self.consumer_key, "redirect_uri": self.redirect_uri}


@dataclass(frozen=True)
class AuthorizationRequest:
    consumer_key: str
    code: str

    def to_dict(self):
        return {"consumer_key": self.consumer_key, "code": self.code}


@dataclass(frozen=True)
class AddRequest:
    url: str
    access_token: str
    consumer_key: str
    title: str = ""
    tags: str = ""

    def to_dict(self):
        """Serialize the payload, leaving out title and tags when empty."""
        data = {"url": self.url}
        if self.title:
            data["title"] = self.title
        if self.tags:
            data["tags"] = self.tags
        data["access_token"] = self.access_token
        data["consumer_key"] = self.consumer_key
        return data


@dataclass(frozen=True)
class AuthorizationResponse:
    """Result of exchanging a request token for an access token."""

    access_token: str
    username: str = ""


@dataclass
class AddInput:
    """Data needed to create a new item in a Pocket list."""

    url: str
    access_token: str
    title: str = ""
    tags: List[str] = field(default_factory=list)

    def validate(self):
        if not self.url:
            raise ValidationError("required URL value is empty")
        if not self.access_token:
            raise ValidationError("access token is empty")

    def generate_request(self, consumer_key):
        return AddRequest(
            url=self.url,
            title=self.title,
            tags=",".join(self.tags or []),
            access_token=self.access_token,
            consumer_key=consumer_key,
        )
