"""Authentication helpers for the Salesforce OAuth2 username-password flow."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ..models import Credentials, Session
from ..utils.config import credentials_from_mapping
from ..utils.errors import AuthenticationError
from ..utils.http_client import LOGIN_URL, HttpClient


class AuthAPI:
    """Exchanges credentials for a bearer token and instance URL."""

    def __init__(self, http_client: HttpClient, login_url: str = LOGIN_URL) -> None:
        self._client = http_client
        self.login_url = login_url

    def authenticate(self, credentials: Union[Credentials, Mapping[str, Any]]) -> Session:
        if not isinstance(credentials, Credentials):
            credentials = credentials_from_mapping(credentials, source="credentials")

        logging.info("Authenticating %s against %s", credentials.username, self.login_url)
        data = self._client.request_token(self.login_url, credentials.form_data())

        access_token = data.get("access_token")
        instance_url = data.get("instance_url")
        if not access_token or not instance_url:
            missing = [name for name in ("access_token", "instance_url") if not data.get(name)]
            raise AuthenticationError(f"Token response is missing {', '.join(missing)}")

        session = Session(
            access_token=access_token,
            instance_url=instance_url,
            token_type=data.get("token_type"),
            issued_at=data.get("issued_at"),
            signature=data.get("signature"),
            identity_url=data.get("id"),
            raw=data,
        )
        logging.info("Authenticated, instance %s", session.instance_url)
        return session
