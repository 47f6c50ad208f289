"""Models describing OAuth password-grant inputs and the resulting session."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Inputs of the OAuth2 username-password flow."""

    grant_type: str
    client_id: str
    client_secret: str = Field(repr=False)
    username: str
    password: str = Field(repr=False)
    security_token: Optional[str] = Field(default=None, repr=False)

    def form_data(self) -> Dict[str, str]:
        """Returns the urlencoded body expected by the token endpoint."""

        password = self.password
        if self.security_token:
            password = f"{password}{self.security_token}"
        return {
            "grant_type": self.grant_type,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "username": self.username,
            "password": password,
        }


class Session(BaseModel):
    """Simplified view of a successful token response."""

    access_token: str = Field(repr=False)
    instance_url: str
    token_type: Optional[str] = None
    issued_at: Optional[str] = None
    signature: Optional[str] = Field(default=None, repr=False)
    identity_url: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False)
