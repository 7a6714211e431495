"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel


class AccessToken(BaseModel):
    """Response from the Letterboxd auth/token endpoint."""
    access_token: str
    token_type: str = "bearer"
    refresh_token: str | None = None
    expires_in: int = 3600


class PasswordGrantRequest(BaseModel):
    grant_type: str = "password"
    username: str
    password: str


class RefreshGrantRequest(BaseModel):
    grant_type: str = "refresh_token"
    refresh_token: str


class TokenStatus(BaseModel):
    """Current state of the client's access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
