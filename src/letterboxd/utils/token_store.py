"""On-disk storage of the CLI's access token."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ValidationError

from letterboxd.errors import ConfigurationError
from letterboxd.models.auth import AccessToken

logger = logging.getLogger(__name__)


class StoredToken(BaseModel):
    token: AccessToken
    expires_at: datetime | None = None


class TokenStore:
    """Persists a single token as JSON, readable only by the owner."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StoredToken | None:
        """Load the stored token, or None if there is none.

        Raises:
            ConfigurationError: If the file is not a valid stored token.
        """
        if not self._path.exists():
            return None
        try:
            with open(self._path) as f:
                return StoredToken.model_validate(json.load(f))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(
                f"Stored token at {self._path} is unreadable: {e}. Run `letterboxd auth logout` to remove it."
            ) from e

    def save(self, token: AccessToken, expires_at: datetime | None = None) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        stored = StoredToken(token=token, expires_at=expires_at)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # An existing file keeps its old mode through O_CREAT
        os.chmod(self._path, 0o600)
        with os.fdopen(fd, "w") as f:
            f.write(stored.model_dump_json(indent=2))
        logger.info(f"Saved token to {self._path}")

    def clear(self) -> bool:
        """Delete the stored token. Returns True if one existed."""
        if not self._path.exists():
            return False
        self._path.unlink()
        return True
