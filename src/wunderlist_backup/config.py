"""Configuration constants and credentials for wunderlist-backup."""

from collections.abc import Mapping
from dataclasses import dataclass

# All requests are relative to this URL; it must end with a slash.
API_BASE_URL: str = "https://a.wunderlist.com/api/v1/"

ACCESS_TOKEN_ENV: str = "WUNDERLIST_ACCESS_TOKEN"
CLIENT_ID_ENV: str = "WUNDERLIST_CLIENT_ID"

ACCEPT_HEADER: str = "application/json; charset=utf-8"


class ConfigurationError(ValueError):
    """Raised when credentials are missing from the environment."""


@dataclass(frozen=True)
class Credentials:
    """Access credentials for the Wunderlist API."""

    access_token: str | None = None
    client_id: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Credentials":
        """Read credentials from an environment mapping (empty values count as absent)."""
        return cls(
            access_token=env.get(ACCESS_TOKEN_ENV) or None,
            client_id=env.get(CLIENT_ID_ENV) or None,
        )

    def validate(self) -> "Credentials":
        """Make sure at least one credential is set. Raise if not.

        The service decides whether the credentials are actually sufficient.
        """
        if self.access_token is None and self.client_id is None:
            msg = f"Missing environment variables: {ACCESS_TOKEN_ENV}, {CLIENT_ID_ENV}"
            raise ConfigurationError(msg)
        return self
