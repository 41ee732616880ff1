"""Client configuration and URL building."""

from pydantic import BaseModel, ConfigDict

import settings
from votes_client.errors import ConfigurationError


class ClientConfig(BaseModel):
    """Functions API configuration, built once at startup and injected into clients."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    access_code: str | None = None
    timeout: float | None = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build config from FUNCTIONS_BASE / FUNCTION_CODE / FUNCTIONS_TIMEOUT."""
        if not settings.FUNCTIONS_BASE:
            raise ConfigurationError("FUNCTIONS_BASE is not set")
        try:
            timeout = float(settings.FUNCTIONS_TIMEOUT) if settings.FUNCTIONS_TIMEOUT else None
        except ValueError:
            raise ConfigurationError(f"Invalid FUNCTIONS_TIMEOUT: {settings.FUNCTIONS_TIMEOUT!r}") from None
        return cls(
            base_url=settings.FUNCTIONS_BASE,
            access_code=settings.FUNCTION_CODE or None,
            timeout=timeout,
        )

    @property
    def trimmed_base(self) -> str:
        """Base URL without its trailing slash."""
        return self.base_url.removesuffix("/")

    def url(self, path: str, with_code: bool = True) -> str:
        return build_url(self, path, with_code)


def build_url(config: ClientConfig, path: str, with_code: bool = True) -> str:
    """Join trimmed base and path, appending ``?code=`` when allowed and configured.

    The access code is trusted configuration and is not escaped.
    """
    suffix = f"?code={config.access_code}" if with_code and config.access_code else ""
    return f"{config.trimmed_base}{path}{suffix}"
