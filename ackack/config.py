import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, SecretStr, model_validator

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.ackack.io"
USER_AGENT_PRODUCT = "ackack-python"

API_KEY_ENV = "ACKACK_API_KEY"
ENDPOINT_ENV = "ACKACK_ENDPOINT"


class APIConfig(BaseModel):
    """Configuration model for the ackack.io API client"""
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = SecretStr("")
    base_url: str = DEFAULT_BASE_URL
    version: Optional[str] = None
    timeout: float = 30.0  # Bounds a single attempt, not the whole retry loop
    max_attempts: int = 3
    retry_base_delay: float = 1.0
    rate_limit_default_wait: float = 60.0
    verbose: bool = False

    @model_validator(mode="after")
    def _require_api_key(self):
        # ConfigurationError is not a ValueError, so pydantic lets it through unwrapped
        if not self.api_key.get_secret_value():
            raise ConfigurationError("api_key is required")
        return self

    @property
    def user_agent(self) -> str:
        if self.version:
            return f"{USER_AGENT_PRODUCT}/{self.version}"
        return USER_AGENT_PRODUCT

    @property
    def default_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    @classmethod
    def build(cls, api_key: Optional[str], base_url: Optional[str] = None, version: Optional[str] = None, **kwargs) -> "APIConfig":
        """Build a config, falling back to the production endpoint when no override is given"""
        return cls(api_key=SecretStr(api_key or ""), base_url=base_url or DEFAULT_BASE_URL, version=version or None, **kwargs)

    @classmethod
    def from_env(cls, api_key: Optional[str] = None, base_url: Optional[str] = None, version: Optional[str] = None, **kwargs) -> "APIConfig":
        """Build a config from ACKACK_API_KEY and ACKACK_ENDPOINT; explicit arguments win"""
        return cls.build(
            api_key=api_key or os.getenv(API_KEY_ENV),
            base_url=base_url or os.getenv(ENDPOINT_ENV),
            version=version,
            **kwargs,
        )
