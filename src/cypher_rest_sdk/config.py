"""Connection settings for the Cypher endpoint."""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "http://localhost"
DEFAULT_PORT = 7474

ENV_HOST = "CYPHER_REST_HOST"
ENV_PORT = "CYPHER_REST_PORT"
ENV_TIMEOUT = "CYPHER_REST_TIMEOUT"


class ConnectionConfig(BaseModel):
    """Where the query endpoint lives and how long to wait for it."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, description="Scheme and host name, e.g. http://localhost")
    port: int = Field(default=DEFAULT_PORT, description="Port of the HTTP endpoint")
    timeout: Optional[float] = Field(default=None, description="Seconds to wait for the server, None waits forever")

    @field_validator('host')
    @classmethod
    def validate_host(cls, v):
        """Validate host carries an HTTP scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Host must start with http:// or https://")
        return v.rstrip("/")

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        """Validate port is a TCP port number."""
        if not 0 < v < 65536:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v):
        """Validate timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConnectionConfig":
        """
        Load configuration from environment variables.

        Unset variables fall back to the defaults.

        Raises:
            ValueError: If a variable cannot be parsed or fails validation
        """
        env = os.environ if environ is None else environ
        config_dict: Dict[str, Any] = {}

        if env.get(ENV_HOST):
            config_dict['host'] = env[ENV_HOST]

        if env.get(ENV_PORT):
            try:
                config_dict['port'] = int(env[ENV_PORT])
            except ValueError:
                raise ValueError(f"{ENV_PORT} must be an integer, got {env[ENV_PORT]!r}")

        if env.get(ENV_TIMEOUT):
            try:
                config_dict['timeout'] = float(env[ENV_TIMEOUT])
            except ValueError:
                raise ValueError(f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}")

        return cls(**config_dict)


__all__ = ['ConnectionConfig', 'DEFAULT_HOST', 'DEFAULT_PORT']
