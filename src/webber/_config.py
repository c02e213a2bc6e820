import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_MAX_IDLE_CONNECTIONS,
    DEFAULT_TIMEOUT,
    ENV_CONNECT_TIMEOUT,
    ENV_DISABLE_SSL_VERIFY,
    ENV_MAX_IDLE_CONNECTIONS,
    ENV_REQUEST_TIMEOUT,
    ENV_TLS_HANDSHAKE_TIMEOUT,
)


class TransportConfig(BaseModel):
    """Settings for the shared transport.

    Every timeout is its own field, in seconds, even though they all default
    to the same value.
    """

    connect_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    tls_handshake_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_idle_connections: int = Field(default=DEFAULT_MAX_IDLE_CONNECTIONS, ge=0)
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_env(cls) -> "TransportConfig":
        """Builds a config from ``WEBBER_*`` environment variables.

        A ``.env`` file in the working directory is loaded first. Variables
        that are not set keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        load_dotenv(override=False)

        values: Dict[str, Any] = {}
        for field_name, env_name in (
            ("connect_timeout", ENV_CONNECT_TIMEOUT),
            ("tls_handshake_timeout", ENV_TLS_HANDSHAKE_TIMEOUT),
            ("request_timeout", ENV_REQUEST_TIMEOUT),
            ("max_idle_connections", ENV_MAX_IDLE_CONNECTIONS),
        ):
            value = os.getenv(env_name)
            if value:
                values[field_name] = value

        disable_ssl = os.getenv(ENV_DISABLE_SSL_VERIFY, "").lower()
        if disable_ssl in ("1", "true", "yes", "on"):
            values["verify_ssl"] = False

        return cls(**values)
