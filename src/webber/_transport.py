from logging import getLogger
from types import TracebackType
from typing import Optional

import httpx

from ._config import TransportConfig
from ._utils._ssl_context import get_httpx_client_kwargs


class Transport:
    """Owns the pooled ``httpx.Client`` every request goes through.

    One transport is meant to be created by the application and shared by
    all executors. ``httpx.Client`` is safe to use from several threads.

    Example:
        with Transport(TransportConfig(request_timeout=5.0)) as transport:
            executor = RequestExecutor(transport)
            response = executor.get(RequestSpec(uri="https://example.com"))
    """

    def __init__(self, config: Optional[TransportConfig] = None) -> None:
        self._logger = getLogger("webber")
        self._config = config or TransportConfig()

        # httpx bounds the TCP dial and the TLS handshake with the same
        # connect timeout, so it must cover both.
        timeout = httpx.Timeout(
            self._config.request_timeout,
            connect=max(
                self._config.connect_timeout, self._config.tls_handshake_timeout
            ),
        )
        limits = httpx.Limits(
            max_keepalive_connections=self._config.max_idle_connections,
        )

        self._client = httpx.Client(
            **get_httpx_client_kwargs(
                verify_ssl=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
            ),
            timeout=timeout,
            limits=limits,
        )

        self._logger.debug(f"Transport created: {self._config}")

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def client(self) -> httpx.Client:
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        return self._client.build_request(method, url, **kwargs)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Sends a request without reading its body.

        Raises:
            httpx.RequestError: On connection, DNS, TLS, timeout or redirect failures.
        """
        return self._client.send(request, stream=True)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
