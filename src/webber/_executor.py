from logging import getLogger
from typing import Any, Mapping, Optional

import httpx

from ._transport import Transport
from ._utils._payload import Payload, PayloadKind, prepare_body
from ._utils._request_spec import HttpMethod, RequestSpec
from ._utils._url import build_url
from ._utils.constants import (
    ACCEPT_ENCODING_GZIP,
    ACCEPT_ENCODING_IDENTITY,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT_ENCODING,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    USER_AGENT,
)
from .models.errors import TransportError, UnsuccessfulStatusError
from .models.response import Response


class RequestExecutor:
    """Runs :class:`RequestSpec` round trips through a shared :class:`Transport`.

    Every call returns a :class:`Response` whose body is already drained.
    Errors that happen after the transport was reached carry that response
    as ``error.response``, so status, headers and body stay available for
    diagnostics.
    """

    def __init__(self, transport: Transport) -> None:
        self._logger = getLogger("webber")
        self._transport = transport

    def get(
        self, spec: RequestSpec, params: Optional[Mapping[str, str]] = None
    ) -> Response:
        spec.method = HttpMethod.GET
        spec.params = dict(params or {})

        return self.do(spec)

    def post(self, spec: RequestSpec, payload: Any = None) -> Response:
        spec.method = HttpMethod.POST
        spec.payload = payload

        return self.do(spec)

    def do(self, spec: RequestSpec) -> Response:
        """Executes the request described by ``spec``.

        Args:
            spec (RequestSpec): The request to run.

        Returns:
            Response: The response, with ``data`` populated.

        Raises:
            MalformedURIError: If ``spec.uri`` cannot be parsed.
            PayloadEncodingError: If a structured payload cannot be serialized.
            TransportError: If no response was obtained, including redirect loops.
            UnsuccessfulStatusError: If the status is outside [200, 300).
            ReadError: If the body could not be drained.
            DecompressionError: If a gzip body could not be decompressed.
        """
        request = self._build_request(spec)

        self._logger.debug(f"Request: {request.method} {request.url}")
        if spec.timeout is not None:
            self._logger.debug(
                f"Ignoring advisory timeout {spec.timeout}s, "
                f"using transport timeout {self._transport.config.request_timeout}s"
            )

        try:
            raw = self._transport.send(request)
        except httpx.RequestError as e:
            self._logger.warning(
                f"Transport failure for {request.method} {request.url}: {e!r}"
            )
            raise TransportError(
                f"Request to {request.url} failed: {e}", Response()
            ) from e

        response = Response(raw)
        response.read(uncompress=spec.enable_gzip)

        if not response.is_success:
            self._logger.warning(
                f"Unsuccessful response {response.status_code} "
                f"for {request.method} {request.url}"
            )
            raise UnsuccessfulStatusError(response)

        return response

    def _build_request(self, spec: RequestSpec) -> httpx.Request:
        method = HttpMethod(spec.method.upper())

        if method.sends_body:
            url = build_url(spec.uri)
            payload = Payload.infer(spec.payload)
        else:
            url = build_url(spec.uri, spec.params)
            payload = Payload.absent()

        body = prepare_body(payload)

        headers = httpx.Headers(spec.headers)
        headers[HEADER_USER_AGENT] = USER_AGENT

        if HEADER_ACCEPT_ENCODING not in headers:
            headers[HEADER_ACCEPT_ENCODING] = (
                ACCEPT_ENCODING_GZIP if spec.enable_gzip else ACCEPT_ENCODING_IDENTITY
            )

        if spec.content_type:
            headers[HEADER_CONTENT_TYPE] = spec.content_type
        elif (
            payload.kind == PayloadKind.STRUCTURED
            and HEADER_CONTENT_TYPE not in headers
        ):
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        return self._transport.build_request(
            method.value, url, content=body, headers=headers
        )
