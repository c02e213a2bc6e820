"""webber - a small HTTP request helper built on httpx.

Usage:
    from webber import RequestExecutor, RequestSpec, Transport

    with Transport() as transport:
        executor = RequestExecutor(transport)
        response = executor.get(
            RequestSpec(uri="https://jsonplaceholder.typicode.com/posts"),
            {"id": "2"},
        )
        print(response.data)
"""

from ._config import TransportConfig
from ._executor import RequestExecutor
from ._transport import Transport
from ._utils import (
    HttpMethod,
    Payload,
    PayloadKind,
    RequestSpec,
    build_url,
    prepare_body,
    setup_logging,
)
from ._utils.constants import (
    CONTENT_TYPE_FORM_ENCODED,
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT,
    USER_AGENT,
)
from .models import (
    DecompressionError,
    MalformedURIError,
    PayloadEncodingError,
    ReadError,
    Response,
    ResponseError,
    TransportError,
    UnsuccessfulStatusError,
    WebberError,
)

__all__ = [
    "CONTENT_TYPE_FORM_ENCODED",
    "CONTENT_TYPE_JSON",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "DecompressionError",
    "HttpMethod",
    "MalformedURIError",
    "Payload",
    "PayloadEncodingError",
    "PayloadKind",
    "ReadError",
    "RequestExecutor",
    "RequestSpec",
    "Response",
    "ResponseError",
    "Transport",
    "TransportConfig",
    "TransportError",
    "UnsuccessfulStatusError",
    "WebberError",
    "build_url",
    "prepare_body",
    "setup_logging",
]
