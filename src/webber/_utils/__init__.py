from ._logs import setup_logging
from ._payload import Payload, PayloadKind, prepare_body
from ._request_spec import HttpMethod, RequestSpec
from ._url import build_url

__all__ = [
    "setup_logging",
    "Payload",
    "PayloadKind",
    "prepare_body",
    "HttpMethod",
    "RequestSpec",
    "build_url",
]
