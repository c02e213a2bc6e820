from .errors import (
    DecompressionError,
    MalformedURIError,
    PayloadEncodingError,
    ReadError,
    ResponseError,
    TransportError,
    UnsuccessfulStatusError,
    WebberError,
)
from .response import Response

__all__ = [
    "DecompressionError",
    "MalformedURIError",
    "PayloadEncodingError",
    "ReadError",
    "Response",
    "ResponseError",
    "TransportError",
    "UnsuccessfulStatusError",
    "WebberError",
]
