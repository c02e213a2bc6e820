from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .response import Response


class WebberError(Exception):
    """Base class for every error raised by webber."""


class MalformedURIError(WebberError):
    def __init__(self, uri: str, reason: Optional[str] = None) -> None:
        self.uri = uri
        self.message = f"Malformed URI {uri!r}" + (f": {reason}" if reason else "")
        super().__init__(self.message)


class PayloadEncodingError(WebberError):
    """Raised when a structured payload cannot be serialized to JSON."""

    def __init__(self, payload_type: str, reason: str) -> None:
        self.payload_type = payload_type
        self.message = f"Could not encode payload of type {payload_type}: {reason}"
        super().__init__(self.message)


class ResponseError(WebberError):
    """An error that still carries the (possibly empty) response.

    Callers can inspect ``error.response`` for the status code, headers and
    whatever body was read before the failure.
    """

    def __init__(self, message: str, response: "Response") -> None:
        self.message = message
        self.response = response
        super().__init__(self.message)


class TransportError(ResponseError):
    """Connection, DNS, TLS or timeout failure. No status code is available."""


class UnsuccessfulStatusError(ResponseError):
    """The transport succeeded but the status code is outside [200, 300)."""

    def __init__(self, response: "Response") -> None:
        content = (
            response.data.decode("utf-8", errors="replace")
            if response.data
            else "No content"
        )

        enriched_message = (
            "The response was unsuccessful"
            f"\nRequest URL: {response.url or 'Unknown'}"
            f"\nStatus Code: {response.status_code}"
            f"\nResponse Content: {content}"
        )

        super().__init__(enriched_message, response)

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code


class ReadError(ResponseError):
    """Draining the response body failed."""


class DecompressionError(ReadError):
    """The response body could not be gzip-decompressed."""
