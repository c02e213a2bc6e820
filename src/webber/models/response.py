import zlib
from contextlib import closing
from io import BytesIO
from typing import Optional

import httpx

from .._utils.constants import GZIP_ENCODINGS, HEADER_CONTENT_ENCODING
from .errors import DecompressionError, ReadError


def _gzip_decompressor() -> "zlib._Decompress":
    return zlib.decompressobj(zlib.MAX_WBITS | 16)


class Response:
    """The outcome of a single request, with the body fully buffered.

    A ``Response`` always exists, even when the transport failed before
    producing anything. In that case ``raw`` is ``None``, there is no status
    code and ``data`` stays ``None``.

    Attributes:
        raw: The underlying ``httpx.Response``, if any.
        data: The materialized body, set by :meth:`read`.
    """

    def __init__(self, raw: Optional[httpx.Response] = None) -> None:
        self.raw = raw
        self.data: Optional[bytes] = None

    @property
    def status_code(self) -> Optional[int]:
        return self.raw.status_code if self.raw is not None else None

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers if self.raw is not None else httpx.Headers()

    @property
    def url(self) -> Optional[str]:
        if self.raw is None:
            return None
        try:
            return str(self.raw.request.url)
        except RuntimeError:
            # httpx.Response built without a request
            return None

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    def read(self, uncompress: bool = False) -> None:
        """Drains the response body into :attr:`data`.

        The raw stream is closed on every exit path. When ``uncompress`` is
        set and the ``Content-Encoding`` header is ``gzip`` or ``agzip``, the
        body is gunzipped while it is drained. Any other encoding is left
        untouched.

        Reading a response without an underlying ``httpx.Response`` or one
        that was already read is a no-op.

        Args:
            uncompress (bool): Whether gzip bodies should be decompressed.

        Raises:
            DecompressionError: If the body is not a valid gzip stream.
            ReadError: If the body stream fails while being drained.
        """
        if self.raw is None or self.data is not None:
            return

        with closing(self.raw):
            content_encoding = self.raw.headers.get(HEADER_CONTENT_ENCODING, "")
            if uncompress and content_encoding in GZIP_ENCODINGS:
                self.data = self._drain_gzip()
            else:
                self.data = self._drain()

    def _drain(self) -> bytes:
        buffer = BytesIO()
        try:
            # iter_raw skips httpx's own content decoding
            for chunk in self.raw.iter_raw():
                buffer.write(chunk)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise ReadError(f"Failed to read response body: {e}", self) from e
        return buffer.getvalue()

    def _drain_gzip(self) -> bytes:
        buffer = BytesIO()
        decompressor = _gzip_decompressor()
        try:
            for chunk in self.raw.iter_raw():
                # a body can hold several concatenated gzip members
                while chunk:
                    if decompressor.eof:
                        decompressor = _gzip_decompressor()
                    buffer.write(decompressor.decompress(chunk))
                    chunk = decompressor.unused_data if decompressor.eof else b""
            buffer.write(decompressor.flush())
        except zlib.error as e:
            raise DecompressionError(
                f"Failed to decompress response body: {e}", self
            ) from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise ReadError(f"Failed to read response body: {e}", self) from e

        if not decompressor.eof:
            raise DecompressionError(
                "Failed to decompress response body: truncated gzip stream", self
            )
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Response [{self.status_code if self.raw is not None else 'no response'}]>"
