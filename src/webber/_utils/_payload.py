from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Union

from pydantic_core import PydanticSerializationError, to_json

from ..models.errors import PayloadEncodingError

STREAM_CHUNK_SIZE = 64 * 1024

Body = Union[bytes, Iterator[bytes]]


class PayloadKind(str, Enum):
    ABSENT = "absent"
    TEXT = "text"
    BYTES = "bytes"
    STREAM = "stream"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class Payload:
    """A request payload tagged with how it should be turned into a body.

    Build one explicitly with the constructors below, or let
    :meth:`Payload.infer` pick the kind from the value's shape.
    """

    kind: PayloadKind
    value: Any = None

    @classmethod
    def absent(cls) -> "Payload":
        return cls(PayloadKind.ABSENT)

    @classmethod
    def text(cls, value: str) -> "Payload":
        return cls(PayloadKind.TEXT, value)

    @classmethod
    def binary(cls, value: Union[bytes, bytearray, memoryview]) -> "Payload":
        return cls(PayloadKind.BYTES, value)

    @classmethod
    def stream(cls, value: Any) -> "Payload":
        return cls(PayloadKind.STREAM, value)

    @classmethod
    def structured(cls, value: Any) -> "Payload":
        return cls(PayloadKind.STRUCTURED, value)

    @classmethod
    def infer(cls, value: Any) -> "Payload":
        """Classifies a raw value.

        The checks run in a fixed priority order and the structured case is
        the catch-all, so a value is only JSON-encoded when nothing more
        specific matched:

        1. ``None`` -> absent
        2. ``str`` -> text
        3. ``bytes``, ``bytearray``, ``memoryview`` -> bytes
        4. anything with a callable ``read`` -> stream
        5. everything else -> structured
        """
        if isinstance(value, Payload):
            return value
        if value is None:
            return cls.absent()
        if isinstance(value, str):
            return cls.text(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.binary(value)
        if callable(getattr(value, "read", None)):
            return cls.stream(value)
        return cls.structured(value)


def _iter_stream(stream: Any) -> Iterator[bytes]:
    while True:
        chunk = stream.read(STREAM_CHUNK_SIZE)
        if not chunk:
            return
        yield chunk.encode("utf-8") if isinstance(chunk, str) else bytes(chunk)


def prepare_body(payload: Any) -> Optional[Body]:
    """Turns a payload into something the transport can send.

    Args:
        payload: A :class:`Payload` or any raw value, classified with
            :meth:`Payload.infer`.

    Returns:
        ``None`` for no body, ``bytes`` for text, binary and structured
        payloads, or a chunk iterator for streams. Streams are consumed by
        the transport, the caller keeps ownership of closing them.

    Raises:
        PayloadEncodingError: If a structured payload cannot be serialized.
    """
    payload = Payload.infer(payload)

    if payload.kind == PayloadKind.ABSENT:
        return None
    if payload.kind == PayloadKind.TEXT:
        return payload.value.encode("utf-8")
    if payload.kind == PayloadKind.BYTES:
        return bytes(payload.value)
    if payload.kind == PayloadKind.STREAM:
        return _iter_stream(payload.value)

    try:
        return to_json(payload.value, by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise PayloadEncodingError(type(payload.value).__name__, str(e)) from e
