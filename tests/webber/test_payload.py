import io
from dataclasses import dataclass
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from pydantic import BaseModel, Field

from webber import Payload, PayloadEncodingError, PayloadKind, prepare_body


class Post(BaseModel):
    user_id: int = Field(alias="userId")
    title: str


@dataclass
class Comment:
    id: int
    body: str


class ReadableStr(str):
    def read(self, size: int = -1) -> str:
        return str(self)


class TestPayloadInfer:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, PayloadKind.ABSENT),
            ("text", PayloadKind.TEXT),
            (b"bytes", PayloadKind.BYTES),
            (bytearray(b"bytes"), PayloadKind.BYTES),
            (memoryview(b"bytes"), PayloadKind.BYTES),
            (io.BytesIO(b"stream"), PayloadKind.STREAM),
            (io.StringIO("stream"), PayloadKind.STREAM),
            ({"a": 1}, PayloadKind.STRUCTURED),
            ([1, 2, 3], PayloadKind.STRUCTURED),
            (42, PayloadKind.STRUCTURED),
        ],
    )
    def test_infer_kind(self, value, kind: PayloadKind):
        assert Payload.infer(value).kind == kind

    def test_text_wins_over_stream(self):
        assert Payload.infer(ReadableStr("abc")).kind == PayloadKind.TEXT

    def test_explicit_payload_is_kept(self):
        payload = Payload.structured("already a string")

        assert Payload.infer(payload) is payload


class TestPrepareBody:
    def test_absent(self):
        assert prepare_body(None) is None

    def test_text_is_sent_unmodified(self):
        assert prepare_body("name=webber&v=ünï") == "name=webber&v=ünï".encode("utf-8")

    def test_bytes_are_sent_verbatim(self):
        assert prepare_body(b"\x00\x01\x02") == b"\x00\x01\x02"
        assert prepare_body(bytearray(b"\x03")) == b"\x03"

    def test_stream_is_passed_through(self):
        body = prepare_body(io.BytesIO(b"streamed body"))

        assert not isinstance(body, bytes)
        assert b"".join(body) == b"streamed body"

    def test_text_stream_is_encoded(self):
        body = prepare_body(io.StringIO("streamed text"))

        assert b"".join(body) == b"streamed text"

    def test_dict_is_json_encoded(self):
        assert prepare_body({"userId": 1, "title": "x"}) == b'{"userId":1,"title":"x"}'

    def test_pydantic_model_uses_aliases(self):
        body = prepare_body(Post(userId=1, title="Hello"))

        assert body == b'{"userId":1,"title":"Hello"}'

    def test_dataclass_is_json_encoded(self):
        assert prepare_body(Comment(id=3, body="nice")) == b'{"id":3,"body":"nice"}'

    def test_datetime_is_json_encoded(self):
        body = prepare_body({"at": datetime(2024, 1, 2, tzinfo=timezone.utc)})

        assert body == b'{"at":"2024-01-02T00:00:00Z"}'

    def test_explicit_structured_text_is_json_encoded(self):
        assert prepare_body(Payload.structured("hi")) == b'"hi"'

    @pytest.mark.parametrize(
        "value",
        ["text", b"bytes", io.BytesIO(b"stream"), None],
    )
    def test_specific_kinds_never_serialize(self, value):
        with patch("webber._utils._payload.to_json") as mock_to_json:
            body = prepare_body(value)
            if body is not None and not isinstance(body, bytes):
                b"".join(body)

        mock_to_json.assert_not_called()

    def test_unserializable_value(self):
        with pytest.raises(PayloadEncodingError) as exc_info:
            prepare_body(object())

        assert exc_info.value.payload_type == "object"

    def test_circular_value(self):
        value: dict = {}
        value["self"] = value

        with pytest.raises(PayloadEncodingError):
            prepare_body(value)
