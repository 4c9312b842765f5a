"""Tests for the default JSON codec and error handler."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx
import pytest
from pydantic import BaseModel, Field

from thinhttp.codec import (
    OutgoingRequest,
    default_error_handler,
    json_request_encoder,
    json_response_decoder,
)
from thinhttp.exceptions import StatusError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class Item(BaseModel):
    name: str = ""
    count: int = 0
    tags: list[str] = Field(default_factory=list)


@dataclass
class Point:
    x: int = 0
    y: int = 0
    labels: list[str] = field(default_factory=list)


def _response(content: bytes, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=content,
        request=httpx.Request("GET", "https://api.example.com/test"),
    )


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------


class TestJsonRequestEncoder:
    def test_encodes_dict(self) -> None:
        request = OutgoingRequest(method="POST", url="https://api.example.com/items")
        json_request_encoder(request, {"name": "a", "count": 2})
        assert json.loads(request.content) == {"name": "a", "count": 2}
        assert request.headers["content-type"] == "application/json"

    def test_encodes_pydantic_model(self) -> None:
        request = OutgoingRequest(method="POST", url="https://api.example.com/items")
        json_request_encoder(request, Item(name="a", count=1, tags=["x"]))
        assert json.loads(request.content) == {"name": "a", "count": 1, "tags": ["x"]}

    def test_encodes_dataclass(self) -> None:
        request = OutgoingRequest(method="PUT", url="https://api.example.com/points/1")
        json_request_encoder(request, Point(x=1, y=2))
        assert json.loads(request.content) == {"x": 1, "y": 2, "labels": []}

    def test_overrides_existing_content_type(self) -> None:
        request = OutgoingRequest(method="POST", url="https://api.example.com/items")
        request.headers["Content-Type"] = "text/plain"
        json_request_encoder(request, [1, 2])
        assert request.headers["content-type"] == "application/json"

    def test_unserialisable_value_raises(self) -> None:
        request = OutgoingRequest(method="POST", url="https://api.example.com/items")
        with pytest.raises(ValueError):
            json_request_encoder(request, object())


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class TestJsonResponseDecoder:
    def test_decodes_into_dict(self) -> None:
        out = {"kept": True}
        json_response_decoder(_response(b'{"x": 1}'), out)
        assert out == {"kept": True, "x": 1}

    def test_decodes_into_list(self) -> None:
        out = ["stale"]
        json_response_decoder(_response(b"[1, 2, 3]"), out)
        assert out == [1, 2, 3]

    def test_decodes_into_pydantic_model(self) -> None:
        out = Item(name="old", count=5)
        json_response_decoder(_response(b'{"count": 9, "tags": ["a"]}'), out)
        assert out.name == "old"
        assert out.count == 9
        assert out.tags == ["a"]

    def test_decodes_into_dataclass(self) -> None:
        out = Point(y=4)
        json_response_decoder(_response(b'{"x": 1}'), out)
        assert out == Point(x=1, y=4)

    def test_invalid_json_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            json_response_decoder(_response(b"not json"), {})

    def test_shape_mismatch_raises_type_error(self) -> None:
        out: dict = {}
        with pytest.raises(TypeError):
            json_response_decoder(_response(b"[1]"), out)
        assert out == {}

    def test_validation_failure_leaves_model_untouched(self) -> None:
        out = Item(name="old", count=5)
        with pytest.raises(ValueError):
            json_response_decoder(_response(b'{"count": "many"}'), out)
        assert out.count == 5

    def test_unsupported_destination_raises(self) -> None:
        with pytest.raises(TypeError):
            json_response_decoder(_response(b"1"), 0)


class TestRoundTrip:
    def test_model_survives_encode_then_decode(self) -> None:
        original = Item(name="widget", count=3, tags=["a", "b"])
        request = OutgoingRequest(method="POST", url="https://api.example.com/items")
        json_request_encoder(request, original)

        decoded = Item()
        json_response_decoder(_response(request.content), decoded)
        assert decoded.model_dump() == original.model_dump()


# ---------------------------------------------------------------------------
# Error handler
# ---------------------------------------------------------------------------


class TestDefaultErrorHandler:
    def test_carries_status_and_body(self) -> None:
        err = default_error_handler(_response(b"not found", status_code=404))
        assert isinstance(err, StatusError)
        assert err.status_code == 404
        assert err.body == b"not found"
        assert err.text == "not found"
        assert "404" in str(err)
        assert "not found" in str(err)

    def test_empty_body(self) -> None:
        err = default_error_handler(_response(b"", status_code=503))
        assert err.status_code == 503
        assert err.body == b""
