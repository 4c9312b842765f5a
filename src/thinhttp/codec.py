"""Pluggable request encoding, response decoding, and error mapping.

A :class:`~thinhttp.client.Client` delegates three behaviours to plain
callables so that each instance can swap them independently:

* :data:`RequestEncoder` -- ``(request, value) -> None``. Serialises *value*
  into :attr:`OutgoingRequest.content` and sets any content headers.
* :data:`ResponseDecoder` -- ``(response, out) -> None``. Parses the body of
  an :class:`httpx.Response` into the caller-supplied destination *out*.
* :data:`ErrorHandler` -- ``(response) -> Exception``. Builds the exception
  raised for a response whose status is outside ``200-299``.

The defaults defined here speak JSON. Serialisation goes through
:func:`pydantic_core.to_json` and validation of typed destinations through
:class:`pydantic.TypeAdapter`, so pydantic models, dataclasses, and plain
dicts/lists are all supported on both sides.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic_core import to_json

from thinhttp.exceptions import StatusError

Header = Mapping[str, str]
"""Header name to header value. Keys are unique; order carries no meaning."""

JSON_CONTENT_TYPE = "application/json"


@dataclass
class OutgoingRequest:
    """Mutable request under construction, handed to the request encoder.

    Attributes:
        method: HTTP method token (e.g. ``"POST"``).
        url: Absolute target URI.
        headers: Request headers. Values set here override the transport's
            default headers of the same name.
        content: Encoded request body, or ``None`` for no body.
    """

    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: Optional[bytes] = None


RequestEncoder = Callable[[OutgoingRequest, Any], None]
ResponseDecoder = Callable[[httpx.Response, Any], None]
ErrorHandler = Callable[[httpx.Response], Exception]


def json_request_encoder(request: OutgoingRequest, value: Any) -> None:
    """Serialise *value* as JSON into the request body.

    Args:
        request: The request being built.
        value: Any value :func:`pydantic_core.to_json` accepts -- pydantic
            models, dataclasses, mappings, sequences, and scalars.

    Raises:
        pydantic_core.PydanticSerializationError: If *value* is not
            serialisable.
    """
    request.content = to_json(value)
    request.headers["Content-Type"] = JSON_CONTENT_TYPE


def json_response_decoder(response: httpx.Response, out: Any) -> None:
    """Parse the response body as JSON and populate *out* in place.

    * ``dict`` -- updated with the decoded object.
    * ``list`` -- contents replaced by the decoded array.
    * pydantic model or dataclass instance -- the decoded object is merged
      over the current field values, validated against the destination's
      type, and every field is assigned back. Fields absent from the body
      keep their current values.

    Raises:
        ValueError: If the body is not valid JSON or fails validation.
        TypeError: If the JSON shape does not fit *out*, or *out* is of an
            unsupported type.
    """
    data = response.json()

    if isinstance(out, dict):
        _expect(data, dict, out)
        out.update(data)
    elif isinstance(out, list):
        _expect(data, list, out)
        out[:] = data
    elif isinstance(out, BaseModel):
        _expect(data, dict, out)
        merged = type(out).model_validate({**out.model_dump(by_alias=True), **data})
        for name in type(out).model_fields:
            setattr(out, name, getattr(merged, name))
    elif dataclasses.is_dataclass(out) and not isinstance(out, type):
        _expect(data, dict, out)
        names = [f.name for f in dataclasses.fields(out)]
        current = {name: getattr(out, name) for name in names}
        merged = TypeAdapter(type(out)).validate_python({**current, **data})
        for name in names:
            setattr(out, name, getattr(merged, name))
    else:
        raise TypeError(f"unsupported decode destination: {type(out).__name__}")


def _expect(data: Any, kind: type, out: Any) -> None:
    if not isinstance(data, kind):
        raise TypeError(
            f"cannot decode JSON {type(data).__name__} into {type(out).__name__}"
        )


def default_error_handler(response: httpx.Response) -> Exception:
    """Return a :class:`~thinhttp.exceptions.StatusError` for *response*."""
    return StatusError(response.status_code, response.content)
