"""thinhttp -- a thin JSON-over-HTTP client built on httpx.

A :class:`Client` is configured once from a :class:`Config` and then reused.
Its verb methods encode an input value, send the request, reject any status
outside ``200-299``, and decode the body into a caller-supplied destination::

    from thinhttp import Client, Config

    client = Client(Config(name="inventory", read_timeout=10))
    item: dict = {}
    client.get("https://api.example.com/items/1", item)

Modules:
    client: The :class:`Client` and its dispatch routine.
    config: :class:`Config` and the defaulting rules.
    codec: Default JSON encoder/decoder and error handler.
    exceptions: One exception class per failure phase.
"""

from thinhttp.client import Client
from thinhttp.codec import (
    Header,
    OutgoingRequest,
    default_error_handler,
    json_request_encoder,
    json_response_decoder,
)
from thinhttp.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, Config
from thinhttp.exceptions import (
    DecodeError,
    EncodeError,
    StatusError,
    ThinHTTPError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Config",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "DecodeError",
    "EncodeError",
    "Header",
    "OutgoingRequest",
    "StatusError",
    "ThinHTTPError",
    "TransportError",
    "default_error_handler",
    "json_request_encoder",
    "json_response_decoder",
]
