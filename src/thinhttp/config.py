"""Client configuration and defaulting rules.

:class:`Config` is a frozen pydantic model. Every field may be left at its
zero value; :meth:`Config.with_defaults` replaces zero values with the
module-level defaults below to produce the *effective* configuration a
:class:`~thinhttp.client.Client` is built from.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from thinhttp.codec import (
    ErrorHandler,
    RequestEncoder,
    ResponseDecoder,
    default_error_handler,
    json_request_encoder,
    json_response_decoder,
)

DEFAULT_USER_AGENT = "thinhttp"
"""Client name sent as the ``User-Agent`` header when none is configured."""

DEFAULT_TIMEOUT = 5.0
"""Seconds applied to any unset read or write timeout, and to connect/pool."""


class Config(BaseModel):
    """Settings for a :class:`~thinhttp.client.Client`.

    Example::

        Config(name="billing-service", read_timeout=10)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(default="", description="Client name, sent as User-Agent")
    read_timeout: float = Field(default=0, ge=0, description="Read timeout in seconds")
    write_timeout: float = Field(default=0, ge=0, description="Write timeout in seconds")
    no_default_user_agent_header: bool = Field(
        default=False, description="Do not send a User-Agent header by default"
    )
    request_encoder: Optional[RequestEncoder] = None
    response_decoder: Optional[ResponseDecoder] = None
    error_handler: Optional[ErrorHandler] = None
    transport: Optional[httpx.BaseTransport] = Field(
        default=None, description="Custom httpx transport, e.g. httpx.MockTransport"
    )

    def with_defaults(self) -> Config:
        """Return a copy with every zero-valued field replaced by its default."""
        return self.model_copy(
            update={
                "name": self.name or DEFAULT_USER_AGENT,
                "read_timeout": self.read_timeout or DEFAULT_TIMEOUT,
                "write_timeout": self.write_timeout or DEFAULT_TIMEOUT,
                "request_encoder": self.request_encoder or json_request_encoder,
                "response_decoder": self.response_decoder or json_response_decoder,
                "error_handler": self.error_handler or default_error_handler,
            }
        )
