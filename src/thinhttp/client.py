"""Synchronous HTTP client with pluggable encoding, decoding, and error mapping.

This module provides :class:`Client`, a thin layer over :class:`httpx.Client`.
Each verb method funnels into one dispatch routine that:

1. builds the request and applies caller headers over the defaults,
2. encodes the input value, if any, with the configured encoder,
3. sends the request through the transport,
4. routes any status outside ``200-299`` to the configured error handler,
5. decodes the body into the output destination, if any.

Connection pooling, TLS and timeout enforcement are left to httpx. Redirects
are not followed, so a 3xx response reaches the error handler.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from thinhttp.codec import Header, OutgoingRequest
from thinhttp.config import DEFAULT_TIMEOUT, Config
from thinhttp.exceptions import DecodeError, EncodeError, TransportError

logger = logging.getLogger(__name__)


class Client:
    """HTTP client whose verb methods raise on failure and return ``None``.

    A client holds no per-call state and may be shared between threads.
    Use it as a context manager, or call :meth:`close`, to release pooled
    connections.

    Args:
        config: Client settings. Zero-valued fields are replaced by defaults;
            ``None`` means all defaults.

    Example::

        with Client(Config(name="inventory")) as client:
            item: dict[str, Any] = {}
            client.get("https://api.example.com/items/1", item)
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._config = (config or Config()).with_defaults()
        cfg = self._config
        self._client = httpx.Client(
            timeout=httpx.Timeout(
                DEFAULT_TIMEOUT, read=cfg.read_timeout, write=cfg.write_timeout
            ),
            headers={"User-Agent": cfg.name},
            transport=cfg.transport,
        )
        if cfg.no_default_user_agent_header:
            del self._client.headers["User-Agent"]
        self._request_encoder = cfg.request_encoder
        self._response_decoder = cfg.response_decoder
        self._error_handler = cfg.error_handler

    @property
    def config(self) -> Config:
        """The effective configuration, with all defaults applied."""
        return self._config

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport and its pooled connections."""
        self._client.close()

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def get(self, uri: str, out: Any = None, headers: Optional[Header] = None) -> None:
        """Send a GET request and decode the body into *out* when given."""
        self._do(uri, "GET", None, out, headers)

    def post(
        self,
        uri: str,
        payload: Any = None,
        out: Any = None,
        headers: Optional[Header] = None,
    ) -> None:
        """Send a POST request with *payload* encoded as the body."""
        self._do(uri, "POST", payload, out, headers)

    def put(
        self,
        uri: str,
        payload: Any = None,
        out: Any = None,
        headers: Optional[Header] = None,
    ) -> None:
        """Send a PUT request with *payload* encoded as the body."""
        self._do(uri, "PUT", payload, out, headers)

    def patch(
        self,
        uri: str,
        payload: Any = None,
        out: Any = None,
        headers: Optional[Header] = None,
    ) -> None:
        """Send a PATCH request with *payload* encoded as the body."""
        self._do(uri, "PATCH", payload, out, headers)

    def delete(
        self,
        uri: str,
        payload: Any = None,
        out: Any = None,
        headers: Optional[Header] = None,
    ) -> None:
        """Send a DELETE request, with *payload* encoded as the body if given."""
        self._do(uri, "DELETE", payload, out, headers)

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #

    def _do(
        self,
        uri: str,
        method: str,
        payload: Any,
        out: Any,
        headers: Optional[Header],
    ) -> None:
        """Run one request/response exchange.

        Args:
            uri: Absolute target URI.
            method: HTTP method token.
            payload: Value to encode as the body; ``None`` sends no body.
            out: Destination the decoder populates; ``None`` skips decoding.
            headers: Headers applied over the client's default headers.

        Raises:
            EncodeError: The encoder failed. Nothing was sent.
            TransportError: The network exchange failed or timed out.
            DecodeError: The body of a 2xx response could not be decoded.
            Exception: Whatever the error handler returns for a non-2xx
                status, raised as is (by default a
                :class:`~thinhttp.exceptions.StatusError`).
        """
        request = OutgoingRequest(method=method, url=uri)
        for key, value in (headers or {}).items():
            request.headers[key] = value

        if payload is not None:
            try:
                self._request_encoder(request, payload)
            except Exception as exc:
                logger.debug("%s %s: encode failed: %s", method, uri, exc)
                raise EncodeError(f"encode request failed: {exc}", cause=exc) from exc

        logger.debug("%s %s", method, uri)
        response: Optional[httpx.Response] = None
        try:
            try:
                response = self._client.send(
                    self._client.build_request(
                        request.method,
                        request.url,
                        headers=request.headers,
                        content=request.content,
                    )
                )
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                logger.debug("%s %s: send failed: %s", method, uri, exc)
                raise TransportError(f"send request failed: {exc}", cause=exc) from exc

            status = response.status_code
            logger.debug("%s %s -> %d", method, uri, status)
            if status < 200 or status > 299:
                raise self._error_handler(response)

            if out is not None:
                try:
                    self._response_decoder(response, out)
                except Exception as exc:
                    logger.debug("%s %s: decode failed: %s", method, uri, exc)
                    raise DecodeError(
                        f"decode response failed: {exc}", cause=exc
                    ) from exc
        finally:
            if response is not None:
                response.close()
