"""Transport wrappers and client factories.

httpx event hooks only fire for requests that produce a response. Connection
failures, timeouts and other transport errors are raised past them, so the
wrappers here report those to PrettyHttpxLogger.on_error() and re-raise the
original exception unchanged.
"""

from __future__ import annotations

__all__ = [
    "AsyncLoggingTransport",
    "LoggingTransport",
    "create_async_client",
    "create_client",
]

from typing import Any, Callable

import httpx

from pretty_httpx_logger.interceptor import PrettyHttpxLogger


class LoggingTransport(httpx.BaseTransport):
    """Sync transport that prints transport errors before re-raising them.

    Args:
        logger: The PrettyHttpxLogger to report to.
        transport: Wrapped transport. Defaults to httpx.HTTPTransport().
    """

    def __init__(self, logger: PrettyHttpxLogger, transport: httpx.BaseTransport | None = None) -> None:
        self._logger = logger
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        try:
            return self._transport.handle_request(request)
        except httpx.TransportError as e:
            self._logger.on_error(e, request)
            raise

    def close(self) -> None:
        self._transport.close()


class AsyncLoggingTransport(httpx.AsyncBaseTransport):
    """Async transport that prints transport errors before re-raising them.

    Args:
        logger: The PrettyHttpxLogger to report to.
        transport: Wrapped transport. Defaults to httpx.AsyncHTTPTransport().
    """

    def __init__(self, logger: PrettyHttpxLogger, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._logger = logger
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._transport.handle_async_request(request)
        except httpx.TransportError as e:
            self._logger.on_error(e, request)
            raise

    async def aclose(self) -> None:
        await self._transport.aclose()


def _merge_hooks(
    ours: dict[str, list[Callable[..., Any]]],
    theirs: dict[str, list[Callable[..., Any]]] | None,
) -> dict[str, list[Callable[..., Any]]]:
    """User hooks run first so they see requests before they are printed."""
    merged: dict[str, list[Callable[..., Any]]] = {event: list(hooks) for event, hooks in (theirs or {}).items()}
    for event, hooks in ours.items():
        merged.setdefault(event, []).extend(hooks)
    return merged


def create_client(
    logger: PrettyHttpxLogger | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    event_hooks: dict[str, list[Callable[..., Any]]] | None = None,
    **kwargs: Any,
) -> httpx.Client:
    """Create an httpx.Client that prints its traffic.

    Args:
        logger: Logger to use. Defaults to PrettyHttpxLogger().
        transport: Transport to wrap. Defaults to httpx.HTTPTransport().
        event_hooks: Additional hooks, run before the logger's.
        **kwargs: Passed through to httpx.Client.

    Returns:
        Configured httpx.Client.
    """
    logger = logger or PrettyHttpxLogger()
    return httpx.Client(
        transport=LoggingTransport(logger, transport),
        event_hooks=_merge_hooks(logger.event_hooks, event_hooks),
        **kwargs,
    )


def create_async_client(
    logger: PrettyHttpxLogger | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    event_hooks: dict[str, list[Callable[..., Any]]] | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient that prints its traffic.

    Args:
        logger: Logger to use. Defaults to PrettyHttpxLogger().
        transport: Transport to wrap. Defaults to httpx.AsyncHTTPTransport().
        event_hooks: Additional hooks (async callables), run before the logger's.
        **kwargs: Passed through to httpx.AsyncClient.

    Returns:
        Configured httpx.AsyncClient.
    """
    logger = logger or PrettyHttpxLogger()
    return httpx.AsyncClient(
        transport=AsyncLoggingTransport(logger, transport),
        event_hooks=_merge_hooks(logger.async_event_hooks, event_hooks),
        **kwargs,
    )
