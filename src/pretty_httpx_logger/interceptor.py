"""PrettyHttpxLogger: boxed, colorized transcripts of httpx traffic.

Attach to a client through its event hooks:

    logger = PrettyHttpxLogger(LoggerConfig(request_body=True))
    client = httpx.Client(event_hooks=logger.event_hooks)
    # or: logger.attach(client)

Output for a JSON response (defaults):

    ╔╣ Request ║ GET
    ║  https://api.example.com/users/7
    ╚══════ … ══════╝
    ╔╣ Response ║ GET ║ Status: 200 OK  ║ Time: 42 ms
    ║  https://api.example.com/users/7
    ╚══════ … ══════╝
    ╔ Body
    ║
    ║    {
    ║         "id": 7
    ║    }
    ║
    ╚══════ … ══════╝

The logger only observes. It never changes requests or responses, and any
exception raised while printing is reported to the system logger instead of
propagating into the HTTP call. 4xx/5xx responses are printed as errors.

Transport failures never reach event hooks; wrap the transport with
LoggingTransport (see transport.py) to have them printed through on_error().
"""

from __future__ import annotations

__all__ = ["PrettyHttpxLogger"]

import logging
import re
import time
import weakref
from collections.abc import Mapping
from typing import Any, Callable, Iterable

import httpx

from pretty_httpx_logger.body import read_request_body, read_response_body
from pretty_httpx_logger.config import LoggerConfig
from pretty_httpx_logger.constants import BOX_TOP, MARGIN
from pretty_httpx_logger.filters import FilterArgs, TrafficFilter
from pretty_httpx_logger.printer import PrettyPrinter, Sink
from pretty_httpx_logger.utils.logging.sinks import colored_sink, console_sink
from pretty_httpx_logger.utils.logging.system_logger import get_system_logger

_BOUNDARY = re.compile(r"boundary=\"?([^\";]+)", re.IGNORECASE)


class PrettyHttpxLogger:
    """Observer for httpx request/response/error events.

    Args:
        config: What to print and how. Defaults to LoggerConfig().
        emit: Sink receiving each line. Defaults to click.echo on stdout.
        filter: Optional callable; returning False skips printing for that event.
        system_logger: Logger for rendering failures. If None, uses singleton.
        clock: Monotonic clock in seconds, used for response times.
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        emit: Sink | None = None,
        filter: TrafficFilter | None = None,
        system_logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or LoggerConfig()
        self.filter = filter
        self._emit = emit or console_sink()
        self._printer = PrettyPrinter(self.config.format)
        self._system_logger = system_logger or get_system_logger()
        self._clock = clock
        # Start times, keyed weakly so finished requests don't accumulate
        self._started: weakref.WeakKeyDictionary[httpx.Request, float] = weakref.WeakKeyDictionary()

    # ==================== Wiring ====================

    @property
    def event_hooks(self) -> dict[str, list[Callable[..., Any]]]:
        """Hooks for httpx.Client(event_hooks=...)."""
        return {"request": [self.on_request], "response": [self.on_response]}

    @property
    def async_event_hooks(self) -> dict[str, list[Callable[..., Any]]]:
        """Hooks for httpx.AsyncClient(event_hooks=...)."""
        return {"request": [self.aon_request], "response": [self.aon_response]}

    def attach(self, client: httpx.Client | httpx.AsyncClient) -> None:
        """Append this logger's hooks to an existing client."""
        hooks = client.event_hooks
        new_hooks = self.async_event_hooks if isinstance(client, httpx.AsyncClient) else self.event_hooks
        for event, callbacks in new_hooks.items():
            hooks.setdefault(event, []).extend(callbacks)
        client.event_hooks = hooks

    # ==================== Hooks ====================

    def on_request(self, request: httpx.Request) -> None:
        """Request hook: record the start time and print the request."""
        self._started[request] = self._clock()
        if not self.config.enabled:
            return
        try:
            if self._needs_request_body():
                _buffer_multipart(request)
            self._log_request(request)
        except Exception as e:
            self._report_failure("request", e)

    def on_response(self, response: httpx.Response) -> None:
        """Response hook (sync clients): read the body and print the response.

        Errors while reading the body (timeouts, dropped connections)
        propagate to the caller unchanged; only printing is guarded.
        """
        if not self.config.enabled:
            return
        if self._needs_body(response):
            response.read()
        try:
            self._log_response(response)
        except Exception as e:
            self._report_failure("response", e)

    async def aon_request(self, request: httpx.Request) -> None:
        """Request hook for async clients."""
        self._started[request] = self._clock()
        if not self.config.enabled:
            return
        try:
            if self._needs_request_body():
                await _abuffer_multipart(request)
            self._log_request(request)
        except Exception as e:
            self._report_failure("request", e)

    async def aon_response(self, response: httpx.Response) -> None:
        """Response hook (async clients): read the body and print the response.

        Body read errors propagate unchanged, as in on_response().
        """
        if not self.config.enabled:
            return
        if self._needs_body(response):
            await response.aread()
        try:
            self._log_response(response)
        except Exception as e:
            self._report_failure("response", e)

    def on_error(self, exc: BaseException, request: httpx.Request | None = None) -> None:
        """Print an error raised around a request.

        HTTPStatusError is printed with its status, timing and (already read)
        body. Anything else is printed as a box with the exception type and
        message.

        Args:
            exc: The exception.
            request: The request it belongs to, if exc does not carry one.
        """
        if not self.config.enabled:
            return
        try:
            self._log_error(exc, request)
        except Exception as e:
            self._report_failure("error", e)

    # ==================== Request ====================

    def _needs_request_body(self) -> bool:
        return self.config.request_body or self.filter is not None

    def _log_request(self, request: httpx.Request) -> None:
        data = read_request_body(request)
        if not self._accepts(request, FilterArgs(is_response=False, data=data)):
            return

        cfg = self.config
        if cfg.request:
            self._write(
                "request",
                self._printer.print_boxed(f"Request {MARGIN} {request.method} ", str(request.url)),
            )

        if cfg.request_header:
            headers: dict[str, Any] = dict(request.headers.items())
            extensions = dict(request.extensions)
            timeout = extensions.pop("timeout", None)
            if timeout is not None:
                headers["timeout"] = timeout

            self._write(
                "header",
                self._printer.print_table(request.url.params, header="Query Parameters"),
                self._printer.print_table(headers, header="Headers"),
                self._printer.print_table(extensions, header="Extensions"),
            )

        if cfg.request_body and request.method != "GET" and data is not None:
            self._write("body", self._request_body_lines(request, data))

    def _request_body_lines(self, request: httpx.Request, data: Any) -> Iterable[str]:
        content_type = request.headers.get("content-type", "")

        if isinstance(data, Mapping):
            yield from self._printer.print_table(data, header="Body")
        elif "x-www-form-urlencoded" in content_type and isinstance(data, str):
            yield from self._printer.print_table(httpx.QueryParams(data), header="Form data")
        elif "multipart/form-data" in content_type:
            match = _BOUNDARY.search(content_type)
            boundary = match.group(1) if match else ""
            yield f"{BOX_TOP} Form data | {boundary} "
            yield from self._printer.iter_lines(data)
            yield from self._printer.print_rule()
        else:
            yield from self._printer.iter_lines(data)

    # ==================== Response ====================

    def _needs_body(self, response: httpx.Response) -> bool:
        cfg = self.config
        return cfg.response_body or self.filter is not None or (cfg.error and response.is_error)

    def _log_response(self, response: httpx.Response) -> None:
        data = read_response_body(response)
        if not self._accepts(response.request, FilterArgs(is_response=True, data=data)):
            return

        if response.is_error:
            if self.config.error:
                self._log_status_error(response, data, "HTTPStatusError")
            return

        request = response.request
        elapsed = self._elapsed_ms(request)
        header = (
            f"Response {MARGIN} {request.method} {MARGIN} "
            f"Status: {response.status_code} {response.reason_phrase}  {MARGIN} Time: {elapsed} ms"
        )
        self._write("response_status", self._printer.print_boxed(header, str(request.url)))

        if self.config.response_header:
            headers = {key: ", ".join(response.headers.get_list(key)) for key in response.headers.keys()}
            self._write("response_header", self._printer.print_table(headers, header="Headers"))

        if self.config.response_body:
            self._write("response", self._body_section(data))

    def _body_section(self, data: Any) -> Iterable[str]:
        yield f"{BOX_TOP} Body"
        yield MARGIN
        if data is not None:
            yield from self._printer.iter_lines(data)
        yield MARGIN
        yield from self._printer.print_rule()

    # ==================== Errors ====================

    def _log_error(self, exc: BaseException, request: httpx.Request | None) -> None:
        if isinstance(exc, httpx.HTTPStatusError):
            response = exc.response
            data = read_response_body(response)
            if not self._accepts(response.request, FilterArgs(is_response=True, data=data)):
                return
            if self.config.error:
                self._log_status_error(response, data, type(exc).__name__)
            return

        request = request or _request_of(exc)
        if request is not None and not self._accepts(request, FilterArgs(is_response=True, data=None)):
            return
        if not self.config.error:
            return

        text = str(exc) or (str(request.url) if request is not None else "")
        self._write("error", self._printer.print_boxed(f"HTTPError {MARGIN} {type(exc).__name__}", text))

    def _log_status_error(self, response: httpx.Response, data: Any, error_type: str) -> None:
        elapsed = self._elapsed_ms(response.request)
        header = (
            f"{error_type} {MARGIN} Status: {response.status_code} {response.reason_phrase} "
            f"{MARGIN} Time: {elapsed} ms"
        )
        self._write("error", self._status_error_lines(header, str(response.request.url), data, error_type))

    def _status_error_lines(self, header: str, url: str, data: Any, error_type: str) -> Iterable[str]:
        yield from self._printer.print_boxed(header, url)
        if data is not None:
            yield f"{BOX_TOP} {error_type}"
            yield from self._printer.iter_lines(data)
        yield from self._printer.print_rule()
        yield ""

    # ==================== Helpers ====================

    def _accepts(self, request: httpx.Request, args: FilterArgs) -> bool:
        return self.filter is None or bool(self.filter(request, args))

    def _elapsed_ms(self, request: httpx.Request) -> int:
        started = self._started.get(request)
        if started is None:
            return 0
        return int((self._clock() - started) * 1000)

    def _write(self, section: str, *blocks: Iterable[str]) -> None:
        emit = colored_sink(self._emit, self.config.colors.resolve(section))
        for block in blocks:
            for line in block:
                emit(line)

    def _report_failure(self, stage: str, error: Exception) -> None:
        self._system_logger.warning(
            {
                "event": "pretty_log_failed",
                "stage": stage,
                "error_type": type(error).__name__,
                "error": str(error)[:200],
                "message": f"Failed to print HTTP {stage}",
            }
        )


def _request_of(exc: BaseException) -> httpx.Request | None:
    """The request attached to an httpx exception, if any."""
    if not isinstance(exc, httpx.RequestError):
        return None
    try:
        return exc.request
    except RuntimeError:
        # Not attached yet (raised inside a transport)
        return None


def _buffer_multipart(request: httpx.Request) -> None:
    """Load a multipart body so it can be printed.

    httpx regenerates multipart streams from their fields, so reading one here
    leaves the bytes sent on the wire unchanged. Other streams are left alone.
    """
    if "multipart/form-data" not in request.headers.get("content-type", ""):
        return
    try:
        request.content
    except httpx.RequestNotRead:
        request.read()


async def _abuffer_multipart(request: httpx.Request) -> None:
    """Async variant of _buffer_multipart(), reading without blocking the loop."""
    if "multipart/form-data" not in request.headers.get("content-type", ""):
        return
    try:
        request.content
    except httpx.RequestNotRead:
        await request.aread()
