"""Tests for the logging transports and client factories."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from pretty_httpx_logger.config import FormatOptions, LoggerConfig
from pretty_httpx_logger.interceptor import PrettyHttpxLogger
from pretty_httpx_logger.transport import (
    AsyncLoggingTransport,
    LoggingTransport,
    create_async_client,
    create_client,
)

URL = "https://api.test/ping"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def lines() -> list[str]:
    return []


@pytest.fixture
def logger(lines: list[str]) -> PrettyHttpxLogger:
    config = LoggerConfig(format=FormatOptions(max_width=20))
    return PrettyHttpxLogger(config, emit=lines.append, system_logger=MagicMock())


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused")


def ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="pong")


# ============================================================================
# Sync
# ============================================================================


class TestCreateClient:
    """Tests for create_client and LoggingTransport."""

    def test_prints_traffic(self, logger: PrettyHttpxLogger, lines: list[str]) -> None:
        # Act
        with create_client(logger, transport=httpx.MockTransport(ok)) as client:
            client.get(URL)

        # Assert
        assert lines[0] == "╔╣ Request ║ GET "
        assert "║ pong" in lines

    def test_transport_error_is_printed_and_reraised(self, logger: PrettyHttpxLogger, lines: list[str]) -> None:
        # Act
        with create_client(logger, transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(httpx.ConnectError, match="connection refused"):
                client.get(URL)

        # Assert
        assert lines[3:] == ["╔╣ HTTPError ║ ConnectError", "║  connection refused", "╚" + "═" * 20 + "╝"]

    def test_user_hooks_run_before_logger(self, logger: PrettyHttpxLogger, lines: list[str]) -> None:
        # Arrange
        order: list[str] = []

        def user_hook(request: httpx.Request) -> None:
            order.append(f"user:{len(lines)}")

        # Act
        with create_client(
            logger, transport=httpx.MockTransport(ok), event_hooks={"request": [user_hook]}
        ) as client:
            client.get(URL)

        # Assert
        assert order == ["user:0"]

    def test_passes_client_options_through(self, logger: PrettyHttpxLogger) -> None:
        with create_client(logger, transport=httpx.MockTransport(ok), base_url="https://api.test") as client:
            assert client.get("/ping").status_code == 200

    def test_close_is_delegated(self, logger: PrettyHttpxLogger) -> None:
        # Arrange
        inner = MagicMock(spec=httpx.BaseTransport)
        transport = LoggingTransport(logger, inner)

        # Act
        transport.close()

        # Assert
        inner.close.assert_called_once()


# ============================================================================
# Async
# ============================================================================


class TestCreateAsyncClient:
    """Tests for create_async_client and AsyncLoggingTransport."""

    @pytest.mark.asyncio
    async def test_prints_traffic(self, logger: PrettyHttpxLogger, lines: list[str]) -> None:
        # Act
        async with create_async_client(logger, transport=httpx.MockTransport(ok)) as client:
            await client.get(URL)

        # Assert
        assert "║ pong" in lines

    @pytest.mark.asyncio
    async def test_transport_error_is_printed_and_reraised(
        self, logger: PrettyHttpxLogger, lines: list[str]
    ) -> None:
        # Act
        async with create_async_client(logger, transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get(URL)

        # Assert
        assert "╔╣ HTTPError ║ ConnectError" in lines

    @pytest.mark.asyncio
    async def test_aclose_is_delegated(self, logger: PrettyHttpxLogger) -> None:
        # Arrange
        inner = MagicMock(spec=httpx.AsyncBaseTransport)
        inner.aclose = AsyncMock()
        transport = AsyncLoggingTransport(logger, inner)

        # Act
        await transport.aclose()

        # Assert
        inner.aclose.assert_awaited_once()
