"""Tests for error handling middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from uptime_scout.middleware.errors import ErrorHandlingMiddleware


@pytest.fixture
def mock_context() -> MagicMock:
    """Create a mock middleware context."""
    context = MagicMock()
    context.method = "tools/call"
    context.message = MagicMock()
    context.message.name = "uptime"
    return context


@pytest.mark.asyncio
async def test_passes_through_success(mock_context: MagicMock) -> None:
    middleware = ErrorHandlingMiddleware()
    call_next = AsyncMock(return_value="success")

    assert await middleware.on_message(mock_context, call_next) == "success"
    assert middleware.get_error_stats() == {}


@pytest.mark.asyncio
async def test_logs_and_reraises(mock_context: MagicMock) -> None:
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)
    call_next = AsyncMock(side_effect=ValueError("bad host"))

    with pytest.raises(ValueError):
        await middleware.on_message(mock_context, call_next)

    mock_logger.error.assert_called_once()
    logged = str(mock_logger.error.call_args)
    assert "ValueError" in logged
    assert "tools/call" in logged


@pytest.mark.asyncio
async def test_counts_errors_by_type(mock_context: MagicMock) -> None:
    middleware = ErrorHandlingMiddleware()

    for error in (ValueError("a"), ValueError("b"), KeyError("c")):
        with pytest.raises((ValueError, KeyError)):
            await middleware.on_message(mock_context, AsyncMock(side_effect=error))

    assert middleware.get_error_stats() == {"ValueError": 2, "KeyError": 1}

    middleware.reset_stats()
    assert middleware.get_error_stats() == {}
