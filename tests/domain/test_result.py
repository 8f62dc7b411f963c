from __future__ import annotations

import pytest

from pokedex_lite.domain.errors import NotFoundError, UpstreamError
from pokedex_lite.domain.result import Err, Ok, attempt


async def _returns(value: str) -> str:
    return value


async def _raises(exc: Exception) -> str:
    raise exc


@pytest.mark.asyncio
async def test_attempt_wraps_value_in_ok() -> None:
    result = await attempt(_returns("payload"))

    assert result == Ok("payload")
    assert result.is_ok


@pytest.mark.asyncio
async def test_attempt_wraps_upstream_error_in_err() -> None:
    error = UpstreamError("Unexpected status 500", status_code=500)

    result = await attempt(_raises(error))

    assert isinstance(result, Err)
    assert not result.is_ok
    assert result.error is error
    assert result.reason == "Unexpected status 500"


@pytest.mark.asyncio
async def test_attempt_captures_not_found_as_upstream_failure() -> None:
    result = await attempt(_raises(NotFoundError("CatalogEntry", "missingno")))

    assert isinstance(result, Err)
    assert result.error.error_code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_attempt_propagates_programming_errors() -> None:
    with pytest.raises(KeyError):
        await attempt(_raises(KeyError("bug")))
