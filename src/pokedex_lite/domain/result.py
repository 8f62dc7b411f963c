"""Typed outcome of a single upstream call.

Every gateway call made by the coordinator is turned into either ``Ok`` or
``Err`` at its call site, so the reducer receives one value per call
instead of each intent carrying its own try/except branches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from pokedex_lite.domain.errors import UpstreamError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    error: UpstreamError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]


async def attempt(call: Awaitable[T]) -> Result[T]:
    """
    Await an upstream call and capture its outcome.

    Only UpstreamError (and its subclasses) is captured; anything else is a
    bug and propagates.

    Args:
        call: Awaitable returned by a gateway method

    Returns:
        Ok with the payload, or Err with the upstream failure
    """
    try:
        return Ok(await call)
    except UpstreamError as exc:
        return Err(exc)
