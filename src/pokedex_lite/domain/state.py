"""Screen state and the reducer that evolves it.

The coordinator never mutates state in place: each intent produces events,
and ``reduce`` maps ``(state, event)`` to the next immutable state. The
coordinator applies events one at a time, so interleaved intents can only
observe whole transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from pokedex_lite.domain.entry import CatalogEntry, CatalogPage, EntryDetail, FilterResult
from pokedex_lite.domain.result import Ok, Result

NOT_FOUND_NOTICE = "No entry found with that name, showing the full list"


class ViewMode(str, Enum):
    LIST = "LIST"
    FILTERED = "FILTERED"


@dataclass(frozen=True, slots=True)
class CoordinatorState:
    catalog: tuple[CatalogEntry, ...] = ()
    filter_result: FilterResult | None = None
    detail: EntryDetail | None = None
    cursor: str | None = None
    is_loading: bool = False
    is_loading_more: bool = False
    query: str = ""
    notice: str | None = None
    initialized: bool = False

    @property
    def view_mode(self) -> ViewMode:
        return ViewMode.FILTERED if self.filter_result is not None else ViewMode.LIST

    @property
    def has_more(self) -> bool:
        """True while a further page can be requested."""
        return self.initialized and self.cursor is not None

    @property
    def can_search(self) -> bool:
        return bool(self.query.strip())


# ==============================================================================
# Events
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CatalogRequested:
    pass


@dataclass(frozen=True, slots=True)
class CatalogLoaded:
    result: Result[CatalogPage]


@dataclass(frozen=True, slots=True)
class PageRequested:
    pass


@dataclass(frozen=True, slots=True)
class PageLoaded:
    result: Result[CatalogPage]


@dataclass(frozen=True, slots=True)
class QueryChanged:
    text: str


@dataclass(frozen=True, slots=True)
class SearchRequested:
    pass


@dataclass(frozen=True, slots=True)
class SearchResolved:
    result: Result[FilterResult]


@dataclass(frozen=True, slots=True)
class DetailRequested:
    pass


@dataclass(frozen=True, slots=True)
class DetailResolved:
    result: Result[EntryDetail]


@dataclass(frozen=True, slots=True)
class FilterCleared:
    pass


@dataclass(frozen=True, slots=True)
class NoticeDismissed:
    pass


Event = Union[
    CatalogRequested,
    CatalogLoaded,
    PageRequested,
    PageLoaded,
    QueryChanged,
    SearchRequested,
    SearchResolved,
    DetailRequested,
    DetailResolved,
    FilterCleared,
    NoticeDismissed,
]


# ==============================================================================
# Reducer
# ==============================================================================


def _same_entity(filter_result: FilterResult | None, detail: EntryDetail) -> bool:
    return filter_result is not None and filter_result.name.lower() == detail.name.lower()


def reduce(state: CoordinatorState, event: Event) -> CoordinatorState:
    """
    Compute the state that follows ``event``.

    Pure function: no I/O, no logging, and the input state is left untouched.

    Args:
        state: Current screen state
        event: Event produced by an intent

    Returns:
        The next state

    Raises:
        TypeError: If the event type is unknown
    """
    if isinstance(event, CatalogRequested):
        return replace(state, is_loading=True)

    if isinstance(event, CatalogLoaded):
        if isinstance(event.result, Ok):
            page = event.result.value
            return replace(
                state,
                catalog=page.entries,
                cursor=page.next_cursor,
                initialized=True,
                is_loading=False,
            )
        return replace(state, is_loading=False)

    if isinstance(event, PageRequested):
        return replace(state, is_loading_more=True)

    if isinstance(event, PageLoaded):
        if isinstance(event.result, Ok):
            page = event.result.value
            return replace(
                state,
                catalog=state.catalog + page.entries,
                cursor=page.next_cursor,
                is_loading_more=False,
            )
        return replace(state, is_loading_more=False)

    if isinstance(event, QueryChanged):
        return replace(state, query=event.text)

    if isinstance(event, SearchRequested):
        return replace(state, is_loading=True, notice=None)

    if isinstance(event, SearchResolved):
        if isinstance(event.result, Ok):
            found = event.result.value
            detail = state.detail
            # A previous entity's detail must not survive a new filter
            if detail is not None and not _same_entity(found, detail):
                detail = None
            return replace(
                state,
                filter_result=found,
                detail=detail,
                notice=None,
                is_loading=False,
            )
        return replace(
            state,
            filter_result=None,
            detail=None,
            notice=NOT_FOUND_NOTICE,
            is_loading=False,
        )

    if isinstance(event, DetailRequested):
        return replace(state, is_loading=True)

    if isinstance(event, DetailResolved):
        if isinstance(event.result, Ok) and _same_entity(state.filter_result, event.result.value):
            return replace(state, detail=event.result.value, is_loading=False)
        return replace(state, is_loading=False)

    if isinstance(event, FilterCleared):
        return replace(state, filter_result=None, detail=None, query="", notice=None)

    if isinstance(event, NoticeDismissed):
        return replace(state, notice=None)

    raise TypeError(f"Unknown event: {type(event).__name__}")
