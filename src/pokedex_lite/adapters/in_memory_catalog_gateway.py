from __future__ import annotations

from pokedex_lite.domain.entry import CatalogEntry, CatalogPage, EntryDetail, FilterResult
from pokedex_lite.domain.errors import NotFoundError, UpstreamError
from pokedex_lite.ports.catalog_gateway import CatalogGateway

CURSOR_PREFIX = "memory://catalog?offset="


class InMemoryCatalogGateway(CatalogGateway):
    """
    Canonical contract implementation for tests.

    - Serves entries in insertion order, page_size at a time
    - Cursors are opaque strings; the last page has next_cursor None
    - Lookups are keyed by lower-cased name
    - Records every call in ``calls`` so tests can assert on traffic
    """

    def __init__(
        self,
        entries: list[CatalogEntry],
        details: list[EntryDetail] | None = None,
        page_size: int = 20,
    ) -> None:
        self._entries = entries
        self._details = {detail.name.lower(): detail for detail in details or []}
        self._page_size = page_size
        self.calls: list[tuple[str, str | None]] = []

    async def fetch_page(self, cursor: str | None = None) -> CatalogPage:
        self.calls.append(("fetch_page", cursor))
        offset = self._parse_cursor(cursor)

        end = offset + self._page_size
        entries = tuple(self._entries[offset:end])
        next_cursor = f"{CURSOR_PREFIX}{end}" if end < len(self._entries) else None

        return CatalogPage(entries=entries, next_cursor=next_cursor)

    async def fetch_entry(self, name: str) -> FilterResult:
        self.calls.append(("fetch_entry", name))
        detail = self._lookup(name)
        return FilterResult(name=detail.name, artwork_url=detail.artwork_url)

    async def fetch_detail(self, name: str) -> EntryDetail:
        self.calls.append(("fetch_detail", name))
        return self._lookup(name)

    def _lookup(self, name: str) -> EntryDetail:
        detail = self._details.get(name.lower())
        if detail is None:
            raise NotFoundError(resource="CatalogEntry", identifier=name)
        return detail

    def _parse_cursor(self, cursor: str | None) -> int:
        if cursor is None:
            return 0
        if not cursor.startswith(CURSOR_PREFIX):
            raise UpstreamError("Unknown cursor", url=cursor)
        try:
            return int(cursor[len(CURSOR_PREFIX):])
        except ValueError:
            raise UpstreamError("Malformed cursor", url=cursor)
