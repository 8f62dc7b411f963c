from __future__ import annotations

from abc import ABC, abstractmethod

from pokedex_lite.domain.entry import CatalogPage, EntryDetail, FilterResult


class CatalogGateway(ABC):
    """
    Port for the upstream catalog API.

    Implementations perform exactly one upstream request per call and
    never retry. Every failure (transport error, non-2xx status,
    malformed body) surfaces as UpstreamError or one of its subclasses.

    Contract (Preconditions):
        - names are pre-validated and normalized by the caller (coordinator)
        - cursors are passed back exactly as returned in CatalogPage.next_cursor
    """

    @abstractmethod
    async def fetch_page(self, cursor: str | None = None) -> CatalogPage:
        """
        Fetch one page of the catalog list.

        Args:
            cursor: Opaque next-page pointer, or None for the first page

        Returns:
            CatalogPage with entries in upstream order and the next cursor

        Raises:
            UpstreamError: If the call failed for any reason
        """
        ...

    @abstractmethod
    async def fetch_entry(self, name: str) -> FilterResult:
        """
        Look up a single entity by its lower-cased name.

        Raises:
            NotFoundError: If upstream has no entity with that name
            UpstreamError: If the call failed for any other reason
        """
        ...

    @abstractmethod
    async def fetch_detail(self, name: str) -> EntryDetail:
        """
        Fetch supplementary detail for a single entity.

        Raises:
            NotFoundError: If upstream has no entity with that name
            UpstreamError: If the call failed for any other reason
        """
        ...
