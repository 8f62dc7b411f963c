from __future__ import annotations

from pokedex_lite.domain.entry import CatalogEntry, EntryDetail, FilterResult
from pokedex_lite.domain.state import CoordinatorState
from pokedex_lite.entrypoints.http.dtos.screen import (
    CatalogEntryDTO,
    EntryDetailDTO,
    FilterResultDTO,
    ScreenStateDTO,
)


class ScreenStateMapper:
    """Maps coordinator state to REST DTOs. No business logic, just translation."""

    @staticmethod
    def to_entry_response(entry: CatalogEntry) -> CatalogEntryDTO:
        return CatalogEntryDTO(
            name=entry.name,
            url=entry.reference,  # Domain uses 'reference', DTO uses upstream 'url'
        )

    @staticmethod
    def to_filter_response(filter_result: FilterResult | None) -> FilterResultDTO | None:
        if filter_result is None:
            return None
        return FilterResultDTO(name=filter_result.name, artwork_url=filter_result.artwork_url)

    @staticmethod
    def to_detail_response(detail: EntryDetail | None) -> EntryDetailDTO | None:
        """
        Converts an entry detail to its DTO.

        Tuples become lists at the boundary; the first ability and held item
        are exposed separately for the detail panel.
        """
        if detail is None:
            return None
        return EntryDetailDTO(
            name=detail.name,
            height=detail.height,
            base_experience=detail.base_experience,
            abilities=list(detail.abilities),
            held_items=list(detail.held_items),
            primary_ability=detail.primary_ability,
            primary_held_item=detail.primary_held_item,
            artwork_url=detail.artwork_url,
        )

    @staticmethod
    def to_response(state: CoordinatorState) -> ScreenStateDTO:
        """
        Converts a state snapshot to the REST response.

        Args:
            state: Coordinator state after an intent

        Returns:
            ScreenStateDTO: Snapshot with derived flags (view_mode, has_more, can_search)
        """
        return ScreenStateDTO(
            view_mode=state.view_mode.value,
            catalog=[ScreenStateMapper.to_entry_response(entry) for entry in state.catalog],
            filter_result=ScreenStateMapper.to_filter_response(state.filter_result),
            detail=ScreenStateMapper.to_detail_response(state.detail),
            next_cursor=state.cursor,
            has_more=state.has_more,
            is_loading=state.is_loading,
            is_loading_more=state.is_loading_more,
            query=state.query,
            can_search=state.can_search,
            notice=state.notice,
        )
