"""
Test suite for ScreenStateMapper.

The mapper only translates coordinator state into REST DTOs:
- Domain 'reference' becomes upstream-style 'url'
- Tuples become lists; primary ability/held item are exposed
- Derived flags (view_mode, has_more, can_search) are copied, never recomputed
"""

from __future__ import annotations

from pokedex_lite.domain.entry import CatalogEntry, EntryDetail, FilterResult
from pokedex_lite.domain.state import CoordinatorState
from pokedex_lite.entrypoints.http.dtos.screen import CatalogEntryDTO, ScreenStateDTO
from pokedex_lite.entrypoints.http.mappers.screen_mapper import ScreenStateMapper


def test_to_entry_response_maps_reference_to_url() -> None:
    dto = ScreenStateMapper.to_entry_response(CatalogEntry(name="bulbasaur", reference="u1"))

    assert dto == CatalogEntryDTO(name="bulbasaur", url="u1")


def test_to_response_for_empty_state() -> None:
    dto = ScreenStateMapper.to_response(CoordinatorState())

    assert isinstance(dto, ScreenStateDTO)
    assert dto.view_mode == "LIST"
    assert dto.catalog == []
    assert dto.filter_result is None
    assert dto.detail is None
    assert dto.has_more is False
    assert dto.can_search is False
    assert dto.notice is None


def test_to_response_for_list_with_more_pages() -> None:
    state = CoordinatorState(
        catalog=(CatalogEntry("bulbasaur", "u1"), CatalogEntry("ivysaur", "u2")),
        cursor="page2",
        initialized=True,
        query="bul",
    )

    dto = ScreenStateMapper.to_response(state)

    assert [entry.name for entry in dto.catalog] == ["bulbasaur", "ivysaur"]
    assert dto.next_cursor == "page2"
    assert dto.has_more is True
    assert dto.can_search is True
    assert dto.query == "bul"


def test_to_response_for_filtered_view_with_detail() -> None:
    state = CoordinatorState(
        filter_result=FilterResult(name="pikachu", artwork_url="art"),
        detail=EntryDetail(
            name="pikachu",
            height=4,
            base_experience=112,
            abilities=("static", "lightning-rod"),
            held_items=(),
            artwork_url="art",
        ),
    )

    dto = ScreenStateMapper.to_response(state)

    assert dto.view_mode == "FILTERED"
    assert dto.filter_result is not None
    assert dto.filter_result.artwork_url == "art"
    assert dto.detail is not None
    assert dto.detail.abilities == ["static", "lightning-rod"]
    assert dto.detail.held_items == []
    assert dto.detail.primary_ability == "static"
    assert dto.detail.primary_held_item is None
