from pydantic import BaseModel, Field


class CatalogEntryDTO(BaseModel):
    name: str
    url: str


class FilterResultDTO(BaseModel):
    name: str
    artwork_url: str | None = None


class EntryDetailDTO(BaseModel):
    name: str
    height: int
    base_experience: int | None = None
    abilities: list[str]
    held_items: list[str]
    primary_ability: str | None = None
    primary_held_item: str | None = None
    artwork_url: str | None = None


class ScreenStateDTO(BaseModel):
    """Read-only snapshot of the screen, returned after every intent."""

    view_mode: str = Field(description="LIST or FILTERED", examples=["LIST"])
    catalog: list[CatalogEntryDTO]
    filter_result: FilterResultDTO | None = None
    detail: EntryDetailDTO | None = None
    next_cursor: str | None = None
    has_more: bool
    is_loading: bool
    is_loading_more: bool
    query: str
    can_search: bool
    notice: str | None = None


class SearchRequestDTO(BaseModel):
    """Body for a typed search."""

    query: str = Field(
        description="Entry name (case-insensitive)",
        examples=["Pikachu"],
        min_length=1,
        max_length=100,
    )


class SelectEntryRequestDTO(BaseModel):
    """Body for a list item selection."""

    name: str = Field(
        description="Name of the selected list item",
        examples=["bulbasaur"],
        min_length=1,
        max_length=100,
    )


class QueryUpdateDTO(BaseModel):
    """Body for a search text edit. Empty text is allowed."""

    query: str = Field(default="", max_length=100, examples=["pika"])
