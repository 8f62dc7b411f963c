from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.errors import ValidationError


# ==============================================================================
# Catalog Entities
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One item of the paginated catalog list."""

    name: str
    reference: str


@dataclass(frozen=True, slots=True)
class CatalogPage:
    entries: tuple[CatalogEntry, ...]
    next_cursor: str | None = None  # None once the catalog is exhausted

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Single-entity view shown while a search is active."""

    name: str
    artwork_url: str | None = None


@dataclass(frozen=True, slots=True)
class EntryDetail:
    """Supplementary detail snapshot for one entity."""

    name: str
    height: int
    base_experience: int | None  # upstream sends null for some entities
    abilities: tuple[str, ...] = ()
    held_items: tuple[str, ...] = ()
    artwork_url: str | None = None

    @property
    def primary_ability(self) -> str | None:
        return self.abilities[0] if self.abilities else None

    @property
    def primary_held_item(self) -> str | None:
        return self.held_items[0] if self.held_items else None


# ==============================================================================
# Intent Inputs
# ==============================================================================


@dataclass(frozen=True, slots=True)
class EntryQuery:
    """Name typed (or selected) by the user, normalized for lookups."""

    text: str

    def validate(self) -> None:
        """
        Validate the query text.

        Raises:
            ValidationError: If the query is empty or whitespace only
        """
        if not self.text or not self.text.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "query",
                        "message": "Must not be empty",
                        "code": "EMPTY_QUERY",
                    }
                ]
            )

    @property
    def lookup_key(self) -> str:
        """Lower-cased, trimmed name used as the upstream path segment."""
        return self.text.strip().lower()
