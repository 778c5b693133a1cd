"""Core enums and type definitions."""

from enum import StrEnum


class DateType(StrEnum):
    """Kinds of dates attached to a bibliographic item."""

    PUBLISHED = "published"
    ACCESSED = "accessed"
    CREATED = "created"
    UPDATED = "updated"
    CONFIRMED = "confirmed"


class FetchState(StrEnum):
    """Progress of the year-selection scan over matched hits."""

    PENDING = "pending"
    SCANNING = "scanning"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class ResolutionStatus(StrEnum):
    """Outcome of a reference resolution."""

    FOUND = "found"
    NOT_FOUND = "not_found"


class RelationType(StrEnum):
    """Relations between bibliographic items."""

    INSTANCE = "instance"  # Dated edition of an undated/all-parts reference
    PART_OF = "partOf"
