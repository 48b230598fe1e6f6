"""Pydantic models for the bundled data and API responses."""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """Base model accepting both field names and the camelCase bundle keys."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# Bible text

class BookMetadata(CamelModel):
    """Catalog entry for a single book."""
    id: str = Field(..., min_length=1, description="Stable lowercase slug, e.g. 'genesis'")
    name: str = Field(..., description="Display name")
    order: int = Field(..., ge=1, description="1-based position in the canon")


class Verse(CamelModel):
    """A single verse. Unknown stored keys (e.g. crossReference) are ignored."""
    chapter: int = Field(..., ge=1)
    verse: int = Field(..., ge=1)
    text: str = ""
    id: str = ""
    paragraph: Literal["y", "n", ""] = Field(default="", description="Whether the verse starts a paragraph")
    title: str = Field(default="", description="Section heading attached to the first verse of a subsection")


class Book(CamelModel):
    """A full book as stored in ``books/<id>.json``."""
    id: str
    name: str
    chapter_count: int = Field(default=0, alias="chapters", ge=0)
    verse_count: int = Field(default=0, alias="verseCount", ge=0)
    verses: List[Verse] = Field(default_factory=list)


class Chapter(CamelModel):
    """Verses of one chapter of a book, in source order."""
    id: str
    name: str
    chapter: int
    verses: List[Verse] = Field(default_factory=list)


# Cross references

class VerseRef(CamelModel):
    """A single verse or a verse range, possibly spanning chapters or books.

    An ``end_verse`` of ``None`` or ``0`` means a single verse.
    """
    book: Optional[str] = None
    chapter: int
    verse: int
    end_book: Optional[str] = Field(default=None, alias="endBook")
    end_chapter: Optional[int] = Field(default=None, alias="endChapter")
    end_verse: Optional[int] = Field(default=None, alias="endVerse")

    @property
    def is_range(self) -> bool:
        return bool(self.end_verse)


class CrossReference(CamelModel):
    """One edge of the cross-reference graph."""
    from_ref: VerseRef = Field(..., alias="from")
    to: VerseRef
    votes: int = Field(default=0, description="Relative attestation weight in the source corpus")


class BookCrossReferences(CamelModel):
    """All cross references originating in one book."""
    book: str
    total_references: int = Field(default=0, alias="totalReferences")
    cross_references: List[CrossReference] = Field(default_factory=list, alias="crossReferences")


class UnmappedBooks(CamelModel):
    note: str = ""
    books: List[str] = Field(default_factory=list)


class BookMapping(CamelModel):
    """English abbreviation -> local book id, plus the deliberately unmapped books."""
    description: str = ""
    mappings: Dict[str, str] = Field(default_factory=dict)
    unmapped_books: UnmappedBooks = Field(default_factory=UnmappedBooks, alias="unmappedBooks")


class BookEntry(CamelModel):
    book: str = Field(..., min_length=1, description="English abbreviation")
    file: str = Field(..., min_length=1, description="Data file name inside the crossrefs directory")
    reference_count: int = Field(default=0, alias="referenceCount", ge=0)


class CrossRefIndex(CamelModel):
    """Catalog of the available per-book cross-reference files."""
    source: str = ""
    generated_date: str = Field(default="", alias="generatedDate")
    total_books: int = Field(default=0, alias="totalBooks")
    books: List[BookEntry] = Field(default_factory=list)


# Responses

class ChapterVerseRef(CamelModel):
    """Single-verse reference used in chapter cross-reference listings."""
    book: str
    chapter: int
    verse: int


class ChapterCrossReference(CamelModel):
    """Cross reference with both ends expressed in local book ids."""
    from_ref: ChapterVerseRef = Field(..., alias="from")
    to: ChapterVerseRef
    votes: int


class VerseCrossReference(CamelModel):
    """Cross reference translated to local ids, with a display string."""
    from_ref: VerseRef = Field(..., alias="from")
    to: VerseRef
    votes: int
    reference: str = Field(..., description="Human-readable target, e.g. 'apokalyps 4:11'")


class HealthCheck(BaseModel):
    """Health check response model."""
    status: str
    service: str
    version: str = "1.0.0"
