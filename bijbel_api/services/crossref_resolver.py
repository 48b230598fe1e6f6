"""Cross-reference lookup, filtering, translation and formatting."""
from __future__ import annotations

import logging
from typing import List, Optional

from bijbel_api.models.schemas import (
    BookCrossReferences,
    ChapterCrossReference,
    ChapterVerseRef,
    CrossReference,
    VerseCrossReference,
    VerseRef,
)
from bijbel_api.repositories.bundle import BundleRepository
from bijbel_api.services.cache_service import CacheService
from bijbel_api.services.crossref_index import CrossRefIndexService
from bijbel_api.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class CrossReferenceResolver:
    """Resolves cross references for books identified by their local id.

    Stored data uses English abbreviations for target books; ``from`` entries
    carry no book and are read as belonging to the requested book.
    """

    def __init__(
        self,
        repository: BundleRepository,
        index: CrossRefIndexService,
        cache: Optional[CacheService] = None,
    ):
        self.repository = repository
        self.index = index
        self.cache = cache if cache is not None else CacheService(enabled=False)

    def _load(self, dutch_book_id: str) -> BookCrossReferences:
        english_abbr = self.index.dutch_to_english(dutch_book_id)
        file_name = self.index.resolve_data_file(english_abbr)
        return self.repository.load_book_cross_references(file_name)

    def get_cross_references(self, dutch_book_id: str) -> BookCrossReferences:
        """Return the full, unfiltered cross-reference set for a book.

        Raises:
            NotFoundError: the book has no English counterpart, no index entry
                or its data file is missing.
            DataParseError: the data file is malformed.
        """
        return self.cache.get_cross_references(dutch_book_id, lambda: self._load(dutch_book_id))

    def get_cross_references_for_verse(self, dutch_book_id: str, chapter: int, verse: int) -> List[CrossReference]:
        """References whose source is exactly ``chapter:verse``, in storage order."""
        refs = self.get_cross_references(dutch_book_id)
        return [
            ref for ref in refs.cross_references
            if ref.from_ref.chapter == chapter and ref.from_ref.verse == verse
        ]

    def get_cross_references_for_chapter(self, dutch_book_id: str, chapter: int) -> List[ChapterCrossReference]:
        """References originating in ``chapter`` with both ends in local ids.

        Entries whose target book has no local id are left out.
        """
        refs = self.get_cross_references(dutch_book_id)
        entries: List[ChapterCrossReference] = []
        for ref in refs.cross_references:
            if ref.from_ref.chapter != chapter:
                continue
            try:
                target_book = self.index.english_to_dutch(ref.to.book or "")
            except NotFoundError:
                logger.debug(f"Skipping cross reference to unmapped book {ref.to.book!r}")
                continue
            entries.append(
                ChapterCrossReference(
                    from_ref=ChapterVerseRef(book=dutch_book_id, chapter=ref.from_ref.chapter, verse=ref.from_ref.verse),
                    to=ChapterVerseRef(book=target_book, chapter=ref.to.chapter, verse=ref.to.verse),
                    votes=ref.votes,
                )
            )
        return entries

    def get_local_cross_references_for_verse(self, dutch_book_id: str, chapter: int, verse: int) -> List[VerseCrossReference]:
        """Per-verse references translated to local ids, each with a display string."""
        results: List[VerseCrossReference] = []
        for ref in self.get_cross_references_for_verse(dutch_book_id, chapter, verse):
            try:
                local = self.translate_to_local(ref)
            except NotFoundError:
                logger.debug(f"Skipping untranslatable cross reference {self.format_reference(ref.to)}")
                continue
            results.append(
                VerseCrossReference(
                    from_ref=local.from_ref,
                    to=local.to,
                    votes=local.votes,
                    reference=self.format_reference(ref.to, use_local_names=True),
                )
            )
        return results

    def translate_to_local(self, ref: CrossReference) -> CrossReference:
        """Return a copy of ``ref`` with ``to.book``/``to.end_book`` as local ids.

        Fails as a whole if either present book has no mapping; ``from`` is
        never translated.
        """
        update = {}
        if ref.to.book:
            update["book"] = self.index.english_to_dutch(ref.to.book)
        if ref.to.end_book:
            update["end_book"] = self.index.english_to_dutch(ref.to.end_book)
        return ref.model_copy(update={"to": ref.to.model_copy(update=update)})

    def _display_name(self, book: Optional[str], use_local_names: bool) -> str:
        if not book:
            return ""
        if use_local_names:
            try:
                return self.index.english_to_dutch(book)
            except NotFoundError:
                return book
        return book

    def format_reference(self, ref: VerseRef, use_local_names: bool = False) -> str:
        """Render a reference as e.g. ``Rom 1:19-20`` or ``Matt 5:1-6:10``.

        With ``use_local_names`` book names are translated where possible and
        kept as-is otherwise.
        """
        book = self._display_name(ref.book, use_local_names)
        prefix = f"{book} " if book else ""

        if ref.is_range:
            if ref.end_book and ref.end_book != ref.book:
                end_book = self._display_name(ref.end_book, use_local_names)
                return f"{prefix}{ref.chapter}:{ref.verse}-{end_book} {ref.end_chapter or ref.chapter}:{ref.end_verse}"
            if ref.end_chapter and ref.end_chapter != ref.chapter:
                return f"{prefix}{ref.chapter}:{ref.verse}-{ref.end_chapter}:{ref.end_verse}"
            return f"{prefix}{ref.chapter}:{ref.verse}-{ref.end_verse}"

        return f"{prefix}{ref.chapter}:{ref.verse}"
