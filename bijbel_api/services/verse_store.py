"""Per-book verse data with sanitized text."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from bijbel_api.models.schemas import Book, Chapter, Verse
from bijbel_api.repositories.bundle import BundleRepository
from bijbel_api.services.cache_service import CacheService
from bijbel_api.services.text_sanitizer import clean_verse_text

logger = logging.getLogger(__name__)


def _clean_verse(verse: Verse) -> Verse:
    return verse.model_copy(update={"text": clean_verse_text(verse.text)})


def iter_chapter_verses(verses: Iterable[Verse], chapter_number: int) -> Iterator[Verse]:
    """Yield the verses of ``chapter_number`` in source order, each one sanitized as it is yielded."""
    for verse in verses:
        if verse.chapter == chapter_number:
            yield _clean_verse(verse)


class VerseStore:
    """Loads books from the bundle on demand.

    Raw parsed books are memoized through ``CacheService``; sanitization runs on
    every call so cached and uncached lookups return the same result.
    """

    def __init__(self, repository: BundleRepository, cache: Optional[CacheService] = None):
        self.repository = repository
        self.cache = cache if cache is not None else CacheService(enabled=False)

    def _load_raw_book(self, book_id: str) -> Book:
        return self.cache.get_book(book_id, lambda: self.repository.load_book(book_id))

    def get_book(self, book_id: str) -> Book:
        """Return the full book with every verse text sanitized.

        Raises:
            NotFoundError: no data file exists for ``book_id``.
            DataParseError: the data file is malformed.
        """
        book = self._load_raw_book(book_id)
        return book.model_copy(update={"verses": [_clean_verse(v) for v in book.verses]})

    def get_chapter(self, book_id: str, chapter_number: int) -> Chapter:
        """Return one chapter; an unknown chapter number yields an empty verse list."""
        book = self._load_raw_book(book_id)
        verses = list(iter_chapter_verses(book.verses, chapter_number))
        if not verses:
            logger.info(f"No verses for {book_id} chapter {chapter_number}")
        return Chapter(id=book_id, name=book.name, chapter=chapter_number, verses=verses)
