"""Translation between English cross-reference abbreviations and local book ids."""
from __future__ import annotations

import logging
from typing import Dict, List

from bijbel_api.models.schemas import BookMapping, CrossRefIndex
from bijbel_api.utils.exceptions import DataParseError, NotFoundError

logger = logging.getLogger(__name__)


class CrossRefIndexService:
    """Bidirectional book mapping plus the catalog of cross-reference files.

    The reverse map is built once here; a mapping that sends two abbreviations
    to the same local id is rejected so both directions stay a bijection.
    """

    def __init__(self, mapping: BookMapping, index: CrossRefIndex):
        self._mapping = mapping
        self._index = index
        self._english_to_dutch: Dict[str, str] = dict(mapping.mappings)
        self._dutch_to_english: Dict[str, str] = {}
        for english, dutch in self._english_to_dutch.items():
            if dutch in self._dutch_to_english:
                logger.error(
                    f"Book mapping is not injective: '{english}' and "
                    f"'{self._dutch_to_english[dutch]}' both map to '{dutch}'"
                )
                raise DataParseError(f"Book mapping maps more than one abbreviation to '{dutch}'")
            self._dutch_to_english[dutch] = english

        overlap = set(mapping.unmapped_books.books) & set(self._dutch_to_english)
        if overlap:
            logger.error(f"Books listed as unmapped but present in mapping: {sorted(overlap)}")
            raise DataParseError("Book mapping lists mapped books as unmapped")

        self._files: Dict[str, str] = {}
        for entry in index.books:
            if entry.book in self._files:
                logger.error(f"Duplicate cross-reference index entry for {entry.book}")
                raise DataParseError(f"Duplicate cross-reference index entry '{entry.book}'")
            self._files[entry.book] = entry.file

    @property
    def mapping(self) -> BookMapping:
        return self._mapping

    @property
    def index(self) -> CrossRefIndex:
        return self._index

    @property
    def unmapped_books(self) -> List[str]:
        return list(self._mapping.unmapped_books.books)

    def english_to_dutch(self, english_abbr: str) -> str:
        try:
            return self._english_to_dutch[english_abbr]
        except KeyError:
            raise NotFoundError(f"No mapping found for book: {english_abbr}") from None

    def dutch_to_english(self, dutch_id: str) -> str:
        try:
            return self._dutch_to_english[dutch_id]
        except KeyError:
            raise NotFoundError(f"No mapping found for book: {dutch_id}") from None

    def has_cross_references(self, dutch_id: str) -> bool:
        return dutch_id in self._dutch_to_english

    def resolve_data_file(self, english_abbr: str) -> str:
        try:
            return self._files[english_abbr]
        except KeyError:
            raise NotFoundError(f"Cross-references not found for book: {english_abbr}") from None
