"""Lookups against the book catalog.

Every lookup raises ``NotFoundError`` on a miss. Earlier versions of the API
answered unknown ids and orders with empty or zero values; clients relying on
that now get a 404 instead.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from bijbel_api.models.schemas import BookMetadata
from bijbel_api.utils.exceptions import DataParseError, NotFoundError

logger = logging.getLogger(__name__)


class BookRegistry:
    """Immutable index of the book catalog by id and by canonical order."""

    def __init__(self, books: Iterable[BookMetadata]):
        self._books: tuple[BookMetadata, ...] = tuple(books)
        self._by_id: Dict[str, BookMetadata] = {}
        self._id_by_order: Dict[int, str] = {}

        for book in self._books:
            if book.id in self._by_id:
                logger.error(f"Duplicate book id in catalog: {book.id}")
                raise DataParseError(f"Duplicate book id '{book.id}' in book catalog")
            if book.order in self._id_by_order:
                logger.error(f"Duplicate book order in catalog: {book.order} ({book.id})")
                raise DataParseError(f"Duplicate book order {book.order} in book catalog")
            self._by_id[book.id] = book
            self._id_by_order[book.order] = book.id

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._by_id

    def has_book(self, book_id: str) -> bool:
        return book_id in self._by_id

    def get_book(self, book_id: str) -> BookMetadata:
        try:
            return self._by_id[book_id]
        except KeyError:
            raise NotFoundError(f"Book '{book_id}' not found") from None

    def get_book_order(self, book_id: str) -> int:
        return self.get_book(book_id).order

    def get_book_id(self, order: int) -> str:
        try:
            return self._id_by_order[order]
        except KeyError:
            raise NotFoundError(f"No book at position {order}") from None

    def list_books(self) -> List[BookMetadata]:
        """All books in catalog order."""
        return list(self._books)
