"""Read-only access to the bundled static JSON data."""
import json
import logging
import re
from pathlib import Path
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from bijbel_api.models.schemas import (
    Book,
    BookCrossReferences,
    BookMapping,
    BookMetadata,
    CrossRefIndex,
)
from bijbel_api.utils.exceptions import DataParseError, NotFoundError

logger = logging.getLogger(__name__)

BOOK_ID_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")
DATA_FILE_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*\.json")

BOOKS_CATALOG_FILE = "books.json"
BOOKS_DIR = "books"
CROSSREFS_DIR = "crossrefs"
BOOK_MAPPING_FILE = "book-mapping.json"
CROSSREF_INDEX_FILE = "index.json"

ModelT = TypeVar("ModelT", bound=BaseModel)

_BOOK_CATALOG_ADAPTER = TypeAdapter(List[BookMetadata])


class BundleRepository:
    """Reads and validates the JSON files of a data bundle directory.

    Layout::

        books.json                 book catalog (id, name, order)
        books/<id>.json            verses per book
        crossrefs/book-mapping.json
        crossrefs/index.json
        crossrefs/<file>           cross references per book, named by the index
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _read_json(self, relative_path: str) -> Any:
        path = self.data_dir / relative_path
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            logger.warning(f"Bundle file missing: {path}")
            raise NotFoundError(f"Data file '{relative_path}' not found") from exc
        except UnicodeDecodeError as exc:
            logger.error(f"Bundle file {path} is not valid UTF-8: {exc}")
            raise DataParseError() from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error(f"Bundle file {path} is not valid JSON: {exc}")
            raise DataParseError() from exc

    def _load_model(self, relative_path: str, model: Type[ModelT]) -> ModelT:
        data = self._read_json(relative_path)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Bundle file {relative_path} failed validation: {exc}")
            raise DataParseError() from exc

    def load_books_catalog(self) -> List[BookMetadata]:
        data = self._read_json(BOOKS_CATALOG_FILE)
        try:
            return _BOOK_CATALOG_ADAPTER.validate_python(data)
        except ValidationError as exc:
            logger.error(f"Book catalog failed validation: {exc}")
            raise DataParseError() from exc

    def load_book(self, book_id: str) -> Book:
        """Load ``books/<book_id>.json``; ids that are not slugs are never looked up."""
        if not book_id or not BOOK_ID_PATTERN.fullmatch(book_id):
            raise NotFoundError(f"Book '{book_id}' not found")
        return self._load_model(f"{BOOKS_DIR}/{book_id}.json", Book)

    def load_book_mapping(self) -> BookMapping:
        return self._load_model(f"{CROSSREFS_DIR}/{BOOK_MAPPING_FILE}", BookMapping)

    def load_crossref_index(self) -> CrossRefIndex:
        return self._load_model(f"{CROSSREFS_DIR}/{CROSSREF_INDEX_FILE}", CrossRefIndex)

    def load_book_cross_references(self, file_name: str) -> BookCrossReferences:
        if not DATA_FILE_PATTERN.fullmatch(file_name):
            logger.error(f"Refusing to read cross-reference file with unsafe name: {file_name!r}")
            raise DataParseError()
        return self._load_model(f"{CROSSREFS_DIR}/{file_name}", BookCrossReferences)
