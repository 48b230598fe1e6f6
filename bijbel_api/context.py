"""Process-wide, read-only Bible data context."""
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bijbel_api.config import get_settings
from bijbel_api.repositories.bundle import BundleRepository
from bijbel_api.services.book_registry import BookRegistry
from bijbel_api.services.cache_service import CacheService
from bijbel_api.services.crossref_index import CrossRefIndexService
from bijbel_api.services.crossref_resolver import CrossReferenceResolver
from bijbel_api.services.verse_store import VerseStore
from bijbel_api.utils.exceptions import DataParseError, NotFoundError

logger = logging.getLogger(__name__)

# Global context, built once
_context: Optional["BibleContext"] = None
_context_lock = threading.Lock()


@dataclass(frozen=True)
class BibleContext:
    """Handle to the initialized core components."""
    registry: BookRegistry
    verse_store: VerseStore
    crossref_index: CrossRefIndexService
    crossref_resolver: CrossReferenceResolver


def build_bible_context(data_dir: Path, cache_enabled: bool = True) -> BibleContext:
    """Parse the catalog files of the bundle at ``data_dir`` into a new context.

    Raises:
        DataParseError: a catalog file is missing, malformed or inconsistent.
    """
    repository = BundleRepository(data_dir)
    cache = CacheService(enabled=cache_enabled)

    try:
        registry = BookRegistry(repository.load_books_catalog())
        crossref_index = CrossRefIndexService(repository.load_book_mapping(), repository.load_crossref_index())
    except NotFoundError as exc:
        # A missing catalog is a broken bundle, not a missing resource.
        logger.error(
            f"Incomplete bundle at {data_dir}: {exc.detail}. "
            f"Set DATA_DIR to a directory holding a complete data bundle."
        )
        raise DataParseError("Bundled data is incomplete") from exc

    logger.info(
        f"Loaded bundle from {data_dir}: {len(registry)} books, "
        f"{len(crossref_index.mapping.mappings)} mapped books, "
        f"{len(crossref_index.index.books)} cross-reference files"
    )

    return BibleContext(
        registry=registry,
        verse_store=VerseStore(repository, cache),
        crossref_index=crossref_index,
        crossref_resolver=CrossReferenceResolver(repository, crossref_index, cache),
    )


def initialize_bible_context() -> BibleContext:
    """Initialize the global context from settings; later calls return the same instance."""
    global _context

    if _context is not None:
        return _context

    with _context_lock:
        if _context is not None:
            logger.warning("Bible context already initialized")
            return _context
        settings = get_settings()
        _context = build_bible_context(settings.data_dir, cache_enabled=settings.cache_enabled)
        return _context


def get_bible_context() -> BibleContext:
    """Dependency injector for the Bible context, initializing it on first use."""
    if _context is None:
        return initialize_bible_context()
    return _context


def reset_bible_context() -> None:
    """Drop the global context so the next access reloads the bundle."""
    global _context

    with _context_lock:
        _context = None
