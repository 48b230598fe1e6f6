"""API routes for book metadata and verse text."""
from typing import List

from fastapi import APIRouter, Depends, Path

from bijbel_api.context import BibleContext, get_bible_context
from bijbel_api.models.schemas import Book, BookMetadata, Chapter

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=List[BookMetadata])
async def list_books(context: BibleContext = Depends(get_bible_context)):
    """All books in canonical order."""
    return context.registry.list_books()


@router.get("/{book_id}", response_model=BookMetadata)
async def get_book(book_id: str, context: BibleContext = Depends(get_bible_context)):
    return context.registry.get_book(book_id)


@router.get("/{book_id}/chapters", response_model=Book)
async def get_book_chapters(book_id: str, context: BibleContext = Depends(get_bible_context)):
    """Full book including chapter and verse counts."""
    return context.verse_store.get_book(book_id)


@router.get("/{book_id}/chapter/{chapter}", response_model=Chapter)
async def get_chapter(
    book_id: str,
    chapter: int = Path(..., ge=1, description="1-based chapter number"),
    context: BibleContext = Depends(get_bible_context),
):
    return context.verse_store.get_chapter(book_id, chapter)
