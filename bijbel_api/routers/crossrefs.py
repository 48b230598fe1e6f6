"""API routes for cross references."""
from typing import List

from fastapi import APIRouter, Depends, Path

from bijbel_api.context import BibleContext, get_bible_context
from bijbel_api.models.schemas import BookCrossReferences, ChapterCrossReference, VerseCrossReference

router = APIRouter(prefix="/crossrefs", tags=["crossrefs"])


@router.get("/{book_id}", response_model=BookCrossReferences, response_model_exclude_none=True)
async def get_cross_references(book_id: str, context: BibleContext = Depends(get_bible_context)):
    """All cross references of a book, target books as English abbreviations."""
    return context.crossref_resolver.get_cross_references(book_id)


@router.get("/{book_id}/chapter/{chapter}", response_model=List[ChapterCrossReference])
async def get_chapter_cross_references(
    book_id: str,
    chapter: int = Path(..., ge=1),
    context: BibleContext = Depends(get_bible_context),
):
    """Cross references of one chapter with target books as local ids."""
    return context.crossref_resolver.get_cross_references_for_chapter(book_id, chapter)


@router.get(
    "/{book_id}/chapter/{chapter}/verse/{verse}",
    response_model=List[VerseCrossReference],
    response_model_exclude_none=True,
)
async def get_verse_cross_references(
    book_id: str,
    chapter: int = Path(..., ge=1),
    verse: int = Path(..., ge=1),
    context: BibleContext = Depends(get_bible_context),
):
    return context.crossref_resolver.get_local_cross_references_for_verse(book_id, chapter, verse)
