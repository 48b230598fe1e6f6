#!/usr/bin/env python3
"""Build the per-book cross-reference bundle from the OpenBible.info TSV export.

The input is ``cross_references.txt`` from https://www.openbible.info/labs/cross-references/
with lines like ``Gen.1.1<TAB>Prov.8.22-Prov.8.30<TAB>59``. The output is one
``<abbr>.json`` per source book plus ``index.json`` in the crossrefs directory.
"""
import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

# Ensure the package is importable when the script is run directly.
PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from bijbel_api.config import get_settings  # noqa: E402
from bijbel_api.models.schemas import (  # noqa: E402
    BookCrossReferences,
    BookEntry,
    CrossReference,
    CrossRefIndex,
    VerseRef,
)

LOGGER = logging.getLogger(__name__)
SOURCE_NAME = "OpenBible.info cross_references.txt"
DEFAULT_INPUT_PATH = PROJECT_DIR / "cross_references.txt"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build cross-reference JSON files from the OpenBible.info TSV")
    parser.add_argument(
        "--input-path",
        type=Path,
        default=DEFAULT_INPUT_PATH,
        help="Path to cross_references.txt (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write the JSON files to (defaults to the configured crossrefs directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse the input without writing any files",
    )
    return parser.parse_args()


def parse_osis_verse(value: str) -> Tuple[str, int, int]:
    """Split ``Gen.1.1`` into ``("Gen", 1, 1)``."""
    parts = value.strip().split(".")
    if len(parts) != 3:
        raise ValueError(f"Invalid verse reference '{value}'")
    book, chapter, verse = parts
    if not book:
        raise ValueError(f"Missing book in verse reference '{value}'")
    try:
        return book, int(chapter), int(verse)
    except ValueError as exc:
        raise ValueError(f"Invalid chapter/verse in reference '{value}'") from exc


def parse_osis_ref(value: str) -> VerseRef:
    """Parse a single verse or a range like ``Prov.8.22-Prov.8.30``.

    Range ends only carry the book or chapter when it differs from the start.
    """
    start, _, end = value.strip().partition("-")
    book, chapter, verse = parse_osis_verse(start)
    if not end:
        return VerseRef(book=book, chapter=chapter, verse=verse)

    end_book, end_chapter, end_verse = parse_osis_verse(end)
    return VerseRef(
        book=book,
        chapter=chapter,
        verse=verse,
        end_book=end_book if end_book != book else None,
        end_chapter=end_chapter if (end_chapter != chapter or end_book != book) else None,
        end_verse=end_verse,
    )


def iter_cross_reference_rows(lines: Iterable[str]) -> Iterator[Tuple[str, CrossReference]]:
    """Yield ``(source book, cross reference)`` pairs, skipping the header and blank lines."""
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        if not line.strip() or line.startswith("From Verse") or line.startswith("#"):
            continue
        columns = line.split("\t")
        if len(columns) < 3:
            raise ValueError(f"Line {line_number}: expected 3 tab-separated columns")
        try:
            from_book, from_chapter, from_verse = parse_osis_verse(columns[0].partition("-")[0])
            target = parse_osis_ref(columns[1])
            votes = int(columns[2])
        except ValueError as exc:
            raise ValueError(f"Line {line_number}: {exc}") from exc
        yield from_book, CrossReference(
            from_ref=VerseRef(chapter=from_chapter, verse=from_verse),
            to=target,
            votes=votes,
        )


def group_by_book(rows: Iterable[Tuple[str, CrossReference]]) -> Dict[str, List[CrossReference]]:
    """Group references by source book, keeping first-seen book order and row order."""
    grouped: Dict[str, List[CrossReference]] = {}
    for book, ref in rows:
        grouped.setdefault(book, []).append(ref)
    return grouped


def data_file_name(english_abbr: str) -> str:
    return f"{english_abbr.lower()}.json"


def build_index(grouped: Dict[str, List[CrossReference]], generated: date) -> CrossRefIndex:
    return CrossRefIndex(
        source=SOURCE_NAME,
        generated_date=generated.isoformat(),
        total_books=len(grouped),
        books=[
            BookEntry(book=book, file=data_file_name(book), reference_count=len(refs))
            for book, refs in grouped.items()
        ],
    )


def write_json(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=1) + "\n", encoding="utf-8")


def write_bundle(grouped: Dict[str, List[CrossReference]], output_dir: Path, generated: date) -> CrossRefIndex:
    output_dir.mkdir(parents=True, exist_ok=True)
    for book, refs in grouped.items():
        book_refs = BookCrossReferences(book=book, total_references=len(refs), cross_references=refs)
        write_json(output_dir / data_file_name(book), book_refs.model_dump(by_alias=True, exclude_none=True))
        LOGGER.info("Wrote %d references for %s", len(refs), book)
    index = build_index(grouped, generated)
    write_json(output_dir / "index.json", index.model_dump(by_alias=True))
    return index


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args()
    if not args.input_path.exists():
        LOGGER.error("Input file not found: %s", args.input_path)
        sys.exit(1)

    LOGGER.info("Reading cross references from %s", args.input_path)
    with args.input_path.open(encoding="utf-8") as handle:
        grouped = group_by_book(iter_cross_reference_rows(handle))

    total = sum(len(refs) for refs in grouped.values())
    LOGGER.info("Parsed %d references across %d books", total, len(grouped))
    if args.dry_run:
        LOGGER.info("Dry run enabled; skipping writes")
        return

    output_dir = args.output_dir or get_settings().crossrefs_dir
    write_bundle(grouped, output_dir, date.today())
    LOGGER.info("Cross-reference bundle written to %s", output_dir)


if __name__ == "__main__":
    main()
