"""Configuration for pytest.

Builds a small data bundle in a temporary directory: the packaged book catalog
and mapping, verse data for Genesis and Matteüs, and cross references for
Genesis, Matteüs and Apokalyps.
"""
import json
import shutil
from pathlib import Path

import pytest

from bijbel_api.config import PACKAGE_DATA_DIR
from bijbel_api.context import build_bible_context

GENESIS_1_1 = "In het begin schiep God de hemel en de aarde."


def _verse(chapter, verse, text, paragraph="n", title=""):
    return {
        "chapter": chapter,
        "verse": verse,
        "text": text,
        "id": f"{chapter}-{verse}",
        "paragraph": paragraph,
        "title": title,
        "crossReference": None,
    }


def genesis_book():
    verses = [
        _verse(1, 1, "In het begin schiep God de <b>hemel</b> en de aarde.\u001a", paragraph="y", title="De schepping"),
        _verse(1, 2, "De aarde was woest en   doods*"),
        _verse(1, 3, "Toen sprak God: &#39;Er moet licht zijn!&#39; En er was licht*</abbr>."),
    ]
    verses += [_verse(1, n, f"Vers {n} van hoofdstuk 1.") for n in range(4, 32)]
    verses += [_verse(2, n, f"Vers {n} van hoofdstuk 2.", paragraph="y" if n == 1 else "n") for n in range(1, 4)]
    return {"id": "genesis", "name": "Genesis", "chapters": 50, "verseCount": len(verses), "verses": verses}


def matteus_book():
    verses = [
        _verse(1, 1, "Stamboom van Jezus Christus.", paragraph="y"),
        _verse(5, 1, "Toen Jezus de menigte zag, ging Hij de berg op."),
    ]
    return {"id": "matteus", "name": "Matteüs", "chapters": 28, "verseCount": len(verses), "verses": verses}


def genesis_crossrefs():
    refs = [
        {"from": {"chapter": 1, "verse": 1}, "to": {"book": "Rev", "chapter": 4, "verse": 11}, "votes": 191},
        {"from": {"chapter": 1, "verse": 1}, "to": {"book": "John", "chapter": 1, "verse": 1, "endVerse": 3}, "votes": 300},
        {"from": {"chapter": 1, "verse": 2}, "to": {"book": "Ps", "chapter": 33, "verse": 6}, "votes": 40},
        {"from": {"chapter": 1, "verse": 1}, "to": {"book": "Heb", "chapter": 11, "verse": 3}, "votes": 120},
        {"from": {"chapter": 1, "verse": 1}, "to": {"book": "Sir", "chapter": 16, "verse": 26}, "votes": 2},
        {"from": {"chapter": 2, "verse": 1}, "to": {"book": "Exod", "chapter": 20, "verse": 11}, "votes": 55},
        {
            "from": {"chapter": 2, "verse": 2},
            "to": {"book": "Exod", "chapter": 20, "verse": 11, "endBook": "Deut", "endChapter": 5, "endVerse": 14},
            "votes": 3,
        },
    ]
    return {"book": "Gen", "totalReferences": len(refs), "crossReferences": refs}


def matteus_crossrefs():
    refs = [
        {"from": {"chapter": 5, "verse": 1}, "to": {"book": "Luke", "chapter": 6, "verse": 17, "endChapter": 7, "endVerse": 1}, "votes": 80},
    ]
    return {"book": "Matt", "totalReferences": len(refs), "crossReferences": refs}


def apokalyps_crossrefs():
    refs = [
        {"from": {"chapter": 4, "verse": 11}, "to": {"book": "Gen", "chapter": 1, "verse": 1}, "votes": 191},
    ]
    return {"book": "Rev", "totalReferences": len(refs), "crossReferences": refs}


def crossref_index():
    return {
        "source": "test fixture",
        "generatedDate": "2024-01-01",
        "totalBooks": 3,
        "books": [
            {"book": "Gen", "file": "gen.json", "referenceCount": 7},
            {"book": "Matt", "file": "matt.json", "referenceCount": 1},
            {"book": "Rev", "file": "rev.json", "referenceCount": 1},
        ],
    }


def write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def write_bundle(root: Path) -> Path:
    """Write the fixture bundle below ``root`` and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    shutil.copy(PACKAGE_DATA_DIR / "books.json", root / "books.json")
    (root / "crossrefs").mkdir(exist_ok=True)
    shutil.copy(PACKAGE_DATA_DIR / "crossrefs" / "book-mapping.json", root / "crossrefs" / "book-mapping.json")
    write_json(root / "books" / "genesis.json", genesis_book())
    write_json(root / "books" / "matteus.json", matteus_book())
    write_json(root / "crossrefs" / "index.json", crossref_index())
    write_json(root / "crossrefs" / "gen.json", genesis_crossrefs())
    write_json(root / "crossrefs" / "matt.json", matteus_crossrefs())
    write_json(root / "crossrefs" / "rev.json", apokalyps_crossrefs())
    return root


@pytest.fixture(scope="session")
def bundle_dir(tmp_path_factory):
    """Read-only fixture bundle shared by the whole session."""
    return write_bundle(tmp_path_factory.mktemp("bundle"))


@pytest.fixture
def scratch_bundle(tmp_path):
    """Fixture bundle a single test may modify."""
    return write_bundle(tmp_path / "bundle")


@pytest.fixture(scope="session")
def bible_context(bundle_dir):
    return build_bible_context(bundle_dir)
