"""Normalization of raw verse text from the bundled corpus."""
import html
import re

CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
# Corpus artifact: footnote asterisk followed by a stray closing tag.
MALFORMED_ABBR_PATTERN = re.compile(r"\*</abbr>")
TRAILING_ASTERISK_PATTERN = re.compile(r"\s*\*\s*$")
TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")


def _clean_once(text: str) -> str:
    text = html.unescape(text)
    text = CONTROL_CHARS_PATTERN.sub("", text)
    text = MALFORMED_ABBR_PATTERN.sub("", text)
    text = TRAILING_ASTERISK_PATTERN.sub("", text)
    text = TAG_PATTERN.sub("", text)
    text = WHITESPACE_PATTERN.sub(" ", text)
    return text.strip()


def clean_verse_text(text: str) -> str:
    """Decode entities and strip markup, control characters and footnote markers.

    A single pass can expose new work for an earlier step (``&amp;lt;b&amp;gt;``
    decodes to an entity, removing a tag can leave a trailing asterisk), so the
    pipeline is repeated until the text stops changing. Each pass never grows
    the string, which bounds the loop and makes the function idempotent.
    """
    if not text:
        return ""
    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again
