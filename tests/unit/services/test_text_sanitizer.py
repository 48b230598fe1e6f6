"""Tests for verse text sanitization."""
import pytest

from bijbel_api.services.text_sanitizer import clean_verse_text


class TestCleanVerseText:
    """Examples from the source corpus and edge cases."""

    def test_decodes_entities_and_removes_abbr_marker(self):
        raw = "Toen sprak God: &#39;Er moet licht zijn!&#39; En er was licht*</abbr>."
        assert clean_verse_text(raw) == "Toen sprak God: 'Er moet licht zijn!' En er was licht."

    def test_strips_markup(self):
        assert clean_verse_text("Dit is <b>vet</b> en <i>cursief</i> tekst.") == "Dit is vet en cursief tekst."

    def test_removes_control_characters(self):
        assert clean_verse_text("Einde van het boek.\u001a") == "Einde van het boek."
        assert clean_verse_text("a\x00b\x7fc") == "abc"

    def test_removes_trailing_asterisk(self):
        assert clean_verse_text("De aarde was woest *") == "De aarde was woest"
        assert clean_verse_text("De aarde was woest*  ") == "De aarde was woest"

    def test_keeps_inner_asterisk(self):
        assert clean_verse_text("een * ster") == "een * ster"

    def test_collapses_whitespace(self):
        assert clean_verse_text("  veel \t  ruimte\n hier  ") == "veel ruimte hier"

    def test_empty_input(self):
        assert clean_verse_text("") == ""

    def test_entity_decoded_tags_are_stripped(self):
        assert clean_verse_text("&lt;b&gt;vet&lt;/b&gt;") == "vet"


@pytest.mark.parametrize(
    "raw",
    [
        "Toen sprak God: &#39;Er moet licht zijn!&#39; En er was licht*</abbr>.",
        "&amp;#39;dubbel gecodeerd&amp;#39;",
        "&amp;lt;b&amp;gt;vet&amp;lt;/b&amp;gt;",
        "a * *",
        "licht*<i></i>",
        "tekst *</abbr>*",
        "\t\x01 <p>alinea</p> \x1a",
        "<<b>>",
        "gewone tekst",
        "&#0;&#x1a;",
    ],
)
def test_clean_is_idempotent(raw):
    once = clean_verse_text(raw)
    assert clean_verse_text(once) == once
