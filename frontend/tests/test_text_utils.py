"""
Tests for search text normalization and highlighting
"""
import pytest

from storefront.utils.text_utils import highlight_search_term, normalize_text


class TestNormalizeText:

    @pytest.mark.parametrize("text, expected", [
        ("Lápiz", "lapiz"),
        ("CAFÉ", "cafe"),
        ("  Té Verde!  ", "te verde"),
        ("Set (12)", "set 12"),
        ("Ñandú", "nandu"),
        ("", ""),
    ])
    def test_examples(self, text, expected):
        assert normalize_text(text) == expected

    def test_accent_insensitive_equality(self):
        assert normalize_text("lápiz") == normalize_text("lapiz")

    @pytest.mark.parametrize("text", ["Lápiz Grafito HB (Caja x12)", "Botella Térmica 750ml", "¿Qué?"])
    def test_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once


class TestHighlightSearchTerm:

    def test_wraps_matching_words(self):
        assert highlight_search_term("Taza de Cerámica", "ceram") == "Taza de <mark>Cerámica</mark>"

    def test_empty_term_returns_text_unchanged(self):
        assert highlight_search_term("Taza  de Cerámica", "") == "Taza  de Cerámica"
        assert highlight_search_term("Taza", "!!") == "Taza"

    def test_whitespace_collapsed_when_highlighting(self):
        assert highlight_search_term("Taza   de", "taza") == "<mark>Taza</mark> de"

    def test_custom_wrap(self):
        assert highlight_search_term("Café Café", "cafe", wrap=str.upper) == "CAFÉ CAFÉ"
