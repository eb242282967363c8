"""
Tests for verb variation expansion.

Tests the normalized variations used for matching and the literal
surface forms used for highlighting.
"""

from src.search.variations import (
    VERB_SUFFIXES,
    expand_surface_forms,
    expand_variations,
)
from src.utils import normalize


class TestExpandVariations:
    """Tests for expand_variations."""

    def test_er_verb_expands_to_folded_forms(self):
        """Test that accented endings fold and collapse onto unaccented ones."""
        result = expand_variations("parler")

        assert result == {"parler", "parle", "parles", "parlent", "parlee", "parlees"}

    def test_folding_collapses_to_six_members(self):
        """Test that é/ée/és/ées fold onto e/ee/es/ees, leaving 6 distinct forms."""
        assert len(expand_variations("parler")) == 6
        assert len(VERB_SUFFIXES) == 7

    def test_non_verb_is_unchanged(self):
        """Test that a word not ending in 'er' yields only itself."""
        assert expand_variations("chat") == {"chat"}

    def test_input_is_normalized(self):
        """Test that case and accents are folded before expansion."""
        result = expand_variations("Préférer")

        assert "preferer" in result
        assert "prefere" in result
        assert "preferent" in result

    def test_always_contains_normalized_word(self):
        """Test that the normalized word itself is always present."""
        for word in ["parler", "chat", "Étude", "mer"]:
            assert normalize(word) in expand_variations(word)

    def test_over_generates_for_non_verbs(self):
        """Test that any word ending in 'er' is expanded, verb or not."""
        assert "me" in expand_variations("mer")

    def test_blank_word(self):
        """Test that blank input gives an empty set."""
        assert expand_variations("") == set()
        assert expand_variations("   ") == set()


class TestExpandSurfaceForms:
    """Tests for expand_surface_forms."""

    def test_er_verb_keeps_accented_forms(self):
        """Test that literal forms keep their accents (8 members)."""
        result = expand_surface_forms("parler")

        assert result == {
            "parler", "parle", "parles", "parlent",
            "parlé", "parlée", "parlés", "parlées"
        }

    def test_preserves_accents_of_the_stem(self):
        """Test that the stem is not folded."""
        result = expand_surface_forms("Préférer")

        assert "préféré" in result
        assert "préférées" in result

    def test_non_verb(self):
        """Test that a non-verb gives only its lower-cased form."""
        assert expand_surface_forms("Chat") == {"chat"}

    def test_blank_word(self):
        """Test that blank input gives an empty set."""
        assert expand_surface_forms("") == set()
