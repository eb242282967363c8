"""
Conjugation-tolerant variations of a search word.

A word ending in "er" is treated as a regular -er verb infinitive and
expanded to its common present-tense and past-participle endings, so
a search for "parler" also finds "parle", "parlent" or "parlées".
Purely suffix-driven: any word ending in "er" is expanded.
"""

import unicodedata
from typing import Set

from ..utils import normalize


INFINITIVE_SUFFIX = "er"

VERB_SUFFIXES = ("e", "es", "ent", "é", "ée", "és", "ées")


def expand_surface_forms(word: str) -> Set[str]:
    """
    Literal forms of a word, accents kept.

    Used for highlighting, where the display text still carries its
    accents ("parlé" must be found as written).

    Args:
        word: A single query token.

    Returns:
        Lower-cased forms including the word itself. Empty set for blank input.
    """
    lowered = unicodedata.normalize("NFC", (word or "").strip()).lower()
    if not lowered:
        return set()

    forms = {lowered}

    if normalize(lowered).endswith(INFINITIVE_SUFFIX):
        stem = lowered[:-len(INFINITIVE_SUFFIX)]
        forms.update(stem + suffix for suffix in VERB_SUFFIXES)

    return forms


def expand_variations(word: str) -> Set[str]:
    """
    Normalized forms of a word, for matching against normalized content.

    Always contains normalize(word). Folding collapses "é" onto "e", so
    "parler" gives six forms: parler, parle, parles, parlent, parlee, parlees.

    Args:
        word: A single query token.

    Returns:
        Set of normalized forms. Empty set for blank input.
    """
    base = normalize((word or "").strip())
    if not base:
        return set()

    variations = {base}

    if base.endswith(INFINITIVE_SUFFIX):
        stem = base[:-len(INFINITIVE_SUFFIX)]
        variations.update(normalize(stem + suffix) for suffix in VERB_SUFFIXES)

    return variations


if __name__ == "__main__":
    for sample in ["parler", "Préférer", "chat", "manger"]:
        print(f"{sample}:")
        print(f"  normalized: {sorted(expand_variations(sample))}")
        print(f"  surface:    {sorted(expand_surface_forms(sample))}")
