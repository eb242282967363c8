"""
Text utility functions for the question search application.

Provides the comparison key used by matching (accent- and case-folding),
repair of mis-decoded spreadsheet text, and cell value cleanup.
"""

import re
import unicodedata
from typing import Any, Dict, List, Tuple


# Combining diacritical marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

# Characters that show up garbled when UTF-8 bytes are read as a
# single-byte Latin encoding ("Ã©" for "é", "â€™" for "’").
_MOJIBAKE_SOURCE_CHARS = "éèêëàâäîïôöùûüÿçœæÉÈÊËÀÂÎÔÙÛÇŒ’‘“”«»…–—\u00a0"


def _build_mojibake_table() -> List[Tuple[str, str]]:
    """Build (garbled, correct) pairs, longest garbled sequence first."""
    table: Dict[str, str] = {}

    for char in _MOJIBAKE_SOURCE_CHARS:
        raw = char.encode("utf-8")
        for encoding in ("cp1252", "latin-1"):
            try:
                garbled = raw.decode(encoding)
            except UnicodeDecodeError:
                continue
            if garbled != char:
                table[garbled] = char

    # "à" is C3 A0: the A0 half is a no-break space, often retyped or
    # re-saved as a plain space
    table["\u00c3 "] = "\u00e0"
    table["\u00c3\u00a0"] = "\u00e0"

    return sorted(table.items(), key=lambda pair: len(pair[0]), reverse=True)


MOJIBAKE_TABLE = _build_mojibake_table()

# "Ã" left alone at a word end once its no-break space was trimmed away
_ORPHAN_A_GRAVE = re.compile("\u00c3(?=$|[\\s.,;:!?)\u00bb\"'])")


def normalize(text: str) -> str:
    """
    Build the comparison key for a piece of text.

    Lower-cases, decomposes (NFD) and drops combining diacritical marks,
    so "Étude" and "etude" compare equal. Never used for display.

    Args:
        text: Any text, possibly None.

    Returns:
        Folded text, or "" for empty input.
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed)


def repair_encoding(text: str) -> str:
    """
    Replace known mis-decoding artifacts with the intended characters.

    Args:
        text: Raw cell text.

    Returns:
        Text with garbled sequences such as "Ã©" replaced by "é".
    """
    if not text:
        return ""

    if "Ã" not in text and "Â" not in text and "â" not in text and "Å" not in text:
        return text

    for garbled, correct in MOJIBAKE_TABLE:
        if garbled in text:
            text = text.replace(garbled, correct)

    return _ORPHAN_A_GRAVE.sub("\u00e0", text)


def clean_text(text: str) -> str:
    """
    Tidy whitespace in a text cell.

    Collapses runs of spaces and tabs, limits blank lines to one, and
    strips each line. Line breaks are kept since question bodies are
    displayed as written.

    Args:
        text: Raw cell text.

    Returns:
        Cleaned text string.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    lines = [line.strip() for line in text.split("\n")]

    return "\n".join(lines).strip()


def clean_cell(value: Any) -> str:
    """
    Convert a spreadsheet cell value to display text.

    Whole floats lose their ".0" so a test number stored as 12.0 shows
    as "12".

    Args:
        value: Cell value as returned by the workbook reader.

    Returns:
        Cleaned string, "" for empty cells.
    """
    if value is None:
        return ""

    if isinstance(value, bool):
        return str(value)

    if isinstance(value, float) and value.is_integer():
        return str(int(value))

    return clean_text(str(value))


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Fit a question on one line of terminal output.

    Line breaks between choices become single spaces, then anything past
    max_length is cut back to the last whole word that fits.

    Args:
        text: Question content or choices, possibly multi-line.
        max_length: Maximum length including suffix.
        suffix: String appended when text was cut.

    Returns:
        Single-line text of at most max_length characters.
    """
    if not text:
        return ""

    flat = " ".join(text.split())
    if len(flat) <= max_length:
        return flat

    room = max_length - len(suffix)
    if room <= 0:
        return suffix[:max_length]

    cut = flat.rfind(" ", 0, room + 1)
    if cut <= 0:
        cut = room

    return flat[:cut].rstrip(" ,;:") + suffix


if __name__ == "__main__":
    print("=== normalize ===")
    for sample in ["café", "CAFÉ", "Étude", "Ça s'est bien passé"]:
        print(f"  {sample!r} -> {normalize(sample)!r}")

    print("\n=== repair_encoding ===")
    garbled = "Il a Ã©tÃ© dÃ©cidÃ© que lâ€™Ã©lÃ¨ve irait Ã  Paris."
    print(f"  {garbled}")
    print(f"  {repair_encoding(garbled)}")

    print("\n=== clean_cell ===")
    for value in [None, 12.0, 3.5, "  A)  oui \n\n\n B) non  "]:
        print(f"  {value!r} -> {clean_cell(value)!r}")
