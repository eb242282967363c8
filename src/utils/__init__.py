"""
Utility module providing shared text helpers.

Contains the normalization key used for matching, encoding repair for
spreadsheet text, and cell cleanup. Has no internal dependencies.
"""

from .text_utils import (
    normalize,
    repair_encoding,
    clean_text,
    clean_cell,
    truncate_text
)

__all__ = [
    "normalize",
    "repair_encoding",
    "clean_text",
    "clean_cell",
    "truncate_text"
]
