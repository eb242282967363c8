"""
Ingestion module turning the question workbook into a corpus.

Provides the openpyxl workbook reader, per-sheet record building with
encoding repair, and the all-or-nothing corpus loader.
"""

from .workbook_reader import WorkbookReader
from .record_builder import build_record, build_records
from .loader import LoadResult, load_corpus, load_corpus_result

__all__ = [
    "WorkbookReader",
    "build_record",
    "build_records",
    "LoadResult",
    "load_corpus",
    "load_corpus_result"
]
