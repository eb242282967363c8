"""
Conversion of raw worksheet rows into question records.

Each question type has its own column layout (see SheetMapping). Cells
that are missing or of an unexpected type degrade to empty values; only
rows without question content are dropped.
"""

from typing import List, Optional, Sequence

from ..core import get_logger, SheetMapping
from ..search.models import LEVELS, QuestionRecord
from ..utils import clean_cell, repair_encoding

logger = get_logger(__name__)


def _cell(row: Sequence, index: Optional[int], fix_encoding: bool) -> str:
    """Read one cell by position, "" when the column is absent."""
    if index is None or index < 0 or index >= len(row):
        return ""

    value = row[index]
    # Repair before cleaning: stripping would eat the no-break space of "Ã\xa0"
    if fix_encoding and isinstance(value, str):
        value = repair_encoding(value)
    return clean_cell(value)


def _parse_level(raw: str, record_id: str) -> Optional[str]:
    level = raw.strip().upper()
    if not level:
        return None
    if level not in LEVELS:
        logger.debug(f"Ignoring unknown level '{raw}' for {record_id}")
        return None
    return level


def build_record(
    question_type: str,
    row_number: int,
    row: Sequence,
    mapping: SheetMapping,
    fix_encoding: bool = True
) -> Optional[QuestionRecord]:
    """
    Build a record from one worksheet row.

    Args:
        question_type: Type of every question in this sheet.
        row_number: 1-based row number in the sheet, used for the id.
        row: Positional cell values.
        mapping: Column positions for this sheet.
        fix_encoding: Whether to repair mis-decoded text.

    Returns:
        The record, or None if the row has no content.
    """
    row = row or ()

    content = _cell(row, mapping.content, fix_encoding)
    if not content:
        return None

    record_id = f"{question_type}-{row_number}"

    return QuestionRecord(
        id=record_id,
        type=question_type,
        content=content,
        choices=_cell(row, mapping.choices, fix_encoding),
        level=_parse_level(_cell(row, mapping.level, False), record_id),
        test_num=_cell(row, mapping.test_num, False) or None,
        question_num=_cell(row, mapping.question_num, False) or None
    )


def build_records(
    question_type: str,
    rows: Sequence[Sequence],
    mapping: SheetMapping,
    first_row_number: int = 2,
    fix_encoding: bool = True
) -> List[QuestionRecord]:
    """
    Build records for every row of a sheet, skipping empty ones.

    Args:
        question_type: Type of every question in this sheet.
        rows: Data rows, header already removed.
        mapping: Column positions for this sheet.
        first_row_number: Sheet row number of rows[0].
        fix_encoding: Whether to repair mis-decoded text.

    Returns:
        Records in sheet order.
    """
    records = []
    skipped = 0

    for offset, row in enumerate(rows):
        record = build_record(
            question_type,
            first_row_number + offset,
            row,
            mapping,
            fix_encoding
        )
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.debug(f"{question_type}: skipped {skipped} row(s) without content")

    return records
