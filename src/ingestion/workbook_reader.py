"""
Workbook reading backend using openpyxl.

Reads the configured worksheets of the question workbook into plain
row tuples. Cell interpretation is left to the record builder.
"""

import zipfile
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..core import get_logger, IngestionError

logger = get_logger(__name__)


Row = Tuple[object, ...]


class WorkbookReader:
    """
    Reads worksheet rows from an .xlsx file.

    Opens the workbook read-only with cached values (formulas resolved
    to their last computed result).
    """

    def __init__(self, header_rows: int = 1):
        """
        Initialize the reader.

        Args:
            header_rows: Number of leading rows to skip in every sheet.
        """
        self.header_rows = max(0, header_rows)

    def read(
        self,
        filepath: Union[str, Path],
        sheet_names: Iterable[str]
    ) -> Dict[str, List[Row]]:
        """
        Read rows from the named sheets.

        Args:
            filepath: Path to the workbook.
            sheet_names: Sheets to read; all must exist.

        Returns:
            Mapping of sheet name to its data rows, header rows removed.

        Raises:
            IngestionError: If the file is missing, unreadable, or lacks a sheet.
        """
        filepath = Path(filepath)
        sheet_names = list(sheet_names)

        if not filepath.exists():
            raise IngestionError(
                f"Workbook not found: {filepath}",
                source=str(filepath)
            )

        try:
            workbook = load_workbook(filepath, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as e:
            raise IngestionError(
                f"Cannot open workbook: {e}",
                source=str(filepath)
            )

        try:
            missing = [name for name in sheet_names if name not in workbook.sheetnames]
            if missing:
                raise IngestionError(
                    f"Missing sheet(s) in workbook: {', '.join(missing)}",
                    source=str(filepath),
                    details={"available": list(workbook.sheetnames)}
                )

            sheets = {}
            for name in sheet_names:
                rows = list(workbook[name].iter_rows(values_only=True))
                sheets[name] = rows[self.header_rows:]
                logger.debug(f"Read {len(sheets[name])} rows from sheet '{name}'")

            return sheets

        finally:
            workbook.close()


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 3:
        print("Usage: python workbook_reader.py <workbook.xlsx> <sheet> [<sheet> ...]")
        sys.exit(1)

    reader = WorkbookReader()

    try:
        data = reader.read(sys.argv[1], sys.argv[2:])
        for sheet, rows in data.items():
            print(f"{sheet}: {len(rows)} rows")
            if rows:
                print(f"  first row: {rows[0]}")
    except IngestionError as e:
        print(f"Read failed: {e.message}")
