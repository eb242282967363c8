"""
Corpus loading with all-or-nothing semantics.

Reads every configured sheet and builds the session corpus. Any failure
aborts the whole load: a partial corpus is never returned.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core import get_config, get_logger, Config, QuestionSearchError
from ..search.models import Corpus
from .record_builder import build_records
from .workbook_reader import WorkbookReader

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """
    Outcome of a corpus load, consumed once by the interface.

    Exactly one of corpus and error is set.
    """
    corpus: Optional[Corpus] = None
    error: Optional[str] = None
    load_time_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.corpus is not None


def load_corpus(config: Config = None, workbook_path: Path = None) -> Corpus:
    """
    Load the question corpus from the workbook.

    Args:
        config: Configuration to use. Defaults to the global config.
        workbook_path: Override for the workbook location.

    Returns:
        The complete corpus.

    Raises:
        IngestionError: If the workbook cannot be read or ids collide.
    """
    config = config or get_config()
    ingestion = config.ingestion
    path = Path(workbook_path or config.paths.workbook_path)

    reader = WorkbookReader(header_rows=ingestion.header_rows)
    sheet_names = [mapping.sheet for mapping in ingestion.sheets.values()]
    sheets = reader.read(path, sheet_names)

    records = []
    for question_type, mapping in ingestion.sheets.items():
        type_records = build_records(
            question_type,
            sheets[mapping.sheet],
            mapping,
            first_row_number=ingestion.header_rows + 1,
            fix_encoding=ingestion.repair_encoding
        )
        logger.debug(f"{question_type}: {len(type_records)} questions")
        records.extend(type_records)

    corpus = Corpus(records)

    logger.info(f"Loaded {len(corpus)} questions from {path.name}")

    return corpus


def load_corpus_result(config: Config = None, workbook_path: Path = None) -> LoadResult:
    """
    Load the corpus and report failure as a value instead of raising.

    Args:
        config: Configuration to use. Defaults to the global config.
        workbook_path: Override for the workbook location.

    Returns:
        LoadResult carrying either the corpus or a readable error message.
    """
    start_time = time.time()

    try:
        corpus = load_corpus(config, workbook_path)
    except QuestionSearchError as e:
        logger.error(f"Corpus load failed: {e.message}")
        return LoadResult(error=f"Impossible de charger les questions : {e.message}")

    return LoadResult(
        corpus=corpus,
        load_time_ms=round((time.time() - start_time) * 1000, 2)
    )


if __name__ == "__main__":
    result = load_corpus_result()

    if result.ok:
        print(f"Loaded {len(result.corpus)} questions in {result.load_time_ms:.0f} ms")
        print(f"By type: {result.corpus.count_by_type()}")
    else:
        print(result.error)
