"""
CLI script to search the question workbook from a terminal.

Usage:
    python scripts/search_cli.py parler                 # Text search
    python scripts/search_cli.py parler --type CE       # Restrict to a type
    python scripts/search_cli.py "" --level B1          # All B1 questions
    python scripts/search_cli.py parler --workbook other.xlsx
    python scripts/search_cli.py parler --config path/to/config.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import get_config, ConfigurationError
from src.core.config_loader import reload_config
from src.core.logger import configure_logging, reset_logging
from src.ingestion import load_corpus_result
from src.search import (
    LEVELS,
    QUESTION_TYPES,
    ContingencyTable,
    FacetSelection,
    MatchEngine,
    run_search,
)
from src.utils import truncate_text


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search French exam questions with accent- and conjugation-tolerant matching"
    )

    parser.add_argument(
        "query",
        help="Search words (empty string lists every question)"
    )

    parser.add_argument(
        "--type",
        choices=QUESTION_TYPES,
        help="Only keep questions of this type"
    )

    parser.add_argument(
        "--level",
        choices=LEVELS,
        help="Only keep questions of this level"
    )

    parser.add_argument(
        "--workbook",
        type=str,
        help="Path to a workbook other than the configured one"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of questions to print (default: 20)"
    )

    return parser.parse_args()


def highlight_terminal(engine: MatchEngine, text: str, query: str) -> str:
    """Wrap matched spans in brackets for terminal output."""
    return "".join(
        f"[{span.text}]" if span.is_match else span.text
        for span in engine.highlight_spans(text, query)
    )


def print_table(table: ContingencyTable) -> None:
    """Print the type x level table with totals."""
    header = "      " + "".join(f"{level:>6}" for level in table.levels) + f"{'Total':>8}"
    print(header)

    for question_type, cells, row_total in table.rows():
        print(f"{question_type:<6}" + "".join(f"{c:>6}" for c in cells) + f"{row_total:>8}")

    column_totals = table.column_totals
    print(
        f"{'Total':<6}"
        + "".join(f"{column_totals[level]:>6}" for level in table.levels)
        + f"{table.grand_total:>8}"
    )


def main():
    """Main entry point for the search CLI."""
    args = parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)

    try:
        config = reload_config(config_path) if args.config else get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    if args.config:
        # Module loggers were set up from the default config at import time
        reset_logging()
        configure_logging(config)

    workbook = Path(args.workbook) if args.workbook else None
    result = load_corpus_result(config, workbook)

    if not result.ok:
        print(result.error)
        sys.exit(1)

    engine = MatchEngine()
    facets = FacetSelection(type=args.type, level=args.level)
    outcome = run_search(result.corpus, args.query, facets, engine=engine)

    print("=" * 60)
    print(f"{outcome.total_results} of {outcome.corpus_size} questions "
          f"({outcome.execution_time_ms:.1f} ms)")
    print("=" * 60)

    if outcome.table is not None:
        print_table(outcome.table)
        print("-" * 60)

    for record in outcome.records[:args.limit]:
        meta = " ".join(
            part for part in (
                record.type,
                record.level or "",
                f"test {record.test_num}" if record.test_num else "",
                f"q{record.question_num}" if record.question_num else "",
            ) if part
        )
        content = truncate_text(record.content, 160)
        print(f"[{meta}] {highlight_terminal(engine, content, args.query)}")
        if record.choices:
            choices = truncate_text(record.choices, 160)
            print(f"    {highlight_terminal(engine, choices, args.query)}")

    if outcome.total_results > args.limit:
        print(f"... and {outcome.total_results - args.limit} more")

    sys.exit(0 if outcome.records else 2)


if __name__ == "__main__":
    main()
