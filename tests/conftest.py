"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, a generated sample workbook, and mock
configurations to ensure tests are isolated and safe.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from openpyxl import Workbook  # noqa: E402


SAMPLE_SHEETS = {
    "CE": [
        ("Test", "Question", "Niveau", "Énoncé", "Choix"),
        (1, 1, "B1", "Il parle français avec ses collègues.", "A) Oui\nB) Non"),
        (1, 2, "A2", "Nous mangeons à la cantine.", "A) Midi\nB) Soir"),
        (1, 3, "b2", "Le directeur a Ã©tÃ© remplacÃ©.", None),
        (None, None, None, None, None),
        (2, 1, "Z9", "Une étude sur le café.", "A) Café\nB) Thé"),
    ],
    "CO": [
        ("Test", "Question", "Niveau", "Énoncé", "Choix"),
        (1.0, 4.0, "C1", "Ils ont parlé de leurs vacances.", None),
    ],
    "EE": [
        ("Test", "Question", "Sujet"),
        (3, 1, "Rédigez une lettre pour présenter votre ville."),
        (3, 2, ""),
    ],
    "EO": [
        ("Test", "Question", "Sujet"),
        (4, 1, "Parlez de votre famille."),
    ],
}


def write_workbook(path: Path, sheets: dict) -> Path:
    """Write a workbook with one sheet per entry of sheets."""
    workbook = Workbook()
    workbook.remove(workbook.active)

    for name, rows in sheets.items():
        sheet = workbook.create_sheet(name)
        for row in rows:
            sheet.append(list(row))

    workbook.save(path)
    return path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="question_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_workbook(temp_dir: Path) -> Path:
    """
    Create a sample question workbook.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the created .xlsx file.
    """
    data_dir = temp_dir / "data"
    data_dir.mkdir(exist_ok=True)
    return write_workbook(data_dir / "questions.xlsx", SAMPLE_SHEETS)


@pytest.fixture
def temp_config(temp_dir: Path, sample_workbook: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json pointing at the sample workbook.

    Args:
        temp_dir: Temporary directory fixture.
        sample_workbook: Sample workbook fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "workbook_path": str(sample_workbook),
            "logs_directory": str(logs_dir)
        },
        "assets": {
            "css_path": "assets/style.css"
        },
        "ingestion": {
            "header_rows": 1,
            "repair_encoding": True,
            "sheets": {
                "CE": {"sheet": "CE", "test_num": 0, "question_num": 1, "level": 2, "content": 3, "choices": 4},
                "CO": {"sheet": "CO", "test_num": 0, "question_num": 1, "level": 2, "content": 3, "choices": 4},
                "EE": {"sheet": "EE", "test_num": 0, "question_num": 1, "level": None, "content": 2},
                "EO": {"sheet": "EO", "test_num": 0, "question_num": 1, "level": None, "content": 2}
            }
        },
        "search": {
            "debounce_ms": 300,
            "max_results": 50
        },
        "gui": {
            "page_title": "Test Questions",
            "subtitle": "Tests"
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from src.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Remove installed handlers and reset the initialization flag between tests.
    """
    from src.core.logger import reset_logging
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """
    Load the temporary config as the global config.

    Yields:
        The loaded Config instance.
    """
    from src.core.config_loader import get_config
    yield get_config(temp_config)


@pytest.fixture
def sample_records():
    """A small in-memory set of records covering every type."""
    from src.search.models import QuestionRecord

    return [
        QuestionRecord(id="CE-2", type="CE", level="B1", content="Il parle français", choices="A) Oui"),
        QuestionRecord(id="CE-3", type="CE", level="A2", content="Nous mangeons ensemble"),
        QuestionRecord(id="CO-2", type="CO", level="B1", content="Elles ont parlé longtemps"),
        QuestionRecord(id="CO-3", type="CO", level="C1", content="Une Étude du climat"),
        QuestionRecord(id="EE-2", type="EE", content="Parlez de votre ville"),
        QuestionRecord(id="EO-2", type="EO", level="B1", content="Décrivez un chat"),
    ]


@pytest.fixture
def workbook_factory():
    """Expose write_workbook to tests that need their own workbook."""
    return write_workbook
