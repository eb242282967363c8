"""
Configuration loader for the question search application.

Loads settings from config/config.json and provides typed access via
dataclasses. Supports singleton access and runtime reload.

The per-type sheet mapping lives here: each question type is read from
its own worksheet, with its own column positions.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import ConfigurationError
from .logger import DEFAULT_QUIET_LOGGERS, LOG_FILENAME


KNOWN_QUESTION_TYPES = ("CE", "CO", "EE", "EO")


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    workbook_path: Path
    logs_directory: Path


@dataclass
class AssetsConfig:
    """Configuration for UI assets paths."""
    css_path: Path


@dataclass
class SheetMapping:
    """
    Column positions for one worksheet.

    Indices are zero-based. None means the sheet has no such column.
    """
    sheet: str
    content: int
    choices: Optional[int] = None
    level: Optional[int] = None
    test_num: Optional[int] = None
    question_num: Optional[int] = None


@dataclass
class IngestionConfig:
    """Configuration for reading the question workbook."""
    header_rows: int
    sheets: Dict[str, SheetMapping]
    repair_encoding: bool = True


@dataclass
class SearchConfig:
    """Configuration for search behaviour."""
    debounce_ms: int
    max_results: int


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str
    subtitle: str


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int
    quiet_loggers: List[str] = field(default_factory=lambda: list(DEFAULT_QUIET_LOGGERS))
    filename: str = LOG_FILENAME


DEFAULT_SHEETS = {
    "CE": {"sheet": "CE", "test_num": 0, "question_num": 1, "level": 2, "content": 3, "choices": 4},
    "CO": {"sheet": "CO", "test_num": 0, "question_num": 1, "level": 2, "content": 3, "choices": 4},
    "EE": {"sheet": "EE", "test_num": 0, "question_num": 1, "level": None, "content": 2, "choices": None},
    "EO": {"sheet": "EO", "test_num": 0, "question_num": 1, "level": None, "content": 2, "choices": None},
}


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    assets: AssetsConfig
    ingestion: IngestionConfig
    search: SearchConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            workbook_path=cls._resolve_path(paths_data.get("workbook_path", "data/questions.xlsx"), project_root),
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        assets_data = data.get("assets", {})
        assets = AssetsConfig(
            css_path=cls._resolve_path(assets_data.get("css_path", "assets/style.css"), project_root)
        )

        ingestion_data = data.get("ingestion", {})
        ingestion = IngestionConfig(
            header_rows=ingestion_data.get("header_rows", 1),
            sheets=cls._parse_sheets(ingestion_data.get("sheets", DEFAULT_SHEETS)),
            repair_encoding=ingestion_data.get("repair_encoding", True)
        )

        search_data = data.get("search", {})
        search = SearchConfig(
            debounce_ms=search_data.get("debounce_ms", 300),
            max_results=search_data.get("max_results", 200)
        )

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "Questions de français"),
            subtitle=gui_data.get("subtitle", "Recherche dans les sujets d'examen")
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5),
            quiet_loggers=list(log_data.get("quiet_loggers", DEFAULT_QUIET_LOGGERS)),
            filename=log_data.get("filename", LOG_FILENAME)
        )

        return cls(
            paths=paths,
            assets=assets,
            ingestion=ingestion,
            search=search,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _parse_sheets(sheets_data: dict) -> Dict[str, SheetMapping]:
        """Parse the per-type sheet mapping, rejecting unknown types."""
        sheets = {}

        for question_type, mapping in sheets_data.items():
            if question_type not in KNOWN_QUESTION_TYPES:
                raise ConfigurationError(
                    f"Unknown question type in sheet mapping: {question_type}",
                    {"known_types": list(KNOWN_QUESTION_TYPES)}
                )

            if mapping.get("content") is None:
                raise ConfigurationError(
                    f"Sheet mapping for {question_type} has no content column",
                    {"mapping": mapping}
                )

            sheets[question_type] = SheetMapping(
                sheet=mapping.get("sheet", question_type),
                content=mapping["content"],
                choices=mapping.get("choices"),
                level=mapping.get("level"),
                test_num=mapping.get("test_num"),
                question_num=mapping.get("question_num")
            )

        return sheets

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(Path(config_path))

    return _config_instance


def _find_config_file() -> Path:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Workbook: {config.paths.workbook_path}")
        print(f"Debounce: {config.search.debounce_ms} ms")
        for question_type, mapping in config.ingestion.sheets.items():
            print(f"  {question_type}: sheet '{mapping.sheet}', content column {mapping.content}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
