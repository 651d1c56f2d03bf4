# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todokit.config import StorageKind, TodokitConfig, get_config, get_config_dir, save_config
from todokit.infrastructure import InMemoryTodoRepository, JsonTodoRepository, build_repository
from todokit.logging_setup import _ConsoleNoiseFilter, setup_logging


def test_config_dir_follows_home_override(isolated_home: Path) -> None:
    assert get_config_dir() == isolated_home


def test_config_dir_is_created_on_demand(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fresh = tmp_path / "nested" / "home"
    monkeypatch.setenv("TODOKIT_HOME", str(fresh))

    assert get_config_dir() == fresh
    assert fresh.is_dir()


def test_defaults(isolated_home: Path) -> None:
    config = get_config()
    assert config.data_file == isolated_home / "todos.json"
    assert config.storage is StorageKind.JSON
    assert config.log_level == "WARNING"


def test_environment_overrides_file(isolated_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    save_config(TodokitConfig(storage="json", log_level="info"))
    monkeypatch.setenv("TODOKIT_STORAGE", "memory")
    monkeypatch.setenv("TODOKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODOKIT_DATA_FILE", str(isolated_home / "elsewhere.json"))

    config = get_config()
    assert config.storage is StorageKind.MEMORY
    assert config.log_level == "DEBUG"
    assert config.data_file == isolated_home / "elsewhere.json"


def test_saved_config_round_trips(isolated_home: Path) -> None:
    save_config(TodokitConfig(data_file=isolated_home / "mine.json", log_level="error"))

    config = get_config()
    assert config.data_file == isolated_home / "mine.json"
    assert config.log_level == "ERROR"


@pytest.mark.parametrize("content", ["{broken", '{"storage": "sqlite"}', '{"log_level": "LOUD"}', "[1, 2]"])
def test_bad_config_file_falls_back_to_defaults(isolated_home: Path, content: str) -> None:
    (isolated_home / "config.json").write_text(content, encoding="utf-8")
    assert get_config() == TodokitConfig()


def test_build_repository_follows_storage_kind(tmp_path: Path) -> None:
    assert isinstance(build_repository(TodokitConfig(storage="memory")), InMemoryTodoRepository)

    repo = build_repository(TodokitConfig(data_file=tmp_path / "todos.json"))
    assert isinstance(repo, JsonTodoRepository)
    assert repo.path == tmp_path / "todos.json"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG")
        setup_logging("INFO")

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("todokit", logging.DEBUG, True),
        ("todokit.application.service", logging.INFO, True),
        ("httpx", logging.INFO, False),
        ("todokitten", logging.WARNING, False),
        ("uvicorn.error", logging.ERROR, True),
    ],
)
def test_console_filter_quiets_third_party_loggers(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown
