"""Shared test fixtures for ytflow."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import yaml
from click.testing import CliRunner

from ytflow.config import clear_config_cache
from ytflow.domain import Sponsorship, VideoRecord

# Fixed reference time so due-date checks are deterministic
NOW = datetime(2025, 6, 15, 12, 0)


@pytest.fixture
def now() -> datetime:
    """Return the fixed reference time used by classification tests."""
    return NOW


@pytest.fixture
def make_record() -> Callable[..., VideoRecord]:
    """Factory for VideoRecord instances.

    Accepts ``amount``, ``emails`` and ``blocked`` as shortcuts for the
    sponsorship sub-record; every other keyword goes to VideoRecord.
    """

    def _make(
        amount: str = "",
        emails: str = "",
        blocked: str = "",
        **kwargs: Any,
    ) -> VideoRecord:
        kwargs.setdefault(
            "sponsorship", Sponsorship(amount=amount, emails=emails, blocked=blocked)
        )
        return VideoRecord(**kwargs)

    return _make


@pytest.fixture
def write_yaml() -> Callable[[Path, Any], Path]:
    """Write a Python object as YAML, creating parent directories."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def manuscript(tmp_path: Path, write_yaml) -> Path:
    """Create a temporary index and manuscript tree with four videos.

    Returns:
        Path to the index file; videos live under ``<tmp>/manuscript``.
    """
    index_path = tmp_path / "index.yaml"
    write_yaml(
        index_path,
        [
            {"name": "Published Video", "category": "devops"},
            {"name": "Edit Me", "category": "devops"},
            {"name": "Blocked Video", "category": "ama"},
            {"name": "Fresh Idea", "category": "devops"},
            {"name": "Missing File", "category": "devops"},
        ],
    )
    videos = tmp_path / "manuscript"
    write_yaml(
        videos / "devops" / "published-video.yaml",
        {
            "name": "Published Video",
            "category": "devops",
            "date": "2025-01-10T16:00",
            "uploadvideo": "/videos/published.mp4",
            "videoid": "abc123",
        },
    )
    write_yaml(
        videos / "devops" / "edit-me.yaml",
        {"name": "Edit Me", "category": "devops", "requestedit": True},
    )
    write_yaml(
        videos / "ama" / "blocked-video.yaml",
        {
            "name": "Blocked Video",
            "category": "ama",
            "sponsorship": {"amount": "500", "blocked": "Legal"},
        },
    )
    write_yaml(
        videos / "devops" / "fresh-idea.yaml",
        {"name": "Fresh Idea", "category": "devops"},
    )
    return index_path


@pytest.fixture
def runner() -> CliRunner:
    """Return a click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the user's ~/.ytflow and YTFLOW_* settings."""
    for var in (
        "YTFLOW_CONFIG_PATH",
        "YTFLOW_INDEX_PATH",
        "YTFLOW_MANUSCRIPT_DIR",
        "YTFLOW_FAR_FUTURE_MONTHS",
        "YTFLOW_LOG_LEVEL",
        "YTFLOW_LOG_FILE",
        "YTFLOW_LOG_FORMAT",
        "YTFLOW_LOG_INCLUDE_STDERR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("YTFLOW_DATA_DIR", str(tmp_path / "ytflow-data"))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
