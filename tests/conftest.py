"""Shared test fixtures for Transcript Lens."""

import os
import sys
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def qapp():
    """Create a QGuiApplication for tests that need Qt."""
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv or ["test"])
    yield app


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def cost_text(fixtures_dir) -> str:
    return (fixtures_dir / "cost_report.txt").read_text(encoding="utf-8")


@pytest.fixture
def context_text(fixtures_dir) -> str:
    return (fixtures_dir / "context_report.md").read_text(encoding="utf-8")


@pytest.fixture
def release_notes_text(fixtures_dir) -> str:
    return (fixtures_dir / "release_notes.txt").read_text(encoding="utf-8")


@pytest.fixture
def transcript_path(fixtures_dir) -> Path:
    return fixtures_dir / "transcript.jsonl"


@pytest.fixture
def settings(qapp, tmp_path):
    """An isolated INI-backed QSettings."""
    from PySide6.QtCore import QSettings
    return QSettings(str(tmp_path / "config.ini"), QSettings.IniFormat)


@pytest.fixture
def config(settings):
    from transcript_lens.services.config_manager import ConfigManager
    return ConfigManager(settings=settings)
