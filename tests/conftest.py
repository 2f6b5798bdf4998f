"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from scriptlines.config import ScriptLinesSettings, configure_logging, reset_settings

SAMPLE_SCRIPT = """FADE IN:

INT. COFFEE SHOP - DAY

Sunlight pours through the front window.

JOHN
Morning, Jane.

JANE
(tired)
You're late again.

JOHN
Traffic.

CUT TO:

EXT. PARKING LOT - NIGHT

Rain hammers the asphalt.

JANE
Where did you park?

INT. COFFEE SHOP - NIGHT

JOHN (CONT'D)
We're closed.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running (may need extended timeout)",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )


@pytest.fixture(autouse=True)
def cleanup_singletons(monkeypatch):
    """Reset the settings singleton and environment between tests."""
    for name in (
        "SCRIPTLINES_DEBUG",
        "SCRIPTLINES_LOG_LEVEL",
        "SCRIPTLINES_LOG_FORMAT",
        "SCRIPTLINES_LOG_FILE",
        "SCRIPTLINES_AUTOCOMPLETE_ENABLED",
        "SCRIPTLINES_AUTOCOMPLETE_DELAY_MS",
        "SCRIPTLINES_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    # Commands may rebind log handlers to a CLI runner stream
    configure_logging(ScriptLinesSettings())


@pytest.fixture
def sample_script() -> str:
    """A short screenplay exercising every element type."""
    return SAMPLE_SCRIPT


@pytest.fixture
def script_file(tmp_path: Path) -> Path:
    """The sample screenplay written to disk."""
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_SCRIPT, encoding="utf-8")
    return path
