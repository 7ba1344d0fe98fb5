"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point CRONFIELD_HOME at an empty temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("CRONFIELD_HOME", str(home))
    return home


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A config.yaml with one enabled and one disabled schedule."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "schedules:\n"
        "  - name: market-close\n"
        "    cron_expression: '0 16 * * MON-FRI'\n"
        "    description: Weekday close\n"
        "  - name: weekly-review\n"
        "    cron_expression: '@weekly'\n"
        "    enabled: false\n"
    )
    return path
