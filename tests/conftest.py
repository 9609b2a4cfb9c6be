"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from hourglass.domain.models import DEFAULT_UNITS
from hourglass.services import DurationService, PatternRegistry, compile_patterns


@pytest.fixture
def registry() -> PatternRegistry:
    """Patterns compiled from the default unit table."""
    return compile_patterns(DEFAULT_UNITS)


@pytest.fixture
def service() -> DurationService:
    """Duration service with default units and format."""
    return DurationService()


# Config fixtures
@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Empty project directory with an isolated home and no HOURGLASS_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("HOURGLASS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HOURGLASS_FORMAT", raising=False)
    monkeypatch.chdir(root)
    yield root


@pytest.fixture
def write_config(project_root: Path):
    """Write a YAML file under <project>/.hourglass/."""

    def _write(text: str, name: str = "config.yaml") -> Path:
        config_dir = project_root / ".hourglass"
        config_dir.mkdir(exist_ok=True)
        path = config_dir / name
        path.write_text(text)
        return path

    return _write
