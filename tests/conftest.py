from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def pytest_configure() -> None:
    """
    Ensure `src/` is importable when running pytest in a src-layout project.

    This only affects the test environment.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the process-wide ConfigManager at a throwaway YAML file."""
    from configstore.infrastructure.config import config_manager as cm

    path = tmp_path / "configstore.yaml"
    monkeypatch.setattr(cm, "CONFIG_FILE", path)
    cm.get_config_manager.cache_clear()
    yield path
    cm.get_config_manager.cache_clear()
