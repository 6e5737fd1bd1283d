from __future__ import annotations

from pathlib import Path

import pytest

from resgen.logging import reset_logging
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_resgen_logger():
    """Undo configure_logging so caplog keeps seeing resgen records."""
    yield
    reset_logging()
