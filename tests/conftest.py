import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def fresh_config(monkeypatch):
    """Clear the cached config before and after a test that changes it."""
    from best_effort_parser import config

    config.reset_config()
    yield config
    monkeypatch.undo()
    config.reset_config()
