import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import bottombar` works when tests run from any CWD/import mode.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


@pytest.fixture(autouse=True)
def clean_bottombar_env(monkeypatch):
    """Keep a developer's BOTTOMBAR_* overrides out of unit tests."""
    for name in (
        "BOTTOMBAR_BASE_URL",
        "BOTTOMBAR_WORKSPACE",
        "BOTTOMBAR_HEADLESS",
        "BOTTOMBAR_OUTPUT_CHANNEL",
        "BOTTOMBAR_POLL_INTERVAL_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
