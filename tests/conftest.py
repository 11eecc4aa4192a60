"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from tablegrid.config import ENV_CAPTION_FORMAT, ENV_CAPTION_PLACEMENT, ENV_EMPTY_INDICATOR

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture(autouse=True)
def default_rendering_env(monkeypatch):
    """Run every test with the built-in rendering defaults, whatever .env says."""
    for name in (ENV_EMPTY_INDICATOR, ENV_CAPTION_PLACEMENT, ENV_CAPTION_FORMAT):
        monkeypatch.delenv(name, raising=False)
