"""
Root test configuration and fixtures for the housing project.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from housing.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment patches in one test don't leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
