"""
Pytest configuration for linmath tests.
Adds the src directory to sys.path so tests run without an install.
"""
import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).parent
SRC_DIR = TESTS_DIR.parent / "src"

# 'import linmath' from a checkout, 'import test_fixtures' from any test folder
for path in (SRC_DIR, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _restore_config():
    """Tests that change the global config must not leak it."""
    from linmath.linmath_config import get_config, set_config
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture(autouse=True)
def _restore_profiling():
    from linmath.profiling import enable_profiling, is_profiling_enabled, reset_profile
    was_enabled = is_profiling_enabled()
    yield
    enable_profiling(was_enabled)
    reset_profile()
