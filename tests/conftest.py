"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A fresh default configuration per test.
- Console reset so injected capture consoles do not leak between tests.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'modelmap' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from modelmap.config import Configuration  # noqa: E402
from modelmap.utils.console import reset_console  # noqa: E402


@pytest.fixture
def config():
  """Default configuration: public access, no naming policy, field matching on."""
  return Configuration()


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the stdout console after tests that inject their own."""
  yield
  reset_console()
