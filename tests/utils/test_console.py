"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers and module loggers reach the injected console.
"""

import logging

import pytest
from rich.console import Console

from modelmap.utils.console import console, get_console, log_info, log_warning, reset_console, set_console


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()


def test_console_singleton_proxy():
  assert callable(console.print)
  assert isinstance(get_console(), Console)


def test_custom_console_injection():
  capture_console = Console(record=True, width=200)
  set_console(capture_console)

  log_info("Captured info")
  log_warning("Captured warning")

  output = capture_console.export_text()
  assert "Captured info" in output
  assert "Captured warning" in output


def test_module_loggers_follow_injected_console():
  capture_console = Console(record=True, width=200)
  set_console(capture_console)

  logging.getLogger("modelmap.discovery.hierarchy").warning("Unknown access level 'x'")

  assert "Unknown access level" in console.export_text()


def test_reset_functionality():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_proxy_getattr_delegation():
  assert isinstance(console.width, int)
