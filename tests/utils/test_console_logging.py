"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers, including the SUCCESS level.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from gluestack_migrate.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  get_console,
  log_debug,
  log_error,
  log_info,
  log_success,
  log_warning,
  logger,
  reset_console,
  set_console,
)


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stderr after every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def capture():
  capture_console = Console(record=True, width=200)
  set_console(capture_console)
  return capture_console


def test_console_singleton_proxy():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_single_rich_handler_after_reinjection():
  set_console(Console(record=True))
  set_console(Console(record=True))
  handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1


def test_handler_lives_on_package_logger():
  assert logger.name == "gluestack_migrate"
  assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


def test_custom_console_injection(capture):
  log_info("Captured Migration Log")
  assert "Captured Migration Log" in capture.export_text()


def test_levels(capture):
  log_warning("careful")
  log_error("broken")
  log_success("done")
  output = capture.export_text()
  assert "careful" in output
  assert "broken" in output
  assert "done" in output
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_debug_hidden_at_default_level(capture):
  log_debug("noisy detail")
  assert "noisy detail" not in capture.export_text()


def test_proxy_print_forwards(capture):
  console.print("direct output")
  assert "direct output" in console.export_text()
