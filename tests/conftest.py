"""Shared pytest fixtures and test helpers for gigtags tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from gigtags.config.settings import CONFIG_ENV_VAR

# 2022-06-25, the date used throughout the facet examples.
GIG_DATE = date(2022, 6, 25)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no stray gigtags.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and gigtags logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    gigtags_logger = logging.getLogger("gigtags")
    gigtags_level = gigtags_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    gigtags_logger.setLevel(gigtags_level)
