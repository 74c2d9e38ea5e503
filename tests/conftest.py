"""Common pytest configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

import phrasal_core.util.logging as logging_util
from phrasal_core.settings import LLM_HOST_ENV, TRANSLATION_LANGUAGE_ENV


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test without STARTER_GO_CLI_* variables or a stray .env file.

    Returns:
        Path: The temporary working directory.
    """
    monkeypatch.delenv(LLM_HOST_ENV, raising=False)
    monkeypatch.delenv(TRANSLATION_LANGUAGE_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_console_logging() -> Generator[None]:
    """Drop handlers installed by configure_logging after each test.

    Yields:
        None: Control to the test.
    """
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
        elif isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    logging_util._LOGGING_INITIALIZED = False
