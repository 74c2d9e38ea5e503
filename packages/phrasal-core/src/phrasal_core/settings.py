"""Run settings resolution: command-line flag, then environment, then default."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from phrasal_core.ports.generation import (
    GenerationErrorCode,
    GenerationErrorDetails,
    GenerationErrorInfo,
    InputError,
)
from phrasal_schemas.config import (
    DEFAULT_LLM_HOST,
    DEFAULT_TRANSLATION_LANGUAGE,
    RunSettings,
)

ENV_PREFIX = "STARTER_GO_CLI_"
LLM_HOST_ENV = f"{ENV_PREFIX}LLM_HOST"
TRANSLATION_LANGUAGE_ENV = f"{ENV_PREFIX}TRANSLATION_LANGUAGE"

_ENV_PATH = Path(".env")

_log = logging.getLogger(__name__)


class EnvironmentSettings(BaseSettings):
    """Settings loaded from STARTER_GO_CLI_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=_ENV_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    llm_host: str | None = Field(default=None)
    translation_language: str | None = Field(default=None)


def load_environment_settings() -> EnvironmentSettings:
    """Read environment-tier settings fresh from the process environment.

    Returns:
        EnvironmentSettings: Values found in the environment, None when unset.
    """
    return EnvironmentSettings()


def resolve_setting(
    flag_value: str | None, env_value: str | None, default: str
) -> tuple[str, bool]:
    """Pick the first non-empty value among flag, environment, and default.

    Args:
        flag_value: Value passed on the command line.
        env_value: Value read from the environment.
        default: Literal fallback.

    Returns:
        tuple[str, bool]: The resolved value and whether the default was used.
    """
    if flag_value:
        return flag_value, False
    if env_value:
        return env_value, False
    return default, True


def resolve_run_settings(
    llm_host: str | None = None,
    translation_language: str | None = None,
    *,
    environment: EnvironmentSettings | None = None,
) -> RunSettings:
    """Resolve the endpoint and target locale for a run.

    Args:
        llm_host: Endpoint URL from the command line.
        translation_language: Target locale from the command line.
        environment: Pre-loaded environment settings; read fresh when None.

    Returns:
        RunSettings: Resolved run inputs.

    Raises:
        InputError: If the resolved endpoint is not an http(s) URL.
    """
    env = environment if environment is not None else load_environment_settings()

    host, host_defaulted = resolve_setting(
        llm_host, env.llm_host, DEFAULT_LLM_HOST
    )
    if host_defaulted:
        _log.info("Using default LLM host: %s", host)

    language, language_defaulted = resolve_setting(
        translation_language, env.translation_language, DEFAULT_TRANSLATION_LANGUAGE
    )
    if language_defaulted:
        _log.info("Using default translation language: %s", language)

    _validate_endpoint(host)
    return RunSettings(llm_host=host, translation_language=language)


def _validate_endpoint(host: str) -> None:
    parsed = urlparse(host)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return
    raise InputError(
        GenerationErrorInfo(
            code=GenerationErrorCode.INPUT_ERROR,
            message=f"LLM host must be an http(s) URL, got '{host}'",
            details=GenerationErrorDetails(
                field="llm_host",
                provided=host,
            ),
        )
    )
