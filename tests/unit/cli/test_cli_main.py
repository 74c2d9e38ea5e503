"""Unit tests for phrasal-cli."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import respx
from typer.testing import CliRunner

import phrasal_cli.main as cli_main
from phrasal_cli.main import app
from phrasal_core import VERSION
from phrasal_core.settings import LLM_HOST_ENV, TRANSLATION_LANGUAGE_ENV
from phrasal_schemas.exit_codes import ExitCode

runner = CliRunner()

DEFAULT_ENDPOINT = "http://localhost:11434/api/generate"


def _envelope(text: str) -> dict[str, object]:
    return {"model": "llama3", "response": text, "done": True}


def test_version_command() -> None:
    """Version command prints the package version."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert VERSION in result.stdout


def test_no_arguments_shows_help() -> None:
    """Running without a command prints usage."""
    result = runner.invoke(app, [])

    assert "analise" in result.output


def test_analise_requires_exactly_one_text_argument() -> None:
    """Missing or extra positional arguments are usage errors."""
    missing = runner.invoke(app, ["analise"])
    extra = runner.invoke(app, ["analise", "one", "two"])

    assert missing.exit_code == 2
    assert extra.exit_code == 2
    assert missing.stdout == ""


@respx.mock
def test_analise_prints_pairs_as_json() -> None:
    """A successful run prints only the JSON result on stdout."""
    respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["Hallo", "Welt"]')),
            httpx.Response(200, json=_envelope("Hello")),
            httpx.Response(200, json=_envelope("World")),
        ]
    )

    result = runner.invoke(app, ["analise", "Hallo Welt"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"source": "Hallo", "translation": "Hello"},
        {"source": "Welt", "translation": "World"},
    ]


@respx.mock
def test_analise_flags_choose_host_and_language() -> None:
    """--llm-host and --translation-language reach the requests."""
    host = "http://gpu-box:8080/api/generate"
    route = respx.post(host).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["Bom dia"]')),
            httpx.Response(200, json=_envelope("Guten Morgen")),
        ]
    )

    result = runner.invoke(
        app, ["analise", "Bom dia", "--llm-host", host, "--translation-language", "de-DE"]
    )

    assert result.exit_code == 0
    translation_prompt = json.loads(route.calls[1].request.content)["prompt"]
    assert translation_prompt.startswith("Translate the following text to de-DE:")


@respx.mock
def test_analise_short_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """-l and -t override the environment."""
    monkeypatch.setenv(LLM_HOST_ENV, "http://ignored:1/api/generate")
    monkeypatch.setenv(TRANSLATION_LANGUAGE_ENV, "fr-FR")
    host = "http://127.0.0.1:9999/api/generate"
    route = respx.post(host).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["x"]')),
            httpx.Response(200, json=_envelope("y")),
        ]
    )

    result = runner.invoke(app, ["analise", "x", "-l", host, "-t", "nl-NL"])

    assert result.exit_code == 0
    assert route.call_count == 2
    assert "nl-NL" in json.loads(route.calls[1].request.content)["prompt"]


@respx.mock
def test_analise_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables supply the host and language when flags are absent."""
    host = "http://llm.lan:11434/api/generate"
    monkeypatch.setenv(LLM_HOST_ENV, host)
    monkeypatch.setenv(TRANSLATION_LANGUAGE_ENV, "sv-SE")
    route = respx.post(host).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["Hej"]')),
            httpx.Response(200, json=_envelope("Hej")),
        ]
    )

    result = runner.invoke(app, ["analise", "Hej"])

    assert result.exit_code == 0
    assert "sv-SE" in json.loads(route.calls[1].request.content)["prompt"]
    assert "Using default" not in result.stderr


@respx.mock
def test_analise_reports_defaults_on_stderr() -> None:
    """Default notices go to stderr and never corrupt stdout."""
    respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["a"]')),
            httpx.Response(200, json=_envelope("A")),
        ]
    )

    result = runner.invoke(app, ["analise", "a"])

    assert result.exit_code == 0
    assert f"Using default LLM host: {DEFAULT_ENDPOINT}" in result.stderr
    assert "Using default translation language: en-US" in result.stderr
    assert json.loads(result.stdout) == [{"source": "a", "translation": "A"}]


@respx.mock
def test_analise_transport_failure_exit_code() -> None:
    """An unreachable endpoint exits with CONNECTION_ERROR and no JSON."""
    respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=httpx.ConnectError("Connection refused")
    )

    result = runner.invoke(app, ["analise", "Hallo"])

    assert result.exit_code == ExitCode.CONNECTION_ERROR
    assert result.stdout == ""
    assert "Error:" in result.stderr
    assert "segmentation failed" in result.stderr


@respx.mock
def test_analise_decode_failure_exit_code() -> None:
    """Non-array segmentation output exits with DECODE_ERROR."""
    respx.post(DEFAULT_ENDPOINT).mock(
        return_value=httpx.Response(200, json=_envelope("Sure! Here are the sections."))
    )

    result = runner.invoke(app, ["analise", "Hallo"])

    assert result.exit_code == ExitCode.DECODE_ERROR
    assert result.stdout == ""


@respx.mock
def test_analise_upstream_failure_exit_code() -> None:
    """A non-200 answer exits with UPSTREAM_ERROR."""
    respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["a", "b"]')),
            httpx.Response(500, json={"error": "out of memory"}),
        ]
    )

    result = runner.invoke(app, ["analise", "a b"])

    assert result.exit_code == ExitCode.UPSTREAM_ERROR
    assert result.stdout == ""
    assert "translation of segment 1 failed" in result.stderr
    assert "out of memory" in result.stderr


def test_analise_invalid_host_exit_code() -> None:
    """A host that is not an http(s) URL exits with INPUT_ERROR."""
    result = runner.invoke(app, ["analise", "Hallo", "--llm-host", "localhost:11434"])

    assert result.exit_code == ExitCode.INPUT_ERROR
    assert result.stdout == ""
    assert "LLM host must be an http(s) URL" in result.stderr


def test_analise_unexpected_failure_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unexpected exceptions exit with RUNTIME_ERROR."""
    class _BrokenClient:
        def generate(self, endpoint: str, model: str, prompt: str) -> str:
            raise RuntimeError("kaput")

    monkeypatch.setattr(cli_main, "_build_client", _BrokenClient)

    result = runner.invoke(app, ["analise", "Hallo"])

    assert result.exit_code == ExitCode.RUNTIME_ERROR
    assert "kaput" in result.stderr


@respx.mock
def test_analise_error_message_with_markup_characters() -> None:
    """Server text containing rich markup is printed literally."""
    respx.post(DEFAULT_ENDPOINT).mock(
        return_value=httpx.Response(400, json={"error": "bad [bold]prompt[/bold]"})
    )

    result = runner.invoke(app, ["analise", "Hallo"])

    assert result.exit_code == ExitCode.UPSTREAM_ERROR
    assert "bad [bold]prompt[/bold]" in result.stderr


@respx.mock
def test_analise_replaces_undecodable_argument_bytes() -> None:
    """Surrogate-escaped argv bytes are sent as U+FFFD instead of failing."""
    route = respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["caf\\ufffd"]')),
            httpx.Response(200, json=_envelope("coffee")),
        ]
    )

    result = runner.invoke(app, ["analise", "caf\udce9"])

    assert result.exit_code == 0
    segmentation_prompt = json.loads(route.calls[0].request.content)["prompt"]
    assert "caf\ufffd" in segmentation_prompt
    assert "\udce9" not in segmentation_prompt
    assert json.loads(result.stdout) == [
        {"source": "caf\ufffd", "translation": "coffee"},
    ]


@respx.mock
def test_analise_log_file_receives_debug_records(tmp_path: Path) -> None:
    """--log-file writes debug records without touching stdout."""
    respx.post(DEFAULT_ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json=_envelope('["a"]')),
            httpx.Response(200, json=_envelope("A")),
        ]
    )
    log_file = tmp_path / "logs" / "phrasal.log"

    result = runner.invoke(app, ["analise", "a", "--log-file", str(log_file)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"source": "a", "translation": "A"}]
    contents = log_file.read_text(encoding="utf-8")
    assert "Using default LLM host" in contents
    assert "POST http://localhost:11434/api/generate" in contents
