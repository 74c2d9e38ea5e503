"""CLI entry point - thin adapter over phrasal-core."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape

from phrasal_core import VERSION
from phrasal_core.pipeline import PhrasePipeline, render_results
from phrasal_core.ports.generation import GenerationError
from phrasal_core.settings import resolve_run_settings
from phrasal_core.util.logging import configure_logging
from phrasal_llm import GenerationClient
from phrasal_schemas.exit_codes import ExitCode, resolve_exit_code

TEXT_ARGUMENT = typer.Argument(..., help="Text to segment and translate")
LLM_HOST_OPTION = typer.Option(
    None,
    "--llm-host",
    "-l",
    help=(
        "The Ollama host URL for the LLM service "
        "(default is 'http://localhost:11434/api/generate')"
    ),
)
TRANSLATION_LANGUAGE_OPTION = typer.Option(
    None,
    "--translation-language",
    "-t",
    help="The language for translation in locale format (default is 'en-US')",
)
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Enable debug logging on stderr."
)
LOG_FILE_OPTION = typer.Option(
    None, "--log-file", help="Write detailed debug logs to this file."
)

app = typer.Typer(
    help=(
        "Split text into sections based on their semantic meaning and "
        "translate each section with a local LLM"
    ),
    no_args_is_help=True,
)

_log = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """Phrasal CLI."""


@app.command()
def version() -> None:
    """Display version information."""
    rprint(f"[bold]phrasal[/bold] v{VERSION}")


@app.command()
def analise(
    text: str = TEXT_ARGUMENT,
    llm_host: str | None = LLM_HOST_OPTION,
    translation_language: str | None = TRANSLATION_LANGUAGE_OPTION,
    verbose: bool = VERBOSE_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Analyze TEXT and output its sections with translations as JSON.

    TEXT is sent to an Ollama instance running the llama3 model, which splits
    it into sections and translates each section into the target locale.

    Raises:
        typer.Exit: When any step of the run fails.
    """
    configure_logging("verbose" if verbose else "info", log_file)
    try:
        settings = resolve_run_settings(
            llm_host and _clean_argument(llm_host),
            translation_language and _clean_argument(translation_language),
        )
        pipeline = PhrasePipeline(
            _build_client(), progress_callback=_progress_logger(verbose)
        )
        results = pipeline.run(
            _clean_argument(text),
            settings.llm_host,
            settings.translation_language,
        )
    except GenerationError as exc:
        _render_error(exc.info.describe())
        raise typer.Exit(code=int(resolve_exit_code(exc.info.code))) from exc
    except Exception as exc:
        _log.debug("Unexpected failure", exc_info=True)
        _render_error(str(exc) or type(exc).__name__)
        raise typer.Exit(code=int(ExitCode.RUNTIME_ERROR)) from exc

    typer.echo(render_results(results))


def _build_client() -> GenerationClient:
    return GenerationClient()


def _clean_argument(value: str) -> str:
    """Replace undecodable argv bytes (surrogate escapes) with U+FFFD."""
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _progress_logger(verbose: bool) -> Callable[[int, int], None] | None:
    """Return a progress callback that logs translations when verbose is enabled."""
    if not verbose:
        return None

    def _cb(completed: int, total: int) -> None:
        _log.debug("Translated %d/%d segments", completed, total)

    return _cb


def _render_error(message: str) -> None:
    console = Console(stderr=True)
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


if __name__ == "__main__":
    app()
