"""Fallback entrypoint for `python -m phrasal`.

Routes to the phrasal_cli Typer application.
"""

from phrasal_cli.main import app

if __name__ == "__main__":
    app(prog_name="phrasal")
