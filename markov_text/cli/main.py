import logging

import typer

from markov_text.analytics.sampling import EmptyModelError
from markov_text.config import settings
from markov_text.core.validation import is_valid_text_length, is_valid_window_length
from markov_text.services import build_model

app = typer.Typer(add_completion=False)


@app.command()
def generate(
    window_length: int,
    initial_text: str,
    text_length: int,
    mode: str = typer.Argument(..., help="'random' for an unseeded run, anything else uses the fixed seed"),
    file_name: str = typer.Argument(..., help="corpus file"),
    keep_cr: bool = typer.Option(False, "--keep-cr", help="do not strip carriage returns from the corpus"),
    dump: bool = typer.Option(False, "--dump", help="print the trained model to stderr"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Train on FILE_NAME and print TEXT_LENGTH characters starting with INITIAL_TEXT."""
    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    logging.getLogger("markov_text").setLevel(logging.DEBUG if verbose else settings.log_level.upper())
    if not is_valid_window_length(window_length):
        raise typer.BadParameter("must be at least 1", param_hint="WINDOW_LENGTH")
    if not is_valid_text_length(text_length):
        raise typer.BadParameter("must not be negative", param_hint="TEXT_LENGTH")

    try:
        lm = build_model(window_length, mode, file_name, strip_cr=not keep_cr)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"cannot read corpus {file_name}: {e}", err=True)
        raise typer.Exit(code=1)
    if dump:
        typer.echo(str(lm), err=True, nl=False)

    try:
        text = lm.generate(initial_text, text_length)
    except EmptyModelError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(text)


if __name__ == "__main__":
    app()
