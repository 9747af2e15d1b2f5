import logging
from typing import Optional

import typer

from handwriting2json.config import settings
from handwriting2json.services.batch import run_batch
from handwriting2json.services.discovery import is_valid_directory

app = typer.Typer(help="handwriting2json: images → handwriting recognition → JSON")

log = logging.getLogger("handwriting2json")


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command()
def run(
    directory: Optional[str] = typer.Argument(
        None, help="Directory whose files are sent for recognition."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Concurrent files (default 4)."
    ),
    pause: bool = typer.Option(
        True, "--pause/--no-pause", help="Wait for Enter before exiting."
    ),
):
    """Recognize handwriting in every file of DIRECTORY."""
    typer.echo("Handwriting Recognition:")
    if directory is None:
        directory = typer.prompt(
            "Enter the path of the directory", default="", show_default=False
        )

    _configure_logging()
    if not settings.COMPUTER_VISION_KEY:
        log.warning("COMPUTER_VISION_KEY is not configured (env or .env)")

    if is_valid_directory(directory):
        run_batch(directory, settings=settings, max_parallel=workers)
    else:
        typer.echo("\nInvalid file path")

    if pause:
        typer.echo("\nPress Enter to exit...")
        input()


@app.command()
def version():
    """Show version."""
    import importlib.metadata as md

    print(md.version("handwriting2json"))


if __name__ == "__main__":
    app()
