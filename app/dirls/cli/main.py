"""Main CLI application entry point.

Defines the Typer application: resolves options and settings, then
lists each requested path in order. A path that cannot be read is
reported on stderr and the remaining paths are still processed.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dirls import __version__
from dirls.core.settings import Settings, SettingsError, load_settings
from dirls.core.theme import get_rich_theme, load_theme
from dirls.listing.errors import ListingError, NotAccessibleError
from dirls.listing.identity import IdentityResolver
from dirls.listing.models import ListingConfig
from dirls.listing.reader import DirectoryReader
from dirls.utils.formatting import err_console, print_error, print_warning, use_theme

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="dirls",
    help="List directory contents.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirls version {__version__}")
        raise typer.Exit()


def configure_logging(level: int | str) -> None:
    """Route log records to the stderr console."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_settings() -> Settings:
    """Load user settings, falling back to defaults on error."""
    try:
        return load_settings()
    except SettingsError as e:
        print_warning(f"{e}. Using default settings.")
        return Settings()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files or directories to list.", show_default="."),
    ] = None,
    long: Annotated[
        bool,
        typer.Option(
            "--long",
            "-l",
            help="Use the detailed listing format.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """List directory contents, hidden entries excluded.

    Files are listed before directories, each group sorted by path.
    """
    settings = _load_settings()
    configure_logging(logging.DEBUG if verbose else settings.logging.level)
    if settings.colors:
        use_theme(get_rich_theme(load_theme(settings.colors)))

    config = ListingConfig.from_args(paths, list_output=long or settings.listing.long)
    reader = DirectoryReader(config, IdentityResolver())

    for path in config.paths:
        try:
            listing = reader.read(path)
        except NotAccessibleError as e:
            typer.echo(f"ls: {e.path}: {e.reason}", err=True, color=True)
            continue
        except ListingError as e:
            logger.debug("Listing %s failed", path, exc_info=True)
            print_error(f"{path}: {e}")
            continue

        if config.show_directory_name:
            listing = f"{path}:\n{listing}"
        typer.echo(listing, nl=False, color=True)


if __name__ == "__main__":
    app()
