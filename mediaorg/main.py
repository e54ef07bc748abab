"""
Point d'entree CLI de MediaOrg.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer

from . import __version__
from .adapters.cli.commands import inspect
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="mediaorg",
    help="Classification de fichiers video (series et films)",
)


def _resolve_log_level(settings: Settings, verbose: int, quiet: bool) -> str:
    """Niveau de log console selon les options de verbosite."""
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return settings.log_level


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MediaOrg - Classification de fichiers video."""
    settings = Settings()
    configure_logging(
        log_level=_resolve_log_level(settings, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(inspect)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaOrg v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
