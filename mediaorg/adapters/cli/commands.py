"""
Commandes CLI de MediaOrg.

- inspect : analyse des fichiers video et affichage des Episodes
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from mediaorg.adapters.cli.helpers import (
    collect_video_files,
    console,
    format_season_episode,
    suppress_loguru,
)
from mediaorg.container import Container
from mediaorg.services.episode_factory import EpisodeOutcome


def inspect(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Fichiers ou repertoires a analyser"),
    ],
) -> None:
    """
    Analyse des fichiers video et affiche nom, saison, episode et type.

    Exemples:
      mediaorg inspect Show.Name.S02E05.720p.mkv
      mediaorg inspect ~/Downloads
    """
    files = collect_video_files(paths)
    if not files:
        console.print("[yellow]Aucun fichier video trouve.[/yellow]")
        return

    container = Container()
    factory = container.episode_factory()
    outcomes = asyncio.run(factory.create_many(files))

    with suppress_loguru():
        _render_outcomes(outcomes)

    failures = [outcome for outcome in outcomes if not outcome.success]
    if failures:
        raise typer.Exit(code=1)


def _render_outcomes(outcomes: list[EpisodeOutcome]) -> None:
    """Affiche le tableau des Episodes puis la liste des echecs."""
    table = Table(title="Fichiers analyses")
    table.add_column("Fichier", style="cyan")
    table.add_column("Nom")
    table.add_column("Saison/Episode", justify="center")
    table.add_column("Extension", justify="center")
    table.add_column("Type", style="green")

    for outcome in outcomes:
        episode = outcome.episode
        if episode is None:
            continue
        table.add_row(
            escape(episode.filename),
            escape(episode.name),
            format_season_episode(episode),
            episode.extension,
            episode.media_type.value,
        )

    console.print(table)

    for outcome in outcomes:
        if outcome.error is not None:
            console.print(
                f"[red]Echec[/red] {escape(outcome.path.name)}: {escape(str(outcome.error))}"
            )
