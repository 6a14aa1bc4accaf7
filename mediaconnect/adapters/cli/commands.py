"""
Commandes CLI de recherche et d'affichage des details.
"""

import asyncio
from typing import Annotated

import typer

from mediaconnect.adapters.api.errors import MovieClientError
from mediaconnect.adapters.cli.display import build_details_panel, build_results_table
from mediaconnect.adapters.cli.helpers import console, suppress_loguru, with_container
from mediaconnect.core.value_objects import NotFound


def search(
    title: Annotated[str, typer.Argument(help="Titre du film ou de la serie")],
) -> None:
    """Recherche des films et series par titre (OMDb)."""
    if not title.strip():
        console.print("[red]Veuillez saisir un titre.[/red]")
        raise typer.Exit(code=1)
    asyncio.run(_search_async(title.strip()))


@with_container()
async def _search_async(container, title: str) -> None:
    """Implementation async de la commande search."""
    client = container.movie_client()
    try:
        outcome = await client.search(title)
    except MovieClientError as e:
        console.print(f"[red]Echec de la recherche : {e}[/red]")
        raise typer.Exit(code=1)

    if isinstance(outcome, NotFound):
        console.print("[yellow]Aucun resultat.[/yellow]")
        if outcome.error:
            console.print(f"[dim]{outcome.error}[/dim]")
        return

    console.print(f"{outcome.total_count} resultat(s) trouve(s)")
    console.print(build_results_table(outcome.results))


def details(
    imdb_id: Annotated[str, typer.Argument(help="ID IMDb (ex: tt0372784)")],
) -> None:
    """Affiche les details agreges d'un titre (TMDB)."""
    asyncio.run(_details_async(imdb_id.strip()))


@with_container()
async def _details_async(container, imdb_id: str) -> None:
    """Implementation async de la commande details."""
    client = container.movie_client()
    # pas de logs stderr pendant le spinner
    with suppress_loguru(), console.status("Chargement des details..."):
        result = await client.get_details(imdb_id)
    console.print(build_details_panel(result))
