"""
Rendu Rich de la liste des resultats et du panneau de details.
"""

from typing import Iterable

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mediaconnect.core.value_objects import AggregatedDetails, SearchResult


def build_results_table(results: Iterable[SearchResult]) -> Table:
    """Tableau des resultats de recherche (titre, annee, ID IMDb)."""
    table = Table(title="Resultats")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee")
    table.add_column("IMDb", style="cyan")
    for index, result in enumerate(results, start=1):
        table.add_row(str(index), result.title, result.year, result.external_id)
    return table


def _cast_table(details: AggregatedDetails) -> Table:
    table = Table(title="Distribution", show_edge=False)
    table.add_column("Acteur", style="bold")
    table.add_column("Role")
    for member in details.cast:
        table.add_row(member.name, member.character)
    return table


def build_details_panel(details: AggregatedDetails) -> Panel:
    """
    Panneau de details d'un titre.

    Les details indisponibles n'affichent que le message d'explication.
    """
    if not details.details_available:
        return Panel(Text(details.overview, style="yellow"), title="Details")

    lines = [Text(details.overview or "Pas de synopsis.")]
    lines.append(Text(f"Sortie : {details.release_date or 'inconnue'}"))
    lines.append(Text(f"Note : {details.rating or 'N/A'}"))
    if details.cast:
        lines.append(_cast_table(details))
    else:
        lines.append(Text("No cast information available", style="dim"))
    lines.append(Text(details.streaming_summary, style="green"))
    return Panel(Group(*lines), title=details.title or "Details")
