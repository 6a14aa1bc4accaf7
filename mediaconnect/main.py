"""
Point d'entrée CLI de MediaConnect.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger
from pydantic import ValidationError

from . import __version__
from .adapters.cli.commands import details, search
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="mediaconnect",
    help="Recherche de films et series avec details et plateformes de streaming",
)

# Commandes utilisables sans cles API
KEYLESS_COMMANDS = {"version"}


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """MediaConnect - films, series et plateformes de streaming."""
    if ctx.invoked_subcommand in KEYLESS_COMMANDS or ctx.resilient_parsing:
        return

    try:
        settings = Settings()
    except ValidationError as e:
        typer.echo(f"Configuration invalide :\n{e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.info(f"Démarrage de MediaConnect v{__version__}")


app.command()(search)
app.command()(details)


def _mask(key: str) -> str:
    return f"{key[:4]}…" if len(key) > 4 else "***"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle (cles masquees)."""
    config = Settings()
    typer.echo(f"OMDb : {config.omdb_base_url} (cle {_mask(config.omdb_api_key)})")
    typer.echo(f"TMDB : {config.tmdb_base_url} (cle {_mask(config.tmdb_api_key)})")
    typer.echo(
        f"Quota OMDb : {config.omdb_max_requests} requetes / {config.omdb_window_seconds:g}s"
    )
    typer.echo(
        f"Quota TMDB : {config.tmdb_max_requests} requetes / {config.tmdb_window_seconds:g}s"
    )
    typer.echo(f"Region streaming : {config.watch_region}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaConnect v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
