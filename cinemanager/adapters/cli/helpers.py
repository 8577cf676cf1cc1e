"""
Utilitaires partages pour les commandes CLI de CineManager.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour couper les logs pendant l'affichage Rich
- open_catalog : ouverture d'une session authentifiee sur un catalogue
- render_movies : tableau Rich d'une liste de films
"""

from contextlib import contextmanager
from typing import Iterable

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cinemanager.container import Container
from cinemanager.core.entities import Movie
from cinemanager.services.catalog import FilteredCatalog

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinemanager")
    try:
        yield
    finally:
        loguru_logger.enable("cinemanager")


def open_catalog(container: Container, username: str, password: str) -> FilteredCatalog:
    """
    Authentifie l'utilisateur puis charge son catalogue.

    Raises:
        typer.Exit: code 1 si les identifiants sont refuses
    """
    if not container.auth_service().authenticate(username, password):
        console.print("[red]Identifiants invalides.[/red]")
        raise typer.Exit(code=1)

    repository = container.catalog_repository(username=username)
    catalog = FilteredCatalog.open(repository)
    if repository.last_skipped:
        console.print(
            f"[yellow]{repository.last_skipped} ligne(s) illisible(s) ignoree(s) "
            f"dans {repository.path}[/yellow]"
        )
    return catalog


def render_movies(movies: Iterable[Movie], title: str = "Catalogue") -> Table:
    """Construit le tableau Rich des films, numerotes a partir de 1."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold cyan")
    table.add_column("Realisateur")
    table.add_column("Annee", justify="right")
    table.add_column("Categories", style="magenta")
    table.add_column("Note", justify="right", style="green")
    table.add_column("IMDb", style="dim")

    for index, movie in enumerate(movies, start=1):
        table.add_row(
            str(index),
            escape(movie.title),
            escape(movie.director),
            str(movie.release_year),
            escape(movie.categories),
            f"{movie.rating:.1f}",
            escape(movie.external_id),
        )
    return table
