"""
Point d'entree CLI de CineManager.

Configure le logging et monte les commandes du catalogue.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    add,
    delete,
    facets,
    list_movies,
    locate,
    register,
    report,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinemanager",
    help="Gestionnaire de catalogue de films personnel",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Affiche les logs DEBUG sur la console"),
    ] = False,
) -> None:
    """CineManager - Catalogue de films personnel."""
    configure_logging(get_config(), level="DEBUG" if verbose else None)


app.command()(register)
app.command(name="list")(list_movies)
app.command()(add)
app.command()(delete)
app.command()(report)
app.command()(facets)
app.command()(locate)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return Container().config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Donnees : {config.data_dir}")
    typer.echo(f"Registre des comptes : {config.credentials_path}")
    typer.echo(f"Catalogues : {config.data_dir / config.catalog_file_pattern}")
    typer.echo(f"Mots de passe : {'pbkdf2' if config.hash_passwords else 'texte clair'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineManager v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    logger.debug("Demarrage de CineManager", version=__version__)
    app()


if __name__ == "__main__":
    main()
