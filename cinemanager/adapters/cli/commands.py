"""
Commandes CLI du catalogue (register, list, add, delete, report, facets, locate).

Chaque commande de catalogue ouvre une session : authentification sur le
registre des comptes puis chargement du catalogue de l'utilisateur.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from cinemanager.adapters.cli.helpers import (
    console,
    open_catalog,
    render_movies,
    suppress_loguru,
)
from cinemanager.container import Container
from cinemanager.core.entities import Movie
from cinemanager.core.errors import ValidationError
from cinemanager.infrastructure.persistence.record_codec import is_storable_field

UserOption = Annotated[
    str,
    typer.Option("--user", "-u", envvar="CINEMANAGER_USER", help="Nom d'utilisateur"),
]
PasswordOption = Annotated[
    str,
    typer.Option(
        "--password", "-p",
        envvar="CINEMANAGER_PASSWORD",
        prompt=True,
        hide_input=True,
        help="Mot de passe",
    ),
]


def _describe(movie: Movie) -> str:
    return f"{escape(movie.title)} ({movie.release_year})"


def register(
    username: Annotated[str, typer.Argument(help="Nom du compte a creer")],
    password: Annotated[
        str,
        typer.Option(
            "--password", "-p",
            prompt=True,
            hide_input=True,
            confirmation_prompt=True,
            help="Mot de passe du compte",
        ),
    ],
) -> None:
    """Cree un nouveau compte utilisateur."""
    container = Container()
    if not container.auth_service().register(username, password):
        console.print(
            f"[red]Impossible de creer le compte '{escape(username)}' "
            "(deja existant ou invalide).[/red]"
        )
        raise typer.Exit(code=1)
    console.print(f"[green]Compte '{escape(username)}' cree.[/green]")


def list_movies(
    user: UserOption,
    password: PasswordOption,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Filtre sur titre, realisateur, annee ou categories"),
    ] = None,
) -> None:
    """Affiche le catalogue, filtre si --search est fourni."""
    catalog = open_catalog(Container(), user, password)
    catalog.set_filter(search)
    movies = list(catalog.view())
    if not movies:
        console.print("[yellow]Aucun film.[/yellow]")
        return

    with suppress_loguru():
        console.print(render_movies(movies, title=f"Catalogue de {escape(user)}"))
        console.print(f"[dim]{len(movies)} / {len(catalog)} film(s)[/dim]")


def add(
    user: UserOption,
    password: PasswordOption,
    title: Annotated[str, typer.Option("--title", "-t", help="Titre du film")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de sortie (1888-2100)")],
    rating: Annotated[float, typer.Option("--rating", "-r", help="Note (1-10)")],
    director: Annotated[str, typer.Option("--director", "-d", help="Realisateur")] = "",
    media_path: Annotated[
        str, typer.Option("--path", help="Dossier contenant la video et la jaquette")
    ] = "",
    categories: Annotated[
        str, typer.Option("--categories", "-c", help="Categorie, sans virgule (ex: 'Drama')")
    ] = "",
    external_id: Annotated[str, typer.Option("--imdb", help="ID IMDb (ex: tt0111161)")] = "",
) -> None:
    """Ajoute un film au catalogue."""
    fields = {
        "titre": title,
        "realisateur": director,
        "chemin": media_path,
        "categories": categories,
        "IMDb": external_id,
    }
    invalid = [name for name, value in fields.items() if not is_storable_field(value)]
    if invalid:
        console.print(
            f"[red]Film refuse : virgule ou fin de ligne interdite ({', '.join(invalid)}).[/red]"
        )
        raise typer.Exit(code=1)

    catalog = open_catalog(Container(), user, password)
    try:
        movie = catalog.add(
            title=title,
            director=director,
            release_year=year,
            media_path=media_path,
            categories=categories,
            rating=rating,
            external_id=external_id,
        )
    except ValidationError as e:
        console.print(f"[red]Film refuse : {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Film ajoute : {_describe(movie)}[/green]")
    if not catalog.last_save_ok:
        console.print("[red]Attention : la sauvegarde sur disque a echoue.[/red]")
        raise typer.Exit(code=2)


def delete(
    user: UserOption,
    password: PasswordOption,
    title: Annotated[str, typer.Argument(help="Titre exact du film a supprimer")],
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee, pour distinguer les homonymes")
    ] = None,
) -> None:
    """Supprime la premiere occurrence d'un film du catalogue."""
    catalog = open_catalog(Container(), user, password)
    target = next(
        (
            m for m in catalog.movies
            if m.title == title and (year is None or m.release_year == year)
        ),
        None,
    )
    if target is None:
        console.print(f"[yellow]Film introuvable : {escape(title)}[/yellow]")
        raise typer.Exit(code=1)

    catalog.delete(target)
    console.print(f"[green]Film supprime : {_describe(target)}[/green]")
    if not catalog.last_save_ok:
        console.print("[red]Attention : la sauvegarde sur disque a echoue.[/red]")
        raise typer.Exit(code=2)


def report(
    user: UserOption,
    password: PasswordOption,
    output: Annotated[Path, typer.Argument(help="Fichier texte de destination")],
) -> None:
    """Exporte le rapport du catalogue groupe par categories."""
    container = Container()
    catalog = open_catalog(container, user, password)
    try:
        path = container.report_generator().write(catalog.movies, output)
    except OSError as e:
        console.print(f"[red]Ecriture du rapport impossible : {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Rapport genere : {escape(str(path))}[/green]")


def facets(
    user: UserOption,
    password: PasswordOption,
    search: Annotated[
        Optional[str], typer.Option("--search", "-s", help="Filtre applique avant le calcul")
    ] = None,
) -> None:
    """Affiche les categories, realisateurs et annees du catalogue."""
    from rich.tree import Tree

    catalog = open_catalog(Container(), user, password)
    catalog.set_filter(search)
    values = catalog.facets()

    tree = Tree(f"[bold]Catalogue de {escape(user)}[/bold]")
    for label, items in (
        ("Categories", values.categories),
        ("Realisateurs", values.directors),
        ("Annees", values.years),
    ):
        branch = tree.add(f"[cyan]{label}[/cyan]")
        for item in items:
            branch.add(escape(str(item)))

    with suppress_loguru():
        console.print(tree)


def locate(
    user: UserOption,
    password: PasswordOption,
    title: Annotated[str, typer.Argument(help="Titre exact du film")],
) -> None:
    """Affiche la video et la jaquette trouvees dans le dossier du film."""
    container = Container()
    catalog = open_catalog(container, user, password)
    movie = next((m for m in catalog.movies if m.title == title), None)
    if movie is None:
        console.print(f"[yellow]Film introuvable : {escape(title)}[/yellow]")
        raise typer.Exit(code=1)

    video, cover = container.media_locator().locate(movie)
    console.print(f"Video : {escape(str(video)) if video else '[dim]aucune[/dim]'}")
    console.print(f"Jaquette : {escape(str(cover)) if cover else '[dim]aucune[/dim]'}")
