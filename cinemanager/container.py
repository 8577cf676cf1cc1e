"""
Container d'injection de dependances via dependency-injector.

Centralise la construction des repositories et services pour la CLI.
Le repository catalogue est une Factory parametree par le username :
container.catalog_repository(username="alice").
"""

from dependency_injector import containers, providers

from .adapters.file_system import MediaLocator
from .config import Settings
from .infrastructure.persistence import FileCatalogRepository, FileUserRepository
from .services.auth import AuthService
from .services.report import ReportGenerator


def _user_repository(settings: Settings) -> FileUserRepository:
    return FileUserRepository(path=settings.credentials_path)


def _catalog_repository(settings: Settings, username: str) -> FileCatalogRepository:
    return FileCatalogRepository(username=username, path=settings.catalog_path(username))


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        auth = container.auth_service()
        repo = container.catalog_repository(username="alice")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Repositories - Factory : le registre est relu a chaque usage
    user_repository = providers.Factory(_user_repository, settings=config)
    catalog_repository = providers.Factory(_catalog_repository, settings=config)

    # Services
    auth_service = providers.Factory(
        AuthService,
        user_repo=user_repository,
        hash_passwords=config.provided.hash_passwords,
        hash_iterations=config.provided.hash_iterations,
    )

    # Services sans etat - Singletons
    report_generator = providers.Singleton(ReportGenerator)
    media_locator = providers.Singleton(MediaLocator)
