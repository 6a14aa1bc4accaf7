"""
Utilitaires partages pour les commandes CLI de MediaConnect.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant le client a la fin
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from mediaconnect.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru(), console.status("..."):
            result = await client.get_details(imdb_id)
    """
    loguru_logger.disable("mediaconnect")
    try:
        yield
    finally:
        loguru_logger.enable("mediaconnect")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le MovieClient du container est ferme a la sortie (client HTTP et
    limiteurs), y compris en cas d'erreur.

    Usage:
        @with_container()
        async def my_command(container, ...):
            client = container.movie_client()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.movie_client().close()
        return wrapper
    return decorator
