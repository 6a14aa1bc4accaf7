"""
Exceptions levees par les clients API.

Toutes heritent de MovieClientError pour permettre a la facade de degrader
proprement n'importe quel echec en un AggregatedDetails affichable.
"""

from typing import Optional


class MovieClientError(Exception):
    """Erreur de base des clients API OMDb/TMDB."""


class TransportError(MovieClientError):
    """Echec reseau: DNS, connexion refusee, timeout, trop de redirections."""


class RequestFailedError(MovieClientError):
    """
    Exception levee quand l'API repond avec un statut different de 200.

    Attributes:
        status_code: Statut HTTP recu
        url: URL appelee (cles API masquees), ou None
    """

    def __init__(self, status_code: int, url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"API request failed with status: {status_code}")


class DecodeError(MovieClientError):
    """Corps de reponse qui n'est pas du JSON valide ou pas de la forme attendue."""


class InterruptedWaitError(MovieClientError):
    """
    Attente d'un quota interrompue par la fermeture du limiteur.

    Attributes:
        limiter: Nom du limiteur interrompu (ex: "tmdb")
    """

    def __init__(self, limiter: str) -> None:
        self.limiter = limiter
        super().__init__(f"Rate limit wait interrupted ({limiter})")
