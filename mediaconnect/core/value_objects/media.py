"""
Objets valeur pour la recherche et les details d'un titre.

Objets valeur immutables representant les resultats renvoyes a l'appelant.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilite
et des tuples pour les sequences ordonnees.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from mediaconnect.utils.constants import TMDB_IMAGE_BASE_URL


class ContentType(Enum):
    """Type de contenu cote TMDB.

    La valeur correspond au segment d'URL utilise par l'API TMDB.

    Valeurs:
        MOVIE: Film
        SERIES: Serie TV
    """

    MOVIE = "movie"
    SERIES = "tv"


def _image_url(path: Optional[str]) -> Optional[str]:
    """Construit l'URL complete d'une image TMDB a partir de son chemin."""
    return f"{TMDB_IMAGE_BASE_URL}{path}" if path else None


@dataclass(frozen=True)
class SearchResult:
    """
    Resultat de recherche OMDb.

    Attributs :
        title : Titre du film ou de la serie
        year : Annee (ou plage d'annees pour une serie, ex: "2008-2013")
        external_id : ID IMDb (format ttXXXXXXX), cle de recherche TMDB
        poster_url : URL de l'affiche, None si OMDb n'en fournit pas
    """

    title: str
    year: str
    external_id: str
    poster_url: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.title} ({self.year})"


@dataclass(frozen=True)
class Found:
    """Recherche fructueuse: resultats dans l'ordre renvoye par OMDb."""

    results: tuple[SearchResult, ...]
    total_count: int


@dataclass(frozen=True)
class NotFound:
    """Recherche sans resultat. error contient le message OMDb s'il existe."""

    error: Optional[str] = None


SearchOutcome = Union[Found, NotFound]


@dataclass(frozen=True)
class ResolvedTarget:
    """
    Correspondance TMDB d'un ID IMDb.

    Attributs :
        internal_id : ID numerique TMDB
        content_type : Film ou serie (determine les chemins d'API a interroger)
    """

    internal_id: int
    content_type: ContentType


@dataclass(frozen=True)
class CastMember:
    """Membre de la distribution (acteur et personnage)."""

    name: str
    character: str = ""
    profile_path: Optional[str] = None

    @property
    def profile_url(self) -> Optional[str]:
        return _image_url(self.profile_path)

    def __str__(self) -> str:
        return f"{self.name} as {self.character}" if self.character else self.name


@dataclass(frozen=True)
class StreamingProvider:
    """Plateforme de streaming par abonnement."""

    name: str
    logo_path: Optional[str] = None

    @property
    def logo_url(self) -> Optional[str]:
        return _image_url(self.logo_path)


@dataclass(frozen=True)
class AggregatedDetails:
    """
    Details agreges d'un titre (details + distribution + plateformes).

    Quand details_available est False, overview contient un message lisible
    expliquant l'echec, et cast/streaming_providers sont vides.

    Attributs :
        title : Titre TMDB (nom de la serie ou titre du film)
        overview : Synopsis, ou message d'erreur si details indisponibles
        release_date : Date de sortie (ou de premiere diffusion)
        rating : Note moyenne TMDB sous forme de texte
        cast : Distribution dans l'ordre TMDB
        streaming_providers : Plateformes de streaming de la region configuree
        details_available : False si les details n'ont pas pu etre charges
    """

    title: str
    overview: str
    release_date: Optional[str] = None
    rating: Optional[str] = None
    cast: tuple[CastMember, ...] = ()
    streaming_providers: tuple[StreamingProvider, ...] = ()
    details_available: bool = True

    @classmethod
    def unavailable(cls, message: str) -> "AggregatedDetails":
        """Construit l'enregistrement degrade affiche a la place des details."""
        return cls(title="", overview=message, details_available=False)

    @property
    def streaming_summary(self) -> str:
        """Resume lisible des plateformes de streaming."""
        if not self.streaming_providers:
            return "Not available for streaming"
        return "Available on: " + ", ".join(p.name for p in self.streaming_providers)
