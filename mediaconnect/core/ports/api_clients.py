"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour les APIs média externes.
Les adaptateurs fournissent les clients concrets (OMDb pour la recherche,
TMDB pour la resolution d'ID et les details).
"""

from abc import ABC, abstractmethod
from typing import Optional

from mediaconnect.core.value_objects import (
    AggregatedDetails,
    ContentType,
    ResolvedTarget,
    SearchOutcome,
)


class ISearchGateway(ABC):
    """
    Interface de recherche par mot-cle sur l'API principale.

    Les erreurs de transport ou de decodage remontent a l'appelant.
    """

    @abstractmethod
    async def search(self, query: str) -> SearchOutcome:
        """
        Recherche des titres par mot-cle.

        Args :
            query : Texte recherche (titre)

        Retourne :
            Found avec les resultats dans l'ordre de l'API, ou NotFound
        """
        ...


class IIdentifierResolver(ABC):
    """Interface de resolution d'un ID externe vers l'ID interne TMDB."""

    @abstractmethod
    async def resolve(self, external_id: str) -> Optional[ResolvedTarget]:
        """
        Resout un ID IMDb vers l'ID TMDB et le type de contenu.

        Args :
            external_id : ID IMDb (format ttXXXXXXX)

        Retourne :
            ResolvedTarget, ou None si aucune correspondance
        """
        ...


class IDetailsAggregator(ABC):
    """Interface d'agregation des details, credits et plateformes d'un titre."""

    @abstractmethod
    async def aggregate(
        self, internal_id: int, content_type: ContentType
    ) -> AggregatedDetails:
        """
        Charge et fusionne les details d'un titre.

        Ne leve pas d'exception pour un echec de sous-requete: retourne un
        AggregatedDetails degrade si les details principaux manquent.
        """
        ...
