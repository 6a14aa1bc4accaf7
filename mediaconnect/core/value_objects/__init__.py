"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- ContentType : Type de contenu TMDB (MOVIE, SERIES)
- SearchResult : Resultat de recherche OMDb
- Found / NotFound / SearchOutcome : Issue d'une recherche
- ResolvedTarget : Correspondance TMDB d'un ID IMDb
- CastMember : Membre de la distribution
- StreamingProvider : Plateforme de streaming
- AggregatedDetails : Details agreges affiches a l'utilisateur
"""

from mediaconnect.core.value_objects.media import (
    AggregatedDetails,
    CastMember,
    ContentType,
    Found,
    NotFound,
    ResolvedTarget,
    SearchOutcome,
    SearchResult,
    StreamingProvider,
)

__all__ = [
    "AggregatedDetails",
    "CastMember",
    "ContentType",
    "Found",
    "NotFound",
    "ResolvedTarget",
    "SearchOutcome",
    "SearchResult",
    "StreamingProvider",
]
