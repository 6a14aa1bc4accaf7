"""
Ports (interfaces abstraites) de la couche domaine.

Les ports definissent les contrats que les adaptateurs doivent implementer.
"""

from mediaconnect.core.ports.api_clients import (
    IDetailsAggregator,
    IIdentifierResolver,
    ISearchGateway,
)

__all__ = [
    "IDetailsAggregator",
    "IIdentifierResolver",
    "ISearchGateway",
]
