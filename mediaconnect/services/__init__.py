"""
Couche services (cas d'utilisation).

- MovieClient : facade recherche + details agreges
"""

from mediaconnect.services.movie_client import MovieClient

__all__ = ["MovieClient"]
