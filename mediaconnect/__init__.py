"""
MediaConnect - Recherche de films et series avec details agreges.

Ce package interroge OMDb pour la recherche par titre puis TMDB pour les
details (synopsis, distribution, plateformes de streaming), en respectant
les quotas de chaque API.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports)
- services/ : Couche application (facade MovieClient)
- adapters/ : Couche infrastructure (clients API, CLI)
"""

__version__ = "0.1.0"
