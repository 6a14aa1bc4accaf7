"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, pydantic, CLI).

Sous-packages :
- ports/ : Interfaces abstraites definissant les contrats des clients API
- value_objects/ : Objets valeur immutables (SearchResult, AggregatedDetails, ...)
"""
