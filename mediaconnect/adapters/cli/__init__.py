"""
Interface ligne de commande (Typer + Rich).

Couche de presentation: affiche la liste des resultats et le panneau de
details. Elle seule possede la boucle asyncio.
"""
