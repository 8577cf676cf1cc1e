"""
Couche infrastructure de CineManager.

Implementations concretes des ports definis dans la couche domaine :

- persistence/ : Stockage en fichiers texte delimites (codec et repositories)
"""
