"""
CineManager - Gestionnaire de catalogue de films personnel.

Ce package fournit l'authentification des utilisateurs, la persistance
du catalogue de films de chaque utilisateur dans un fichier texte plat,
le filtrage en direct du catalogue et l'export d'un rapport groupe.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (validation, catalogue filtre, rapport)
- infrastructure/ : Persistance fichier (codec, repositories)
- adapters/ : CLI et acces au systeme de fichiers media
"""

__version__ = "0.1.0"
