"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les erreurs.
Cette couche n'a AUCUNE dependance vers l'infrastructure (fichiers, CLI).

Sous-packages :
- entities/ : Entites metier (Movie, User)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- errors.py : Hierarchie d'exceptions du catalogue
"""
