"""
Entite compte utilisateur.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Compte du registre des utilisateurs.

    Attributs :
        username : Cle unique du compte (sensible a la casse)
        password : Mot de passe stocke (texte clair ou empreinte pbkdf2)
    """

    username: str
    password: str
