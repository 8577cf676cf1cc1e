"""
Couche application : cas d'utilisation du catalogue.

- auth : authentification et inscription des comptes
- validation : regles metier d'admission d'un film
- catalog : catalogue filtre en direct, persiste a chaque mutation
- report : rapport texte groupe par categories
"""
