"""
Adaptateurs vers l'exterieur : CLI et systeme de fichiers media.
"""
