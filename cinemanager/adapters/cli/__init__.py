"""Adaptateur CLI (Typer + Rich) du gestionnaire de catalogue."""
