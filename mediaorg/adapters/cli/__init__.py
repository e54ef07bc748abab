"""
Package CLI de MediaOrg (typer + rich).

- commands : commandes montees sur l'application typer
- helpers : console Rich partagee et utilitaires d'affichage
"""
