"""
Adaptateurs (couche infrastructure) de MediaOrg.

- probing/ : Sonde de duree basee sur pymediainfo
- cli/ : Interface en ligne de commande (typer + rich)
"""
