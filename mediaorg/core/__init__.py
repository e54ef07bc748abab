"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et la hierarchie d'exceptions. Cette couche n'a AUCUNE dependance vers
l'infrastructure (pymediainfo, typer, rich).

Sous-packages :
- entities/ : Entite Episode
- ports/ : Interface de la sonde de duree
- value_objects/ : Objets valeur immutables (MediaFormat, MediaResult, MediaType)
"""
