"""Fest verdrahtete Karte der Mansão.

Stammbaum der Räume (e = links, d = rechts):

    Hall de Entrada
    ├── e: Sala de Estar
    │   ├── e: Escritorio
    │   │   ├── e: Biblioteca
    │   │   └── d: Quarto Principal
    │   │       └── d: Banheiro Privativo
    │   └── d: Sala de Jantar
    └── d: Cozinha
        ├── e: Despensa
        └── d: Jardim
            └── d: Piscina

Die Karte wird von den Blättern zur Wurzel aufgebaut, weil Räume nach
dem Erzeugen nicht mehr verändert werden können.
"""

from models.room import Room

ROOT_NAME = "Hall de Entrada"


def build_mansion() -> Room:
    """Baut die Mansão auf und gibt den Hall de Entrada zurück."""
    # Ebene 4
    banheiro = Room.create("Banheiro Privativo")

    # Ebene 3
    biblioteca = Room.create("Biblioteca")
    quarto = Room(name="Quarto Principal", right=banheiro)
    piscina = Room.create("Piscina")

    # Ebene 2
    escritorio = Room(name="Escritorio", left=biblioteca, right=quarto)
    jantar = Room.create("Sala de Jantar")
    despensa = Room.create("Despensa")
    jardim = Room(name="Jardim", right=piscina)

    # Ebene 1
    estar = Room(name="Sala de Estar", left=escritorio, right=jantar)
    cozinha = Room(name="Cozinha", left=despensa, right=jardim)

    return Room(name=ROOT_NAME, left=estar, right=cozinha)
