"""Fehler des Explorers, die dem Spieler angezeigt werden.

Beide sind behebbar: Die Schleife meldet sie und fragt erneut.
"""

from models.room import Direction


class ExplorerError(Exception):
    """Basisklasse für abgelehnte Eingaben."""


class InvalidChoiceError(ExplorerError):
    """Eingabe ist keine der Tasten e, d oder s."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("Por favor, digite 'e', 'd' ou 's'.")


class NoSuchPathError(ExplorerError):
    """In der gewählten Richtung gibt es keinen Raum."""

    def __init__(self, direction: Direction, room_name: str) -> None:
        self.direction = direction
        self.room_name = room_name
        super().__init__(f"Não há caminho {direction.side} neste cômodo!")
