"""Zustandsautomat für die Erkundung der Mansão.

Zustände: ACTIVE (mit aktuellem Raum) und TERMINATED. Übergänge:
  e / d  -> Wechsel in den Nachfolger, falls vorhanden (sonst NoSuchPathError)
  s      -> TERMINATED (QUIT)
  Blatt  -> TERMINATED (LEAF), automatisch nach dem Betreten
  sonst  -> InvalidChoiceError, Raum bleibt unverändert
"""

import logging
from enum import Enum
from typing import Optional

from explorer.errors import InvalidChoiceError, NoSuchPathError
from models.room import Direction, Room

logger = logging.getLogger(__name__)

QUIT_KEY = "s"


class ExplorerState(str, Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class EndReason(str, Enum):
    LEAF = "leaf"
    QUIT = "quit"


def parse_choice(raw: str) -> str:
    """Normalisiert eine Eingabezeile auf 'e', 'd' oder 's'.

    Groß-/Kleinschreibung und umgebende Leerzeichen werden ignoriert.
    Alles andere (auch leere Eingaben) wird abgelehnt.
    """
    key = raw.strip().lower()
    if key == QUIT_KEY or key in {d.value for d in Direction}:
        return key
    raise InvalidChoiceError(raw)


class Explorer:
    """Hält den aktuellen Raum und den bisher gegangenen Weg."""

    def __init__(self, root: Room) -> None:
        self.current = root
        self.history: list[Room] = [root]
        self.end_reason: Optional[EndReason] = None
        self._check_leaf()

    @property
    def state(self) -> ExplorerState:
        if self.end_reason is None:
            return ExplorerState.ACTIVE
        return ExplorerState.TERMINATED

    @property
    def is_active(self) -> bool:
        return self.state is ExplorerState.ACTIVE

    def choose(self, raw: str) -> Room:
        """Verarbeitet eine Eingabe und gibt den (neuen) aktuellen Raum zurück.

        Raises:
            InvalidChoiceError: Eingabe ist nicht e/d/s.
            NoSuchPathError: In der Richtung gibt es keinen Raum.
        """
        self._ensure_active()
        try:
            key = parse_choice(raw)
        except InvalidChoiceError:
            logger.info(f"Ungültige Eingabe in '{self.current.name}': {raw!r}")
            raise
        if key == QUIT_KEY:
            self.quit()
        else:
            self.move(Direction(key))
        return self.current

    def move(self, direction: Direction) -> Room:
        """Geht in die gegebene Richtung weiter."""
        self._ensure_active()
        nxt = self.current.child(direction)
        if nxt is None:
            logger.info(
                f"Kein Weg nach {direction.name} in '{self.current.name}'"
            )
            raise NoSuchPathError(direction, self.current.name)
        logger.debug(f"{self.current.name} -> {nxt.name} ({direction.name})")
        self.current = nxt
        self.history.append(nxt)
        self._check_leaf()
        return nxt

    def quit(self) -> None:
        """Beendet die Erkundung im aktuellen Raum."""
        self._ensure_active()
        self.end_reason = EndReason.QUIT
        logger.info(f"Erkundung abgebrochen in '{self.current.name}'")

    @property
    def path_names(self) -> list[str]:
        return [r.name for r in self.history]

    def _check_leaf(self) -> None:
        if self.current.is_leaf:
            self.end_reason = EndReason.LEAF
            logger.info(f"Blatt erreicht: '{self.current.name}'")

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise RuntimeError(
                f"Erkundung bereits beendet ({self.end_reason.value})."
            )
