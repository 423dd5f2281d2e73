"""Datenmodell für einen Cômodo der Mansão (Pydantic v2).

Ein Room ist ein Knoten eines Binärbaums: Name plus optionaler linker
und rechter Nachfolger. Räume sind unveränderlich (frozen) und werden
von unten nach oben aufgebaut, d.h. jeder Raum bekommt seinen Elternknoten
genau einmal, nämlich beim Erzeugen des Elternknotens.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Direction(str, Enum):
    """Richtung im Baum; der Wert ist die Eingabetaste."""
    LEFT = "e"
    RIGHT = "d"

    @property
    def label(self) -> str:
        """Anzeigename der Richtung ("Esquerda" / "Direita")."""
        return _DIRECTION_LABELS[self]

    @property
    def side(self) -> str:
        """Richtung in Fließtext-Form ("à esquerda" / "à direita")."""
        return _DIRECTION_SIDES[self]


_DIRECTION_LABELS = {
    Direction.LEFT: "Esquerda",
    Direction.RIGHT: "Direita",
}

_DIRECTION_SIDES = {
    Direction.LEFT: "à esquerda",
    Direction.RIGHT: "à direita",
}


class Room(BaseModel):
    """Repräsentiert einen Raum der Mansão als Baumknoten."""

    model_config = ConfigDict(frozen=True)

    name: str                      # "Hall de Entrada"
    left: Optional[Room] = None    # Weg nach links ('e')
    right: Optional[Room] = None   # Weg nach rechts ('d')

    @classmethod
    def create(cls, name: str) -> Room:
        """Erzeugt einen Raum ohne Nachfolger."""
        return cls(name=name)

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Raumname darf nicht leer sein.")
        return v

    @model_validator(mode="after")
    def _check_tree(self):
        # Baum-Invariante: kein Raum darf zweimal im Teilbaum hängen
        if self.left is not None and self.right is not None:
            if self.left is self.right:
                raise ValueError(
                    f"'{self.left.name}' kann nicht links und rechts "
                    f"von '{self.name}' hängen."
                )
            left_ids = {id(r) for r in self.left.iter_rooms()}
            for r in self.right.iter_rooms():
                if id(r) in left_ids:
                    raise ValueError(
                        f"'{r.name}' hat mehr als einen Elternknoten "
                        f"unterhalb von '{self.name}'."
                    )
        return self

    # ─── Abfragen ───

    @property
    def is_leaf(self) -> bool:
        """True wenn der Raum keine weiteren Wege hat."""
        return self.left is None and self.right is None

    def child(self, direction: Direction) -> Optional[Room]:
        """Nachfolger in der gegebenen Richtung (oder None)."""
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def directions(self) -> list[Direction]:
        """Verfügbare Richtungen in der Reihenfolge links, rechts."""
        return [d for d in Direction if self.child(d) is not None]

    def iter_rooms(self) -> Iterator[Room]:
        """Iteriert über diesen Raum und alle Nachfolger (Pre-Order)."""
        yield self
        for d in Direction:
            nxt = self.child(d)
            if nxt is not None:
                yield from nxt.iter_rooms()

    def depth(self) -> int:
        """Höhe des Teilbaums; ein Blatt hat Tiefe 0."""
        heights = [self.child(d).depth() for d in self.directions()]
        return 1 + max(heights) if heights else 0

    def __str__(self) -> str:
        return self.name
