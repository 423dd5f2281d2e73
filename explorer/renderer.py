"""Texte und Zeilen für die Konsolenausgabe des Explorers.

Alle Funktionen geben rich-Markup zurück; Eckige Klammern der Tasten
werden escaped, damit rich sie nicht als Stil-Tags liest.
"""

from rich.markup import escape

from explorer.engine import QUIT_KEY
from models.room import Room

PROMPT = "Sua escolha (e/d/s): "
SEPARATOR = "-" * 40

LEAF_TITLE = "-- FIM DA EXPLORAÇÃO --"
LEAF_TEXT = (
    "Você encontrou um cômodo sem mais caminhos. "
    "A exploração termina aqui."
)
FAREWELL = "Saindo do Detective Quest. Volte sempre!"
FINISHED = "Programa finalizado com sucesso."


def _key(key: str) -> str:
    return escape(f"[{key}]")


def room_header(room: Room) -> list[str]:
    return [
        SEPARATOR,
        f"VOCÊ ESTÁ EM: [bold]{escape(room.name)}[/bold]",
        SEPARATOR,
    ]


def direction_lines(room: Room, show_preview: bool = True) -> list[str]:
    """Zeilen mit den verfügbaren Wegen plus der Option zum Beenden.

    Mit show_preview steht der Name des Nachbarraums neben der Richtung:
    "  [e] Esquerda -> Sala de Estar".
    """
    lines = ["Caminhos disponiveis:"]
    for d in room.directions():
        line = f"  {_key(d.value)} {d.label}"
        if show_preview:
            line += f" -> {escape(room.child(d).name)}"
        lines.append(line)
    lines.append(f"  {_key(QUIT_KEY)} Sair do jogo")
    return lines


def path_summary(names: list[str]) -> str:
    return "Caminho percorrido: " + " -> ".join(escape(n) for n in names)
