"""Interaktive Erkundungsschleife über die Konsole (rich)."""

import logging
from typing import Callable, Optional

from rich.console import Console

from config.schema import ExplorerConfig
from explorer.engine import EndReason, Explorer
from explorer.errors import InvalidChoiceError, NoSuchPathError
from explorer.renderer import (
    FAREWELL,
    LEAF_TEXT,
    LEAF_TITLE,
    PROMPT,
    direction_lines,
    path_summary,
    room_header,
)
from models.room import Room

logger = logging.getLogger(__name__)


def run_exploration(
    root: Room,
    console: Optional[Console] = None,
    read_choice: Optional[Callable[[str], str]] = None,
    config: Optional[ExplorerConfig] = None,
) -> Explorer:
    """Führt die Erkundung ab root bis zu einem Blatt oder bis 's'.

    read_choice bekommt den Prompt und liefert eine Eingabezeile;
    Standard ist console.input. EOFError (Strg-D) gilt als 's'.
    Gibt den beendeten Explorer zurück.
    """
    console = console or Console()
    config = config or ExplorerConfig()
    read = read_choice or console.input

    explorer = Explorer(root)
    while True:
        for line in room_header(explorer.current):
            console.print(line)

        if explorer.end_reason is EndReason.LEAF:
            console.print(f"\n[bold]{LEAF_TITLE}[/bold]")
            console.print(LEAF_TEXT)
            break

        for line in direction_lines(explorer.current, config.show_path_preview):
            console.print(line)

        try:
            raw = read(PROMPT)
        except EOFError:
            logger.debug("Eingabe beendet (EOF)")
            console.print()
            explorer.quit()
        else:
            try:
                explorer.choose(raw)
            except NoSuchPathError as e:
                console.print(f"\n[red]--- ERRO: {e} ---[/red]\n")
            except InvalidChoiceError as e:
                console.print(f"\n[yellow]--- ESCOLHA INVÁLIDA: {e} ---[/yellow]\n")

        if explorer.end_reason is EndReason.QUIT:
            console.print(f"\n{FAREWELL}")
            break

    if config.show_path_summary:
        console.print(f"[dim]{path_summary(explorer.path_names)}[/dim]")
    return explorer
