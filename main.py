"""Detective Quest — Erkundung der Mansão (Haupt-CLI).

Verwendung:
  python main.py                 Erkundung starten (wie 'explore')
  python main.py explore         Erkundung starten
  python main.py map             Karte der Mansão anzeigen
  python main.py config show     Einstellungen anzeigen
  python main.py config init     Einstellungsdatei mit Defaults anlegen
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree
from rich import box

console = Console()


def _load_config_or_abort():
    """Lädt die Konfiguration (oder Defaults) bzw. bricht bei Fehlern ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr, mgr.load()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )


# ─── EXPLORE ──────────────────────────────────────────────────────────────────

@click.command("explore")
def cmd_explore():
    """Erkundet die Mansão interaktiv (e = links, d = rechts, s = beenden)."""
    from explorer.loop import run_exploration
    from explorer.renderer import FINISHED
    from models.mansion import build_mansion

    mgr, config = _load_config_or_abort()
    _configure_logging(config.log_level)

    if config.show_banner:
        console.print(Panel(
            "[bold]BEM-VINDO(A) AO DETECTIVE QUEST[/bold]\n"
            "Exploração do Mapa da Mansão",
            border_style="cyan",
            expand=False,
        ))
        console.print()

    run_exploration(build_mansion(), console=console, config=config)
    console.print(f"\n[green]{FINISHED}[/green]")


# ─── MAP ──────────────────────────────────────────────────────────────────────

def _add_branches(node: Tree, room) -> None:
    for d in room.directions():
        child = room.child(d)
        label = f"{escape(f'[{d.value}]')} {escape(child.name)}"
        if child.is_leaf:
            label += " [dim](fim)[/dim]"
        _add_branches(node.add(label), child)


@click.command("map")
def cmd_map():
    """Zeigt die Karte der Mansão als Baum an."""
    from models.mansion import build_mansion

    root = build_mansion()
    tree = Tree(f"[bold]{escape(root.name)}[/bold]")
    _add_branches(tree, root)
    console.print(tree)

    rooms = list(root.iter_rooms())
    leaves = sum(1 for r in rooms if r.is_leaf)
    console.print(
        f"\n[dim]{len(rooms)} cômodos | {leaves} sem saída | "
        f"profundidade {root.depth()}[/dim]"
    )


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Einstellungen anzeigen oder anlegen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuellen Einstellungen an."""
    mgr, config = _load_config_or_abort()

    source = "Defaults" if mgr.first_run_check() else str(mgr.DEFAULT_CONFIG)
    table = Table(title=f"Einstellungen ({source})", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for k, v in config.model_dump().items():
        table.add_row(k, str(v))
    console.print(table)


@cmd_config.command("init")
def config_init():
    """Legt die Einstellungsdatei mit Default-Werten an."""
    from config.manager import ConfigManager
    from config.schema import ExplorerConfig

    mgr = ConfigManager()
    if not mgr.first_run_check():
        if not click.confirm(
            f"{mgr.DEFAULT_CONFIG} existiert bereits. Überschreiben?", default=False
        ):
            console.print("[yellow]Abgebrochen.[/yellow]")
            return
    mgr.save(ExplorerConfig())


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Detective Quest: Erkundung der Mansão als Binärbaum.

    Ohne Befehl startet direkt die Erkundung.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_explore)


def main():
    """Einstiegspunkt. Speichermangel beendet das Programm mit Diagnose."""
    try:
        cli()
    except MemoryError:
        console.print("[red bold]Erro ao alocar memória para a mansão.[/red bold]")
        sys.exit(1)


# Befehle registrieren
cli.add_command(cmd_explore)
cli.add_command(cmd_map)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
