"""Konfigurationsmanager: Laden und Speichern der Explorer-Einstellungen.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren. Die Datei ist
optional; fehlt sie, gelten die Defaults aus ExplorerConfig.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from config.schema import ExplorerConfig

logger = logging.getLogger(__name__)

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Detective Quest — Explorer-Einstellungen
# Erstellt: {date.today().isoformat()}
# ============================================
"""


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "explorer_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> ExplorerConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic.

        Ohne path wird DEFAULT_CONFIG gelesen; fehlt diese Datei, werden die
        Defaults zurückgegeben. Ein explizit angegebener, fehlender Pfad
        ist dagegen ein Fehler.
        """
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            if path is None:
                logger.debug(f"Keine Konfiguration unter {target}, nutze Defaults")
                return ExplorerConfig()
            raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {target}")
        with open(target, "r", encoding="utf-8") as f:
            try:
                raw = yaml.load(f)
            except YAMLError as e:
                raise ValueError(
                    f"Konfigurationsdatei ungültig: {target}\n"
                    f"YAML-Fehler: {e}"
                ) from e
        try:
            return ExplorerConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    # ─── Speichern ───

    def save(self, config: ExplorerConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit Kommentaren je Feld."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: ExplorerConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Zeilenkommentaren aus den Feldbeschreibungen."""
        cm = CommentedMap(config.model_dump())
        for name, field in ExplorerConfig.model_fields.items():
            if field.description:
                cm.yaml_add_eol_comment(field.description, name)
        return cm
