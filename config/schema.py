from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExplorerConfig(BaseModel):
    """Anzeige- und Logging-Einstellungen des Explorers.

    Die Karte selbst ist fest verdrahtet und nicht konfigurierbar.
    """
    # Begrüßungsbanner vor der Erkundung anzeigen
    show_banner: bool = Field(True,
        description="Begrüßungsbanner anzeigen")
    # Namen der Nachbarräume neben den Richtungen anzeigen
    show_path_preview: bool = Field(True,
        description="Nachbarräume neben e/d anzeigen")
    # Gegangenen Weg am Ende ausgeben
    show_path_summary: bool = Field(True,
        description="Gegangenen Weg am Ende anzeigen")
    # Log-Level für den Root-Logger (Ausgabe auf stderr)
    log_level: str = Field("WARNING",
        description="DEBUG, INFO, WARNING, ERROR oder CRITICAL")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(
                f"Unbekanntes Log-Level '{v}'. Erlaubt: {', '.join(LOG_LEVELS)}"
            )
        return v
