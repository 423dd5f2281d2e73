"""Explorer: Zustandsautomat und Konsolenschleife für die Mansão."""

from explorer.engine import EndReason, Explorer, ExplorerState, parse_choice
from explorer.errors import ExplorerError, InvalidChoiceError, NoSuchPathError
from explorer.loop import run_exploration

__all__ = [
    "EndReason",
    "Explorer",
    "ExplorerState",
    "parse_choice",
    "ExplorerError",
    "InvalidChoiceError",
    "NoSuchPathError",
    "run_exploration",
]
