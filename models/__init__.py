from models.room import Direction, Room
from models.mansion import ROOT_NAME, build_mansion

__all__ = [
    "Direction",
    "Room",
    "ROOT_NAME",
    "build_mansion",
]
