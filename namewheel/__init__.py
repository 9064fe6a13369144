"""namewheel - a spinning wheel of names for the terminal."""

from namewheel.entries import Entry
from namewheel.wheel import Wheel

__all__ = ["Entry", "Wheel"]
__version__ = "0.1.0"
