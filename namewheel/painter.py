"""Terminal rendering of the wheel as colored character cells."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.style import Style
from rich.text import Text

from namewheel.entries import Entry
from namewheel.pointer import TAU, index_from_bounds, sector_bounds, sector_start

PALETTE = [
    "#cc7700",
    "#3369e8",
    "#d50f25",
    "#eeb211",
    "#009925",
    "#8e44ad",
    "#16a085",
    "#c0392b",
]

POINTER = "▼"
# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 2.0


@dataclass
class Canvas:
    """Target surface for one frame; ``text`` holds the result after drawing."""

    width: int
    height: int
    text: Text = field(default_factory=Text)


class WheelPainter:
    """Draws the wheel. Sector geometry is cached until ``refresh()``."""

    def __init__(self) -> None:
        self._bounds: list[float] | None = None
        self._entries_key: tuple[int, ...] = ()

    def refresh(self) -> None:
        self._bounds = None

    def _get_bounds(self, entries: Sequence[Entry]) -> list[float]:
        key = tuple(id(e) for e in entries)
        if self._bounds is None or key != self._entries_key:
            self._bounds = sector_bounds(entries)
            self._entries_key = key
        return self._bounds

    def draw(
        self,
        canvas: Canvas,
        angle: float,
        display_entries: Sequence[Entry],
        all_entries: Sequence[Entry],
        wheel_config,
        dark_mode: bool,
    ) -> None:
        background = Style(bgcolor="black" if dark_mode else "white")
        hub_style = Style(
            color="white" if dark_mode else "black",
            bgcolor="#333333" if dark_mode else "#dddddd",
            bold=True,
        )
        text = Text(no_wrap=True, overflow="crop")
        width, height = canvas.width, canvas.height
        if width < 3 or height < 3:
            canvas.text = text
            return
        if not display_entries:
            label = "No entries" if not all_entries else "All entries disabled"
            text.append(label.center(width)[:width], style=background)
            canvas.text = text
            return

        bounds = self._get_bounds(display_entries)
        # Row 0 is reserved for the pointer
        radius = min((height - 1) / 2, width / (2 * CELL_ASPECT)) - 0.5
        cx = (width - 1) / 2
        cy = 1 + (height - 2) / 2
        hub = radius / 4

        labels = self._label_cells(display_entries, bounds, angle, cx, cy, radius)

        for y in range(height):
            if y:
                text.append("\n")
            if y == 0:
                pad = int(round(cx))
                text.append(" " * pad, style=background)
                text.append(POINTER, style=Style(color=PALETTE[0], bold=True))
                text.append(" " * (width - pad - 1), style=background)
                continue
            for x in range(width):
                dx = (x - cx) / CELL_ASPECT
                dy = y - cy
                r = math.hypot(dx, dy)
                if r > radius:
                    text.append(" ", style=background)
                elif r <= hub:
                    text.append(" ", style=hub_style)
                else:
                    # Screen angle clockwise from the pointer
                    theta = math.atan2(dx, -dy)
                    index = index_from_bounds(bounds, angle - theta)
                    color = PALETTE[index % len(PALETTE)]
                    char = labels.get((x, y), " ")
                    text.append(char, style=Style(color="white", bgcolor=color, bold=True))
        canvas.text = text

    def _label_cells(
        self,
        entries: Sequence[Entry],
        bounds: list[float],
        angle: float,
        cx: float,
        cy: float,
        radius: float,
    ) -> dict[tuple[int, int], str]:
        """Initial of each label at two thirds of the radius, mid-sector."""
        cells = {}
        for i, entry in enumerate(entries):
            if not entry.label:
                continue
            center = (sector_start(bounds, i) + bounds[i]) / 2
            theta = (angle - center) % TAU
            x = int(round(cx + math.sin(theta) * radius * 2 / 3 * CELL_ASPECT))
            y = int(round(cy - math.cos(theta) * radius * 2 / 3))
            cells[(x, y)] = entry.label[0].upper()
        return cells
