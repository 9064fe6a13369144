"""Wheel entries."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class Entry:
    """A labeled slice candidate.

    Compared by identity: the wheel keeps references to the entries it was
    given, and two entries with the same label are still two slices.
    """

    label: str
    enabled: bool | None = None
    weight: float = 1.0

    @property
    def is_enabled(self) -> bool:
        # A missing flag counts as enabled
        return self.enabled is None or bool(self.enabled)


def parse_entries(lines: Iterable[str]) -> list[Entry]:
    """Build entries from text lines.

    Blank lines are skipped. A leading '#' keeps the entry on the wheel's
    list but disables it, e.g. "# Alice".
    """
    entries = []
    for line in lines:
        text = line.strip()
        if not text:
            continue
        if text.startswith("#"):
            label = text.lstrip("#").strip()
            if label:
                entries.append(Entry(label, enabled=False))
            continue
        entries.append(Entry(text))
    return entries
