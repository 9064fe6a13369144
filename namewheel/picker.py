"""Selects which entries are shown as slices on the wheel."""

import logging
import random
from collections import deque
from collections.abc import Sequence

from namewheel.entries import Entry

log = logging.getLogger(__name__)


class DisplayEntryPicker:
    """Builds the Display List from the eligible entries.

    When there are more eligible entries than slices, the surplus waits in a
    hidden queue and is rotated in one slice at a time on the side of the
    wheel facing away from the pointer, so every entry eventually gets a turn
    on screen without the slice under the pointer ever changing.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._all_entries: list[Entry] = []
        self._display_entries: list[Entry] = []
        self._hidden: deque[Entry] = deque()
        self._last_pointer_index: int | None = None
        self._kept: Entry | None = None

    def set_entries(
        self, entries: Sequence[Entry], max_slices: int, allow_duplicates: bool
    ) -> None:
        self._all_entries = list(entries)
        eligible = list(entries)
        if not allow_duplicates:
            eligible = _remove_duplicate_labels(eligible)
        max_slices = max(1, max_slices)
        self._display_entries = eligible[:max_slices]
        self._hidden = deque(eligible[max_slices:])
        self._last_pointer_index = None
        self._kept = None
        log.debug(
            "Display list rebuilt: %d shown, %d hidden",
            len(self._display_entries),
            len(self._hidden),
        )

    def get_display_entries(self) -> list[Entry]:
        return self._display_entries

    def get_all_entries(self) -> list[Entry]:
        return self._all_entries

    def tick(self, pointer_index: int) -> bool:
        """Rotate a hidden entry in when the pointer crosses into a new slice.

        Returns True if the Display List changed.
        """
        moved = pointer_index != self._last_pointer_index
        self._last_pointer_index = pointer_index
        if not moved or not self._hidden or pointer_index < 0:
            return False
        n = len(self._display_entries)
        if n < 2:
            return False
        opposite = (pointer_index + n // 2) % n
        if self._display_entries[opposite] is self._kept:
            return False
        self._hidden.append(self._display_entries[opposite])
        self._display_entries[opposite] = self._hidden.popleft()
        return True

    def set_random_position(self, keep: Entry | None = None) -> None:
        """Shuffle which hidden entries come up next.

        ``keep`` stays on the wheel until the next rebuild or resolution.
        """
        self._kept = keep
        if len(self._hidden) > 1:
            hidden = list(self._hidden)
            self._rng.shuffle(hidden)
            self._hidden = deque(hidden)


def _remove_duplicate_labels(entries: list[Entry]) -> list[Entry]:
    seen: set[str] = set()
    out = []
    for entry in entries:
        if entry.label in seen:
            continue
        seen.add(entry.label)
        out.append(entry)
    return out
