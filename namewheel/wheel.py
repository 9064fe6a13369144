"""Spin controller - rotation state, target resolution and phase dispatch.

The wheel is driven from outside: something calls ``tick()`` at a fixed
60 Hz and ``start_spin()`` when the user asks for a spin. Nothing here
blocks, sleeps or runs in the background.
"""

import logging
import random
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

from namewheel.config import WheelConfig
from namewheel.entries import Entry
from namewheel.painter import WheelPainter
from namewheel.phases import IdleDemoPhase, SpinPhase, deceleration_distance
from namewheel.picker import DisplayEntryPicker
from namewheel.pointer import (
    TAU,
    get_index_at_pointer,
    normalize_angle,
    sector_center,
    sector_width,
)

log = logging.getLogger(__name__)

TICKS_PER_SECOND = 60
MAX_ACCELERATION_TICKS = 60
JITTER = 0.1  # fraction of a sector, centered: +-5%

EntryChangedCallback = Callable[[], Any]
SpinDoneCallback = Callable[[Entry | None], Any]


class StateTimeLengths(NamedTuple):
    accelerating: float
    decelerating: float


class Wheel:
    """A wheel of entries that spins and lands on one of them."""

    def __init__(
        self,
        config: WheelConfig | None = None,
        picker: DisplayEntryPicker | None = None,
        painter: WheelPainter | None = None,
        rng: random.Random | None = None,
        dark_mode: bool = False,
    ) -> None:
        self.angle = 0.0
        self.speed = 0.0
        self.config = config or WheelConfig()
        self.dark_mode = dark_mode
        self._rng = rng or random.Random()
        self.picker = picker or DisplayEntryPicker(rng=self._rng)
        self.painter = painter or WheelPainter()
        self.target_entry: Entry | None = None
        self.predetermined_sequence: list[int] = []
        self.current_sequence_index = 0
        self._on_entry_changed: EntryChangedCallback | None = None
        self._on_spin_done: SpinDoneCallback | None = None
        self._index_at_last_tick: int | None = None
        self._target_from_sequence = False
        self.phase: SpinPhase = IdleDemoPhase()
        self.phase.enter(self)

    # -- configuration ---------------------------------------------------

    def set_entries(
        self, entries: Sequence[Entry], max_slices: int, allow_duplicates: bool
    ) -> None:
        if self.is_spinning():
            log.debug("Ignoring new entries while spinning")
            return
        enabled = [e for e in entries if e.is_enabled]
        self.picker.set_entries(enabled, max_slices, allow_duplicates)
        self.painter.refresh()

    def configure(self, config: WheelConfig, dark_mode: bool = False) -> None:
        if self.is_spinning():
            log.debug("Ignoring new settings while spinning")
            return
        self.config = config
        self.dark_mode = dark_mode
        self.painter.refresh()

    def refresh(self) -> None:
        self.painter.refresh()

    def set_target_entry(self, entry: Entry | None) -> None:
        self.target_entry = entry
        self._target_from_sequence = False

    def set_target_index(self, index: int) -> bool:
        """Target the display entry at ``index``.

        Out of range indices are ignored; returns whether the target changed.
        """
        entries = self.picker.get_display_entries()
        if not 0 <= index < len(entries):
            log.debug(f"Target index {index} out of range for {len(entries)} entries")
            return False
        self.target_entry = entries[index]
        self._target_from_sequence = False
        return True

    def clear_target(self) -> None:
        self.target_entry = None
        self._target_from_sequence = False

    def set_predetermined_sequence(self, sequence: Sequence[int]) -> None:
        self.predetermined_sequence = list(sequence)
        self.current_sequence_index = 0

    # -- spinning --------------------------------------------------------

    def start_spin(
        self,
        on_entry_changed: EntryChangedCallback | None = None,
        on_spin_done: SpinDoneCallback | None = None,
    ) -> None:
        """Register callbacks and ask the active phase to start a spin.

        Only the idle and post-spin phases accept; a spin already in
        progress ignores the request entirely: callbacks, sequence and
        target are left as they are.
        """
        if self.is_spinning():
            log.debug("Ignoring spin request while spinning")
            return
        self._on_entry_changed = on_entry_changed
        self._on_spin_done = on_spin_done

        self._consume_sequence()

        if self.target_entry is not None:
            self.set_random_position()
        self._transition(self.phase.click(self))

    click = start_spin

    def _consume_sequence(self) -> None:
        """Turn the next sequence index into the target for this spin.

        Once the sequence runs out, a target it left behind is dropped so
        later spins land randomly. Targets set by hand are kept.
        """
        if self.current_sequence_index < len(self.predetermined_sequence):
            index = self.predetermined_sequence[self.current_sequence_index]
            self.current_sequence_index += 1
            if self.set_target_index(index):
                self._target_from_sequence = True
        elif self._target_from_sequence:
            self.target_entry = None
            self._target_from_sequence = False

    def tick(self) -> None:
        self._transition(self.phase.tick(self))
        self._advance()
        index = self.get_index_at_pointer()
        if self.picker.tick(index):
            self.painter.refresh()

    def _advance(self) -> None:
        self.angle = normalize_angle(self.angle + self.speed)
        index = self.get_index_at_pointer()
        if index != self._index_at_last_tick:
            self._index_at_last_tick = index
            if self._on_entry_changed is not None:
                self._on_entry_changed()

    def _transition(self, phase: SpinPhase | None) -> None:
        if phase is None:
            return
        log.debug(f"Phase {self.phase!r} -> {phase!r}")
        self.phase = phase
        phase.enter(self)

    def set_random_position(self) -> None:
        """Jump to the landing angle for the coming spin.

        Lands in the middle of the target's sector, give or take 5% of the
        sector, when a target is set and still on the wheel. Otherwise any
        angle is equally likely.
        """
        target = self.target_entry
        if target is not None:
            entries = self.picker.get_display_entries()
            index = next((i for i, e in enumerate(entries) if e is target), -1)
            if index != -1:
                width = sector_width(entries, index)
                jitter = (self._rng.random() - 0.5) * width * JITTER
                landing = sector_center(entries, index) + jitter
                if self.config.exact_landing and self.is_spinning():
                    # Back off by the distance still to come so it stops here
                    landing -= deceleration_distance(
                        self.speed, self.get_state_time_lengths().decelerating
                    )
                self.angle = normalize_angle(landing)
                self.picker.set_random_position(keep=target)
                return
            log.debug(f"Target {target.label!r} not on the wheel, landing randomly")
        self.angle = self._rng.random() * TAU
        self.picker.set_random_position()

    def spin_is_done(self) -> None:
        entry = self.get_entry_at_pointer()
        log.info(f"Spin done: {entry.label if entry else None!r}")
        if self._on_spin_done is not None:
            self._on_spin_done(entry)

    # -- queries ---------------------------------------------------------

    def is_spinning(self) -> bool:
        return self.phase.is_spinning()

    def get_index_at_pointer(self) -> int:
        return get_index_at_pointer(self.picker.get_display_entries(), self.angle)

    def get_entry_at_pointer(self) -> Entry | None:
        index = self.get_index_at_pointer()
        if index < 0:
            return None
        return self.picker.get_display_entries()[index]

    def reset_rotation(self) -> None:
        self.angle = 0.0

    def get_state_time_lengths(self) -> StateTimeLengths:
        spin_ticks = self.config.spin_time * TICKS_PER_SECOND
        accelerating = min(MAX_ACCELERATION_TICKS, spin_ticks / 3)
        return StateTimeLengths(accelerating, spin_ticks - accelerating)

    def draw(self, canvas) -> bool:
        """Paint onto ``canvas`` if the active phase wants a frame."""
        if self.config is None or not self.phase.draw_this_frame():
            return False
        self.painter.draw(
            canvas,
            self.angle,
            self.picker.get_display_entries(),
            self.picker.get_all_entries(),
            self.config,
            self.dark_mode,
        )
        return True
