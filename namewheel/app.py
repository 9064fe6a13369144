"""Wheel of names - main application."""

import logging
from collections.abc import Sequence
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from namewheel.config import WheelConfig, get_wheel_config
from namewheel.entries import Entry
from namewheel.theme import WHEEL_THEME
from namewheel.wheel import Wheel
from namewheel.widgets import WheelView

log = logging.getLogger(__name__)


class WheelApp(App):
    """Spin a wheel of names in the terminal."""

    CSS_PATH = Path(__file__).parent / "styles.tcss"

    BINDINGS = [
        Binding("space", "spin", "Spin", priority=True),
        Binding("t", "next_target", "Target", show=False),
        Binding("x", "clear_target", "Clear target"),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(
        self,
        entries: Sequence[Entry],
        config: WheelConfig | None = None,
        target: str | None = None,
        sequence: Sequence[int] | None = None,
    ) -> None:
        super().__init__()
        self.config = config or get_wheel_config()
        self.entries = list(entries)
        self.wheel = Wheel(self.config, dark_mode=self.config.dark_mode)
        self.wheel.set_entries(
            self.entries, self.config.max_slices, self.config.allow_duplicates
        )
        if sequence:
            self.wheel.set_predetermined_sequence(sequence)
        if target:
            self._set_target_by_label(target)
        self.winners: list[Entry] = []

    def _set_target_by_label(self, label: str) -> None:
        for entry in self.wheel.picker.get_display_entries():
            if entry.label == label:
                self.wheel.set_target_entry(entry)
                return
        log.warning(f"Target {label!r} is not on the wheel")

    def compose(self) -> ComposeResult:
        yield WheelView(self.wheel, id="wheel")
        yield Static("", id="status")
        yield Static("", id="winner")
        yield Static("", id="target")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(WHEEL_THEME)
        self.theme = WHEEL_THEME.name
        if not self.wheel.picker.get_display_entries():
            self.notify("No enabled entries to spin", severity="warning")
        self._update_target_label()

    def _update_target_label(self) -> None:
        target = self.wheel.target_entry
        text = f"Target: {target.label}" if target else ""
        self.query_one("#target", Static).update(text)

    def action_spin(self) -> None:
        if not self.wheel.picker.get_display_entries():
            self.notify("No enabled entries to spin", severity="warning")
            return
        if self.query_one("#wheel", WheelView).spin():
            self.query_one("#winner", Static).update("")
            # A sequence may have picked the target just now
            self._update_target_label()

    def action_next_target(self) -> None:
        """Cycle the target through the display entries."""
        entries = self.wheel.picker.get_display_entries()
        if not entries:
            return
        current = self.wheel.target_entry
        index = next((i for i, e in enumerate(entries) if e is current), -1)
        self.wheel.set_target_index((index + 1) % len(entries))
        self._update_target_label()

    def action_clear_target(self) -> None:
        self.wheel.clear_target()
        self._update_target_label()

    def on_wheel_view_entry_changed(self, event: WheelView.EntryChanged) -> None:
        label = event.entry.label if event.entry else ""
        self.query_one("#status", Static).update(label)

    def on_wheel_view_spin_done(self, event: WheelView.SpinDone) -> None:
        if event.entry is None:
            return
        self.winners.append(event.entry)
        self.query_one("#winner", Static).update(f"🎉 {event.entry.label}")
        self.notify(f"We have a winner: {event.entry.label}")
