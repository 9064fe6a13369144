"""Animated wheel widget."""

from rich.text import Text
from textual.message import Message
from textual.widget import Widget

from namewheel.entries import Entry
from namewheel.painter import Canvas
from namewheel.widgets.base.cursor import ClickableMixin, PointerStyle
from namewheel.wheel import TICKS_PER_SECOND, Wheel


class WheelView(Widget, ClickableMixin):
    """Hosts a Wheel, ticks it at 60 FPS and paints it into the terminal."""

    DEFAULT_CSS = """
    WheelView {
        width: 1fr;
        height: 1fr;
        min-height: 9;
    }
    """

    class EntryChanged(Message):
        """Posted when a different entry moves under the pointer."""

        def __init__(self, entry: Entry | None) -> None:
            self.entry = entry
            super().__init__()

    class SpinDone(Message):
        """Posted once per spin with the entry the wheel stopped on."""

        def __init__(self, entry: Entry | None) -> None:
            self.entry = entry
            super().__init__()

    def __init__(self, wheel: Wheel, **kwargs) -> None:
        super().__init__(**kwargs)
        self.wheel = wheel
        self._timer = None

    def on_mount(self) -> None:
        self._timer = self.set_interval(1 / TICKS_PER_SECOND, self._tick)

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _tick(self) -> None:
        self.wheel.tick()
        if self.wheel.phase.draw_this_frame():
            self.refresh(layout=False)

    def render(self) -> Text:
        canvas = Canvas(self.size.width, self.size.height)
        self.wheel.draw(canvas)
        return canvas.text

    def spin(self) -> bool:
        """Start a spin. Returns False if one is already in progress."""
        if self.wheel.is_spinning():
            return False
        self.wheel.start_spin(self._entry_changed, self._spin_done)
        return True

    def _entry_changed(self) -> None:
        self.post_message(self.EntryChanged(self.wheel.get_entry_at_pointer()))

    def _spin_done(self, entry: Entry | None) -> None:
        self.post_message(self.SpinDone(entry))

    def busy_pointer(self) -> PointerStyle | None:
        return "not-allowed" if self.wheel.is_spinning() else None

    def on_click(self) -> None:
        self.spin()
