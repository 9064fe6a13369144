"""Mouse cursor mixin for clickable Textual widgets.

Uses OSC 22 escape sequences supported by modern terminals
(Ghostty, Kitty, WezTerm, foot). Unsupported terminals ignore the sequence.
"""

import os
from typing import Literal

# CSS cursor names supported by OSC 22
PointerStyle = Literal["default", "pointer", "wait", "not-allowed"]

# Cache the tty file descriptor for direct terminal writes
_tty_fd: int | None = None


def _get_tty() -> int | None:
    """Get file descriptor for the controlling terminal."""
    global _tty_fd
    if _tty_fd is None:
        try:
            _tty_fd = os.open("/dev/tty", os.O_WRONLY)
        except OSError:
            _tty_fd = -1  # Mark as unavailable
    return _tty_fd if _tty_fd >= 0 else None


def set_pointer(style: PointerStyle = "default") -> None:
    """Emit OSC 22 to change mouse pointer shape."""
    tty = _get_tty()
    if tty is None:
        return
    try:
        os.write(tty, f"\033]22;{style}\033\\".encode())
    except OSError:
        pass


class ClickableMixin:
    """Mixin for clickable widgets with a hand cursor.

    Widgets can override ``busy_pointer()`` to show another style while they
    won't react to clicks (e.g. a wheel that is already spinning).
    Adds the 'clickable' class for CSS styling.
    """

    def busy_pointer(self) -> PointerStyle | None:
        return None

    def on_mount(self) -> None:
        self.add_class("clickable")  # type: ignore[attr-defined]

    def on_enter(self) -> None:
        set_pointer(self.busy_pointer() or "pointer")

    def on_leave(self) -> None:
        set_pointer("default")
