"""Textual widgets for the wheel UI."""

from namewheel.widgets.base import ClickableMixin
from namewheel.widgets.wheel_view import WheelView

__all__ = ["ClickableMixin", "WheelView"]
