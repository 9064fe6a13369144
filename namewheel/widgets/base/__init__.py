"""Base classes and mixins for widgets."""

from namewheel.widgets.base.cursor import ClickableMixin, set_pointer

__all__ = ["ClickableMixin", "set_pointer"]
