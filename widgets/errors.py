"""Errors raised by the widgets."""


class WidgetInputError(ValueError):
    """The user typed something the widget can't work with."""
