"""Log presenter module."""

from .presenter import (
    CATEGORY_COLORS,
    DEFAULT_COLOR,
    ILogPresenter,
    LogPresenter,
    RenderedEntry,
    color_for,
    format_time_of_day,
    render_entries,
    render_entry,
)

__all__ = [
    "CATEGORY_COLORS",
    "DEFAULT_COLOR",
    "ILogPresenter",
    "LogPresenter",
    "RenderedEntry",
    "color_for",
    "format_time_of_day",
    "render_entries",
    "render_entry",
]
