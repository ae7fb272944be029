"""Log presenter: renders LogStore snapshots for the viewing surface."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable, Protocol

from ..logging_config import get_logger
from ..log_store import ILogStore
from ..models import KycEvent

logger = get_logger(__name__)

STEP_PLACEHOLDER = "-"
HEADER_SEPARATOR = " · "
TIME_PLACEHOLDER = "--:--:--"

DEFAULT_COLOR = "#8E8E93"  # gray

CATEGORY_COLORS: dict[str, str] = {
    "flowStarted": "#007AFF",  # blue
    "stepStarted": "#5856D6",  # indigo
    "stepCompleted": "#34C759",  # green
    "flowCompleted": "#30B0C7",  # teal
    "permissionRequired": "#FF9500",  # orange
    "error": "#FF3B30",  # red
}


@dataclass(frozen=True)
class RenderedEntry:
    """One row of the log as shown to the user."""

    header: str
    badge: str
    color: str
    time: str
    message: str
    meta_line: str | None = None  # None hides the meta line


def color_for(event_type: str) -> str:
    """Display color for an event category."""
    return CATEGORY_COLORS.get(event_type, DEFAULT_COLOR)


def format_time_of_day(timestamp_millis: int, tz: tzinfo | None = None) -> str:
    """HH:MM:SS for an epoch-millis timestamp (local time unless tz is given)."""
    try:
        moment = datetime.fromtimestamp(timestamp_millis / 1000, tz)
    except (OverflowError, OSError, ValueError):
        return TIME_PLACEHOLDER
    return moment.strftime("%H:%M:%S")


def render_entry(event: KycEvent, tz: tzinfo | None = None) -> RenderedEntry:
    """Render a single event."""
    step = event.step if event.step is not None else STEP_PLACEHOLDER
    return RenderedEntry(
        header=f"{event.type}{HEADER_SEPARATOR}{step}",
        badge=event.type.upper(),
        color=color_for(event.type),
        time=format_time_of_day(event.timestamp_millis, tz),
        message=event.message,
        meta_line=f"Meta: {event.meta}" if event.meta else None,
    )


def render_entries(
    events: Iterable[KycEvent], tz: tzinfo | None = None
) -> tuple[RenderedEntry, ...]:
    """Render events in the order given (snapshots are newest first)."""
    return tuple(render_entry(event, tz) for event in events)


class ILogPresenter(Protocol):
    """Viewing-surface side of the log."""

    def on_visible(self) -> tuple[RenderedEntry, ...]:
        """Re-read the store and replace the rendered rows."""
        ...

    def on_hidden(self) -> None:
        """Mark the viewing surface as hidden."""
        ...

    def clear_log(self) -> None:
        """Clear the store and the rendered rows."""
        ...


class LogPresenter:
    """Renders the LogStore newest-first, refreshed on every visibility transition."""

    def __init__(self, store: ILogStore, tz: tzinfo | None = None):
        self._store = store
        self._tz = tz
        self._rows: tuple[RenderedEntry, ...] = ()
        self._visible = False

    @property
    def rows(self) -> tuple[RenderedEntry, ...]:
        return self._rows

    @property
    def visible(self) -> bool:
        return self._visible

    def on_visible(self) -> tuple[RenderedEntry, ...]:
        """Re-read the store and replace the rendered rows."""
        self._visible = True
        self._rows = render_entries(self._store.snapshot(), self._tz)
        logger.debug("Rendered %d log rows", len(self._rows))
        return self._rows

    def on_hidden(self) -> None:
        """Mark the viewing surface as hidden."""
        self._visible = False

    def clear_log(self) -> None:
        """Clear the store and the rendered rows."""
        self._store.clear()
        self._rows = ()
        logger.info("Event log cleared")
