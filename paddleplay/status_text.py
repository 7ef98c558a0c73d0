"""Status text that is shown for a while, or until replaced or cleared."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Union

DEFAULT_FONT_SIZE = 18.0
DEFAULT_TEXT_COLOR = (128, 128, 128)
DEFAULT_MARGIN = 10.0

Duration = Union[float, int, timedelta]


def _seconds(duration: Duration) -> float:
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    if seconds < 0:
        raise ValueError(f"duration must not be negative, got {duration!r}")
    return seconds


class StatusText:
    """A line of status text, centred along the bottom of the window by default.

    Text set with a duration is cleared automatically once that much time has
    been ticked away; text set without one stays until it is replaced or cleared.
    """

    def __init__(self) -> None:
        self.text = ""
        self.font_size = DEFAULT_FONT_SIZE
        self.color = DEFAULT_TEXT_COLOR
        self.margin = DEFAULT_MARGIN
        self._remaining: Optional[float] = None

    @property
    def timer_running(self) -> bool:
        """True while a display duration is counting down."""
        return self._remaining is not None

    def set_text(self, text: str, duration: Optional[Duration] = None) -> None:
        """Show ``text``; with a duration, clear it once that much time has passed."""
        seconds = None if duration is None else _seconds(duration)
        self.text = str(text)
        if seconds is not None:
            self._remaining = seconds

    def clear(self) -> None:
        """Blank the text."""
        self.text = ""

    def tick(self, dt: Duration) -> None:
        """Let ``dt`` seconds pass, clearing the text when its duration runs out."""
        elapsed = _seconds(dt)
        if self._remaining is None:
            return
        self._remaining -= elapsed
        if self._remaining <= 0:
            self.text = ""
            self._remaining = None

    def __repr__(self) -> str:
        return f"StatusText(text={self.text!r}, remaining={self._remaining!r})"