"""A single scan: conductance readings for the 24 meridian points."""

from __future__ import annotations

from datetime import datetime

MERIDIAN_KEYS: tuple[str, ...] = (
    "h1Left", "h2Left", "h3Left", "h4Left", "h5Left", "h6Left",
    "f1Left", "f2Left", "f3Left", "f4Left", "f5Left", "f6Left",
    "h1Right", "h2Right", "h3Right", "h4Right", "h5Right", "h6Right",
    "f1Right", "f2Right", "f3Right", "f4Right", "f5Right", "f6Right",
)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ScanSession:
    """Readings of one scan, all points starting at 0.0."""

    def __init__(self, date: str | None = None) -> None:
        self.date = date if date is not None else datetime.now().strftime(DATE_FORMAT)
        self._points: dict[str, float] = {key: 0.0 for key in MERIDIAN_KEYS}

    def _check_key(self, key: str) -> None:
        if key not in self._points:
            raise ValueError(f"Invalid meridian point key: {key}")

    def set_point(self, key: str, value: float) -> None:
        """Set the reading of an existing meridian point."""
        self._check_key(key)
        self._points[key] = float(value)

    def get_point(self, key: str) -> float:
        """Return the reading of a meridian point."""
        self._check_key(key)
        return self._points[key]

    def meridian_points(self) -> dict[str, float]:
        """Return a copy of all readings, ordered by key."""
        return dict(sorted(self._points.items()))

    def __repr__(self) -> str:
        return f"ScanSession(date={self.date!r})"