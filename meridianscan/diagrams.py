"""Body chart and bar chart data from meridian readings."""

from __future__ import annotations

from typing import Mapping

from .indicators import Status, classify

# Meridian point prefix and the organ key used in the body chart.
ORGANS: tuple[tuple[str, str], ...] = (
    ("h1", "lung"),
    ("h2", "peri"),
    ("h3", "heart"),
    ("h4", "smallIn"),
    ("h5", "lymph"),
    ("h6", "largeIn"),
    ("f1", "panc"),
    ("f2", "liver"),
    ("f3", "kidney"),
    ("f4", "bladder"),
    ("f5", "gBladder"),
    ("f6", "stomach"),
)

_SIDES = (("Left", "L"), ("Right", "R"))


class Diagrams:
    """Chart data for one scan against a normal conductance range."""

    def __init__(self, meridian_points: Mapping[str, float]) -> None:
        self._points: dict[str, float] = dict(meridian_points)
        self._body_chart: dict[str, Status] = {}
        self._bar_chart: dict[str, float] = {}

    @property
    def body_chart_data(self) -> dict[str, Status]:
        """Status of each organ, keyed like 'lungL' or 'stomachR'."""
        return dict(self._body_chart)

    @property
    def bar_chart_data(self) -> dict[str, float]:
        """Each reading as a percentage of the range's midpoint."""
        return dict(self._bar_chart)

    def calculate_body_chart_data(self, norm_max: float, norm_min: float) -> dict[str, Status]:
        """Classify every organ's reading against the normal range."""
        for point, organ in ORGANS:
            for side, suffix in _SIDES:
                value = self._points.get(f"{point}{side}", 0.0)
                self._body_chart[f"{organ}{suffix}"] = classify(value, norm_max, norm_min)
        return self.body_chart_data

    def calculate_bar_chart_data(self, norm_max: float, norm_min: float) -> dict[str, float]:
        """Express every reading as a percentage of the range's midpoint."""
        average = (norm_max + norm_min) / 2
        if average == 0:
            raise ValueError("normal conductance range has a zero midpoint")
        for point, _ in ORGANS:
            for side, _suffix in _SIDES:
                key = f"{point}{side}"
                self._bar_chart[key] = self._points.get(key, 0.0) / average * 100
        return self.bar_chart_data