"""Advice on organs whose meridian readings fall outside the normal range."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

# Meridian point prefix and the organ it reflects, in report order.
ORGAN_NAMES: tuple[tuple[str, str], ...] = (
    ("h1", "lung"),
    ("h2", "pericardium"),
    ("h3", "heart"),
    ("h4", "small intestine"),
    ("h5", "lymph vessel"),
    ("h6", "large intestine"),
    ("f1", "pancreas"),
    ("f2", "liver"),
    ("f3", "kidney"),
    ("f4", "bladder"),
    ("f5", "gall bladder"),
    ("f6", "stomach"),
)


class Condition(Enum):
    """How an organ is working, judged from both sides of the body."""

    INSUFFICIENT = "insufficiently"
    HYPERACTIVE = "hyperactively"
    IRREGULAR = "irregularly"


def _message(organ: str, condition: Condition) -> str:
    return (
        f"The {organ} is working {condition.value}, if abnormities persist over time, "
        f"we recommend that you see a {organ} specialist\n"
    )


def _assess(left: float, right: float, norm_max: float, norm_min: float) -> Condition | None:
    """Judge one organ from its left and right readings; None when it is normal."""
    right_inside = norm_min < right < norm_max
    if left < norm_min:
        if right < norm_min or right_inside:
            return Condition.INSUFFICIENT
        return Condition.IRREGULAR
    if left > norm_max:
        if right > norm_max or right_inside:
            return Condition.HYPERACTIVE
        return Condition.IRREGULAR
    if right < norm_min:
        return Condition.INSUFFICIENT
    if right > norm_max:
        return Condition.HYPERACTIVE
    return None


class Recommendations:
    """Collects advice for every organ with abnormal readings."""

    def __init__(self, meridian_points: Mapping[str, float]) -> None:
        self._points: dict[str, float] = dict(meridian_points)
        self._recommend: list[str] = []

    def calculate_abnormities(self, norm_max: float, norm_min: float) -> list[str]:
        """Append advice for each abnormal organ and return all advice so far."""
        for point, organ in ORGAN_NAMES:
            left = self._points.get(f"{point}Left", 0.0)
            right = self._points.get(f"{point}Right", 0.0)
            condition = _assess(left, right, norm_max, norm_min)
            if condition is not None:
                self._recommend.append(_message(organ, condition))
        return self.recommendations()

    def recommendations(self) -> list[str]:
        """Return the collected advice in the order it was produced."""
        return list(self._recommend)