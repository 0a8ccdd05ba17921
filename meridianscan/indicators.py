"""Health indicators derived from meridian point conductance."""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping

HAND_POINTS = ("h1", "h2", "h3", "h4", "h5", "h6")
FOOT_POINTS = ("f1", "f2", "f3", "f4", "f5", "f6")
MERIDIAN_COUNT = 24


class Status(IntEnum):
    """How a value compares with the normal conductance range."""

    INSUFFICIENT = 0
    HYPERACTIVE = 1
    NORMAL = 2


def classify(value: float, norm_max: float, norm_min: float) -> Status:
    """Classify a value against the normal range; the bounds count as normal."""
    if value < norm_min:
        return Status.INSUFFICIENT
    if value > norm_max:
        return Status.HYPERACTIVE
    return Status.NORMAL


def _both_sides(*points: str) -> list[str]:
    return [f"{point}{side}" for point in points for side in ("Left", "Right")]


_IMMUNE_KEYS = _both_sides("h1", "h5", "h6", "f1")
_METABOLISM_KEYS = _both_sides("f1", "f2", "f3", "f6")
_PSYCHO_KEYS = _both_sides("h2", "h3", "h5", "f2", "f3")
_MUSCULO_KEYS = _both_sides(*FOOT_POINTS)

_PROCESSED_KEYS = (
    "energyLevel",
    "immuneSystem",
    "metabolism",
    "psychoEmotional",
    "musculoskeletal",
    "leftMeridian",
    "rightMeridian",
    "upperMeridian",
    "lowerMeridian",
)


class Indicators:
    """Averages and sums of meridian readings, with their status against a norm."""

    def __init__(self, meridian_points: Mapping[str, float]) -> None:
        self._points: dict[str, float] = dict(meridian_points)
        self._processed: dict[str, float] = {key: 0.0 for key in _PROCESSED_KEYS}
        self._status: dict[str, Status] = {}

    @property
    def processed_data(self) -> dict[str, float]:
        """Calculated indicator values, keyed by indicator name."""
        return dict(self._processed)

    @property
    def status(self) -> dict[str, Status]:
        """Status of each classified indicator calculated so far."""
        return dict(self._status)

    def _sum(self, keys: list[str]) -> float:
        return sum(self._points.get(key, 0.0) for key in keys)

    def _average(self, name: str, keys: list[str], norm_max: float, norm_min: float) -> float:
        value = self._sum(keys) / len(keys)
        self._processed[name] = value
        self._status[name] = classify(value, norm_max, norm_min)
        return value

    def calculate_energy_level(self, norm_max: float, norm_min: float) -> float:
        """Average of all meridian readings."""
        value = sum(self._points.values()) / MERIDIAN_COUNT
        self._processed["energyLevel"] = value
        self._status["energyLevel"] = classify(value, norm_max, norm_min)
        return value

    def calculate_immune_system(self, norm_max: float, norm_min: float) -> float:
        """Average of lung, lymph vessel, large intestine and pancreas readings."""
        return self._average("immuneSystem", _IMMUNE_KEYS, norm_max, norm_min)

    def calculate_metabolism(self, norm_max: float, norm_min: float) -> float:
        """Average of pancreas, liver, kidney and stomach readings."""
        return self._average("metabolism", _METABOLISM_KEYS, norm_max, norm_min)

    def calculate_psycho_emotional(self, norm_max: float, norm_min: float) -> float:
        """Average of pericardium, heart, lymph vessel, liver and kidney readings."""
        return self._average("psychoEmotional", _PSYCHO_KEYS, norm_max, norm_min)

    def calculate_musculoskeletal(self, norm_max: float, norm_min: float) -> float:
        """Average of all foot readings."""
        return self._average("musculoskeletal", _MUSCULO_KEYS, norm_max, norm_min)

    def _total(self, name: str, keys: list[str]) -> float:
        value = self._sum(keys)
        self._processed[name] = value
        return value

    def calculate_left_meridian(self) -> float:
        """Sum of all left-side readings."""
        return self._total("leftMeridian", [f"{p}Left" for p in HAND_POINTS + FOOT_POINTS])

    def calculate_right_meridian(self) -> float:
        """Sum of all right-side readings."""
        return self._total("rightMeridian", [f"{p}Right" for p in HAND_POINTS + FOOT_POINTS])

    def calculate_upper_meridian(self) -> float:
        """Sum of all hand readings."""
        return self._total("upperMeridian", _both_sides(*HAND_POINTS))

    def calculate_lower_meridian(self) -> float:
        """Sum of all foot readings."""
        return self._total("lowerMeridian", _both_sides(*FOOT_POINTS))