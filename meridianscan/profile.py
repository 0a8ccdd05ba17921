"""Profiles and their normal conductance ranges."""

from __future__ import annotations

from dataclasses import dataclass, field

from .scan_session import ScanSession


def conductance_range(age: int, weight: int) -> tuple[int, int]:
    """Return the (min, max) normal conductance for an age and weight."""
    if age < 10:
        bands = ((20, 40), (25, 45), (35, 55))
        light_limit, heavy_limit = 15, 30
    else:
        light_limit, heavy_limit = 50, 70
        if age < 20:
            bands = ((55, 75), (60, 85), (50, 80))
        elif age < 40:
            bands = ((50, 70), (55, 80), (50, 75))
        elif age < 80:
            bands = ((45, 65), (50, 70), (45, 65))
        else:
            bands = ((35, 50), (40, 55), (35, 50))

    if weight < light_limit:
        return bands[0]
    if weight <= heavy_limit:
        return bands[1]
    return bands[2]


@dataclass
class Profile:
    """A person measured by the device."""

    profile_name: str
    gender: str
    weight: int
    age: int
    height: float
    birth_date: str = ""
    conductance_norm_min: float = 0.0
    conductance_norm_max: float = 0.0
    current_scan_session: ScanSession = field(default_factory=ScanSession)

    def calculate_conductance_range(self) -> None:
        """Set the normal conductance range from age and weight."""
        low, high = conductance_range(self.age, self.weight)
        self.conductance_norm_min = low
        self.conductance_norm_max = high