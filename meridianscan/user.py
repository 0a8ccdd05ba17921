"""Account holder owning profiles and scan history."""

from __future__ import annotations

from dataclasses import dataclass, field

from .historical_data import HistoricalData
from .profile import Profile
from .scan_session import ScanSession

MAX_PROFILES = 5


@dataclass
class User:
    """A user account with up to five profiles."""

    age: int
    first_name: str
    last_name: str
    gender: str
    weight: int
    height: float
    birth_date: str
    email: str
    password: str = field(repr=False)
    historical_data: HistoricalData = field(default_factory=HistoricalData, repr=False)
    profiles: list[Profile] = field(default_factory=list)

    def save_session_to_history(self, name: str, date: str, scan: ScanSession) -> None:
        """Record a scan session in this user's history."""
        self.historical_data.add(name, date, scan)

    def add_profile(self, profile: Profile) -> bool:
        """Add a profile unless the limit is reached; return whether it was added."""
        if len(self.profiles) >= MAX_PROFILES:
            return False
        self.profiles.append(profile)
        return True

    def remove_profile(self, profile_name: str) -> None:
        """Remove every profile with the given name."""
        self.profiles = [p for p in self.profiles if p.profile_name != profile_name]

    def get_profile(self, profile_name: str) -> Profile | None:
        """Return the first profile with the given name, or None."""
        return next((p for p in self.profiles if p.profile_name == profile_name), None)

    def update_profile(
        self,
        profile_name: str,
        new_profile_name: str,
        new_weight: int,
        new_gender: str,
        new_height: float,
        age: int,
    ) -> Profile | None:
        """Update the first profile with the given name; return it, or None."""
        profile = self.get_profile(profile_name)
        if profile is None:
            return None
        profile.profile_name = new_profile_name
        profile.weight = new_weight
        profile.gender = new_gender
        profile.height = new_height
        profile.age = age
        return profile