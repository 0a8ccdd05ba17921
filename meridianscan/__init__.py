"""Meridian-point conductance scans: profiles, history, indicators, charts and recommendations."""

__version__ = "1.0.0"
__all__ = [
    "diagrams",
    "historical_data",
    "indicators",
    "profile",
    "recommendations",
    "scan_session",
    "user",
]