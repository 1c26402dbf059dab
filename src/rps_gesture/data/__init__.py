"""
Data loading modules for recorded hand landmarks.
"""

from .landmark_files import load_observations, parse_hand

__all__ = [
    "load_observations",
    "parse_hand",
]
