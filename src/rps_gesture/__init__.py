"""
Rock-Paper-Scissors Hand Gesture Classification

Classifies a hand pose as rock, paper, scissors or unknown from the wrist,
fingertip and PIP joint positions reported by a pose estimator.
"""

__version__ = "1.0.0"

from .core import (
    Finger,
    FingerReading,
    FingerState,
    Gesture,
    GestureClassifier,
    GestureResult,
    HandLandmarks,
    JointName,
    Point2D,
    classify,
    euclidean_distance,
    joint_set_from_hand,
    joint_set_from_landmarks,
    joint_set_from_mapping,
)
from .utils import ConfigManager, Logger

__all__ = [
    "Finger",
    "FingerReading",
    "FingerState",
    "Gesture",
    "GestureClassifier",
    "GestureResult",
    "HandLandmarks",
    "JointName",
    "Point2D",
    "classify",
    "euclidean_distance",
    "joint_set_from_hand",
    "joint_set_from_landmarks",
    "joint_set_from_mapping",
    "ConfigManager",
    "Logger",
]
