"""
Core modules for rock-paper-scissors gesture classification.
"""

from .geometry import ORIGIN, Point2D, euclidean_distance
from .joints import (
    Finger,
    HandLandmarks,
    JointName,
    JointSet,
    joint_set_from_hand,
    joint_set_from_landmarks,
    joint_set_from_mapping,
    missing_joints,
    resolve_joint,
)
from .classifier import (
    FingerReading,
    FingerState,
    Gesture,
    GestureClassifier,
    GestureResult,
    classify,
    decide_gesture,
    read_fingers,
)

__all__ = [
    "ORIGIN",
    "Point2D",
    "euclidean_distance",
    "Finger",
    "HandLandmarks",
    "JointName",
    "JointSet",
    "joint_set_from_hand",
    "joint_set_from_landmarks",
    "joint_set_from_mapping",
    "missing_joints",
    "resolve_joint",
    "FingerReading",
    "FingerState",
    "Gesture",
    "GestureClassifier",
    "GestureResult",
    "classify",
    "decide_gesture",
    "read_fingers",
]
