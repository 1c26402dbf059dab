"""
Shared fixtures for the gesture classifier tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rps_gesture.core.geometry import Point2D
from rps_gesture.core.joints import Finger, JointName
from rps_gesture.utils.logger import Logger


# (tip, pip) placements relative to a wrist at the origin
FINGER_POSES = {
    "straight": ((0.0, 10.0), (0.0, 5.0)),
    "bent": ((0.0, 2.0), (0.0, 5.0)),
    # tip and PIP both 5.0 from the wrist
    "level": ((5.0, 0.0), (0.0, 5.0)),
}


@pytest.fixture
def make_hand():
    """Build a joint set from per-finger poses ("straight", "bent" or "level")."""
    def _make_hand(index, middle, ring, little, wrist=(0.0, 0.0)):
        poses = {
            Finger.INDEX: index,
            Finger.MIDDLE: middle,
            Finger.RING: ring,
            Finger.LITTLE: little,
        }
        wx, wy = wrist
        joints = {JointName.WRIST: Point2D(wx, wy)}
        for finger, pose in poses.items():
            (tx, ty), (px, py) = FINGER_POSES[pose]
            joints[finger.tip] = Point2D(wx + tx, wy + ty)
            joints[finger.pip] = Point2D(wx + px, wy + py)
        return joints

    return _make_hand


@pytest.fixture
def quiet_logger():
    """Debug-level logger with no handlers of its own; records reach caplog."""
    return Logger(
        name="rps_gesture_test",
        level="DEBUG",
        console_output=False,
        file_output=False
    )
