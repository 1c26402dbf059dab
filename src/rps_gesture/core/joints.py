"""
Hand joint names and adapters that turn pose-estimator output into joint sets.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .geometry import ORIGIN, Point2D


class JointName(str, Enum):
    """Joints the classifier reads."""
    WRIST = "wrist"
    INDEX_TIP = "indexTip"
    INDEX_PIP = "indexPIP"
    MIDDLE_TIP = "middleTip"
    MIDDLE_PIP = "middlePIP"
    RING_TIP = "ringTip"
    RING_PIP = "ringPIP"
    LITTLE_TIP = "littleTip"
    LITTLE_PIP = "littlePIP"


class Finger(str, Enum):
    """The four fingers whose bend decides the gesture. The thumb is not used."""
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    LITTLE = "little"

    @property
    def tip(self) -> JointName:
        return _FINGER_JOINTS[self][0]

    @property
    def pip(self) -> JointName:
        return _FINGER_JOINTS[self][1]


_FINGER_JOINTS = {
    Finger.INDEX: (JointName.INDEX_TIP, JointName.INDEX_PIP),
    Finger.MIDDLE: (JointName.MIDDLE_TIP, JointName.MIDDLE_PIP),
    Finger.RING: (JointName.RING_TIP, JointName.RING_PIP),
    Finger.LITTLE: (JointName.LITTLE_TIP, JointName.LITTLE_PIP),
}

# Absent joints are either missing keys or None values
JointSet = Mapping[JointName, Optional[Point2D]]

# Indices into MediaPipe's 21-point hand model
MEDIAPIPE_LANDMARK_INDICES = {
    JointName.WRIST: 0,
    JointName.INDEX_PIP: 6,
    JointName.INDEX_TIP: 8,
    JointName.MIDDLE_PIP: 10,
    JointName.MIDDLE_TIP: 12,
    JointName.RING_PIP: 14,
    JointName.RING_TIP: 16,
    JointName.LITTLE_PIP: 18,
    JointName.LITTLE_TIP: 20,
}

MEDIAPIPE_NUM_LANDMARKS = 21


@dataclass
class HandLandmarks:
    """Container for one detected hand's landmark data."""
    landmarks: List[Tuple[float, ...]]
    handedness: str = "unknown"
    confidence: float = 0.0
    timestamp: float = 0.0


def resolve_joint(joints: JointSet, name: JointName) -> Point2D:
    """Return the joint's point, or the origin when the joint is absent."""
    point = joints.get(name)
    return ORIGIN if point is None else point


def missing_joints(joints: JointSet) -> Tuple[JointName, ...]:
    """Absent joints, in declaration order."""
    return tuple(name for name in JointName if joints.get(name) is None)


def to_point(value: Any) -> Optional[Point2D]:
    """
    Coerce a serialized point into a Point2D.

    Accepts a Point2D, a mapping with ``x`` and ``y`` keys, or a sequence whose
    first two items are x and y (a trailing z is ignored). None stays None.

    Raises:
        ValueError: If the value cannot be read as a point
    """
    if value is None or isinstance(value, Point2D):
        return value

    try:
        if isinstance(value, Mapping):
            return Point2D(float(value["x"]), float(value["y"]))
        if isinstance(value, (str, bytes)) or len(value) < 2:
            raise ValueError
        return Point2D(float(value[0]), float(value[1]))
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"Invalid point: {value!r}")


def joint_set_from_mapping(mapping: Mapping[Any, Any]) -> Dict[JointName, Optional[Point2D]]:
    """
    Build a joint set from a mapping keyed by joint identifier.

    Args:
        mapping: Keys such as "wrist" or "indexTip" (or JointName members)

    Returns:
        Joint set holding only the recognized joints

    Raises:
        ValueError: If a recognized joint has a malformed point
    """
    joints = {}
    for key, value in mapping.items():
        try:
            name = JointName(key)
        except ValueError:
            continue
        joints[name] = to_point(value)
    return joints


def joint_set_from_landmarks(landmarks: Sequence[Sequence[float]]) -> Dict[JointName, Optional[Point2D]]:
    """
    Build a joint set from a MediaPipe 21-point landmark list.

    Args:
        landmarks: (x, y) or (x, y, z) items in MediaPipe order

    Returns:
        Joint set with every joint present

    Raises:
        ValueError: If landmarks is not a sequence, holds fewer than 21 items,
            or a point is malformed
    """
    if isinstance(landmarks, (Mapping, str, bytes)) or not isinstance(landmarks, Sequence):
        raise ValueError(
            f"Landmarks must be a list of points, got {type(landmarks).__name__}"
        )

    if len(landmarks) < MEDIAPIPE_NUM_LANDMARKS:
        raise ValueError(
            f"Expected {MEDIAPIPE_NUM_LANDMARKS} landmarks, got {len(landmarks)}"
        )

    return {
        name: to_point(landmarks[idx])
        for name, idx in MEDIAPIPE_LANDMARK_INDICES.items()
    }


def joint_set_from_hand(hand: HandLandmarks) -> Dict[JointName, Optional[Point2D]]:
    """Build a joint set from a HandLandmarks container."""
    return joint_set_from_landmarks(hand.landmarks)
