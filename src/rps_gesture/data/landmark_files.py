"""
Reading recorded hand landmarks from JSON files.

A file holds one hand, or a list of hands found in the same frame. Each hand
is an object with either a ``joints`` mapping keyed by joint name or a
``landmarks`` list in MediaPipe's 21-point order::

    {"joints": {"wrist": [0.5, 0.9], "indexTip": {"x": 0.4, "y": 0.2}}}
    {"landmarks": [[0.5, 0.9, 0.0], ...], "handedness": "Right"}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.geometry import Point2D
from ..core.joints import JointName, joint_set_from_landmarks, joint_set_from_mapping


def parse_hand(entry: Mapping[str, Any]) -> Dict[JointName, Optional[Point2D]]:
    """
    Parse one serialized hand into a joint set.

    Args:
        entry: Object with a ``joints`` or ``landmarks`` key

    Returns:
        Joint set for the hand

    Raises:
        ValueError: If the entry holds neither key or a point is malformed
    """
    if not isinstance(entry, Mapping):
        raise ValueError(f"Hand entry must be an object, got {type(entry).__name__}")

    if 'joints' in entry:
        joints = entry['joints']
        if not isinstance(joints, Mapping):
            raise ValueError("'joints' must be an object keyed by joint name")
        return joint_set_from_mapping(joints)

    if 'landmarks' in entry:
        return joint_set_from_landmarks(entry['landmarks'])

    raise ValueError("Hand entry needs a 'joints' or 'landmarks' key")


def load_observations(path: Union[str, Path]) -> List[Dict[JointName, Optional[Point2D]]]:
    """
    Load the hands recorded in a landmark JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Joint sets in file order (empty if the file lists no hands)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or a hand is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Landmark file not found: {path}")

    try:
        with open(path, 'r', encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")

    entries = data if isinstance(data, list) else [data]
    return [parse_hand(entry) for entry in entries]
