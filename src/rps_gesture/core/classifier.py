"""
Rock-paper-scissors classification from hand joint positions.

A finger counts as straight when its tip is farther from the wrist than its
PIP joint, and bent when the tip is closer. The gesture follows from which of
the four fingers are straight or bent.
"""

import time
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .geometry import euclidean_distance
from .joints import Finger, JointName, JointSet, missing_joints, resolve_joint
from ..utils.config import MISSING_JOINT_POLICIES
from ..utils.logger import Logger


class Gesture(str, Enum):
    """Classification output."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Label shown to players."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Gesture.ROCK: "グー",
    Gesture.PAPER: "パー",
    Gesture.SCISSORS: "チョキ",
    Gesture.UNKNOWN: "？？？",
}


class FingerState(str, Enum):
    STRAIGHT = "straight"
    BENT = "bent"


@dataclass(frozen=True)
class FingerReading:
    """Wrist distances for one finger."""
    finger: Finger
    tip_distance: float
    pip_distance: float

    @property
    def state(self) -> Optional[FingerState]:
        """Straight or bent; None when tip and PIP are equally far from the wrist."""
        if self.tip_distance > self.pip_distance:
            return FingerState.STRAIGHT
        if self.tip_distance < self.pip_distance:
            return FingerState.BENT
        return None


@dataclass(frozen=True)
class GestureResult:
    """Result of classifying one hand."""
    gesture: Gesture
    fingers: Tuple[FingerReading, ...]
    missing_joints: Tuple[JointName, ...]
    timestamp: float

    @property
    def finger_states(self) -> Dict[Finger, Optional[FingerState]]:
        return {reading.finger: reading.state for reading in self.fingers}


def read_fingers(joints: JointSet) -> Tuple[FingerReading, ...]:
    """
    Measure each finger's tip and PIP distance from the wrist.

    Absent joints are read as the origin.

    Args:
        joints: Joint set for one hand

    Returns:
        Readings for index, middle, ring and little finger, in that order
    """
    wrist = resolve_joint(joints, JointName.WRIST)
    return tuple(
        FingerReading(
            finger=finger,
            tip_distance=euclidean_distance(wrist, resolve_joint(joints, finger.tip)),
            pip_distance=euclidean_distance(wrist, resolve_joint(joints, finger.pip))
        )
        for finger in Finger
    )


def decide_gesture(readings: Sequence[FingerReading]) -> Gesture:
    """
    Pick the gesture from per-finger readings. First match wins:
    all straight is paper, index and middle straight with ring and little
    bent is scissors, all bent is rock, anything else is unknown.
    """
    states = {reading.finger: reading.state for reading in readings}
    straight = FingerState.STRAIGHT
    bent = FingerState.BENT

    if all(states.get(finger) is straight for finger in Finger):
        return Gesture.PAPER

    if (states.get(Finger.INDEX) is straight and states.get(Finger.MIDDLE) is straight
            and states.get(Finger.RING) is bent and states.get(Finger.LITTLE) is bent):
        return Gesture.SCISSORS

    if all(states.get(finger) is bent for finger in Finger):
        return Gesture.ROCK

    return Gesture.UNKNOWN


def classify(joints: JointSet) -> Gesture:
    """Classify one hand's joint set. Never raises."""
    return decide_gesture(read_fingers(joints))


class GestureClassifier:
    """Configured gesture classifier with per-finger diagnostics."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None
    ):
        """
        Initialize the classifier.

        Args:
            config: Configuration with optional ``classifier`` and ``logging``
                sections (see config/classifier.yaml)
            logger: Logger instance

        Raises:
            ValueError: If the missing-joint policy is not supported
        """
        config = config or {}
        settings = config.get('classifier') or {}

        self.missing_joint_policy = settings.get('missing_joints', "origin")
        if self.missing_joint_policy not in MISSING_JOINT_POLICIES:
            raise ValueError(
                f"Unsupported missing_joints policy: {self.missing_joint_policy!r} "
                f"(expected one of {', '.join(MISSING_JOINT_POLICIES)})"
            )
        self.log_finger_states = bool(settings.get('log_finger_states', True))

        self.logger = logger or Logger.from_config("gesture_classifier", config.get('logging'))

    def evaluate(self, joints: JointSet) -> GestureResult:
        """
        Classify one hand and report how the decision was reached.

        Args:
            joints: Joint set for one hand

        Returns:
            GestureResult with finger readings and absent joints
        """
        absent = missing_joints(joints)
        readings = read_fingers(joints)

        if absent and self.missing_joint_policy == "unknown":
            gesture = Gesture.UNKNOWN
        else:
            gesture = decide_gesture(readings)

        if self.log_finger_states:
            self.logger.log_finger_states((reading.finger, reading.state) for reading in readings)
            self.logger.log_gesture(gesture, absent)

        return GestureResult(
            gesture=gesture,
            fingers=readings,
            missing_joints=absent,
            timestamp=time.time()
        )

    def classify(self, joints: JointSet) -> Gesture:
        """Classify one hand's joint set."""
        return self.evaluate(joints).gesture

    def classify_observations(self, observations: Sequence[JointSet]) -> Optional[GestureResult]:
        """
        Classify the first hand of a frame's observations.

        Args:
            observations: Joint sets for the hands found in one frame

        Returns:
            GestureResult for the first hand, or None if no hand was found
        """
        if not observations:
            return None

        if len(observations) > 1:
            self.logger.debug(f"Ignoring {len(observations) - 1} extra hand(s)")

        return self.evaluate(observations[0])
