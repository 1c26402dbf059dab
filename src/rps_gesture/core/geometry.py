"""
2D point type and distance metric used by the gesture classifier.
"""

import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point in the pose estimator's normalized image space."""
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        """Return the point as a float array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


ORIGIN = Point2D(0.0, 0.0)


def euclidean_distance(a: Point2D, b: Point2D) -> float:
    """
    Straight-line distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        sqrt((a.x - b.x)^2 + (a.y - b.y)^2)
    """
    return float(np.linalg.norm(a.as_array() - b.as_array()))
