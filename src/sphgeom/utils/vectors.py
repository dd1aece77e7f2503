"""Vector helpers for Euclidean 3D directions.

Great circles, sphere points and transforms are all backed by numpy
``float64`` arrays of shape ``(3,)``. The helpers here keep the numerical
details (normalization, robust angles, orthogonal vectors) in one place.
"""

import math
from collections.abc import Sequence

import numpy as np

from sphgeom.exceptions import InvalidArgumentError

# Above this absolute cosine the angle is computed from the cross product
_ANGLE_COS_THRESHOLD = 0.9999


def as_vector(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Convert a 3-element sequence into a float vector.

    Args:
        values: Three Cartesian coordinates

    Returns:
        New ``float64`` array of shape ``(3,)``

    Raises:
        InvalidArgumentError: If the input does not hold exactly three values
    """
    vec = np.array(values, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise InvalidArgumentError(f"Expected a 3D vector but got shape {vec.shape}")
    return vec


def is_finite(vec: np.ndarray) -> bool:
    """Return True if all coordinates are finite."""
    return bool(np.all(np.isfinite(vec)))


def normalize(vec: np.ndarray) -> np.ndarray:
    """Return the unit vector pointing in the direction of ``vec``.

    Raises:
        InvalidArgumentError: If the vector is zero or not finite
    """
    norm = float(np.linalg.norm(vec))
    if norm == 0.0 or not math.isfinite(norm):
        raise InvalidArgumentError(f"Illegal norm: {norm}")
    return vec / norm


def angle_between(a: np.ndarray, b: np.ndarray) -> float:
    """Compute the angle between two vectors in the range ``[0, pi]``.

    Nearly (anti)parallel vectors use the cross product norm instead of the
    arc cosine to keep precision.

    Examples:
        >>> round(angle_between(np.array([1.0, 0, 0]), np.array([0, 1.0, 0])), 6)
        1.570796
    """
    norm_product = float(np.linalg.norm(a) * np.linalg.norm(b))
    if norm_product == 0.0:
        raise InvalidArgumentError("Cannot compute the angle of a zero vector")

    dot = float(np.dot(a, b))
    threshold = norm_product * _ANGLE_COS_THRESHOLD
    if dot < -threshold or dot > threshold:
        cross_norm = float(np.linalg.norm(np.cross(a, b)))
        if dot >= 0:
            return math.asin(cross_norm / norm_product)
        return math.pi - math.asin(cross_norm / norm_product)

    return math.acos(dot / norm_product)


def orthogonal(vec: np.ndarray) -> np.ndarray:
    """Return a unit vector orthogonal to ``vec``.

    The result is deterministic: the smallest coordinate of the input is
    dropped so that the division is always well conditioned.
    """
    x, y, z = (float(c) for c in vec)
    threshold = 0.6 * float(np.linalg.norm(vec))
    if threshold == 0.0:
        raise InvalidArgumentError("Cannot compute an orthogonal vector to the zero vector")

    if abs(x) <= threshold:
        inverse = 1.0 / math.sqrt(y * y + z * z)
        return np.array([0.0, inverse * z, -inverse * y])
    if abs(y) <= threshold:
        inverse = 1.0 / math.sqrt(x * x + z * z)
        return np.array([-inverse * z, 0.0, inverse * x])
    inverse = 1.0 / math.sqrt(x * x + y * y)
    return np.array([inverse * y, -inverse * x, 0.0])


def orthogonal_component(vec: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """Return the unit component of ``reference`` orthogonal to ``vec``.

    Raises:
        InvalidArgumentError: If ``reference`` is parallel to ``vec``
    """
    unit = normalize(vec)
    return normalize(reference - np.dot(reference, unit) * unit)


def rotation_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    """Build the 3x3 matrix of a counterclockwise rotation around ``axis``.

    Uses Rodrigues' rotation formula.
    """
    k = normalize(axis)
    cross = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    return np.eye(3) + math.sin(angle) * cross + (1.0 - math.cos(angle)) * (cross @ cross)


def reflection_matrix(normal: np.ndarray) -> np.ndarray:
    """Build the 3x3 matrix of a reflection across the plane with ``normal``."""
    n = normalize(normal)
    return np.eye(3) - 2.0 * np.outer(n, n)
