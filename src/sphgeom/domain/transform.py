"""Rigid motions of the unit sphere."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from sphgeom.domain.point import Point2S
from sphgeom.exceptions import InvalidArgumentError
from sphgeom.utils.vectors import as_vector, reflection_matrix, rotation_matrix

VectorLike = Sequence[float] | np.ndarray

# Allowed deviation of M * M^T from the identity
ORTHOGONALITY_TOLERANCE = 1e-10


def _direction(axis: Point2S | VectorLike) -> np.ndarray:
    if isinstance(axis, Point2S):
        return axis.vector
    return as_vector(axis)


class Transform2S:
    """Rotation and/or reflection of the sphere around its center.

    The transform is stored as an orthogonal 3x3 matrix acting on the unit
    vectors of points. Composition follows matrix multiplication:
    ``a.multiply(b)`` applies ``b`` first, ``a.premultiply(b)`` applies
    ``a`` first.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: np.ndarray) -> None:
        matrix = np.array(matrix, dtype=float)
        if matrix.shape != (3, 3):
            raise InvalidArgumentError(f"Expected a 3x3 matrix but got shape {matrix.shape}")
        if not np.all(np.isfinite(matrix)):
            raise InvalidArgumentError("Transform matrix must be finite")
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def matrix(self) -> np.ndarray:
        """The underlying 3x3 matrix (read-only)."""
        return self._matrix

    @classmethod
    def identity(cls) -> Transform2S:
        return cls(np.eye(3))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> Transform2S:
        """Create a transform from an orthogonal 3x3 matrix.

        Raises:
            InvalidArgumentError: If the matrix is not a finite orthogonal
                3x3 matrix
        """
        transform = cls(matrix)
        m = transform._matrix
        if not np.allclose(m @ m.T, np.eye(3), rtol=0.0, atol=ORTHOGONALITY_TOLERANCE):
            raise InvalidArgumentError(f"Transform matrix must be orthogonal: {m.tolist()}")
        return transform

    @classmethod
    def create_rotation(cls, axis: Point2S | VectorLike, angle: float) -> Transform2S:
        """Create a counterclockwise rotation of ``angle`` radians around ``axis``."""
        return cls(rotation_matrix(_direction(axis), angle))

    @classmethod
    def create_reflection(cls, normal: Point2S | VectorLike) -> Transform2S:
        """Create a reflection across the great circle with pole ``normal``."""
        return cls(reflection_matrix(_direction(normal)))

    def apply(self, point: Point2S) -> Point2S:
        """Apply the transform to a point."""
        return Point2S.from_vector(self._matrix @ point.vector)

    def apply_vector(self, vector: VectorLike) -> np.ndarray:
        """Apply the transform to a Euclidean vector."""
        return self._matrix @ as_vector(vector)

    def preserves_orientation(self) -> bool:
        """Return True if the transform is a pure rotation."""
        return bool(np.linalg.det(self._matrix) > 0.0)

    def inverse(self) -> Transform2S:
        return Transform2S(np.linalg.inv(self._matrix))

    def multiply(self, other: Transform2S) -> Transform2S:
        """Return ``self * other``; ``other`` is applied first."""
        return Transform2S(self._matrix @ other._matrix)

    def premultiply(self, other: Transform2S) -> Transform2S:
        """Return ``other * self``; this transform is applied first."""
        return Transform2S(other._matrix @ self._matrix)

    def rotate(self, axis: Point2S | VectorLike, angle: float) -> Transform2S:
        """Apply a rotation after this transform."""
        return self.premultiply(Transform2S.create_rotation(axis, angle))

    def reflect(self, normal: Point2S | VectorLike) -> Transform2S:
        """Apply a reflection after this transform."""
        return self.premultiply(Transform2S.create_reflection(normal))

    def __repr__(self) -> str:
        return f"Transform2S[matrix= {self._matrix.tolist()}]"
