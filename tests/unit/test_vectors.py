"""Unit tests for vector helpers."""

import math

import numpy as np
import pytest

from sphgeom.exceptions import InvalidArgumentError
from sphgeom.utils import (
    angle_between,
    as_vector,
    normalize,
    orthogonal,
    orthogonal_component,
    reflection_matrix,
    rotation_matrix,
)


class TestVectorHelpers:
    """Tests for the numpy vector helpers."""

    def test_as_vector_shape(self) -> None:
        """Only three coordinates are accepted."""
        assert as_vector([1, 2, 3]).dtype == np.float64
        with pytest.raises(InvalidArgumentError):
            as_vector([1.0, 2.0])

    def test_normalize(self) -> None:
        """Vectors are scaled to unit length; zero vectors are rejected."""
        np.testing.assert_allclose(normalize(np.array([0.0, 3.0, 4.0])), [0.0, 0.6, 0.8])
        with pytest.raises(InvalidArgumentError, match="Illegal norm"):
            normalize(np.zeros(3))
        with pytest.raises(InvalidArgumentError):
            normalize(np.array([math.inf, 0.0, 0.0]))

    def test_angle_between(self) -> None:
        """Angles are accurate for near-parallel and antiparallel vectors."""
        x = np.array([1.0, 0.0, 0.0])
        assert angle_between(x, np.array([0.0, 2.0, 0.0])) == pytest.approx(0.5 * math.pi)
        assert angle_between(x, np.array([1.0, 1e-9, 0.0])) == pytest.approx(1e-9, rel=1e-6)
        assert angle_between(x, np.array([-1.0, 1e-9, 0.0])) == pytest.approx(math.pi - 1e-9)

    @pytest.mark.parametrize(
        "vec", [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 2.0, 3.0], [-5.0, 0.1, 0.2]]
    )
    def test_orthogonal(self, vec: list[float]) -> None:
        """The orthogonal vector has unit length and zero dot product."""
        result = orthogonal(np.array(vec))
        assert np.linalg.norm(result) == pytest.approx(1.0)
        assert np.dot(result, vec) == pytest.approx(0.0, abs=1e-12)

    def test_orthogonal_component(self) -> None:
        """The parallel part of the reference is removed."""
        result = orthogonal_component(np.array([0.0, 0.0, 1.0]), np.array([1.0, 0.0, 1.0]))
        np.testing.assert_allclose(result, [1.0, 0.0, 0.0], atol=1e-15)
        with pytest.raises(InvalidArgumentError):
            orthogonal_component(np.array([0.0, 0.0, 1.0]), np.array([0.0, 0.0, 2.0]))

    def test_rotation_matrix(self) -> None:
        """Rotations about +z turn +x towards +y."""
        matrix = rotation_matrix(np.array([0.0, 0.0, 1.0]), 0.5 * math.pi)
        np.testing.assert_allclose(matrix @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-15)
        assert np.linalg.det(matrix) == pytest.approx(1.0)

    def test_reflection_matrix(self) -> None:
        """Reflections negate the normal and keep the plane."""
        matrix = reflection_matrix(np.array([0.0, 2.0, 0.0]))
        np.testing.assert_allclose(matrix @ [1.0, 1.0, 1.0], [1.0, -1.0, 1.0])
        assert np.linalg.det(matrix) == pytest.approx(-1.0)
