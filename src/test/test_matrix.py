"""
Test 4x4 matrix helpers: construction, composition and point transforms.
"""

import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.geometry import (
    Point3D, Point4D, matrix4, to_row_major, identity, translation,
    rotation_x, rotation_y, perspective, multiply, transform_point, transform_points
)


class TestPrimitives:
    """Test Point3D and Point4D."""

    def test_point_creation(self):
        p = Point3D(1.0, 2.0, 3.0)
        assert p.x == 1.0
        assert p.y == 2.0
        assert p.z == 3.0

    def test_point_homogeneous(self):
        p = Point3D(1.0, 2.0, 3.0)
        np.testing.assert_array_almost_equal(p.to_homogeneous(), [1.0, 2.0, 3.0, 1.0])

    def test_point_subtraction(self):
        d = Point3D(3.0, 2.0, 1.0) - Point3D(1.0, 1.0, 1.0)
        np.testing.assert_array_almost_equal(d.to_array(), [2.0, 1.0, 0.0])

    def test_point4d_projectable(self):
        assert Point4D(1.0, 2.0, 3.0).is_projectable
        assert not Point4D(1.0, 2.0, 3.0, 0.0).is_projectable

    def test_from_array_shape(self):
        with pytest.raises(ValueError):
            Point4D.from_array(np.zeros(3))


class TestMatrix4:
    """Test construction and layout."""

    def test_row_major_layout(self):
        m = matrix4(range(16))
        # Row 1, column 2 is element 1*4 + 2
        assert m[1, 2] == 6.0
        assert to_row_major(m) == tuple(float(i) for i in range(16))

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            matrix4([0.0] * 15)
        with pytest.raises(ValueError):
            matrix4([0.0] * 17)

    def test_translation_last_column(self):
        m = translation(1.0, 2.0, 3.0)
        np.testing.assert_array_almost_equal(m[:3, 3], [1.0, 2.0, 3.0])
        np.testing.assert_array_almost_equal(m[3], [0.0, 0.0, 0.0, 1.0])

    def test_identity_law(self):
        m = multiply(rotation_y(30.0), translation(1.0, -2.0, 0.5))
        np.testing.assert_array_almost_equal(multiply(identity(), m), m)
        np.testing.assert_array_almost_equal(multiply(m, identity()), m)

    def test_multiply_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            multiply(identity(), np.eye(3))


class TestRotations:
    """Test rotation matrices."""

    def test_rotation_periodic(self):
        np.testing.assert_array_almost_equal(rotation_y(30.0), rotation_y(390.0))
        np.testing.assert_array_almost_equal(rotation_x(-45.0), rotation_x(315.0))

    def test_rotation_y_quarter_turn(self):
        # +x rotates onto -z
        p = transform_point(rotation_y(90.0), Point3D(1.0, 0.0, 0.0))
        np.testing.assert_array_almost_equal(p.to_array(), [0.0, 0.0, -1.0, 1.0])

    def test_rotation_x_quarter_turn(self):
        # +y rotates onto +z
        p = transform_point(rotation_x(90.0), Point3D(0.0, 1.0, 0.0))
        np.testing.assert_array_almost_equal(p.to_array(), [0.0, 0.0, 1.0, 1.0])

    def test_rotation_preserves_length(self):
        v = np.array([0.3, -1.2, 2.5])
        rotated = transform_points(multiply(rotation_y(17.0), rotation_x(-63.0)), v[None, :])
        assert abs(np.linalg.norm(rotated[0, :3]) - np.linalg.norm(v)) < 1e-10


class TestComposition:
    """Test that multiply() composes right-to-left."""

    def test_rightmost_applied_first(self):
        T = translation(0.0, 0.0, -4.0)
        Ry = rotation_y(30.0)
        Rx = rotation_x(60.0)
        v = Point3D(0.5, -0.25, 1.0)

        combined = transform_point(multiply(multiply(T, Ry), Rx), v)

        step = transform_point(Rx, v)
        step = transform_point(Ry, Point3D(step.x, step.y, step.z))
        step = transform_point(T, Point3D(step.x, step.y, step.z))

        np.testing.assert_array_almost_equal(combined.to_array(), step.to_array())

    def test_transform_points_matches_single(self):
        m = multiply(perspective(60.0, 1.5, 0.1, 100.0), translation(0.0, 0.0, -3.0))
        pts = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0], [-1.0, 0.5, -2.0]])
        batch = transform_points(m, pts)
        for i, p in enumerate(pts):
            single = transform_point(m, Point3D.from_array(p))
            np.testing.assert_array_almost_equal(batch[i], single.to_array())

    def test_transform_points_shape(self):
        with pytest.raises(ValueError):
            transform_points(identity(), np.zeros((4, 2)))


class TestPerspective:
    """Test projection matrix entries."""

    def test_entries(self):
        near, far = 0.1, 100.0
        P = perspective(90.0, 2.0, near, far)
        assert abs(P[0, 0] - 0.5) < 1e-10
        assert abs(P[1, 1] - 1.0) < 1e-10
        assert abs(P[2, 2] - (far + near) / (near - far)) < 1e-10
        assert abs(P[2, 3] - 2 * far * near / (near - far)) < 1e-10
        assert P[3, 2] == -1.0
        assert P[3, 3] == 0.0

    def test_w_is_negated_z(self):
        p = transform_point(perspective(90.0, 1.0, 0.1, 100.0), Point3D(0.3, 0.2, -7.0))
        assert abs(p.w - 7.0) < 1e-10

    def test_near_far_planes_map_to_ndc(self):
        P = perspective(90.0, 1.0, 0.1, 100.0)
        near = transform_point(P, Point3D(0.0, 0.0, -0.1))
        far = transform_point(P, Point3D(0.0, 0.0, -100.0))
        assert abs(near.z / near.w + 1.0) < 1e-9
        assert abs(far.z / far.w - 1.0) < 1e-9


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
