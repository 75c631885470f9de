"""
Rotation Algebra Verification Tests.

Checks the algebraic laws of the quaternion product and the rotation
matrix conversion against analytical results and scipy.
"""
import math
import warnings

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as R

from quatkit import (
    IDENTITY,
    allclose,
    as_array,
    conjugate,
    from_axis_angle,
    from_record,
    from_tuple,
    get_w,
    get_y,
    get_z,
    length,
    mul,
    normalize,
    quat,
    scale,
    set_x,
    to_matrix,
    to_record,
    to_tuple,
)

# Tolerances for float64 comparisons
ALGEBRA_TOLERANCE = 1e-12
MATRIX_TOLERANCE = 1e-10


class TestProductLaws:
    """
    Group structure of the quaternion product.
    
    For all a, b, c:
        a·1 = 1·a = a
        (a·b)·c = a·(b·c)
    and a·b ≠ b·a in general.
    """
    
    def test_identity_law(self, random_quaternions):
        for q in random_quaternions:
            assert mul(IDENTITY, q) == q
            assert mul(q, IDENTITY) == q
    
    def test_associativity(self, unit_quaternions):
        qs = unit_quaternions
        for a, b, c in zip(qs, qs[1:], qs[2:]):
            left = mul(mul(a, b), c)
            right = mul(a, mul(b, c))
            assert allclose(left, right, atol=ALGEBRA_TOLERANCE)
    
    def test_non_commutative_witness(self):
        # 90 deg about x and 90 deg about y
        a = from_axis_angle([1.0, 0.0, 0.0], math.pi / 2)
        b = from_axis_angle([0.0, 1.0, 0.0], math.pi / 2)
        assert not allclose(mul(a, b), mul(b, a))
    
    def test_inverse_via_conjugate(self, unit_quaternions):
        for q in unit_quaternions:
            assert allclose(mul(q, conjugate(q)), IDENTITY, atol=ALGEBRA_TOLERANCE)
            assert allclose(mul(conjugate(q), q), IDENTITY, atol=ALGEBRA_TOLERANCE)
    
    def test_conjugate_reverses_product(self, random_quaternions):
        qs = random_quaternions
        for a, b in zip(qs, qs[1:]):
            lhs = conjugate(mul(a, b))
            rhs = mul(conjugate(b), conjugate(a))
            assert allclose(lhs, rhs, atol=ALGEBRA_TOLERANCE)
    
    def test_product_preserves_unit_norm(self, unit_quaternions):
        qs = unit_quaternions
        for a, b in zip(qs, qs[1:]):
            assert length(mul(a, b)) == pytest.approx(1.0, abs=ALGEBRA_TOLERANCE)


class TestNormalization:
    
    def test_unit_length(self, random_quaternions):
        for q in random_quaternions:
            assert length(normalize(q)) == pytest.approx(1.0, abs=ALGEBRA_TOLERANCE)
    
    def test_small_nonzero_scale(self, unit_quaternions):
        for q in unit_quaternions:
            tiny = scale(1e-14, q)
            with warnings.catch_warnings():
                warnings.simplefilter("error")
                assert allclose(normalize(tiny), q, atol=ALGEBRA_TOLERANCE)
    
    def test_zero_quaternion_contract(self):
        """Zero input gives the zero quaternion plus a warning, never NaN."""
        with pytest.warns(RuntimeWarning):
            n = normalize(quat(0, 0, 0, 0))
        assert to_tuple(n) == (0.0, 0.0, 0.0, 0.0)


class TestRoundTrip:
    
    def test_tuple(self, random_quaternions):
        for q in random_quaternions:
            assert from_tuple(to_tuple(q)) == q
    
    def test_record(self, random_quaternions):
        for q in random_quaternions:
            assert from_record(to_record(q)) == q
    
    def test_setter_independence(self, random_quaternions):
        for q in random_quaternions:
            before = to_tuple(q)
            q2 = set_x(7.5, q)
            assert q2.x == 7.5
            assert get_y(q2) == get_y(q)
            assert get_z(q2) == get_z(q)
            assert get_w(q2) == get_w(q)
            assert to_tuple(q) == before


class TestMatrixConversion:
    """
    Quaternion to rotation matrix.
    
    For unit q the 3x3 block must be orthonormal with det = +1 and match
    the standard formula used by scipy.
    """
    
    def test_identity(self):
        assert np.allclose(to_matrix(IDENTITY)[:3, :3], np.eye(3))
    
    def test_zero_quaternion_is_identity(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            M = to_matrix(quat(0, 0, 0, 0))
        assert np.allclose(M, np.eye(4))
    
    def test_z90_maps_x_to_y(self):
        M = to_matrix(from_axis_angle((0.0, 0.0, 1.0), math.pi / 2))
        v = M @ np.array([1.0, 0.0, 0.0, 1.0])
        assert np.allclose(v, [0.0, 1.0, 0.0, 1.0], atol=MATRIX_TOLERANCE)
    
    def test_orthonormal(self, unit_quaternions):
        for q in unit_quaternions:
            Rm = to_matrix(q)[:3, :3]
            assert np.allclose(Rm @ Rm.T, np.eye(3), atol=MATRIX_TOLERANCE)
            assert np.linalg.det(Rm) == pytest.approx(1.0, abs=MATRIX_TOLERANCE)
    
    def test_matches_scipy(self, unit_quaternions):
        for q in unit_quaternions:
            expected = R.from_quat(as_array(q)).as_matrix()
            assert np.allclose(to_matrix(q)[:3, :3], expected, atol=MATRIX_TOLERANCE)
    
    def test_non_unit_input_normalized_implicitly(self, random_quaternions):
        for q in random_quaternions:
            assert np.allclose(to_matrix(q), to_matrix(normalize(q)), atol=MATRIX_TOLERANCE)
    
    def test_composition_order(self, unit_quaternions):
        qs = unit_quaternions
        for a, b in zip(qs, qs[1:]):
            Ma, Mb = to_matrix(a), to_matrix(b)
            assert np.allclose(to_matrix(mul(a, b)), Mb @ Ma, atol=MATRIX_TOLERANCE)


class TestAxisAngle:
    
    @pytest.mark.parametrize("axis", [
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [1.0, 1.0, 0.0],
        [-0.3, 2.0, 0.7],
    ])
    @pytest.mark.parametrize("angle", [0.1, 1.0, math.pi / 2, 3.0])
    def test_matches_scipy_rotvec(self, axis, angle):
        q = from_axis_angle(axis, angle)
        unit = np.asarray(axis) / np.linalg.norm(axis)
        expected = R.from_rotvec(unit * angle)
        assert length(q) == pytest.approx(1.0)
        assert np.allclose(to_matrix(q)[:3, :3], expected.as_matrix(), atol=MATRIX_TOLERANCE)
    
    def test_full_turn_is_negative_identity(self):
        q = from_axis_angle([0.0, 1.0, 0.0], 2 * math.pi)
        assert allclose(q, quat(0, 0, 0, -1), atol=ALGEBRA_TOLERANCE)
        assert np.allclose(to_matrix(q), np.eye(4), atol=MATRIX_TOLERANCE)
    
    def test_zero_axis_rejected(self):
        with pytest.raises(ValueError):
            from_axis_angle([0.0, 0.0, 0.0], math.pi)
