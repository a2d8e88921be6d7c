import numpy as np
import pytest
from core.exceptions import SingularMatrixError
from core.numeric.gauss_jordan import solve_linear_system


def test_solves_regular_system():
    A = np.array([[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]])
    b = np.array([8.0, -11.0, -3.0])
    x = solve_linear_system(A, b)
    np.testing.assert_allclose(x, [2.0, 3.0, -1.0], atol=1e-12)


def test_accepts_nested_lists():
    x = solve_linear_system([[4, 0], [0, 2]], [8, 3])
    np.testing.assert_allclose(x, [2.0, 1.5])


def test_requires_pivoting():
    # Zero in the leading position; naive elimination would divide by zero.
    A = [[0.0, 1.0], [1.0, 0.0]]
    x = solve_linear_system(A, [3.0, 5.0])
    np.testing.assert_allclose(x, [5.0, 3.0])


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_residual_is_small_for_random_systems(seed):
    rng = np.random.default_rng(seed)
    n = 12
    A = rng.normal(size=(n, n)) + n * np.eye(n)
    b = rng.normal(size=n)
    x = solve_linear_system(A, b)
    assert np.linalg.norm(A @ x - b) <= 1e-9 * max(1.0, np.linalg.norm(b))
    np.testing.assert_allclose(x, np.linalg.solve(A, b), rtol=1e-9, atol=1e-12)


def test_zero_row_is_singular():
    A = [[1.0, 2.0], [0.0, 0.0]]
    with pytest.raises(SingularMatrixError):
        solve_linear_system(A, [1.0, 0.0])


def test_identical_rows_are_singular():
    A = [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0], [0.0, 1.0, 4.0]]
    with pytest.raises(SingularMatrixError, match="singular"):
        solve_linear_system(A, [1.0, 1.0, 2.0])


def test_near_singular_pivot_rejected():
    A = [[1e-13, 0.0], [0.0, 1.0]]
    with pytest.raises(SingularMatrixError):
        solve_linear_system(A, [1.0, 1.0])


def test_custom_tolerance():
    A = [[1e-6, 0.0], [0.0, 1.0]]
    np.testing.assert_allclose(solve_linear_system(A, [1e-6, 1.0]), [1.0, 1.0])
    with pytest.raises(SingularMatrixError):
        solve_linear_system(A, [1e-6, 1.0], tol=1e-3)


def test_empty_system_is_trivially_solved():
    x = solve_linear_system(np.zeros((0, 0)), np.zeros(0))
    assert x.shape == (0,)


def test_inputs_are_not_mutated():
    A = np.array([[0.0, 2.0], [3.0, 1.0]])
    b = np.array([4.0, 5.0])
    A_before, b_before = A.copy(), b.copy()
    solve_linear_system(A, b)
    np.testing.assert_array_equal(A, A_before)
    np.testing.assert_array_equal(b, b_before)


def test_shape_mismatch():
    with pytest.raises(ValueError):
        solve_linear_system([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [1.0, 2.0])
    with pytest.raises(ValueError):
        solve_linear_system([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0])
