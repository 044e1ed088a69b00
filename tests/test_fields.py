import numpy as np
import pytest

from cosmogrid.fields import (
    apply_function_k,
    apply_function_k_dep,
    apply_function_r,
    apply_function_r_dep,
    assign_function_of_grids_ijk,
    assign_function_of_grids_k,
    assign_function_of_grids_kdep,
    assign_function_of_grids_r,
)
from cosmogrid.grid import FFTGrid

N = 8
L = 1.0


def _cos_grid():
    g = FFTGrid((N, N, N), (L, L, L))
    x = np.arange(N) / N
    g.data[...] = np.cos(2.0 * np.pi * x)[:, None, None]
    return g


def _random_grid(seed):
    g = FFTGrid((N, N, N), (L, L, L))
    g.data[...] = np.random.default_rng(seed).standard_normal((N, N, N))
    return g


def test_apply_function_r_doubles():
    g = _random_grid(1)
    before = g.data.copy()
    apply_function_r(g, lambda x: 2.0 * x)
    np.testing.assert_allclose(g.data, 2.0 * before)


def test_apply_function_k_scaling_survives_round_trip():
    g = _random_grid(2)
    before = g.data.copy()
    g.fourier_transform_forward()
    apply_function_k(g, lambda x: 3.0 * x)
    g.fourier_transform_backward()
    np.testing.assert_allclose(g.data, 3.0 * before, atol=1e-12)


def test_apply_function_k_dep_laplacian_of_cosine():
    g = _cos_grid()
    expected = -((2.0 * np.pi / L) ** 2) * g.data.copy()
    g.fourier_transform_forward()
    apply_function_k_dep(g, lambda x, k: -x * k.norm_squared())
    g.fourier_transform_backward()
    np.testing.assert_allclose(g.data, expected, atol=1e-9)


def test_apply_function_k_dep_norm_works_on_arrays():
    g = _cos_grid()
    expected = (2.0 * np.pi / L) * g.data.copy()
    g.fourier_transform_forward()
    apply_function_k_dep(g, lambda x, k: x * k.norm())
    g.fourier_transform_backward()
    np.testing.assert_allclose(g.data, expected, atol=1e-9)


def test_apply_function_r_dep_gives_positions():
    g = FFTGrid((N, N, N), (2.0, 2.0, 2.0))
    apply_function_r_dep(g, lambda x, r: r[0] + x)
    for i, j, k in [(0, 0, 0), (3, 1, 2), (7, 5, 6)]:
        assert g.data[i, j, k] == pytest.approx(g.get_r(i, j, k)[0])


def test_assign_function_of_grids_r_sum():
    a = _random_grid(3)
    b = _random_grid(4)
    out = FFTGrid((N, N, N), (L, L, L))
    assign_function_of_grids_r(out, lambda x, y: x + y, a, b)
    np.testing.assert_allclose(out.data, a.data + b.data)


def test_assign_function_of_grids_r_size_mismatch():
    a = FFTGrid((4, 4, 4), (L, L, L))
    out = FFTGrid((N, N, N), (L, L, L))
    with pytest.raises(ValueError):
        assign_function_of_grids_r(out, lambda x: x, a)


def test_assign_function_of_grids_k_product():
    a = _random_grid(5)
    b = _random_grid(6)
    a.fourier_transform_forward()
    b.fourier_transform_forward()
    out = FFTGrid((N, N, N), (L, L, L))
    out.fourier_transform_forward(False)
    assign_function_of_grids_k(out, lambda x, y: x * y, a, b)
    np.testing.assert_allclose(out.data, a.data * b.data)


def test_assign_function_of_grids_ijk_indices():
    a = _random_grid(7)
    a.fourier_transform_forward()
    out = FFTGrid((N, N, N), (L, L, L))
    out.fourier_transform_forward(False)
    assign_function_of_grids_ijk(out, lambda ijk, x: ijk[0] + 0 * x, a)
    assert out.data[5, 2, 1] == 5
    assert out.data[0, 7, 4] == 0
    assert out.data.shape == a.data.shape


def test_assign_function_of_grids_kdep_uses_wave_vector():
    a = _random_grid(8)
    a.fourier_transform_forward()
    out = FFTGrid((N, N, N), (L, L, L))
    out.fourier_transform_forward(False)
    assign_function_of_grids_kdep(out, lambda k, x: k[1] + 0 * x, a)
    for i, j, k in [(1, 2, 3), (6, 7, 0), (4, 5, 2)]:
        assert out.data[i, j, k].real == pytest.approx(out.get_k(i, j, k)[1])


def test_complex_result_in_real_field_rejected():
    g = _random_grid(9)
    with pytest.raises(TypeError):
        apply_function_r(g, lambda x: x * 1j)


def test_complex_grid_accepts_complex_values():
    g = FFTGrid((N, N, N), (L, L, L), complex_data=True)
    apply_function_r_dep(g, lambda x, r: np.exp(1j * r[2]))
    assert g.data[0, 0, 3] == pytest.approx(np.exp(1j * g.get_r(0, 0, 3)[2]))