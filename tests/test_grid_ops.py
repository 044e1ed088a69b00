import math

import numpy as np
import pytest

from cosmogrid.grid import FFTGrid, Space
from cosmogrid.grid_ops import (
    apply_inverse_laplacian,
    apply_laplacian,
    apply_negative_laplacian,
    compute_2norm,
    dealias,
    get_cic,
    get_cic_kspace,
    grid_mean,
    grid_std,
    shift_field,
)


def make_grid(values, length=(1.0, 1.0, 1.0)):
    values = np.asarray(values, dtype=np.float64)
    g = FFTGrid(values.shape, length)
    g.data[...] = values
    return g


def random_field(shape, seed=0):
    return np.random.default_rng(seed).standard_normal(shape)


def test_laplacian_of_sine_wave():
    n = (16, 8, 8)
    x = np.arange(n[0]) / n[0]
    f = np.broadcast_to(np.sin(2 * math.pi * x)[:, None, None], n)
    g = make_grid(f)
    result = apply_laplacian(g)
    assert result is g
    assert g.space is Space.KSPACE
    g.fourier_transform_backward()
    np.testing.assert_allclose(g.data, -((2 * math.pi) ** 2) * f, atol=1e-9)


def test_negative_laplacian_is_minus_laplacian():
    f = random_field((8, 8, 8))
    a = apply_laplacian(make_grid(f))
    b = apply_negative_laplacian(make_grid(f))
    np.testing.assert_allclose(a.data, -b.data, atol=1e-12)


def test_inverse_laplacian_round_trip():
    f = random_field((8, 6, 10), seed=3)
    g = make_grid(f)
    apply_inverse_laplacian(g)
    assert np.all(np.isfinite(g.data))
    assert g.data[0, 0, 0] == 0
    apply_laplacian(g)
    g.fourier_transform_backward()
    np.testing.assert_allclose(g.data, f - f.mean(), atol=1e-10)


def test_statistics_of_constant_field():
    g = make_grid(np.full((4, 4, 4), 2.5))
    assert grid_mean(g) == pytest.approx(2.5)
    assert compute_2norm(g) == pytest.approx(2.5 * 2.5)
    assert grid_std(g) == pytest.approx(0.0, abs=1e-12)


def test_std_scales_linearly():
    f = random_field((6, 6, 6), seed=1)
    s1 = grid_std(make_grid(f))
    s3 = grid_std(make_grid(3.0 * f))
    assert s3 == pytest.approx(3.0 * s1)
    assert compute_2norm(make_grid(3.0 * f)) == pytest.approx(
        9.0 * compute_2norm(make_grid(f))
    )


def test_get_cic_at_nodes_and_midpoints():
    f = random_field((8, 8, 8), seed=2)
    g = make_grid(f)
    dx = 1.0 / 8
    assert get_cic(g, (3 * dx, 2 * dx, 5 * dx)) == pytest.approx(f[3, 2, 5])
    mid = get_cic(g, (3.5 * dx, 2 * dx, 5 * dx))
    assert mid == pytest.approx(0.5 * (f[3, 2, 5] + f[4, 2, 5]))


def test_get_cic_is_periodic():
    f = random_field((8, 8, 8), seed=4)
    g = make_grid(f)
    assert get_cic(g, (1.0, 0.0, 0.0)) == pytest.approx(f[0, 0, 0])
    assert get_cic(g, (-1.0 / 8, 0.0, 0.0)) == pytest.approx(f[7, 0, 0])


def test_get_cic_requires_real_space():
    g = make_grid(random_field((4, 4, 4)))
    g.fourier_transform_forward()
    with pytest.raises(RuntimeError):
        get_cic(g, (0.0, 0.0, 0.0))


def test_get_cic_kspace():
    g = make_grid(random_field((8, 8, 8), seed=5))
    g.fourier_transform_forward()
    assert get_cic_kspace(g, (2.0, 3.0, 1.0)) == pytest.approx(g.data[2, 3, 1])
    top = g.size(2) - 1
    value = get_cic_kspace(g, (2.0, 3.0, top + 0.5))
    assert value == pytest.approx(g.data[2, 3, top])
    with pytest.raises(RuntimeError):
        g.fourier_transform_backward()
        get_cic_kspace(g, (0.0, 0.0, 0.0))


def test_shift_field_by_whole_cells_rolls_data():
    f = random_field((8, 8, 8), seed=6)
    g = make_grid(f)
    shift_field(g, (1.0, 0.0, 2.0))
    assert g.space is Space.RSPACE
    np.testing.assert_allclose(g.data, np.roll(f, (-1, -2), axis=(0, 2)), atol=1e-12)


def test_shift_field_without_transform_back():
    g = make_grid(random_field((4, 4, 4)))
    shift_field(g, (0.5, 0.5, 0.5), transform_back=False)
    assert g.space is Space.KSPACE


def test_dealias():
    g = make_grid(random_field((12, 12, 12), seed=7))
    g.fourier_transform_forward()
    before = g.data.copy()
    dealias(g)
    assert g.data[1, 0, 0] == before[1, 0, 0]
    assert g.data[0, 0, 4] == before[0, 0, 4]
    assert g.data[0, 0, 5] == 0
    assert g.data[6, 6, 6] == 0


def test_dealias_requires_kspace():
    g = make_grid(random_field((4, 4, 4)))
    with pytest.raises(RuntimeError):
        dealias(g)