import numpy as np
import pytest

from fieldmat.field import PrimeField


@pytest.fixture(scope="session")
def bls():
    return PrimeField.bls12_381()


@pytest.fixture
def cauchy():
    """Build a random n x n Cauchy matrix, 1 / (x_i - y_j) for distinct x and y."""

    def build(field, n, seed=0):
        rng = np.random.default_rng(seed)
        points = [int(v) for v in rng.permutation(min(field.order, 4096))[: 2 * n]]
        xs, ys = points[:n], points[n:]
        return [[field.div(field.one, field.sub(x, y)) for y in ys] for x in xs]

    return build
