import random

import pytest

from hull3d import Pt


def random_cloud(n, seed=0, lo=-1.0, hi=1.0):
    rnd = random.Random(seed)
    return [Pt(rnd.uniform(lo, hi), rnd.uniform(lo, hi), rnd.uniform(lo, hi)) for _ in range(n)]


def sphere_cloud(n, seed=0, radius=1.0):
    """n точок на сфері - усі є вершинами оболонки."""
    rnd = random.Random(seed)
    pts = []
    while len(pts) < n:
        x, y, z = rnd.gauss(0, 1), rnd.gauss(0, 1), rnd.gauss(0, 1)
        r = (x*x + y*y + z*z) ** 0.5
        if r < 1e-3:
            continue
        pts.append(Pt(radius*x/r, radius*y/r, radius*z/r))
    return pts


@pytest.fixture
def tetra_points():
    return [Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)]


@pytest.fixture
def cube_points():
    return [
        Pt(0, 0, 0), Pt(1, 0, 0), Pt(1, 1, 0), Pt(0, 1, 0),
        Pt(0, 0, 1), Pt(1, 0, 1), Pt(1, 1, 1), Pt(0, 1, 1),
    ]
