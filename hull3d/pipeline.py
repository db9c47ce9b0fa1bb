from __future__ import annotations
from typing import Iterable, List, Tuple

from .geom import Pt, PointLike, as_pt, unique_points, sub, cross, dot
from .hull import ConvexHull3D, build
from .logging_utils import get_logger

log = get_logger(__name__)


def surface_mesh(
    points: Iterable[PointLike],
    backend: str = "internal",
    dedupe: bool = True,
) -> Tuple[List[Pt], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - (опційно) прибирає дублікати точок;
      - будує опуклу оболонку -> трикутники поверхні.

    backend:
      "internal" - наш Quickhull (hull3d.build);
      "scipy"    - scipy.spatial.ConvexHull (Qhull) як еталон для порівняння.

    Повертає:
      pts     - список Pt у фінальному порядку;
      surface - трикутники оболонки (індекси у pts), зовнішня орієнтація.
    """
    pts: List[Pt] = unique_points(points) if dedupe else [as_pt(p) for p in points]

    if backend.lower() == "internal":
        return pts, build(pts).triangles()

    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        arr = np.array([(p.x, p.y, p.z) for p in pts], dtype=float)
        qh = ConvexHull(arr)
        surface: List[Tuple[int, int, int]] = []
        # Qhull не гарантує обхід; вирівнюємо за зовнішньою нормаллю з equations
        for simplex, eq in zip(qh.simplices, qh.equations):
            a, b, c = (int(i) for i in simplex)
            n = cross(sub(pts[b], pts[a]), sub(pts[c], pts[a]))
            if dot(n, Pt(float(eq[0]), float(eq[1]), float(eq[2]))) < 0:
                b, c = c, b
            surface.append((a, b, c))
        log.debug("scipy backend: %d points, %d triangles", len(pts), len(surface))
        return pts, surface

    raise ValueError(f"Unknown backend: {backend}")


def to_arrays(hull: ConvexHull3D):
    """
    Оболонка як numpy-масиви для зовнішніх споживачів:
      vertices (V,3) float - лише вершини оболонки;
      faces    (F,3) int   - індекси у vertices;
      planes   (F,4) float - (nx, ny, nz, constant), n·p - constant = 0.
    """
    try:
        import numpy as np
    except ImportError as e:
        raise RuntimeError("to_arrays потребує numpy") from e

    used = hull.vertex_indices()
    remap = {old: new for new, old in enumerate(used)}
    vertices = np.array([tuple(hull.points[i]) for i in used], dtype=float).reshape(-1, 3)
    faces = np.array([[remap[i] for i in f.indices] for f in hull.faces], dtype=np.int64).reshape(-1, 3)
    planes = np.array([(*f.normal, f.constant) for f in hull.faces], dtype=float).reshape(-1, 4)
    return vertices, faces, planes
