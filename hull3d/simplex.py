from __future__ import annotations
from math import sqrt
from typing import List, Tuple

from .constants import NIL
from .dcel import Mesh
from .errors import DegenerateGeometry
from .geom import distance_sq
from .ledger import VisibilityLedger
from .logging_utils import get_logger
from .primitives import Plane, Segment
from .tolerance import Extremes

log = get_logger(__name__)


def _pick_base_edge(mesh: Mesh, extremes: Extremes) -> Tuple[int, int]:
    """Пара екстремумів з найбільшим розкидом уздовж своєї осі (перша при рівності)."""
    points = [v.point for v in mesh.vertices]
    best_axis = 0
    max_distance = 0.0
    for axis in range(3):
        d = extremes.separation(points, axis)
        if d > max_distance:
            max_distance = d
            best_axis = axis
    return extremes.min_indices[best_axis], extremes.max_indices[best_axis]


def _farthest_from_line(mesh: Mesh, v0: int, v1: int) -> Tuple[int, float]:
    seg = Segment(mesh.point(v0), mesh.point(v1))
    best, max_distance = NIL, 0.0
    for v, vertex in enumerate(mesh.vertices):
        if v in (v0, v1):
            continue
        d = distance_sq(seg.closest_point(vertex.point, clamp=True), vertex.point)
        if d > max_distance:
            max_distance = d
            best = v
    return best, sqrt(max_distance)


def _farthest_from_plane(mesh: Mesh, plane: Plane, skip: Tuple[int, ...]) -> Tuple[int, float]:
    best, max_distance = NIL, -1.0
    for v, vertex in enumerate(mesh.vertices):
        if v in skip:
            continue
        d = abs(plane.distance_to_point(vertex.point))
        if d > max_distance:
            max_distance = d
            best = v
    return best, max_distance


def build_initial_simplex(mesh: Mesh, ledger: VisibilityLedger, extremes: Extremes) -> List[int]:
    """
    Стартовий тетраедр:
      1) v0, v1 - екстремуми з найбільшим розкидом по одній осі;
      2) v2 - найдальша від відрізку v0-v1;
      3) v3 - найдальша від площини (v0, v1, v2);
      4) чотири грані, зорієнтовані назовні, шість пар twin;
      5) решта точок розкидається по гранях (найбільша відстань > tolerance).
    Повертає дескриптори чотирьох граней.
    """
    tol = ledger.tolerance
    v0, v1 = _pick_base_edge(mesh, extremes)

    v2, d2 = _farthest_from_line(mesh, v0, v1)
    if v2 == NIL or d2 <= tol:
        log.warning("initial simplex: points are coincident or collinear (max line distance %.3g)", d2)
        raise DegenerateGeometry("All points coincident or collinear: cannot form a base triangle")

    plane = Plane.from_coplanar_points(mesh.point(v0), mesh.point(v1), mesh.point(v2))
    v3, d3 = _farthest_from_plane(mesh, plane, (v0, v1, v2))
    if v3 == NIL or d3 <= tol:
        log.warning("initial simplex: points are coplanar (max plane distance %.3g)", d3)
        raise DegenerateGeometry("All points coplanar: 3D hull is impossible")

    log.debug("initial simplex: v0=%d v1=%d v2=%d v3=%d", v0, v1, v2, v3)

    if plane.distance_to_point(mesh.point(v3)) < 0:
        # базова грань не бачить v3 - її нормаль уже дивиться назовні
        faces = [
            mesh.add_face(v0, v1, v2),
            mesh.add_face(v3, v1, v0),
            mesh.add_face(v3, v2, v1),
            mesh.add_face(v3, v0, v2),
        ]
        for i in range(3):
            j = (i + 1) % 3
            # бічна грань i+1 з основою
            mesh.set_twin(mesh.edge(faces[i + 1], 2), mesh.edge(faces[0], j))
            # бічна грань i+1 з бічною j+1
            mesh.set_twin(mesh.edge(faces[i + 1], 1), mesh.edge(faces[j + 1], 0))
    else:
        # базова грань бачить v3 - обходимо основу у зворотному порядку
        faces = [
            mesh.add_face(v0, v2, v1),
            mesh.add_face(v3, v0, v1),
            mesh.add_face(v3, v1, v2),
            mesh.add_face(v3, v2, v0),
        ]
        for i in range(3):
            j = (i + 1) % 3
            mesh.set_twin(mesh.edge(faces[i + 1], 2), mesh.edge(faces[0], (3 - i) % 3))
            mesh.set_twin(mesh.edge(faces[i + 1], 0), mesh.edge(faces[j + 1], 1))

    simplex = (v0, v1, v2, v3)
    for v in range(len(mesh.vertices)):
        if v not in simplex:
            ledger.assign_to_best_face(v, faces)
    return faces
