from __future__ import annotations
from typing import Iterator, List

from .dcel import Mesh, Mark
from .geom import Pt
from .ledger import VisibilityLedger


def _delete_face(ledger: VisibilityLedger, fid: int) -> None:
    # вершини грані йдуть в unassigned, сама грань більше не відвідується
    ledger.delete_face_vertices(fid)
    ledger.mesh.faces[fid].mark = Mark.DELETED


def compute_horizon(mesh: Mesh, ledger: VisibilityLedger, eye_point: Pt, fid: int) -> List[int]:
    """
    Горизонт - ланцюжок напівребер (проти годинникової стрілки), кожне з яких
    розділяє грань, що бачить eye_point (видаляється), і грань, що його не бачить.

    Обхід у глибину по twin-сусідству з явним стеком: стартова грань
    обходиться з ребра 0, грань, у яку «перейшли» через ребро e, - з e.next
    (саме e вже розглянуте з іншого боку). Порядок збігається з рекурсивним.
    """
    E = mesh.edges
    horizon: List[int] = []

    _delete_face(ledger, fid)
    e0 = mesh.faces[fid].edge
    stack: List[Iterator[int]] = [iter((e0, E[e0].next, E[E[e0].next].next))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        twin = E[edge].twin
        opposite = E[twin].face
        face = mesh.faces[opposite]
        if face.mark is not Mark.VISIBLE:
            continue
        if face.distance_to_point(eye_point) > ledger.tolerance:
            # сусід теж бачить точку - поглинаємо і йдемо вглиб
            _delete_face(ledger, opposite)
            first = E[twin].next
            stack.append(iter((first, E[first].next)))
        else:
            horizon.append(edge)
    return horizon
