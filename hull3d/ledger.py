from __future__ import annotations
from typing import Iterable, Sequence

from .constants import NIL, EARLY_EXIT_FACTOR
from .dcel import Mesh, Mark
from .vertex_list import VertexList


class VisibilityLedger:
    """
    Облік «хто яку грань бачить».

    assigned:   [v, v, ..., v, v, v, ...]
                 ^             ^
                 |             |
             a.outside     b.outside
    Вершини однієї грані завжди утворюють суцільний відрізок, що починається
    з face.outside.
    unassigned: вершини, що втратили грань при видаленні; чекають на
    перерозподіл між новими гранями або відкидаються як внутрішні.
    """

    def __init__(self, mesh: Mesh, tolerance: float, early_exit_factor: float = EARLY_EXIT_FACTOR):
        self.mesh = mesh
        self.tolerance = tolerance
        self.early_exit = early_exit_factor * tolerance
        self.assigned = VertexList(mesh.vertices)
        self.unassigned = VertexList(mesh.vertices)

    def add_vertex_to_face(self, v: int, fid: int) -> None:
        face = self.mesh.faces[fid]
        self.mesh.vertices[v].face = fid
        if face.outside == NIL:
            self.assigned.append(v)
        else:
            self.assigned.insert_before(face.outside, v)
        face.outside = v

    def remove_vertex_from_face(self, v: int, fid: int) -> None:
        face = self.mesh.faces[fid]
        if v == face.outside:
            nxt = self.mesh.vertices[v].next
            if nxt != NIL and self.mesh.vertices[nxt].face == fid:
                face.outside = nxt  # у грані лишились інші вершини
            else:
                face.outside = NIL
        self.assigned.remove(v)
        self.mesh.vertices[v].face = NIL

    def remove_all_vertices_from_face(self, fid: int) -> int:
        """Вирізати відрізок вершин грані з assigned; повертає голову ланцюжка або NIL."""
        face = self.mesh.faces[fid]
        if face.outside == NIL:
            return NIL
        V = self.mesh.vertices
        start = end = face.outside
        while V[end].next != NIL and V[V[end].next].face == fid:
            end = V[end].next
        self.assigned.remove_sublist(start, end)
        V[start].prev = NIL
        V[end].next = NIL
        face.outside = NIL
        return start

    def delete_face_vertices(self, fid: int) -> None:
        """Перенести всі вершини грані до unassigned."""
        chain = self.remove_all_vertices_from_face(fid)
        if chain != NIL:
            self.unassigned.append_chain(chain)

    def assign_to_best_face(self, v: int, faces: Sequence[int], early_exit: bool = False) -> int:
        """
        Віддати вершину грані з найбільшою відстанню > tolerance
        (перша знайдена при рівності). Повертає грань або NIL.
        """
        p = self.mesh.vertices[v].point
        max_distance = self.tolerance
        max_face = NIL
        for fid in faces:
            face = self.mesh.faces[fid]
            if face.mark is not Mark.VISIBLE:
                continue
            d = face.distance_to_point(p)
            if d > max_distance:
                max_distance = d
                max_face = fid
            if early_exit and max_distance > self.early_exit:
                break
        if max_face != NIL:
            self.add_vertex_to_face(v, max_face)
        return max_face

    def resolve_unassigned_points(self, new_faces: Iterable[int]) -> int:
        """
        Перерозподілити unassigned між new_faces. Вершини без видимої грані
        (дублікати, внутрішні точки) відкидаються. Повертає кількість відкинутих.
        """
        new_faces = list(new_faces)
        discarded = 0
        # __iter__ буферизує next, тож переносити вершини в assigned на ходу безпечно
        for v in self.unassigned:
            if self.assign_to_best_face(v, new_faces, early_exit=True) == NIL:
                self.mesh.vertices[v].face = NIL
                discarded += 1
        self.unassigned.clear()
        return discarded

    def has_pending(self) -> bool:
        return not self.assigned.is_empty()
