from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Tuple

from .constants import NIL
from .geom import Pt, ORIGIN, dot, distance, distance_sq
from .primitives import Triangle


class Mark(IntEnum):
    VISIBLE = 0
    DELETED = 1


@dataclass
class Vertex:
    """
    Вхідна точка як вузол двозв'язного списку (assigned / unassigned).
    index: позиція у вхідному списку.
    face: грань, яку «бачить» вершина (її outside-множина), або NIL.
    """
    point: Pt
    index: int
    prev: int = NIL
    next: int = NIL
    face: int = NIL


@dataclass
class HalfEdge:
    """Напівребро DCEL: vertex - голова, face - власна грань, twin - ребро сусідньої грані."""
    vertex: int
    face: int
    prev: int = NIL
    next: int = NIL
    twin: int = NIL


@dataclass
class Face:
    """
    Трикутна грань. edge - «головне» напівребро (ребро 0).
    outside: перша вершина суцільного відрізку в assigned-списку, яку ця грань бачить.
    """
    edge: int = NIL
    normal: Pt = ORIGIN
    midpoint: Pt = ORIGIN
    area: float = 0.0
    constant: float = 0.0
    outside: int = NIL
    mark: Mark = Mark.VISIBLE

    def distance_to_point(self, p: Pt) -> float:
        return dot(self.normal, p) - self.constant


class Mesh:
    """
    Арена DCEL: вершини, напівребра і грані в трьох списках, адресованих
    цілими дескрипторами. Видалена грань лише позначається DELETED, слоти
    не перевикористовуються до кінця побудови.
    """

    def __init__(self, points: List[Pt]):
        self.vertices: List[Vertex] = [Vertex(p, i) for i, p in enumerate(points)]
        self.edges: List[HalfEdge] = []
        self.faces: List[Face] = []

    # ---------------- Грані ----------------
    def add_face(self, a: int, b: int, c: int) -> int:
        """Грань (a, b, c): ребра e0->a, e1->b, e2->c зшиті в цикл e0->e1->e2->e0."""
        fid = len(self.faces)
        e0 = self._new_edge(a, fid)
        e1 = self._new_edge(b, fid)
        e2 = self._new_edge(c, fid)
        E = self.edges
        E[e0].next = E[e2].prev = e1
        E[e1].next = E[e0].prev = e2
        E[e2].next = E[e1].prev = e0
        self.faces.append(Face(edge=e0))
        self._compute_face(fid)
        return fid

    def _new_edge(self, vertex: int, face: int) -> int:
        self.edges.append(HalfEdge(vertex, face))
        return len(self.edges) - 1

    def _compute_face(self, fid: int) -> None:
        f = self.faces[fid]
        e = f.edge
        tri = Triangle(self.point(self.tail(e)),
                       self.point(self.head(e)),
                       self.point(self.head(self.edges[e].next)))
        f.normal = tri.normal()
        f.midpoint = tri.midpoint()
        f.area = tri.area()
        f.constant = dot(f.normal, f.midpoint)

    def edge(self, fid: int, i: int) -> int:
        """i-те ребро грані: i > 0 - крокуємо по next, i < 0 - по prev."""
        e = self.faces[fid].edge
        while i > 0:
            e = self.edges[e].next
            i -= 1
        while i < 0:
            e = self.edges[e].prev
            i += 1
        return e

    def face_edges(self, fid: int) -> Iterator[int]:
        start = self.faces[fid].edge
        e = start
        while True:
            yield e
            e = self.edges[e].next
            if e == start:
                break

    def face_vertices(self, fid: int) -> Tuple[int, int, int]:
        a, b, c = (self.edges[e].vertex for e in self.face_edges(fid))
        return (a, b, c)

    def distance_to_face(self, fid: int, p: Pt) -> float:
        return self.faces[fid].distance_to_point(p)

    def visible_faces(self) -> List[int]:
        return [fid for fid, f in enumerate(self.faces) if f.mark is Mark.VISIBLE]

    # ---------------- Напівребра ----------------
    def head(self, e: int) -> int:
        return self.edges[e].vertex

    def tail(self, e: int) -> int:
        prev = self.edges[e].prev
        return self.edges[prev].vertex if prev != NIL else NIL

    def set_twin(self, a: int, b: int) -> None:
        self.edges[a].twin = b
        self.edges[b].twin = a

    def length_sq(self, e: int) -> float:
        t = self.tail(e)
        if t == NIL:
            return -1.0
        return distance_sq(self.point(t), self.point(self.head(e)))

    def length(self, e: int) -> float:
        t = self.tail(e)
        if t == NIL:
            return -1.0
        return distance(self.point(t), self.point(self.head(e)))

    # ---------------- Вершини ----------------
    def point(self, v: int) -> Pt:
        return self.vertices[v].point
