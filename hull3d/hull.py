from __future__ import annotations
from dataclasses import dataclass
from math import isfinite
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import HullConfig
from .constants import NIL, MIN_POINTS
from .dcel import Mesh, Mark
from .errors import InvalidInput, HullValidationError
from .geom import Pt, PointLike, as_pt, centroid, dot
from .horizon import compute_horizon
from .ledger import VisibilityLedger
from .logging_utils import get_logger
from .predicates import orient3d, visible_from_point
from .primitives import Ray
from .simplex import build_initial_simplex
from .tolerance import compute_extremes
from . import query

log = get_logger(__name__)

UEdge = Tuple[int, int]         # неорієнтоване ребро (min(u,v), max(u,v))


@dataclass(frozen=True)
class HullFace:
    """
    Грань готової оболонки.
    normal: одинична зовнішня нормаль; constant = normal·midpoint.
    indices: індекси вершин у вхідному списку (обхід проти годинникової стрілки ззовні).
    """
    normal: Pt
    constant: float
    vertices: Tuple[Pt, Pt, Pt]
    indices: Tuple[int, int, int]
    midpoint: Pt
    area: float

    def distance_to_point(self, p: Pt) -> float:
        return dot(self.normal, p) - self.constant


def _to_points(points: Iterable[PointLike]) -> List[Pt]:
    try:
        pts = [as_pt(p) for p in points]
    except (TypeError, ValueError) as e:
        raise InvalidInput("Every point must be a 3D coordinate (x, y, z)") from e
    for i, p in enumerate(pts):
        if not all(isfinite(c) for c in p):
            raise InvalidInput(f"Point {i} has a non-finite coordinate: {p}")
    if len(pts) < MIN_POINTS:
        raise InvalidInput(f"Need at least {MIN_POINTS} points, got {len(pts)}")
    return pts


class QuickHull:
    """
    Сесія побудови Quickhull. Увесь змінний стан (арена DCEL, списки
    assigned/unassigned, нові грані поточної ітерації) живе тут, тож різні
    побудови незалежні одна від одної.

    Використання: QuickHull(points).compute().finalize() -> ConvexHull3D
    """

    def __init__(self, points: Iterable[PointLike], config: Optional[HullConfig] = None):
        self.config = config or HullConfig()
        self.points: List[Pt] = _to_points(points)
        self.mesh = Mesh(self.points)
        self.extremes = compute_extremes(self.points, self.config.tolerance_scale)
        if self.config.tolerance is not None:
            self.tolerance = self.config.tolerance
        else:
            self.tolerance = self.extremes.tolerance
        self.ledger = VisibilityLedger(self.mesh, self.tolerance, self.config.early_exit_factor)
        self.new_faces: List[int] = []
        self.iterations = 0
        self._computed = False

    # ---------------- Основний цикл ----------------
    def compute(self) -> "QuickHull":
        if self._computed:
            return self
        build_initial_simplex(self.mesh, self.ledger, self.extremes)
        while True:
            eye = self.next_vertex_to_add()
            if eye == NIL:
                break
            self.add_vertex_to_hull(eye)
        self._computed = True
        log.info("hull built: %d points, %d faces, %d iterations",
                 len(self.points), len(self.mesh.visible_faces()), self.iterations)
        return self

    def next_vertex_to_add(self) -> int:
        """
        Наступна «очна» вершина: беремо грань першої вершини в assigned і серед
        вершин саме цієї грані - найвіддаленішу (не глобальний максимум).
        """
        if not self.ledger.has_pending():
            return NIL
        V = self.mesh.vertices
        fid = V[self.ledger.assigned.first()].face
        face = self.mesh.faces[fid]
        eye, max_distance = NIL, 0.0
        v = face.outside
        while v != NIL and V[v].face == fid:
            d = face.distance_to_point(V[v].point)
            if d > max_distance:
                max_distance = d
                eye = v
            v = V[v].next
        return eye

    def add_vertex_to_hull(self, eye: int) -> None:
        """
        1) зняти eye з її грані; 2) горизонт + видалення видимих граней;
        3) віяло нових граней; 4) перерозподіл осиротілих вершин.
        """
        fid = self.mesh.vertices[eye].face
        self.ledger.unassigned.clear()
        self.ledger.remove_vertex_from_face(eye, fid)
        horizon = compute_horizon(self.mesh, self.ledger, self.mesh.point(eye), fid)
        self.add_new_faces(eye, horizon)
        discarded = self.ledger.resolve_unassigned_points(self.new_faces)
        self.iterations += 1
        log.debug("iteration %d: eye=%d horizon=%d new_faces=%d discarded=%d",
                  self.iterations, eye, len(horizon), len(self.new_faces), discarded)

    def add_adjoining_face(self, eye: int, horizon_edge: int) -> int:
        """
        Грань (eye, tail, head) горизонтного ребра; її ребро 2 (tail->head)
        зшивається з колишнім twin горизонтного ребра. Повертає ребро 0 (голова - eye).
        """
        m = self.mesh
        fid = m.add_face(eye, m.tail(horizon_edge), m.head(horizon_edge))
        m.set_twin(m.edge(fid, -1), m.edges[horizon_edge].twin)
        return m.edge(fid, 0)

    def add_new_faces(self, eye: int, horizon: Sequence[int]) -> None:
        """Віяло граней навколо eye; сусідні нові грані зшиваються, останню - з першою."""
        E = self.mesh.edges
        self.new_faces = []
        first_side = prev_side = NIL
        for horizon_edge in horizon:
            side = self.add_adjoining_face(eye, horizon_edge)
            if first_side == NIL:
                first_side = side
            else:
                self.mesh.set_twin(E[side].next, prev_side)
            self.new_faces.append(E[side].face)
            prev_side = side
        if first_side != NIL:
            self.mesh.set_twin(E[first_side].next, prev_side)

    # ---------------- Фіналізація ----------------
    def finalize(self) -> "ConvexHull3D":
        """Лише видимі грані, у порядку створення; службові списки очищуються."""
        if not self._computed:
            self.compute()
        m = self.mesh
        face_ids = tuple(m.visible_faces())
        faces = []
        for fid in face_ids:
            f = m.faces[fid]
            idx = m.face_vertices(fid)
            faces.append(HullFace(
                normal=f.normal,
                constant=f.constant,
                vertices=(m.point(idx[0]), m.point(idx[1]), m.point(idx[2])),
                indices=idx,
                midpoint=f.midpoint,
                area=f.area,
            ))
        self.ledger.assigned.clear()
        self.ledger.unassigned.clear()
        self.new_faces = []
        return ConvexHull3D(self.points, faces, face_ids, m, self.tolerance)


class ConvexHull3D:
    """
    Готова опукла оболонка: незмінний кортеж граней. Арена DCEL (_mesh)
    лишається внутрішньою, лише для validate() і live_edges().
    Будується через build() / ConvexHull3D.from_points().
    """

    def __init__(self, points: Sequence[Pt], faces: Sequence[HullFace],
                 face_ids: Sequence[int], mesh: Mesh, tolerance: float):
        self.points: Tuple[Pt, ...] = tuple(points)
        self.faces: Tuple[HullFace, ...] = tuple(faces)
        self.face_ids: Tuple[int, ...] = tuple(face_ids)
        self._mesh = mesh
        self.tolerance = tolerance

    @classmethod
    def from_points(cls, points: Iterable[PointLike], config: Optional[HullConfig] = None) -> "ConvexHull3D":
        return build(points, config)

    # ---------------- Запити ----------------
    def contains_point(self, p: PointLike) -> bool:
        return query.contains_point(self, p)

    def intersect_ray(self, ray: Ray) -> Optional[Pt]:
        return query.intersect_ray(self, ray)

    def intersects_ray(self, ray: Ray) -> bool:
        return query.intersects_ray(self, ray)

    # ---------------- Топологія ----------------
    def triangles(self) -> List[Tuple[int, int, int]]:
        """Грані як трійки індексів вхідних точок."""
        return [f.indices for f in self.faces]

    def vertex_indices(self) -> List[int]:
        return sorted({i for f in self.faces for i in f.indices})

    def interior_indices(self) -> List[int]:
        """Точки, що не стали вершинами оболонки (внутрішні, на поверхні, дублікати)."""
        on_hull = set(self.vertex_indices())
        return [i for i in range(len(self.points)) if i not in on_hull]

    def live_edges(self) -> List[int]:
        return [e for fid in self.face_ids for e in self._mesh.face_edges(fid)]

    def edge_count(self) -> int:
        return len({(min(u, v), max(u, v)) for f in self.faces
                    for u, v in ((f.indices[0], f.indices[1]),
                                 (f.indices[1], f.indices[2]),
                                 (f.indices[2], f.indices[0]))})

    def euler_characteristic(self) -> int:
        return len(self.vertex_indices()) - self.edge_count() + len(self.faces)

    def __len__(self) -> int:
        return len(self.faces)

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожне неорієнтоване ребро зустрічається рівно у 2 гранях;
          - twin - інволюція, twin живого ребра належить живій грані;
          - кожна грань - цикл рівно з 3 ребер;
          - орієнтація: orient3d(a, b, c, центроїд) < 0 для кожної грані;
          - опуклість: жодна вершина оболонки не бачить грань далі tolerance;
          - V - E + F == 2.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        m = self._mesh
        E = m.edges

        edge_count: Dict[UEdge, int] = {}
        for f in self.faces:
            a, b, c = f.indices
            for u, v in ((a, b), (b, c), (c, a)):
                key = (min(u, v), max(u, v))
                edge_count[key] = edge_count.get(key, 0) + 1
        bad_edges = [(e, k) for e, k in edge_count.items() if k != 2]

        bad_twins: List[int] = []
        for e in self.live_edges():
            t = E[e].twin
            if t == NIL or E[t].twin != e or m.faces[E[t].face].mark is not Mark.VISIBLE:
                bad_twins.append(e)
            elif (m.head(t), m.tail(t)) != (m.tail(e), m.head(e)):
                bad_twins.append(e)

        bad_cycles = [fid for fid in self.face_ids
                      if len(list(m.face_edges(fid))) != 3
                      or E[E[E[m.faces[fid].edge].next].next].next != m.faces[fid].edge]

        hull_vs = self.vertex_indices()
        bad_orient: List[int] = []
        convexity: List[Tuple[int, int]] = []
        if hull_vs:
            O = centroid(self.points[i] for i in hull_vs)
            for k, f in enumerate(self.faces):
                a, b, c = f.vertices
                if orient3d(a, b, c, O) >= 0:
                    bad_orient.append(k)
                for i in hull_vs:
                    if i not in f.indices and visible_from_point(a, b, c, self.points[i], self.tolerance):
                        convexity.append((k, i))

        euler = self.euler_characteristic()
        return {
            "faces": len(self.faces),
            "unique_vertices": len(hull_vs),
            "edges": len(edge_count),
            "euler": euler,
            "bad_edges": bad_edges,
            "bad_twins": bad_twins,
            "bad_cycles": bad_cycles,
            "bad_orient_faces": bad_orient,
            "convexity_violations": convexity,
        }

    def is_valid(self) -> bool:
        report = self.validate()
        return report["euler"] == 2 and not any(
            report[k] for k in ("bad_edges", "bad_twins", "bad_cycles",
                                "bad_orient_faces", "convexity_violations"))

    def to_off(self) -> str:
        """Експорт оболонки у текст OFF (лише вершини оболонки, перенумеровані)."""
        used = self.vertex_indices()
        remap = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(self.faces)} 0"]
        for i in used:
            p = self.points[i]
            lines.append(f"{p.x} {p.y} {p.z}")
        for f in self.faces:
            a, b, c = (remap[i] for i in f.indices)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)


def build(points: Iterable[PointLike], config: Optional[HullConfig] = None) -> ConvexHull3D:
    """
    Опукла оболонка набору точок (Quickhull).
    Кидає InvalidInput (< 4 точок, некоректні координати) або
    DegenerateGeometry (збіжні / колінеарні / копланарні точки).
    З config.validate=True зламана сітка дає HullValidationError.
    """
    config = config or HullConfig()
    hull = QuickHull(points, config).compute().finalize()
    if config.validate and not hull.is_valid():
        report = hull.validate()
        log.warning("hull failed validation: %s", report)
        raise HullValidationError("Constructed hull failed validation", report)
    return hull
