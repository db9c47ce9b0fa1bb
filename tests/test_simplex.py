import pytest

from hull3d import Pt, DegenerateGeometry
from hull3d.constants import NIL
from hull3d.dcel import Mesh
from hull3d.ledger import VisibilityLedger
from hull3d.simplex import build_initial_simplex
from hull3d.tolerance import compute_extremes

from conftest import random_cloud


def start(points):
    mesh = Mesh(points)
    ex = compute_extremes(points)
    ledger = VisibilityLedger(mesh, ex.tolerance)
    return mesh, ledger, ex


@pytest.mark.parametrize("points", [
    [Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)],
    [Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, -1)],
])
def test_simplex_faces_point_outward(points):
    mesh, ledger, ex = start(points)
    faces = build_initial_simplex(mesh, ledger, ex)
    assert len(faces) == 4
    for fid in faces:
        opposite = set(range(4)) - set(mesh.face_vertices(fid))
        (v,) = opposite
        assert mesh.distance_to_face(fid, mesh.point(v)) < 0


def test_simplex_twins_are_an_involution(tetra_points):
    mesh, ledger, ex = start(tetra_points)
    faces = build_initial_simplex(mesh, ledger, ex)
    for fid in faces:
        for e in mesh.face_edges(fid):
            t = mesh.edges[e].twin
            assert t != NIL
            assert mesh.edges[t].twin == e
            assert mesh.head(t) == mesh.tail(e) and mesh.tail(t) == mesh.head(e)


def test_simplex_uses_widest_axis():
    pts = [Pt(0, 0, 0), Pt(0, 5, 0), Pt(1, 1, 0), Pt(0.5, 1, 2), Pt(0.3, 1.0, 0.3)]
    mesh, ledger, ex = start(pts)
    faces = build_initial_simplex(mesh, ledger, ex)
    used = {v for fid in faces for v in mesh.face_vertices(fid)}
    assert {0, 1} <= used
    # внутрішня точка не призначена жодній грані
    assert mesh.vertices[4].face == NIL


def test_remaining_points_assigned_to_visible_faces():
    pts = random_cloud(60, seed=3)
    mesh, ledger, ex = start(pts)
    build_initial_simplex(mesh, ledger, ex)
    for v in ledger.assigned:
        fid = mesh.vertices[v].face
        assert mesh.distance_to_face(fid, mesh.point(v)) > ledger.tolerance


def test_collinear_points_are_degenerate():
    pts = [Pt(i, 2 * i, -i) for i in range(6)]
    mesh, ledger, ex = start(pts)
    with pytest.raises(DegenerateGeometry):
        build_initial_simplex(mesh, ledger, ex)


def test_coincident_points_are_degenerate():
    pts = [Pt(1, 1, 1)] * 5
    mesh, ledger, ex = start(pts)
    with pytest.raises(DegenerateGeometry):
        build_initial_simplex(mesh, ledger, ex)


def test_edge_lengths_and_negative_edge_index(tetra_points):
    mesh, ledger, ex = start(tetra_points)
    faces = build_initial_simplex(mesh, ledger, ex)
    lengths = sorted(round(mesh.length(e), 12) for fid in faces for e in mesh.face_edges(fid))
    assert lengths == [1.0] * 6 + [round(2 ** 0.5, 12)] * 6
    for fid in faces:
        assert mesh.edge(fid, -1) == mesh.edge(fid, 2)
        e = mesh.edge(fid, 0)
        assert mesh.length_sq(e) == pytest.approx(mesh.length(e) ** 2)
