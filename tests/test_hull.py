import itertools
from dataclasses import replace

import pytest

from hull3d import (
    Pt, HullConfig, QuickHull, ConvexHull3D, InvalidInput, DegenerateGeometry, HullError,
    HullValidationError, build,
)
from hull3d.constants import NIL
from hull3d.dcel import Mark
from hull3d.simplex import build_initial_simplex

from conftest import random_cloud, sphere_cloud


def assert_valid(hull):
    report = hull.validate()
    assert report["euler"] == 2, report
    for key in ("bad_edges", "bad_twins", "bad_cycles", "bad_orient_faces", "convexity_violations"):
        assert not report[key], (key, report[key])
    assert hull.is_valid()


def plane_set(hull, digits=9):
    return sorted((round(f.normal.x, digits), round(f.normal.y, digits),
                   round(f.normal.z, digits), round(f.constant, digits)) for f in hull.faces)


def test_tetrahedron(tetra_points):
    hull = build(tetra_points)
    assert len(hull.faces) == 4
    assert len(hull.vertex_indices()) == 4
    assert hull.edge_count() == 6
    assert hull.euler_characteristic() == 2
    assert_valid(hull)


def test_cube_corners(cube_points):
    hull = build(cube_points)
    assert len(hull.faces) == 12
    assert hull.vertex_indices() == list(range(8))
    assert hull.edge_count() == 18
    assert_valid(hull)
    for f in hull.faces:
        # кожна грань лежить на одній із шести граней куба
        assert sorted(abs(c) for c in f.normal) == pytest.approx([0.0, 0.0, 1.0])


@pytest.mark.parametrize("n", [0, 1, 3])
def test_too_few_points(n, tetra_points):
    with pytest.raises(InvalidInput):
        build(tetra_points[:n])


def test_malformed_points_are_invalid_input():
    with pytest.raises(InvalidInput):
        build([(0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)])
    with pytest.raises(InvalidInput):
        build([(float("nan"), 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)])


def test_errors_are_value_errors():
    assert issubclass(InvalidInput, HullError)
    assert issubclass(DegenerateGeometry, ValueError)


@pytest.mark.parametrize("z", [0.0, 2.0])
def test_coplanar_points(z):
    square = [Pt(0, 0, z), Pt(1, 0, z), Pt(1, 1, z), Pt(0, 1, z)]
    extra = [Pt(p.x * 0.8 + 0.1, p.y * 0.7 + 0.2, z) for p in random_cloud(10, seed=7, lo=0.0, hi=1.0)]
    with pytest.raises(DegenerateGeometry):
        build(square + extra)


def test_collinear_points():
    with pytest.raises(DegenerateGeometry):
        build([(t, t, t) for t in range(10)])


@pytest.mark.parametrize("seed", range(5))
def test_random_cloud_invariants(seed):
    pts = random_cloud(200, seed=seed)
    hull = build(pts)
    assert_valid(hull)
    for p in pts:
        assert hull.contains_point(p)


@pytest.mark.parametrize("seed", range(3))
def test_points_on_sphere_are_all_hull_vertices(seed):
    pts = sphere_cloud(64, seed=seed)
    hull = build(pts)
    assert_valid(hull)
    assert len(hull.vertex_indices()) == 64
    assert len(hull.faces) == 2 * 64 - 4
    assert hull.interior_indices() == []


def test_live_edges_form_a_twin_involution():
    q = QuickHull(random_cloud(150, seed=11))
    hull = q.compute().finalize()
    m = q.mesh
    live = set(hull.live_edges())
    assert len(live) == 3 * len(hull.faces)
    for e in live:
        t = m.edges[e].twin
        assert t in live
        assert m.edges[t].twin == e
        assert m.edges[m.edges[m.edges[e].next].next].next == e


def test_rebuild_is_idempotent():
    pts = random_cloud(120, seed=21)
    a, b = build(pts), build(pts)
    assert len(a.faces) == len(b.faces)
    assert plane_set(a) == plane_set(b)
    assert a.triangles() == b.triangles()


def test_input_order_changes_triangulation_not_hull():
    pts = sphere_cloud(40, seed=2)
    a = build(pts)
    b = build(list(reversed(pts)))
    assert len(a.faces) == len(b.faces)
    assert {pts[i] for i in a.vertex_indices()} == {b.points[i] for i in b.vertex_indices()}


def test_duplicates_do_not_change_the_hull(cube_points):
    inner = [Pt(0.25, 0.5, 0.5), Pt(0.5, 0.5, 0.75)]
    base = build(cube_points + inner)
    noisy = build(cube_points + inner + inner + inner + cube_points[:3])
    assert len(noisy.faces) == len(base.faces) == 12
    assert plane_set(noisy) == plane_set(base)
    for i in noisy.interior_indices():
        assert noisy.contains_point(noisy.points[i])


def test_duplicate_interior_points_in_random_cloud():
    pts = sphere_cloud(50, seed=9)
    inner = [Pt(p.x * 0.3, p.y * 0.3, p.z * 0.3) for p in random_cloud(20, seed=10)]
    base = build(pts + inner)
    dup = build(pts + inner + inner)
    assert len(dup.faces) == len(base.faces)
    assert plane_set(dup) == plane_set(base)


def test_interior_points_are_reported(cube_points):
    hull = build(cube_points + [Pt(0.5, 0.5, 0.5)])
    assert hull.interior_indices() == [8]
    assert hull.contains_point(Pt(0.5, 0.5, 0.5))


def test_faces_expose_plane_data(cube_points):
    hull = build(cube_points)
    for f in hull.faces:
        assert len(f.vertices) == 3
        assert f.area == pytest.approx(0.5)
        for p, i in zip(f.vertices, f.indices):
            assert p == hull.points[i]
            assert f.distance_to_point(p) == pytest.approx(0.0, abs=1e-12)


def assert_mesh_invariants(q):
    m = q.mesh
    visible = m.visible_faces()
    vs, undirected = set(), set()
    for fid in visible:
        a, b, c = m.face_vertices(fid)
        vs.update((a, b, c))
        for u, v in ((a, b), (b, c), (c, a)):
            undirected.add((min(u, v), max(u, v)))
        for e in m.face_edges(fid):
            t = m.edges[e].twin
            assert t != NIL
            assert m.edges[t].twin == e
            assert m.faces[m.edges[t].face].mark is Mark.VISIBLE
    assert len(vs) - len(undirected) + len(visible) == 2

    seen = set()
    for v in q.ledger.assigned:
        assert v not in seen
        seen.add(v)
        fid = m.vertices[v].face
        assert fid != NIL and m.faces[fid].mark is Mark.VISIBLE
        assert m.distance_to_face(fid, m.point(v)) > q.tolerance


def test_invariants_hold_after_every_insertion():
    q = QuickHull(random_cloud(150, seed=3))
    build_initial_simplex(q.mesh, q.ledger, q.extremes)
    assert_mesh_invariants(q)
    steps = 0
    while True:
        eye = q.next_vertex_to_add()
        if eye == NIL:
            break
        q.add_vertex_to_hull(eye)
        steps += 1
        assert q.ledger.unassigned.is_empty()
        assert_mesh_invariants(q)
    assert steps == q.iterations > 0
    assert_valid(q.finalize())


def test_finalize_keeps_only_visible_faces(cube_points):
    q = QuickHull(cube_points + [Pt(2, 0.5, 0.5)])
    hull = q.compute().finalize()
    assert isinstance(hull, ConvexHull3D)
    assert q.iterations > 0
    assert q.ledger.assigned.is_empty() and q.ledger.unassigned.is_empty()
    assert all(q.mesh.faces[fid].mark is Mark.VISIBLE for fid in hull.face_ids)
    assert len(hull.face_ids) < len(q.mesh.faces)
    assert len(hull.faces) == len(hull.face_ids)
    assert not hasattr(hull, "mesh")


def test_from_points_matches_build(tetra_points):
    assert ConvexHull3D.from_points(tetra_points).triangles() == build(tetra_points).triangles()


def test_explicit_tolerance_and_validation(cube_points):
    hull = build(cube_points, HullConfig(tolerance=1e-9, validate=True))
    assert hull.tolerance == 1e-9
    assert len(hull.faces) == 12


def test_early_exit_factor_keeps_hull_valid():
    pts = random_cloud(150, seed=13)
    hull = build(pts, HullConfig(early_exit_factor=1.0))
    assert_valid(hull)
    assert plane_set(hull) != [] and all(hull.contains_point(p) for p in pts)


def test_to_off(tetra_points):
    off = build(tetra_points).to_off().splitlines()
    assert off[0] == "OFF"
    assert off[1] == "4 4 0"
    assert all(line.startswith("3 ") for line in off[6:])
    tris = [tuple(int(x) for x in line.split()[1:]) for line in off[6:]]
    assert set(itertools.chain.from_iterable(tris)) == {0, 1, 2, 3}


def test_validate_flags_a_flipped_face(cube_points):
    hull = build(cube_points)
    f = hull.faces[0]
    a, b, c = f.vertices
    i, j, k = f.indices
    flipped = replace(f, vertices=(a, c, b), indices=(i, k, j))
    broken = ConvexHull3D(hull.points, (flipped,) + hull.faces[1:], hull.face_ids,
                          hull._mesh, hull.tolerance)
    report = broken.validate()
    assert report["bad_orient_faces"] == [0]
    assert not broken.is_valid()
    assert hull.validate()["bad_orient_faces"] == []


def test_failed_validation_raises_validation_error(monkeypatch, tetra_points):
    monkeypatch.setattr(ConvexHull3D, "is_valid", lambda self: False)
    with pytest.raises(HullValidationError) as info:
        build(tetra_points, HullConfig(validate=True))
    assert not isinstance(info.value, DegenerateGeometry)
    assert isinstance(info.value, HullError)
    assert info.value.report["faces"] == 4
    # без validate=True перевірка не запускається
    assert len(build(tetra_points)) == 4
