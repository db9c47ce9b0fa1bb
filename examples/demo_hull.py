# examples/demo_hull.py
from hull3d import Ray, Pt, build, configure_logging
from hull3d.geom import unique_points

if __name__ == "__main__":
    configure_logging("DEBUG")
    raw = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]
    pts = unique_points(raw)
    hull = build(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("Interior points:", hull.interior_indices())
    print("Contains (0.5,0.5,0.5):", hull.contains_point((0.5, 0.5, 0.5)))

    hit = hull.intersect_ray(Ray(Pt(-1.0, 0.5, 0.5), Pt(1.0, 0.0, 0.0)))
    print("Ray hit:", hit)

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off - можна глянути в MeshLab/ParaView.")
