# examples/plot_hull.py
from __future__ import annotations

import argparse
import random

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from hull3d import Pt, Ray, build, configure_logging


def generate_random_points(n: int, seed: int = 0):
    """
    n випадкових точок у кулі радіуса 1 (відбір із куба [-1,1]^3).
    """
    rnd = random.Random(seed)
    pts = []
    while len(pts) < n:
        x, y, z = (rnd.uniform(-1.0, 1.0) for _ in range(3))
        if x*x + y*y + z*z <= 1.0:
            pts.append((x, y, z))
    return pts


def plot_hull(hull, ray=None, show_points: bool = True):
    fig = plt.figure(figsize=(7, 7))
    ax = fig.add_subplot(111, projection="3d")

    tris = [[tuple(p) for p in f.vertices] for f in hull.faces]
    poly = Poly3DCollection(tris, alpha=0.35, edgecolor="k", linewidths=0.5)
    poly.set_facecolor("tab:blue")
    ax.add_collection3d(poly)

    if show_points:
        inner = hull.interior_indices()
        xs = [hull.points[i].x for i in inner]
        ys = [hull.points[i].y for i in inner]
        zs = [hull.points[i].z for i in inner]
        ax.scatter(xs, ys, zs, s=4, c="gray")
        on = hull.vertex_indices()
        ax.scatter([hull.points[i].x for i in on],
                   [hull.points[i].y for i in on],
                   [hull.points[i].z for i in on], s=12, c="tab:red")

    if ray is not None:
        hit = hull.intersect_ray(ray)
        end = hit if hit is not None else ray.at(3.0)
        ax.plot([ray.origin.x, end.x], [ray.origin.y, end.y], [ray.origin.z, end.z], c="tab:green")
        if hit is not None:
            ax.scatter([hit.x], [hit.y], [hit.z], s=40, c="tab:green")

    ax.set_xlim(-1.5, 1.5); ax.set_ylim(-1.5, 1.5); ax.set_zlim(-1.5, 1.5)
    ax.set_title(f"{len(hull.faces)} faces, {len(hull.vertex_indices())} vertices")
    return fig


def main():
    parser = argparse.ArgumentParser(description="Quickhull preview")
    parser.add_argument("-n", type=int, default=200, help="кількість точок")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log", default="INFO")
    args = parser.parse_args()

    configure_logging(args.log)
    hull = build(generate_random_points(args.n, args.seed))
    print("VALIDATION:", hull.validate())
    plot_hull(hull, ray=Ray(Pt(-2.0, 0.3, 0.1), Pt(1.0, 0.0, 0.0)))
    plt.show()


if __name__ == "__main__":
    main()
