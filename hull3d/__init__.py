"""
hull3d - опукла оболонка 3D набору точок (Quickhull) на DCEL-арені
+ запити належності точки й перетину з променем.
"""
import logging as _logging

__version__ = "0.2.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from hull3d.geom import Pt, centroid, unique_points
from hull3d.primitives import Plane, Segment, Triangle, Ray
from hull3d.predicates import orient3d, signed_distance_to_plane, visible_from_point
from hull3d.errors import HullError, InvalidInput, DegenerateGeometry, HullValidationError
from hull3d.config import HullConfig
from hull3d.hull import ConvexHull3D, HullFace, QuickHull, build
from hull3d.query import contains_point, intersect_ray, intersects_ray
from hull3d.logging_utils import configure_logging, get_logger

__all__ = [
    "Pt", "centroid", "unique_points",
    "Plane", "Segment", "Triangle", "Ray",
    "orient3d", "signed_distance_to_plane", "visible_from_point",
    "HullError", "InvalidInput", "DegenerateGeometry", "HullValidationError",
    "HullConfig",
    "ConvexHull3D", "HullFace", "QuickHull", "build",
    "contains_point", "intersect_ray", "intersects_ray",
    "configure_logging", "get_logger",
    "__version__",
]
